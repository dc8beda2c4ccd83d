"""Entry endpoints scoped to a collection vocabulary.

    POST /collections/{collectionId}/vocabularies/{vocabularyId}/entries
    POST /collections/{collectionId}/vocabularies/{vocabularyId}/entries/{entryId}/move
"""

from __future__ import annotations

import logging

import httpx

from ..client import AuthenticatedClient
from ..models.entry import Entry
from ..models.entry_request import CreateEntryRequest
from ..results import Conflict, Created, CreateResult, Failure, Moved, MoveResult
from ._responses import failure_from_error, failure_from_transport, is_success, parse_api_error, parse_success_body

logger = logging.getLogger(__name__)


def entries_path(collection_id: int, vocabulary_id: int) -> str:
    return f"/collections/{collection_id}/vocabularies/{vocabulary_id}/entries"


def parse_create_response(response: httpx.Response, raise_on_unexpected_status: bool = True) -> CreateResult:
    """Classify a create response as Created, Conflict or Failure.

    Shared with the drafts endpoint, which returns the same shapes.

    Raises:
        errors.UnexpectedStatus: If a success body cannot be parsed and
            ``raise_on_unexpected_status`` is True.
    """
    if is_success(response):
        entry = parse_success_body(response, Entry.from_dict, raise_on_unexpected_status, "entry")
        return entry if isinstance(entry, Failure) else Created(resource=entry)

    error = parse_api_error(response)
    if error.is_duplicate_entry:
        assert error.existing_entry is not None
        logger.info(
            "Duplicate reported for %r (existing entry id=%s)",
            error.existing_entry.entry_text,
            error.existing_entry.id,
        )
        return Conflict(existing_resource=error.existing_entry)

    return failure_from_error(error)


def parse_move_response(response: httpx.Response, raise_on_unexpected_status: bool = True) -> MoveResult:
    if is_success(response):
        entry = parse_success_body(response, Entry.from_dict, raise_on_unexpected_status, "entry")
        return entry if isinstance(entry, Failure) else Moved(resource=entry)
    return failure_from_error(parse_api_error(response))


async def create_entry(
    client: AuthenticatedClient,
    request: CreateEntryRequest,
    *,
    collection_id: int,
    vocabulary_id: int,
) -> CreateResult:
    """Create an entry in a vocabulary.

    Args:
        client:        Authenticated client carrying the session.
        request:       The entry payload. ``allow_duplicate`` is sent only when set.
        collection_id: Collection that owns the vocabulary.
        vocabulary_id: Target vocabulary.

    Raises:
        NotAuthenticatedError: If the client has no access token.
        errors.UnexpectedStatus: If a success body cannot be parsed and
            Client.raise_on_unexpected_status is True.

    Returns:
        Created, Conflict (existing entry embedded) or Failure.
    """
    try:
        response = await client.request(
            "post",
            entries_path(collection_id, vocabulary_id),
            json=request.to_dict(),
        )
    except httpx.TransportError as exc:
        return failure_from_transport(exc, "Create entry")

    return parse_create_response(response, client.raise_on_unexpected_status)


async def move_entry(
    client: AuthenticatedClient,
    entry_id: int,
    destination_id: int,
    *,
    collection_id: int,
    vocabulary_id: int,
) -> MoveResult:
    """Move an entry from its current vocabulary to ``destination_id``.

    ``collection_id`` / ``vocabulary_id`` identify the entry's current location.
    """
    try:
        response = await client.request(
            "post",
            f"{entries_path(collection_id, vocabulary_id)}/{entry_id}/move",
            json={"vocabularyId": destination_id},
        )
    except httpx.TransportError as exc:
        return failure_from_transport(exc, "Move entry")

    return parse_move_response(response, client.raise_on_unexpected_status)
