"""Drafts endpoints.

    POST /drafts
    POST /drafts/{entryId}/move
"""

from __future__ import annotations

import httpx

from ..client import AuthenticatedClient
from ..models.entry_request import CreateEntryRequest
from ..results import CreateResult, MoveResult
from ._responses import failure_from_transport
from .entries import parse_create_response, parse_move_response


async def create_draft(client: AuthenticatedClient, request: CreateEntryRequest) -> CreateResult:
    """Create an entry in the user's drafts vocabulary.

    Duplicate detection and the ``allowDuplicate`` override behave exactly as
    for :func:`wordfolio.client.api.entries.create_entry`.
    """
    try:
        response = await client.request("post", "/drafts", json=request.to_dict())
    except httpx.TransportError as exc:
        return failure_from_transport(exc, "Create draft")

    return parse_create_response(response, client.raise_on_unexpected_status)


async def move_draft_entry(client: AuthenticatedClient, entry_id: int, destination_id: int) -> MoveResult:
    try:
        response = await client.request(
            "post",
            f"/drafts/{entry_id}/move",
            json={"vocabularyId": destination_id},
        )
    except httpx.TransportError as exc:
        return failure_from_transport(exc, "Move draft")

    return parse_move_response(response, client.raise_on_unexpected_status)
