"""Collections hierarchy endpoint.

    GET /collections-hierarchy
"""

from __future__ import annotations

import httpx

from ..client import AuthenticatedClient
from ..models.hierarchy import CollectionsHierarchy
from ..results import HierarchyResult
from ._responses import failure_from_error, failure_from_transport, is_success, parse_api_error, parse_success_body


async def get_collections_hierarchy(client: AuthenticatedClient) -> HierarchyResult:
    """Fetch every collection with its vocabularies plus the drafts vocabulary.

    Raises:
        errors.UnexpectedStatus: If the server returns a non-JSON success body and
            Client.raise_on_unexpected_status is True.

    Returns:
        CollectionsHierarchy on success, Failure otherwise.
    """
    try:
        response = await client.request("get", "/collections-hierarchy")
    except httpx.TransportError as exc:
        return failure_from_transport(exc, "Load vocabularies")

    if not is_success(response):
        return failure_from_error(parse_api_error(response))

    return parse_success_body(response, CollectionsHierarchy.from_dict, client.raise_on_unexpected_status, "hierarchy")
