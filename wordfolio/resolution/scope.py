"""Per-view owner of the resolution pipelines.

A view that can add entries, add drafts or move entries builds one ViewScope
with the session's client and closes it on teardown.  Closing forces every
outstanding decision to resolve as cancelled, so no suspended submit() or
relocate() outlives its view.

Usage::

    async with ViewScope(client) as scope:
        pipeline = scope.entry_pipeline(collection_id=1, vocabulary_id=2)
        outcome = await pipeline.submit(request)
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from ..client.api.collections import get_collections_hierarchy
from ..client.api.drafts import create_draft, move_draft_entry
from ..client.api.entries import create_entry, move_entry
from ..client.client import AuthenticatedClient
from .move import MoveTargetResolver
from .pipeline import DuplicateResolutionPipeline

logger = logging.getLogger(__name__)


class ViewScope:
    """Builds pipelines and resolvers bound to one session and tears them down together."""

    def __init__(self, client: AuthenticatedClient) -> None:
        self.client = client
        self._owned: list[DuplicateResolutionPipeline | MoveTargetResolver] = []
        self._closed = False

    def entry_pipeline(self, *, collection_id: int, vocabulary_id: int) -> DuplicateResolutionPipeline:
        """Pipeline that adds entries to one collection vocabulary."""
        create = functools.partial(
            create_entry,
            self.client,
            collection_id=collection_id,
            vocabulary_id=vocabulary_id,
        )
        return self._own(DuplicateResolutionPipeline(create, name="entry"))

    def draft_pipeline(self) -> DuplicateResolutionPipeline:
        """Pipeline that adds entries to drafts.  Independent of any entry pipeline."""
        create = functools.partial(create_draft, self.client)
        return self._own(DuplicateResolutionPipeline(create, name="draft"))

    def entry_mover(self, *, collection_id: int, vocabulary_id: int) -> MoveTargetResolver:
        """Resolver that moves entries out of one collection vocabulary."""
        move = functools.partial(
            move_entry,
            self.client,
            collection_id=collection_id,
            vocabulary_id=vocabulary_id,
        )
        return self._own(MoveTargetResolver(self._load_hierarchy, move=move, name="move-entry"))

    def draft_mover(self) -> MoveTargetResolver:
        move = functools.partial(move_draft_entry, self.client)
        return self._own(MoveTargetResolver(self._load_hierarchy, move=move, name="move-draft"))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        for owned in self._owned:
            owned.close()
        logger.debug("View scope closed (%d component(s))", len(self._owned))
        self._owned.clear()

    async def __aenter__(self) -> "ViewScope":
        return self

    async def __aexit__(self, *args: Any) -> None:
        self.close()

    async def _load_hierarchy(self):
        return await get_collections_hierarchy(self.client)

    def _own(self, component):
        if self._closed:
            raise RuntimeError("View scope is closed")
        self._owned.append(component)
        return component
