"""Move-target resolution for relocating an entry between vocabularies.

The resolver flattens a collections hierarchy into a list of destinations:

  1. The drafts (default) vocabulary first, if the user has one, labelled
     "<name> - <name>".
  2. Every vocabulary of every collection, in server order, labelled
     "<collection> - <vocabulary>".
  3. The entry's current vocabulary removed.

It then drives its own ConfirmationGateway, typed to a MoveSelection, while
the host lets the user pick one of those destinations.  A selection outside
the list, or any selection while the hierarchy failed to load, cannot be
confirmed.  A failed load is not terminal: the host may call retry() and
the same prompt stays open.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable

from attrs import define, field, frozen

from ..client.models.entry import Entry
from ..client.models.hierarchy import CollectionsHierarchy
from ..client.results import Failure, HierarchyResult, Moved, MoveResult
from ..errors import GatewayBusyError, GatewayClosedError
from .gateway import ConfirmationGateway

logger = logging.getLogger(__name__)

LoadHierarchyFn = Callable[[], Awaitable[HierarchyResult]]
MoveFn = Callable[[int, int], Awaitable[MoveResult]]


@frozen
class MoveTarget:
    destination_id: int
    label: str
    is_default_destination: bool
    parent_group_id: int | None


@frozen
class MoveSelection:
    """The decision a move prompt resolves with."""

    destination_id: int
    is_default_destination: bool
    parent_group_id: int | None

    def entry_path(self, entry_id: int) -> str:
        """Client route of ``entry_id`` once it lives at this destination."""
        if self.is_default_destination:
            return f"/drafts/entries/{entry_id}"
        return f"/collections/{self.parent_group_id}/vocabularies/{self.destination_id}/entries/{entry_id}"


@frozen
class MovePrompt:
    current_destination_id: int


def build_move_targets(hierarchy: CollectionsHierarchy | None, current_destination_id: int) -> list[MoveTarget]:
    """Flatten ``hierarchy`` into the destinations an entry may move to.

    The snapshot is only read.  Returns an empty list when there is no
    hierarchy or no other destination exists.
    """
    if hierarchy is None:
        return []

    candidates: list[MoveTarget] = []
    default = hierarchy.default_vocabulary
    if default is not None:
        candidates.append(MoveTarget(
            destination_id=default.id,
            label=f"{default.name} - {default.name}",
            is_default_destination=True,
            parent_group_id=None,
        ))

    for collection in hierarchy.collections:
        for vocabulary in collection.vocabularies:
            candidates.append(MoveTarget(
                destination_id=vocabulary.id,
                label=f"{collection.name} - {vocabulary.name}",
                is_default_destination=False,
                parent_group_id=collection.id,
            ))

    targets: list[MoveTarget] = []
    seen: set[int] = {current_destination_id}
    for candidate in candidates:
        if candidate.destination_id in seen:
            continue
        seen.add(candidate.destination_id)
        targets.append(candidate)
    return targets


class MoveStatus(str, Enum):
    MOVED = "moved"
    FAILED = "failed"
    ABANDONED = "abandoned"

    def __str__(self) -> str:
        return str(self.value)


@frozen
class MoveOutcome:
    status: MoveStatus
    selection: MoveSelection | None = None
    resource: Entry | None = None
    failure: Failure | None = None

    @property
    def location_path(self) -> str | None:
        if self.status is not MoveStatus.MOVED or self.selection is None or self.resource is None:
            return None
        return self.selection.entry_path(self.resource.id)


@define
class _ResolverState:
    current_destination_id: int | None = None
    hierarchy: CollectionsHierarchy | None = None
    load_error: Failure | None = None
    targets: list[MoveTarget] = field(factory=list)
    selected_id: int | None = None


class MoveTargetResolver:
    """Let a human pick where an entry moves, then optionally perform the move.

    Args:
        load_hierarchy: Async hierarchy query, e.g.
                        ``functools.partial(get_collections_hierarchy, client)``.
        move:           Async move call ``move(item_id, destination_id)``.
                        Only needed for :meth:`relocate`.
        gateway:        This resolver's own gateway.
    """

    def __init__(
        self,
        load_hierarchy: LoadHierarchyFn,
        move: MoveFn | None = None,
        gateway: ConfirmationGateway[MovePrompt, MoveSelection] | None = None,
        name: str = "move",
    ) -> None:
        self.name = name
        self._load_hierarchy = load_hierarchy
        self._move = move
        self.gateway: ConfirmationGateway[MovePrompt, MoveSelection] = (
            gateway if gateway is not None else ConfirmationGateway(name=f"{name}-target")
        )
        self._state = _ResolverState()

    @property
    def targets(self) -> list[MoveTarget]:
        return list(self._state.targets)

    @property
    def load_error(self) -> Failure | None:
        return self._state.load_error

    @property
    def is_loaded(self) -> bool:
        return self._state.hierarchy is not None and self._state.load_error is None

    @property
    def selected(self) -> MoveTarget | None:
        return self._find(self._state.selected_id)

    @property
    def can_confirm(self) -> bool:
        return self.is_loaded and self.selected is not None

    async def refresh(self) -> bool:
        """(Re)load the hierarchy and rebuild the target list.

        Returns:
            True when the hierarchy loaded.  On failure ``load_error`` is set,
            the target list is empty and confirm() is disabled.
        """
        result = await self._load_hierarchy()
        if isinstance(result, Failure):
            logger.warning("%s: failed to load vocabularies (%s): %s", self.name, result.kind, result.detail)
            self._state.hierarchy = None
            self._state.load_error = result
            self._state.targets = []
            return False

        self._state.hierarchy = result
        self._state.load_error = None
        if self._state.current_destination_id is None:
            # Outside a prompt there is no item to exclude, so no targets.
            self._state.targets = []
        else:
            self._state.targets = build_move_targets(result, self._state.current_destination_id)
        if self.selected is None:
            self._state.selected_id = None
        return True

    async def retry(self) -> bool:
        """Retry a failed hierarchy load while the prompt stays open."""
        return await self.refresh()

    async def choose_destination(self, current_destination_id: int) -> MoveSelection | None:
        """Load destinations, open the gateway and wait for the user's pick.

        Returns:
            The confirmed MoveSelection, or None if the user cancelled or the
            resolver was closed while the vocabularies were loading.

        Raises:
            GatewayBusyError:   If a move prompt is already open.
            GatewayClosedError: If the resolver has been closed.
        """
        if self.gateway.closed:
            raise GatewayClosedError(f"{self.name}: resolver is closed")
        if self.gateway.is_open:
            raise GatewayBusyError(f"{self.name}: a move prompt is already open")

        self._state = _ResolverState(current_destination_id=current_destination_id)
        await self.refresh()
        if self.gateway.closed:
            logger.info("%s: view closed while loading vocabularies", self.name)
            return None
        return await self.gateway.raise_prompt(MovePrompt(current_destination_id=current_destination_id))

    def select(self, destination_id: int | None) -> bool:
        """Mark ``destination_id`` as the pending choice.

        Returns:
            False (and clears the selection) when the id is not a valid target.
        """
        if self._find(destination_id) is None:
            self._state.selected_id = None
            return False
        self._state.selected_id = destination_id
        return True

    def confirm(self) -> bool:
        """Resolve the gateway with the current selection.

        A no-op returning False when the hierarchy is not loaded, the
        selection is not a valid target, or no prompt is open.
        """
        target = self.selected
        if not self.is_loaded or target is None or not self.gateway.is_open:
            logger.debug("%s: confirm ignored (loaded=%s, selected=%s)", self.name, self.is_loaded, target)
            return False

        self.gateway.confirm(MoveSelection(
            destination_id=target.destination_id,
            is_default_destination=target.is_default_destination,
            parent_group_id=target.parent_group_id,
        ))
        return True

    def cancel(self) -> bool:
        return self.gateway.cancel()

    def close(self) -> None:
        self.gateway.close()

    async def relocate(self, item_id: int, current_destination_id: int) -> MoveOutcome:
        """Choose a destination for ``item_id`` and move it there.

        Raises:
            RuntimeError: If the resolver was built without a move callable.
        """
        if self._move is None:
            raise RuntimeError(f"{self.name}: no move operation configured")

        selection = await self.choose_destination(current_destination_id)
        if selection is None:
            return MoveOutcome(status=MoveStatus.ABANDONED)

        result = await self._move(item_id, selection.destination_id)
        if isinstance(result, Moved):
            logger.info("%s: entry %s moved to vocabulary %s", self.name, item_id, selection.destination_id)
            return MoveOutcome(status=MoveStatus.MOVED, selection=selection, resource=result.resource)

        logger.warning("%s: move failed (%s): %s", self.name, result.kind, result.detail)
        return MoveOutcome(status=MoveStatus.FAILED, selection=selection, failure=result)

    def _find(self, destination_id: int | None) -> MoveTarget | None:
        if destination_id is None:
            return None
        for target in self._state.targets:
            if target.destination_id == destination_id:
                return target
        return None
