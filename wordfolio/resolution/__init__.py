"""Human-in-the-loop resolution protocols for the Wordfolio client.

- gateway:  ConfirmationGateway, suspends a coroutine until a human decides
- pending:  PendingRequestCache, the exact payload kept for safe replay
- pipeline: DuplicateResolutionPipeline, create with duplicate override
- move:     MoveTargetResolver, destination choice for moving an entry
- scope:    ViewScope, per-view construction and teardown
"""

from .gateway import ConfirmationGateway
from .move import MoveOutcome, MoveSelection, MoveStatus, MoveTarget, MoveTargetResolver, build_move_targets
from .pending import PendingOperation, PendingRequestCache
from .pipeline import (
    DuplicatePrompt,
    DuplicateResolutionPipeline,
    PipelineState,
    ResolutionOutcome,
    ResolutionStatus,
)
from .scope import ViewScope

__all__ = [
    "ConfirmationGateway",
    "DuplicatePrompt",
    "DuplicateResolutionPipeline",
    "MoveOutcome",
    "MoveSelection",
    "MoveStatus",
    "MoveTarget",
    "MoveTargetResolver",
    "PendingOperation",
    "PendingRequestCache",
    "PipelineState",
    "ResolutionOutcome",
    "ResolutionStatus",
    "ViewScope",
    "build_move_targets",
]
