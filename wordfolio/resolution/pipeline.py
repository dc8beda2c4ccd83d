"""Duplicate-resolution pipeline for entry creation.

Orchestrates one create attempt end to end:

  submit(request)
    -> create(request)
         Created   -> Resolved(SUCCESS)
         Failure   -> Resolved(FAILED)
         Conflict  -> gateway.raise_prompt(DuplicatePrompt)      [suspends]
                        True        -> create(cached + allow_duplicate=True)
                                         Created -> Resolved(SUCCESS)
                                         else    -> Resolved(FAILED)
                        False/None  -> Resolved(ABANDONED), no further call

The retry always replays the payload held in the PendingRequestCache, never
a fresher value from the caller, so the server re-evaluates identical content
and only the override flag differs.  The flag is applied to that one retry
and is never stored: the next submit() of the same content conflicts again.

One submission per instance at a time.  submit() during an in-flight
submission raises PipelineBusyError rather than racing the cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Generic

from attrs import evolve, frozen

from ..client.models.entry import Entry
from ..client.models.entry_request import CreateEntryRequest
from ..client.results import Conflict, Created, CreateResult, Failure, FailureKind
from ..errors import PipelineBusyError
from .gateway import ConfirmationGateway
from .pending import PendingRequestCache, RequestT

logger = logging.getLogger(__name__)

CreateFn = Callable[[CreateEntryRequest], Awaitable[CreateResult]]


class PipelineState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    CONFLICT_PENDING_DECISION = "conflict_pending_decision"
    RETRYING_WITH_OVERRIDE = "retrying_with_override"
    RESOLVED = "resolved"


_IN_FLIGHT = frozenset({
    PipelineState.SUBMITTING,
    PipelineState.CONFLICT_PENDING_DECISION,
    PipelineState.RETRYING_WITH_OVERRIDE,
})


class ResolutionStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    ABANDONED = "abandoned"

    def __str__(self) -> str:
        return str(self.value)


@frozen
class DuplicatePrompt(Generic[RequestT]):
    """What the host shows while a duplicate decision is outstanding."""

    existing_resource: Entry
    request: RequestT


@frozen
class ResolutionOutcome:
    """Terminal state of one submission cycle.

    Attributes:
        status:            SUCCESS, FAILED or ABANDONED.
        resource:          The created entry (SUCCESS only).
        failure:           Why the cycle failed (FAILED only).
        existing_resource: The duplicate the server reported, if any.
        overridden:        True when the result came from the override retry.
    """

    status: ResolutionStatus
    resource: Entry | None = None
    failure: Failure | None = None
    existing_resource: Entry | None = None
    overridden: bool = False

    @property
    def succeeded(self) -> bool:
        return self.status is ResolutionStatus.SUCCESS


class DuplicateResolutionPipeline:
    """Submit an entry, routing server-reported duplicates through a human decision.

    Args:
        create:  Async create call, e.g. ``functools.partial(create_entry, client,
                 collection_id=1, vocabulary_id=2)``.
        gateway: This pipeline's own gateway.  Never share one between pipelines.
        name:    Label for log messages.
    """

    def __init__(
        self,
        create: CreateFn,
        gateway: ConfirmationGateway[DuplicatePrompt[CreateEntryRequest], bool] | None = None,
        name: str = "entry",
    ) -> None:
        self.name = name
        self._create = create
        self.gateway: ConfirmationGateway[DuplicatePrompt[CreateEntryRequest], bool] = (
            gateway if gateway is not None else ConfirmationGateway(name=f"{name}-duplicate")
        )
        self.pending: PendingRequestCache[CreateEntryRequest] = PendingRequestCache()
        self._state = PipelineState.IDLE
        self.last_outcome: ResolutionOutcome | None = None

    def __repr__(self) -> str:
        return f"DuplicateResolutionPipeline(name={self.name!r}, state={self._state.value})"

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state in _IN_FLIGHT

    async def submit(self, request: CreateEntryRequest, context: Any = None) -> ResolutionOutcome:
        """Run one submission cycle to its terminal outcome.

        Args:
            request: The entry payload.  Snapshotted on entry; later changes
                     to the caller's object do not affect a retry.
            context: Opaque data kept alongside the payload (e.g. target ids).

        Raises:
            PipelineBusyError: If a submission is already in flight.
            Exception:         Anything the create callable raises besides a
                               classified failure propagates after cleanup.
        """
        if self.is_busy:
            raise PipelineBusyError(f"{self.name}: a submission is already in flight")

        operation = self.pending.store(request, context)
        self._state = PipelineState.SUBMITTING
        logger.debug("%s: submitting %r", self.name, operation.request_payload.entry_text)

        try:
            result = await self._create(operation.request_payload)
            if isinstance(result, Conflict):
                return await self._resolve_conflict(result)
            return self._finish_from_result(result)
        finally:
            if self.is_busy:
                # Unexpected exception or task cancellation mid-cycle.
                self.pending.clear()
                self._state = PipelineState.RESOLVED

    def close(self) -> None:
        """Teardown: an outstanding duplicate decision resolves as abandoned."""
        self.gateway.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _resolve_conflict(self, conflict: Conflict) -> ResolutionOutcome:
        operation = self.pending.peek()
        assert operation is not None

        if self.gateway.closed:
            logger.info("%s: view closed while submitting, duplicate not added", self.name)
            return self._finish(ResolutionOutcome(
                status=ResolutionStatus.ABANDONED,
                existing_resource=conflict.existing_resource,
            ))

        self._state = PipelineState.CONFLICT_PENDING_DECISION
        logger.info(
            "%s: duplicate of entry %s, awaiting decision",
            self.name,
            conflict.existing_resource.id,
        )
        confirmed = await self.gateway.raise_prompt(
            DuplicatePrompt(existing_resource=conflict.existing_resource, request=operation.request_payload)
        )

        if not confirmed:
            logger.info("%s: duplicate not added", self.name)
            return self._finish(ResolutionOutcome(
                status=ResolutionStatus.ABANDONED,
                existing_resource=conflict.existing_resource,
            ))

        self._state = PipelineState.RETRYING_WITH_OVERRIDE
        retry_request = evolve(operation.request_payload, allow_duplicate=True)
        logger.debug("%s: retrying with override", self.name)
        result = await self._create(retry_request)

        if isinstance(result, Conflict):
            logger.warning("%s: server reported a duplicate despite the override flag", self.name)
            result = Failure(
                kind=FailureKind.SERVER,
                detail="The server rejected the entry as a duplicate even though adding it anyway was requested",
                status_code=409,
            )

        return self._finish_from_result(result, existing_resource=conflict.existing_resource, overridden=True)

    def _finish_from_result(
        self,
        result: Created | Failure,
        existing_resource: Entry | None = None,
        overridden: bool = False,
    ) -> ResolutionOutcome:
        if isinstance(result, Created):
            return self._finish(ResolutionOutcome(
                status=ResolutionStatus.SUCCESS,
                resource=result.resource,
                existing_resource=existing_resource,
                overridden=overridden,
            ))

        logger.warning("%s: create failed (%s): %s", self.name, result.kind, result.detail)
        return self._finish(ResolutionOutcome(
            status=ResolutionStatus.FAILED,
            failure=result,
            existing_resource=existing_resource,
            overridden=overridden,
        ))

    def _finish(self, outcome: ResolutionOutcome) -> ResolutionOutcome:
        self.pending.clear()
        self._state = PipelineState.RESOLVED
        self.last_outcome = outcome
        return outcome
