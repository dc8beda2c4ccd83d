"""One-slot cache of the request a pipeline is working on.

The payload is deep-copied on store so that whatever the caller does to its
own objects after submitting, the override replay sends exactly what the
server judged to be a duplicate.
"""

from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

from attrs import frozen

RequestT = TypeVar("RequestT")


@frozen
class PendingOperation(Generic[RequestT]):
    request_payload: RequestT
    context: Any = None


class PendingRequestCache(Generic[RequestT]):
    def __init__(self) -> None:
        self._operation: PendingOperation[RequestT] | None = None

    @property
    def is_empty(self) -> bool:
        return self._operation is None

    def store(self, request_payload: RequestT, context: Any = None) -> PendingOperation[RequestT]:
        """Snapshot ``request_payload``, replacing whatever was cached."""
        self._operation = PendingOperation(copy.deepcopy(request_payload), context)
        return self._operation

    def peek(self) -> PendingOperation[RequestT] | None:
        return self._operation

    def clear(self) -> None:
        self._operation = None
