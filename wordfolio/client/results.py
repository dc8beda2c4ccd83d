"""Classified outcomes of calls against the Wordfolio REST API.

Write endpoints never raise for an HTTP error status.  Each response is
classified into one of three shapes the resolution protocols interpret:

  Created / Moved  — the server accepted the request and returned the resource
  Conflict         — HTTP 409 carrying the full existing entry
  Failure          — anything else, tagged with a FailureKind

Transport errors (connect, read, timeout) are folded into
``Failure(kind=FailureKind.NETWORK)`` so callers handle one type.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from attrs import field, frozen

from .models.entry import Entry
from .models.hierarchy import CollectionsHierarchy


class FailureKind(str, Enum):
    VALIDATION = "validation"
    NETWORK = "network"
    SERVER = "server"

    def __str__(self) -> str:
        return str(self.value)


@frozen
class Created:
    """The create call succeeded."""

    resource: Entry


@frozen
class Moved:
    """The move call succeeded; ``resource`` is the entry at its new location."""

    resource: Entry


@frozen
class Conflict:
    """The server reported a duplicate and embedded the existing entry."""

    existing_resource: Entry


@frozen
class Failure:
    """Any non-conflict failure.

    Attributes:
        kind:          Validation, network or server.
        detail:        Human-readable message for the terminal state.
        status_code:   HTTP status, or None for transport errors.
        field_errors:  Field-level messages from a validation response.
    """

    kind: FailureKind
    detail: str
    status_code: int | None = None
    field_errors: dict[str, list[str]] = field(factory=dict)


CreateResult = Union[Created, Conflict, Failure]
MoveResult = Union[Moved, Failure]
HierarchyResult = Union[CollectionsHierarchy, Failure]

__all__ = [
    "Conflict",
    "CreateResult",
    "Created",
    "Failure",
    "FailureKind",
    "HierarchyResult",
    "MoveResult",
    "Moved",
]
