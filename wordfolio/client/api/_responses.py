"""Response classification shared by the endpoint modules.

Status mapping:
  2xx                              -> parsed resource (malformed body: UnexpectedStatus or Failure(SERVER))
  409 with an ``existingEntry``    -> Conflict (create endpoints only)
  400 / 422                        -> Failure(VALIDATION), field errors kept
  anything else                    -> Failure(SERVER)
  httpx.TransportError             -> Failure(NETWORK)
"""

from __future__ import annotations

import json
import logging
from http import HTTPStatus
from typing import Any, Callable, TypeVar

import httpx

from ... import errors
from ..models.api_error import ApiError
from ..results import Failure, FailureKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

_VALIDATION_STATUSES = frozenset({HTTPStatus.BAD_REQUEST, HTTPStatus.UNPROCESSABLE_ENTITY})


def parse_api_error(response: httpx.Response) -> ApiError:
    """Parse an error body, falling back to the status phrase when it is not JSON."""
    try:
        body: Any = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None

    if not isinstance(body, dict):
        return ApiError(status=response.status_code, title=response.reason_phrase or None)
    return ApiError.from_dict(body, status=response.status_code)


def failure_from_error(error: ApiError) -> Failure:
    if error.status in _VALIDATION_STATUSES:
        return Failure(
            kind=FailureKind.VALIDATION,
            detail=error.message,
            status_code=error.status,
            field_errors=error.errors,
        )
    return Failure(kind=FailureKind.SERVER, detail=error.message, status_code=error.status)


def failure_from_transport(exc: httpx.TransportError, operation: str) -> Failure:
    logger.warning("%s failed before a response was received: %s", operation, exc)
    if isinstance(exc, httpx.TimeoutException):
        return Failure(kind=FailureKind.NETWORK, detail=f"{operation} timed out")
    return Failure(kind=FailureKind.NETWORK, detail=f"{operation} could not reach the server: {exc}")


def is_success(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 300


def parse_success_body(
    response: httpx.Response,
    parse: Callable[[Any], T],
    raise_on_unexpected_status: bool,
    what: str,
) -> T | Failure:
    """Parse a 2xx body with ``parse``.

    Raises:
        errors.UnexpectedStatus: If the body is not JSON or does not fit the
            model and ``raise_on_unexpected_status`` is True.
    """
    try:
        return parse(response.json())
    except (ValueError, KeyError, TypeError) as exc:
        if raise_on_unexpected_status:
            raise errors.UnexpectedStatus(response.status_code, response.content) from exc
        logger.warning("Malformed %s response (status %s): %s", what, response.status_code, exc)
        return Failure(kind=FailureKind.SERVER, detail=f"Malformed {what} response", status_code=response.status_code)
