"""Shared fixtures for the Wordfolio client test suite."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable

import httpx
import pytest

from wordfolio.client.client import AuthenticatedClient
from wordfolio.client.models.entry import Entry
from wordfolio.client.models.hierarchy import CollectionsHierarchy
from wordfolio.resolution.gateway import ConfirmationGateway


def entry_payload(id: int, text: str = "run", vocabulary_id: int = 2) -> dict[str, Any]:
    return {
        "id": id,
        "vocabularyId": vocabulary_id,
        "entryText": text,
        "createdAt": "2026-01-05T10:00:00Z",
        "updatedAt": None,
        "definitions": [
            {
                "id": id * 10,
                "definitionText": "to move swiftly on foot",
                "source": "Manual",
                "displayOrder": 0,
                "examples": [{"id": id * 100, "exampleText": "I run every morning", "source": "Custom"}],
            }
        ],
        "translations": [],
    }


def make_entry(id: int, text: str = "run", vocabulary_id: int = 2) -> Entry:
    return Entry.from_dict(entry_payload(id, text, vocabulary_id))


def make_hierarchy(
    default: tuple[int, str] | None = (1, "Drafts"),
    groups: list[tuple[int, str, list[tuple[int, str]]]] | None = None,
) -> CollectionsHierarchy:
    if groups is None:
        groups = [(2, "Spanish", [(3, "Core"), (4, "Extra")])]
    return CollectionsHierarchy.from_dict({
        "defaultVocabulary": None if default is None else {"id": default[0], "name": default[1]},
        "collections": [
            {
                "id": group_id,
                "name": group_name,
                "vocabularies": [{"id": vid, "name": vname} for vid, vname in items],
            }
            for group_id, group_name, items in groups
        ],
    })


class ScriptedCall:
    """Async callable that returns pre-set results and records its arguments."""

    def __init__(self, *results: Any) -> None:
        self.results = list(results)
        self.calls: list[tuple] = []

    async def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result

    @property
    def call_count(self) -> int:
        return len(self.calls)


class GatedCall(ScriptedCall):
    """ScriptedCall that holds every call until ``release`` is set."""

    def __init__(self, *results: Any) -> None:
        super().__init__(*results)
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def __call__(self, *args: Any) -> Any:
        self.started.set()
        await self.release.wait()
        return await super().__call__(*args)


async def wait_for_open(gateway: ConfirmationGateway, rounds: int = 200) -> None:
    """Yield to the loop until ``gateway`` opens."""
    for _ in range(rounds):
        if gateway.is_open:
            return
        await asyncio.sleep(0)
    raise AssertionError(f"{gateway!r} never opened")


class RecordingTransport:
    """Handler for httpx.MockTransport that records requests and replies from a script."""

    def __init__(self, *responses: httpx.Response | Exception | Callable[[httpx.Request], httpx.Response]) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(request)
        return response

    def json_bodies(self) -> list[Any]:
        return [json.loads(request.content) if request.content else None for request in self.requests]


@pytest.fixture
def make_client() -> Callable[[RecordingTransport], AuthenticatedClient]:
    def factory(handler: RecordingTransport, token: str = "abc123") -> AuthenticatedClient:
        return AuthenticatedClient(
            base_url="https://wordfolio.test/api",
            token=token,
            httpx_args={"transport": httpx.MockTransport(handler)},
        )

    return factory
