"""End-to-end tests: ViewScope wiring over a mocked REST backend."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from conftest import RecordingTransport, entry_payload, wait_for_open
from wordfolio.client.models.entry_request import CreateEntryRequest
from wordfolio.resolution.move import MoveStatus
from wordfolio.resolution.pipeline import ResolutionStatus
from wordfolio.resolution.scope import ViewScope

HIERARCHY = {
    "defaultVocabulary": {"id": 1, "name": "Drafts"},
    "collections": [
        {"id": 2, "name": "Spanish", "vocabularies": [{"id": 3, "name": "Core"}, {"id": 4, "name": "Extra"}]}
    ],
}


def duplicate_response(existing_id: int = 5) -> httpx.Response:
    return httpx.Response(409, json={"status": 409, "existingEntry": entry_payload(existing_id)})


@pytest.mark.asyncio
async def test_entry_pipeline_confirm_replays_over_http(make_client):
    handler = RecordingTransport(duplicate_response(), httpx.Response(201, json=entry_payload(9)))
    client = make_client(handler)

    async with ViewScope(client) as scope:
        pipeline = scope.entry_pipeline(collection_id=2, vocabulary_id=3)
        task = asyncio.create_task(pipeline.submit(CreateEntryRequest(entry_text="run")))
        await wait_for_open(pipeline.gateway)
        pipeline.gateway.confirm(True)
        outcome = await task

    assert outcome.status is ResolutionStatus.SUCCESS
    assert outcome.resource.id == 9
    first, retry = handler.json_bodies()
    assert "allowDuplicate" not in first
    assert retry == dict(first, allowDuplicate=True)
    assert {r.url.path for r in handler.requests} == {"/api/collections/2/vocabularies/3/entries"}
    await client.aclose()


@pytest.mark.asyncio
async def test_draft_pipeline_cancel_makes_one_call(make_client):
    handler = RecordingTransport(duplicate_response())
    client = make_client(handler)

    async with ViewScope(client) as scope:
        pipeline = scope.draft_pipeline()
        task = asyncio.create_task(pipeline.submit(CreateEntryRequest(entry_text="run")))
        await wait_for_open(pipeline.gateway)
        pipeline.gateway.cancel()
        outcome = await task

    assert outcome.status is ResolutionStatus.ABANDONED
    assert len(handler.requests) == 1
    assert handler.requests[0].url.path == "/api/drafts"
    await client.aclose()


@pytest.mark.asyncio
async def test_teardown_abandons_every_outstanding_decision(make_client):
    handler = RecordingTransport(
        duplicate_response(),
        duplicate_response(),
        httpx.Response(200, json=HIERARCHY),
    )
    client = make_client(handler)
    scope = ViewScope(client)

    entry_pipeline = scope.entry_pipeline(collection_id=2, vocabulary_id=3)
    draft_pipeline = scope.draft_pipeline()
    mover = scope.entry_mover(collection_id=2, vocabulary_id=3)

    entry_task = asyncio.create_task(entry_pipeline.submit(CreateEntryRequest(entry_text="run")))
    await wait_for_open(entry_pipeline.gateway)
    draft_task = asyncio.create_task(draft_pipeline.submit(CreateEntryRequest(entry_text="run")))
    await wait_for_open(draft_pipeline.gateway)
    move_task = asyncio.create_task(mover.relocate(42, current_destination_id=3))
    await wait_for_open(mover.gateway)

    scope.close()

    assert (await entry_task).status is ResolutionStatus.ABANDONED
    assert (await draft_task).status is ResolutionStatus.ABANDONED
    assert (await move_task).status is MoveStatus.ABANDONED
    assert len(handler.requests) == 3
    with pytest.raises(RuntimeError):
        scope.draft_pipeline()
    await client.aclose()


@pytest.mark.asyncio
async def test_entry_mover_over_http(make_client):
    handler = RecordingTransport(
        httpx.Response(200, json=HIERARCHY),
        httpx.Response(200, json=entry_payload(42, vocabulary_id=1)),
    )
    client = make_client(handler)

    async with ViewScope(client) as scope:
        mover = scope.entry_mover(collection_id=2, vocabulary_id=3)
        task = asyncio.create_task(mover.relocate(42, current_destination_id=3))
        await wait_for_open(mover.gateway)
        assert [t.label for t in mover.targets] == ["Drafts - Drafts", "Spanish - Extra"]
        mover.select(1)
        mover.confirm()
        outcome = await task

    assert outcome.status is MoveStatus.MOVED
    assert outcome.location_path == "/drafts/entries/42"
    assert handler.requests[1].url.path == "/api/collections/2/vocabularies/3/entries/42/move"
    assert handler.json_bodies()[1] == {"vocabularyId": 1}
    await client.aclose()


@pytest.mark.asyncio
async def test_draft_mover_retries_failed_hierarchy(make_client):
    handler = RecordingTransport(
        httpx.ConnectError("connection refused"),
        httpx.Response(200, json=HIERARCHY),
        httpx.Response(200, json=entry_payload(42, vocabulary_id=4)),
    )
    client = make_client(handler)

    async with ViewScope(client) as scope:
        mover = scope.draft_mover()
        task = asyncio.create_task(mover.relocate(42, current_destination_id=1))
        await wait_for_open(mover.gateway)

        assert mover.load_error is not None
        assert not mover.confirm()
        assert await mover.retry()
        assert mover.select(4)
        assert mover.confirm()
        outcome = await task

    assert outcome.location_path == "/collections/2/vocabularies/4/entries/42"
    assert handler.requests[2].url.path == "/api/drafts/42/move"
    await client.aclose()
