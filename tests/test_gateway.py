"""Tests for ConfirmationGateway: single slot, exactly-once resolution, teardown."""

from __future__ import annotations

import asyncio

import pytest

from conftest import wait_for_open
from wordfolio.errors import GatewayBusyError, GatewayClosedError
from wordfolio.resolution.gateway import ConfirmationGateway


@pytest.mark.asyncio
async def test_confirm_resumes_caller_with_value():
    gateway: ConfirmationGateway[str, int] = ConfirmationGateway(name="test")
    waiter = asyncio.create_task(gateway.raise_prompt("pick a number"))
    await wait_for_open(gateway)

    assert gateway.is_open
    assert gateway.prompt == "pick a number"

    gateway.confirm(7)

    assert await waiter == 7
    assert not gateway.is_open
    assert gateway.prompt is None


@pytest.mark.asyncio
async def test_cancel_resumes_caller_with_none():
    gateway: ConfirmationGateway[str, bool] = ConfirmationGateway()
    waiter = asyncio.create_task(gateway.raise_prompt("sure?"))
    await wait_for_open(gateway)

    assert gateway.cancel() is True
    assert await waiter is None
    assert not gateway.is_open


@pytest.mark.asyncio
async def test_gateway_reusable_immediately_after_decision():
    gateway: ConfirmationGateway[str, bool] = ConfirmationGateway()
    first = asyncio.create_task(gateway.raise_prompt("first"))
    await wait_for_open(gateway)
    gateway.confirm(True)

    # Re-raise before the first waiter has even been resumed.
    second = asyncio.create_task(gateway.raise_prompt("second"))
    await wait_for_open(gateway)
    assert gateway.prompt == "second"
    gateway.cancel()

    assert await first is True
    assert await second is None


@pytest.mark.asyncio
async def test_overlapping_raise_is_rejected_and_keeps_open_decision():
    gateway: ConfirmationGateway[str, bool] = ConfirmationGateway()
    first = asyncio.create_task(gateway.raise_prompt("first"))
    await wait_for_open(gateway)

    with pytest.raises(GatewayBusyError):
        await gateway.raise_prompt("second")

    assert gateway.prompt == "first"
    gateway.confirm(True)
    assert await first is True


@pytest.mark.asyncio
async def test_confirm_without_open_prompt_raises():
    gateway: ConfirmationGateway[str, bool] = ConfirmationGateway()

    with pytest.raises(GatewayClosedError):
        gateway.confirm(True)
    assert gateway.cancel() is False


@pytest.mark.asyncio
async def test_second_decision_is_ignored():
    gateway: ConfirmationGateway[str, bool] = ConfirmationGateway()
    waiter = asyncio.create_task(gateway.raise_prompt("once"))
    await wait_for_open(gateway)

    gateway.confirm(True)
    assert gateway.cancel() is False
    with pytest.raises(GatewayClosedError):
        gateway.confirm(False)

    assert await waiter is True


@pytest.mark.asyncio
async def test_close_cancels_outstanding_and_rejects_new_prompts():
    gateway: ConfirmationGateway[str, bool] = ConfirmationGateway()
    waiter = asyncio.create_task(gateway.raise_prompt("pending"))
    await wait_for_open(gateway)

    gateway.close()

    assert await waiter is None
    assert gateway.closed
    with pytest.raises(GatewayClosedError):
        await gateway.raise_prompt("after close")


@pytest.mark.asyncio
async def test_cancelled_waiter_releases_slot():
    gateway: ConfirmationGateway[str, bool] = ConfirmationGateway()
    waiter = asyncio.create_task(gateway.raise_prompt("abandoned"))
    await wait_for_open(gateway)

    waiter.cancel()
    with pytest.raises(asyncio.CancelledError):
        await waiter

    assert not gateway.is_open
    again = asyncio.create_task(gateway.raise_prompt("again"))
    await wait_for_open(gateway)
    gateway.confirm(False)
    assert await again is False


@pytest.mark.asyncio
async def test_subscribers_see_open_and_close_transitions():
    gateway: ConfirmationGateway[str, bool] = ConfirmationGateway()
    seen: list[tuple[bool, str | None]] = []
    unsubscribe = gateway.subscribe(lambda g: seen.append((g.is_open, g.prompt)))

    waiter = asyncio.create_task(gateway.raise_prompt("watch me"))
    await wait_for_open(gateway)
    gateway.confirm(True)
    await waiter

    assert seen == [(True, "watch me"), (False, None)]

    unsubscribe()
    waiter = asyncio.create_task(gateway.raise_prompt("unwatched"))
    await wait_for_open(gateway)
    gateway.cancel()
    await waiter
    assert len(seen) == 2


@pytest.mark.asyncio
async def test_failing_listener_does_not_break_protocol():
    gateway: ConfirmationGateway[str, bool] = ConfirmationGateway()

    def broken(_gateway):
        raise RuntimeError("render failed")

    gateway.subscribe(broken)
    waiter = asyncio.create_task(gateway.raise_prompt("still works"))
    await wait_for_open(gateway)
    gateway.confirm(True)

    assert await waiter is True
