"""Single-slot gateway that suspends a coroutine until a human decides.

A caller awaits ``raise_prompt(prompt)``; the gateway stores the prompt,
flips ``is_open`` and notifies its subscribers so a host can render it.
A later host event calls ``confirm(value)`` or ``cancel()``, which closes the
gateway and resumes the caller with ``value`` or ``None``.

Invariants:
- At most one outstanding decision per gateway.  A second ``raise_prompt``
  while one is open raises GatewayBusyError; the open decision is untouched.
- Each decision resolves exactly once.  State is cleared before the waiter
  is resumed, so a new prompt can be raised immediately.
- ``close()`` is the teardown hook: it cancels any outstanding decision and
  rejects further prompts.  Owners call it when their view goes away.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Generic, TypeVar

from ..errors import GatewayBusyError, GatewayClosedError

logger = logging.getLogger(__name__)

PromptT = TypeVar("PromptT")
ResultT = TypeVar("ResultT")

GatewayListener = Callable[["ConfirmationGateway"], None]


class ConfirmationGateway(Generic[PromptT, ResultT]):
    """Future-bridged human decision with one open slot.

    Args:
        name: Label used in log messages, e.g. ``"duplicate-entry"``.
    """

    def __init__(self, name: str = "gateway") -> None:
        self.name = name
        self._prompt: PromptT | None = None
        self._decision: asyncio.Future[ResultT | None] | None = None
        self._listeners: list[GatewayListener] = []
        self._closed = False

    def __repr__(self) -> str:
        return f"ConfirmationGateway(name={self.name!r}, is_open={self.is_open})"

    @property
    def is_open(self) -> bool:
        return self._decision is not None

    @property
    def prompt(self) -> PromptT | None:
        return self._prompt

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Host surface
    # ------------------------------------------------------------------

    def subscribe(self, listener: GatewayListener) -> Callable[[], None]:
        """Register a callback fired after every open/close transition.

        Returns:
            A callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def confirm(self, value: ResultT) -> None:
        """Resolve the outstanding decision with ``value``.

        Raises:
            GatewayClosedError: If no prompt is open.
        """
        decision = self._take_decision()
        if decision is None:
            raise GatewayClosedError(f"{self.name}: confirm() called with no open prompt")

        logger.debug("%s: confirmed", self.name)
        if not decision.done():
            decision.set_result(value)
        self._notify()

    def cancel(self) -> bool:
        """Resolve the outstanding decision with ``None``.

        Returns:
            True if a decision was outstanding, False if the call was a no-op.
        """
        decision = self._take_decision()
        if decision is None:
            return False

        logger.debug("%s: cancelled", self.name)
        if not decision.done():
            decision.set_result(None)
        self._notify()
        return True

    def close(self) -> None:
        """Teardown: cancel any outstanding decision and refuse new prompts."""
        if self._closed:
            return
        if self.cancel():
            logger.info("%s: closed with a decision outstanding; resolved as cancelled", self.name)
        self._closed = True
        self._listeners.clear()

    # ------------------------------------------------------------------
    # Caller surface
    # ------------------------------------------------------------------

    async def raise_prompt(self, prompt: PromptT) -> ResultT | None:
        """Open the gateway with ``prompt`` and wait for the decision.

        Returns:
            The value passed to ``confirm()``, or None on ``cancel()``/``close()``.

        Raises:
            GatewayBusyError:   If another decision is still outstanding.
            GatewayClosedError: If the gateway has been closed.
        """
        if self._closed:
            raise GatewayClosedError(f"{self.name}: gateway is closed")
        if self._decision is not None:
            raise GatewayBusyError(f"{self.name}: a decision is already outstanding")

        decision: asyncio.Future[ResultT | None] = asyncio.get_running_loop().create_future()
        self._decision = decision
        self._prompt = prompt
        logger.debug("%s: opened", self.name)
        self._notify()

        try:
            return await decision
        finally:
            # Waiter cancelled while open: release the slot.
            if self._decision is decision:
                self._take_decision()
                self._notify()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _take_decision(self) -> asyncio.Future[ResultT | None] | None:
        decision = self._decision
        self._decision = None
        self._prompt = None
        return decision

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("%s: listener %r failed", self.name, listener)
