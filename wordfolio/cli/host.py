"""Terminal host for resolution prompts.

The resolution classes never render anything.  This host subscribes to their
gateways and, whenever one opens, shows the prompt with Rich and asks the
user with questionary, then calls confirm()/cancel() on the gateway.

Ctrl+C at any question (questionary returns None) counts as cancel.
"""

from __future__ import annotations

import asyncio
import logging

import questionary
from rich.console import Console
from rich.panel import Panel

from wordfolio.client.models.entry import Entry
from wordfolio.resolution.gateway import ConfirmationGateway
from wordfolio.resolution.move import MoveTargetResolver
from wordfolio.resolution.pipeline import DuplicatePrompt, DuplicateResolutionPipeline

logger = logging.getLogger(__name__)

_RETRY = "Retry"
_CANCEL = "Cancel"


def render_entry(entry: Entry) -> str:
    """Build a Rich markup string describing an entry."""
    lines = [f"[bold]{entry.entry_text}[/bold]"]

    if entry.definitions:
        lines.append("\n[bold]Definitions:[/bold]")
        for definition in entry.definitions:
            lines.append(f"  • {definition.definition_text}")
            lines.extend(f"    [dim]“{example.example_text}”[/dim]" for example in definition.examples)

    if entry.translations:
        lines.append("\n[bold]Translations:[/bold]")
        for translation in entry.translations:
            lines.append(f"  • {translation.translation_text}")
            lines.extend(f"    [dim]“{example.example_text}”[/dim]" for example in translation.examples)

    if entry.created_at:
        lines.append(f"\n[dim]Added {entry.created_at}[/dim]")
    return "\n".join(lines)


class PromptHost:
    """Answers open gateways from the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self._tasks: set[asyncio.Task] = set()

    def attach_pipeline(self, pipeline: DuplicateResolutionPipeline) -> None:
        pipeline.gateway.subscribe(self._on_duplicate_gateway)

    def attach_mover(self, resolver: MoveTargetResolver) -> None:
        def on_change(gateway: ConfirmationGateway) -> None:
            if gateway.is_open:
                self._spawn(self._answer_move(resolver), gateway)

        resolver.gateway.subscribe(on_change)

    def close(self) -> None:
        for task in self._tasks:
            task.cancel()
        self._tasks.clear()

    # ------------------------------------------------------------------
    # Duplicate entry
    # ------------------------------------------------------------------

    def _on_duplicate_gateway(self, gateway: ConfirmationGateway) -> None:
        if gateway.is_open:
            self._spawn(self._answer_duplicate(gateway), gateway)

    async def _answer_duplicate(self, gateway: ConfirmationGateway[DuplicatePrompt, bool]) -> None:
        prompt = gateway.prompt
        if prompt is None:
            return

        self.console.print(Panel(
            "A matching entry already exists in this vocabulary.\n\n"
            + render_entry(prompt.existing_resource),
            title="Already in Vocabulary",
            border_style="yellow",
        ))

        add_anyway = await questionary.confirm("Add anyway?", default=False).ask_async()

        if gateway.prompt is not prompt:
            return
        if add_anyway:
            gateway.confirm(True)
        else:
            gateway.cancel()

    # ------------------------------------------------------------------
    # Move entry
    # ------------------------------------------------------------------

    async def _answer_move(self, resolver: MoveTargetResolver) -> None:
        while resolver.gateway.is_open:
            if resolver.load_error is not None:
                self.console.print(Panel(
                    "[red]Failed to Load Vocabularies[/red]\n\n"
                    "Something went wrong while loading target vocabularies. Please try again.",
                    border_style="red",
                ))
                action = await questionary.select("What would you like to do?", choices=[_RETRY, _CANCEL]).ask_async()
                if action == _RETRY:
                    await resolver.retry()
                    continue
                resolver.cancel()
                return

            targets = resolver.targets
            if not targets:
                self.console.print("[yellow]There are no other vocabularies available for this entry.[/yellow]")
                resolver.cancel()
                return

            destination_id = await questionary.select(
                "Choose a target vocabulary for this entry:",
                choices=[questionary.Choice(title=target.label, value=target.destination_id) for target in targets],
            ).ask_async()

            if destination_id is None or not resolver.select(destination_id):
                resolver.cancel()
                return
            resolver.confirm()
            return

    def _spawn(self, coro, gateway: ConfirmationGateway) -> None:
        prompt = gateway.prompt
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)

        def done(finished: asyncio.Task) -> None:
            self._tasks.discard(finished)
            if not finished.cancelled() and finished.exception() is not None:
                exc = finished.exception()
                logger.error("Prompt host failed: %s", exc, exc_info=exc)
            # Never leave the caller suspended on a prompt nobody answers.
            if gateway.prompt is prompt:
                gateway.cancel()

        task.add_done_callback(done)
