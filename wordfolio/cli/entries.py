"""CLI commands that add and move vocabulary entries.

Each command opens a ViewScope for its lifetime, attaches the terminal
PromptHost to the pipeline or resolver it uses, and reports the terminal
outcome.  Leaving the command (normally or via Ctrl+C) closes the scope, so
no decision is left outstanding.

Usage:
    wordfolio add-entry run --collection-id 1 --vocabulary-id 2 -d "to move swiftly"
    wordfolio add-draft correr -t run
    wordfolio move-entry 42 --collection-id 1 --vocabulary-id 2
    wordfolio move-draft 42 --drafts-vocabulary-id 7
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, List, Optional

import httpx
import typer
from rich.console import Console

from wordfolio.client.client import AuthenticatedClient
from wordfolio.client.models.entry_request import CreateEntryRequest, DefinitionRequest, TranslationRequest
from wordfolio.config import settings
from wordfolio.errors import NotAuthenticatedError, UnexpectedStatus
from wordfolio.resolution.move import MoveOutcome, MoveStatus, MoveTargetResolver
from wordfolio.resolution.pipeline import DuplicateResolutionPipeline, ResolutionOutcome, ResolutionStatus
from wordfolio.resolution.scope import ViewScope
from wordfolio.cli.host import PromptHost, render_entry

console = Console()

_TOKEN_OPTION = typer.Option(
    settings.access_token,
    "--token",
    envvar="WORDFOLIO_ACCESS_TOKEN",
    help="Access token issued at login.",
    show_default=False,
)


def build_client(token: str) -> AuthenticatedClient:
    return AuthenticatedClient(
        base_url=settings.api_base_url,
        token=token,
        token_type=settings.token_type,
        timeout=httpx.Timeout(settings.request_timeout_seconds),
        verify_ssl=settings.verify_ssl,
    )


def build_request(text: str, definitions: list[str], translations: list[str]) -> CreateEntryRequest:
    """Build a create request from CLI arguments.

    Raises:
        typer.BadParameter: If the entry has neither a definition nor a translation.
    """
    if not definitions and not translations:
        raise typer.BadParameter("At least one definition or translation is required")
    return CreateEntryRequest(
        entry_text=text.strip(),
        definitions=[DefinitionRequest(definition_text=d) for d in definitions],
        translations=[TranslationRequest(translation_text=t) for t in translations],
    )


def _run(token: str, flow: Callable[[ViewScope, PromptHost], Awaitable[None]]) -> None:
    async def main() -> None:
        host = PromptHost(console)
        async with build_client(token) as client:
            async with ViewScope(client) as scope:
                try:
                    await flow(scope, host)
                finally:
                    host.close()

    try:
        asyncio.run(main())
    except NotAuthenticatedError:
        console.print("[red]Not authenticated. Set WORDFOLIO_ACCESS_TOKEN or pass --token.[/red]")
        raise typer.Exit(code=1)
    except UnexpectedStatus as exc:
        console.print(f"[red]Unexpected response from the server (status {exc.status_code}).[/red]")
        raise typer.Exit(code=1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        raise typer.Exit(code=130)


def _report_created(outcome: ResolutionOutcome, success_message: str, failure_message: str) -> None:
    if outcome.status is ResolutionStatus.SUCCESS:
        assert outcome.resource is not None
        console.print(f"[green]{success_message}[/green]")
        console.print(render_entry(outcome.resource))
        return
    if outcome.status is ResolutionStatus.ABANDONED:
        console.print("[dim]Not added.[/dim]")
        return

    console.print(f"[red]{failure_message}[/red]")
    if outcome.failure is not None:
        console.print(f"[dim]{outcome.failure.detail}[/dim]")
        for name, messages in outcome.failure.field_errors.items():
            for message in messages:
                console.print(f"[dim]  {name}: {message}[/dim]")
    raise typer.Exit(code=1)


def _report_moved(outcome: MoveOutcome) -> None:
    if outcome.status is MoveStatus.MOVED:
        console.print(f"[green]Entry moved.[/green] {outcome.location_path}")
        return
    if outcome.status is MoveStatus.ABANDONED:
        console.print("[dim]Entry not moved.[/dim]")
        return

    console.print("[red]Failed to move entry. Please try again.[/red]")
    if outcome.failure is not None:
        console.print(f"[dim]{outcome.failure.detail}[/dim]")
    raise typer.Exit(code=1)


def add_entry(
    text: str = typer.Argument(..., help="The word or phrase to add."),
    collection_id: int = typer.Option(..., "--collection-id", help="Collection that owns the vocabulary."),
    vocabulary_id: int = typer.Option(..., "--vocabulary-id", help="Vocabulary to add the entry to."),
    definition: Optional[List[str]] = typer.Option(None, "--definition", "-d", help="Definition (repeatable)."),
    translation: Optional[List[str]] = typer.Option(None, "--translation", "-t", help="Translation (repeatable)."),
    token: str = _TOKEN_OPTION,
) -> None:
    """Add an entry to a vocabulary, asking before adding a duplicate."""
    request = build_request(text, definition or [], translation or [])
    outcomes: list[ResolutionOutcome] = []

    async def flow(scope: ViewScope, host: PromptHost) -> None:
        pipeline: DuplicateResolutionPipeline = scope.entry_pipeline(
            collection_id=collection_id,
            vocabulary_id=vocabulary_id,
        )
        host.attach_pipeline(pipeline)
        outcomes.append(await pipeline.submit(request, context={"collection_id": collection_id}))

    _run(token, flow)
    _report_created(outcomes[0], "Entry created successfully", "Failed to create entry. Please try again.")


def add_draft(
    text: str = typer.Argument(..., help="The word or phrase to add."),
    definition: Optional[List[str]] = typer.Option(None, "--definition", "-d", help="Definition (repeatable)."),
    translation: Optional[List[str]] = typer.Option(None, "--translation", "-t", help="Translation (repeatable)."),
    token: str = _TOKEN_OPTION,
) -> None:
    """Add an entry to drafts, asking before adding a duplicate."""
    request = build_request(text, definition or [], translation or [])
    outcomes: list[ResolutionOutcome] = []

    async def flow(scope: ViewScope, host: PromptHost) -> None:
        pipeline = scope.draft_pipeline()
        host.attach_pipeline(pipeline)
        outcomes.append(await pipeline.submit(request))

    _run(token, flow)
    _report_created(outcomes[0], "Draft created successfully", "Failed to create draft. Please try again.")


def _move(token: str, entry_id: int, current_vocabulary_id: int, make: Callable[[ViewScope], MoveTargetResolver]) -> None:
    outcomes: list[MoveOutcome] = []

    async def flow(scope: ViewScope, host: PromptHost) -> None:
        resolver = make(scope)
        host.attach_mover(resolver)
        outcomes.append(await resolver.relocate(entry_id, current_vocabulary_id))

    _run(token, flow)
    _report_moved(outcomes[0])


def move_entry(
    entry_id: int = typer.Argument(..., help="Entry to move."),
    collection_id: int = typer.Option(..., "--collection-id", help="Collection the entry is in."),
    vocabulary_id: int = typer.Option(..., "--vocabulary-id", help="Vocabulary the entry is in."),
    token: str = _TOKEN_OPTION,
) -> None:
    """Move an entry to another vocabulary or to drafts."""
    _move(
        token,
        entry_id,
        vocabulary_id,
        lambda scope: scope.entry_mover(collection_id=collection_id, vocabulary_id=vocabulary_id),
    )


def move_draft(
    entry_id: int = typer.Argument(..., help="Draft entry to move."),
    drafts_vocabulary_id: int = typer.Option(..., "--drafts-vocabulary-id", help="Id of the drafts vocabulary."),
    token: str = _TOKEN_OPTION,
) -> None:
    """Move a draft into a collection vocabulary."""
    _move(token, entry_id, drafts_vocabulary_id, lambda scope: scope.draft_mover())
