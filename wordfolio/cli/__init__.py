"""Wordfolio CLI — add and move vocabulary entries from the terminal.

Entry point registered in pyproject.toml:
    wordfolio = "wordfolio.cli:app"

Commands:
    wordfolio add-entry   — add an entry to a vocabulary
    wordfolio add-draft   — add an entry to drafts
    wordfolio move-entry  — move an entry to another vocabulary
    wordfolio move-draft  — move a draft into a vocabulary

Usage:
    wordfolio --help
    WORDFOLIO_ACCESS_TOKEN=... wordfolio add-draft correr -t run
"""

import logging

import typer
from rich.logging import RichHandler

from wordfolio.cli.entries import add_draft, add_entry, move_draft, move_entry
from wordfolio.config import settings

app = typer.Typer(
    name="wordfolio",
    help="Wordfolio CLI — manage your vocabularies",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


app.command("add-entry")(add_entry)
app.command("add-draft")(add_draft)
app.command("move-entry")(move_entry)
app.command("move-draft")(move_draft)
