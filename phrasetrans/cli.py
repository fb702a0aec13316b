"""
Command-line interface for PhraseTrans.

Provides commands for:
- Translating a piece of text with a dictionary file
- Running an interactive translate loop
- Validating and browsing dictionary files

Usage:
    phrasetrans translate "Hello there" --dictionary words.txt
    phrasetrans interactive --dictionary words.txt
    phrasetrans dictionary words.txt --search "new york"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from phrasetrans import __version__
from phrasetrans.config import APP_NAME, DICTIONARY_ENV_VAR, EXIT_COMMAND, resolve_dictionary_path
from phrasetrans.translate.dictionary import LoadResult
from phrasetrans.translate.translator import Translator

app = typer.Typer(
    name="phrasetrans",
    help="PhraseTrans: dictionary-driven phrase translation",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{APP_NAME} v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(
        False, "--verbose",
        help="Log dictionary loading details",
    ),
):
    """PhraseTrans: dictionary-driven phrase translation."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_or_exit(translator: Translator, path: Path) -> None:
    result: LoadResult = translator.load_file(path)
    if not result.ok:
        console.print(f"[red]Error:[/] {escape(result.message)}", soft_wrap=True)
        raise typer.Exit(1)


def _require_dictionary(dictionary: Optional[Path]) -> Path:
    path = resolve_dictionary_path(dictionary)
    if path is None:
        console.print(
            f"[red]Error:[/] No dictionary given. Pass --dictionary or set {DICTIONARY_ENV_VAR}",
            soft_wrap=True,
        )
        raise typer.Exit(1)
    return path


@app.command()
def translate(
    text: str = typer.Argument(..., help="Text to translate"),
    dictionary: Optional[Path] = typer.Option(
        None, "--dictionary", "-d",
        help=f"Dictionary file (defaults to ${DICTIONARY_ENV_VAR})",
    ),
    explain: bool = typer.Option(
        False, "--explain", "-e",
        help="Show which phrases were matched",
    ),
):
    """Translate a piece of text."""
    translator = Translator()
    _load_or_exit(translator, _require_dictionary(dictionary))

    if not explain:
        console.print(escape(translator.translate(text)), soft_wrap=True, highlight=False)
        return

    result = translator.analyze(text)
    table = Table(title="Segments")
    table.add_column("Source", style="cyan")
    table.add_column("Output", style="green")
    table.add_column("Matched")
    for segment in result.segments:
        table.add_row(
            escape(segment.source),
            escape(segment.output),
            "✓" if segment.matched else "",
        )
    console.print(table)
    console.print(f"\n[bold]Translated text:[/] {escape(result.text)}", soft_wrap=True, highlight=False)
    console.print(f"[dim]Coverage: {result.coverage:.0%} of {result.token_count} words[/]")


@app.command()
def interactive(
    dictionary: Optional[Path] = typer.Option(
        None, "--dictionary", "-d",
        help=f"Dictionary file (defaults to ${DICTIONARY_ENV_VAR}, else prompts)",
    ),
):
    """Translate lines typed at the prompt until 'exit'."""
    path = resolve_dictionary_path(dictionary)
    if path is None:
        path = Path(Prompt.ask("Enter the path to the dictionary file", console=console))

    translator = Translator()
    _load_or_exit(translator, path)
    console.print("[green]Dictionary loaded successfully![/]")

    while True:
        try:
            text = Prompt.ask(
                f"Enter text to translate (or type '{EXIT_COMMAND}' to quit)",
                console=console,
            )
        except EOFError:
            break
        if text.strip().lower() == EXIT_COMMAND:
            break
        console.print(
            f"Translated text: {escape(translator.translate(text))}",
            soft_wrap=True,
            highlight=False,
        )

    console.print("Goodbye!")


@app.command()
def dictionary(
    path: Path = typer.Argument(..., help="Dictionary file to check"),
    search: Optional[str] = typer.Option(
        None, "--search", "-s",
        help="Look up a single phrase",
    ),
):
    """Validate a dictionary file and list or search its entries."""
    translator = Translator()
    _load_or_exit(translator, path)
    store = translator.store

    if search:
        target = store.lookup(search)
        if target is not None:
            console.print(f"[green]{escape(search)}[/] → [cyan]{escape(target)}[/]", soft_wrap=True)
        else:
            console.print(f"[yellow]Phrase not found:[/] {escape(search)}")
        return

    table = Table(title=f"Dictionary: {escape(path.name)}")
    table.add_column("Phrase", style="cyan")
    table.add_column("Translation", style="green")
    for entry in store:
        table.add_row(escape(entry.key), escape(entry.value))
    console.print(table)
    console.print(
        f"{len(store)} entries, longest phrase {store.max_phrase_length} words",
        soft_wrap=True,
    )

    if store.duplicates:
        console.print(f"[yellow]{store.duplicates} duplicate keys ignored (first occurrence kept)[/]")
