"""Command-line interface for inspecting note blocks."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from .config_loader import load_settings
from .config_settings import BridgeSettings
from .exceptions import AnkiBridgeError, ValidationError
from .utils.logging import configure_logging

app = typer.Typer(
    name="anki-bridge",
    help="Inspect how Obsidian note blocks resolve for Anki.",
    no_args_is_help=True,
)

console = Console()


def _load(config_path: Path | None, log_level: str) -> BridgeSettings:
    configure_logging(log_level)
    try:
        return load_settings(config_path)
    except AnkiBridgeError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1) from e


@app.command(name="check-config")
def check_config(
    text: Annotated[str, typer.Argument(help="Inline note configuration (YAML)")],
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARN, ERROR)"),
    ] = "WARNING",
) -> None:
    """Validate an inline note configuration."""
    from .models.note_config import validate_parse_config

    configure_logging(log_level)
    try:
        config = validate_parse_config(text)
    except ValidationError as e:
        console.print(f"[bold red]Invalid:[/bold red] {e.message}")
        raise typer.Exit(code=1) from e

    table = Table(title="Note configuration")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("id", repr(config.id))
    for key, value in config.model_dump(by_alias=True, exclude={"id"}).items():
        table.add_row(key, "[dim]absent[/dim]" if value is None else repr(value))
    console.print(table)


@app.command(name="inspect")
def inspect_note(
    document: Annotated[
        Path, typer.Argument(help="Document the note block belongs to")
    ],
    front: Annotated[str, typer.Option("--front", help="Front-like text")],
    back: Annotated[str | None, typer.Option("--back", help="Back-like text")] = None,
    config_text: Annotated[
        str | None, typer.Option("--config", help="Inline note configuration (YAML)")
    ] = None,
    note_type: Annotated[
        str, typer.Option("--type", help="Block type: basic or cloze")
    ] = "basic",
    line: Annotated[int, typer.Option("--line", help="Line of the block")] = 1,
    config_path: Annotated[
        Path | None,
        typer.Option("--settings", help="Path to anki-bridge.yaml", exists=True),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARN, ERROR)"),
    ] = "WARNING",
) -> None:
    """Show how one note block resolves: model, deck, tags, fields and action."""
    from .anki.payload import anki_fields_for_note
    from .domain.services import plan_sync_action, resolve_deck, resolve_tags
    from .models.parse_result import ParseNoteResult
    from .obsidian.metadata_cache import FrontmatterMetadataCache
    from .sync.note_builder import build_note

    settings = _load(config_path, log_level)

    marker = {"offset": 0, "line": line, "column": 1}
    try:
        result = ParseNoteResult.from_raw(
            {
                "type": note_type,
                "config": config_text,
                "front": front,
                "back": back,
                "location": {"start": marker, "end": marker},
            }
        )
        note = build_note(result, document, settings)
    except ValidationError as e:
        console.print(f"[bold red]Note skipped:[/bold red] {e.message}")
        raise typer.Exit(code=1) from e

    metadata = FrontmatterMetadataCache()
    action = plan_sync_action(note)

    table = Table(title=f"{document}:{line}")
    table.add_column("Property", style="cyan")
    table.add_column("Value")
    table.add_row("kind", note.kind.value)
    table.add_row("model", note.get_model_name(settings))
    table.add_row("deck", resolve_deck(note, settings))
    table.add_row("tags", ", ".join(resolve_tags(note, settings, metadata)))
    for name, value in anki_fields_for_note(note, settings).items():
        table.add_row(f"field: {name}", value)
    table.add_row(
        "action",
        action.action_type.value + (f" ({action.reason})" if action.reason else ""),
    )
    console.print(table)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
