#!/usr/bin/env python3
"""Command-line interface for mixtape.

A thin front end over PlaylistStore: every command opens the persisted
playlist, calls one store operation and renders the result.
"""

import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from mixtape import create_store
from mixtape.embed import embed_html
from mixtape.exceptions import EntryNotFoundError, MixtapeError
from mixtape.models import (
    EntryFilter,
    ImportFailure,
    MediaReference,
    PlaylistEntry,
    ResolutionFailure,
)
from mixtape.resolver import resolve
from mixtape.settings import Settings, get_settings
from mixtape.snapshot import encode_snapshot
from mixtape.store import PlaylistStore

logger = logging.getLogger("mixtape")

DEFAULT_EXPORT_FILENAME = "mixtape-playlist.json"


def setup_logging(level: int | str = logging.WARNING) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first so it can be called more than once.

    Args:
        level: Root log level, as a logging constant or level name.
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=Console(stderr=True),
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def print_entry_card(console: Console, entry: PlaylistEntry) -> None:
    """Print a single entry as a vertical card.

    Args:
        console: Rich console for output.
        entry: Entry to display.
    """
    star = "[yellow]★[/yellow]" if entry.favorite else "☆"
    table = Table(
        show_header=False,
        padding=(0, 1),
        title=f"{star} [bold]{escape(entry.label)}[/bold]",
        title_justify="left",
    )
    table.add_column("Field", style="bold cyan", width=10)
    table.add_column("Value", overflow="fold")

    table.add_row("ID", entry.id)
    table.add_row("Provider", escape(entry.provider_label))
    table.add_row("Link", escape(entry.source_url))
    table.add_row("Embed", escape(entry.embed_url))
    if entry.note:
        table.add_row("Note", escape(entry.note))
    table.add_row("Added", entry.created_at.astimezone().strftime("%Y-%m-%d %H:%M"))

    console.print()
    console.print(table)


def print_entries(console: Console, entries: list[PlaylistEntry], total: int) -> None:
    """Print entries as a table, newest first.

    Args:
        console: Rich console for output.
        entries: Entries to display.
        total: Size of the whole collection, for the summary line.
    """
    if not entries:
        console.print(
            "[dim]No items yet. Paste a YouTube or Spotify link with "
            "[bold]mixtape add URL[/bold][/dim]"
        )
        return

    table = Table(header_style="bold cyan")
    table.add_column("ID", no_wrap=True)
    table.add_column("", width=1)
    table.add_column("Provider")
    table.add_column("Title", overflow="fold")
    table.add_column("Note", overflow="fold", style="dim")
    for entry in entries:
        table.add_row(
            entry.id,
            "[yellow]★[/yellow]" if entry.favorite else "",
            escape(entry.provider_label),
            escape(entry.label),
            escape(entry.note),
        )
    console.print(table)
    console.print(f"Showing {len(entries)} of {total} item(s)")


def print_reference(console: Console, reference: MediaReference) -> None:
    """Print a resolved reference as a two-column table."""
    table = Table(show_header=False, padding=(0, 1))
    table.add_column("Field", style="bold cyan", width=10)
    table.add_column("Value", overflow="fold")
    table.add_row("Provider", reference.provider.label)
    if reference.subtype is not None:
        table.add_row("Type", reference.subtype.value)
    table.add_row("ID", reference.external_id)
    table.add_row("Embed", reference.embed_url)
    console.print(table)


def _open_store(ctx: click.Context) -> PlaylistStore:
    settings: Settings = ctx.obj["settings"]
    return create_store(settings, data_dir=ctx.obj.get("data_dir"))


def _require(entry: PlaylistEntry | None, entry_id: str) -> PlaylistEntry:
    if entry is None:
        raise EntryNotFoundError(entry_id)
    return entry


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the playlist (default: $MIXTAPE_DATA_DIR).",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, data_dir: Path | None) -> None:
    """Keep a personal playlist of YouTube and Spotify links with notes."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.ClickException(
            f"Configuration error: {e.errors()[0]['msg']}"
        ) from e
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["data_dir"] = data_dir
    setup_logging(logging.DEBUG if verbose else settings.log_level)


@main.command(name="add")
@click.argument("url", metavar="URL")
@click.option("-n", "--name", default="", help="Title, e.g. 'Our first trip'.")
@click.option("--note", default="", help="Personal note.")
@click.pass_context
def add_cmd(ctx: click.Context, url: str, name: str, note: str) -> None:
    """Add a YouTube or Spotify link to the playlist.

    \b
    Examples:
      mixtape add "https://youtu.be/dQw4w9WgXcQ" --name "Our Song"
      mixtape add "https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC"
    """
    result = _open_store(ctx).add(url, display_name=name, note=note)
    if isinstance(result, ResolutionFailure):
        raise click.ClickException(result.message)
    console = Console()
    console.print(f"[green]Added[/green] {escape(result.label)} ({result.id})")


@main.command(name="list")
@click.option(
    "-f",
    "--filter",
    "tag",
    type=click.Choice([f.value for f in EntryFilter]),
    default=EntryFilter.ALL.value,
    help="Show only some entries (default: all).",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_cmd(ctx: click.Context, tag: str, as_json: bool) -> None:
    """List playlist entries, newest first."""
    store = _open_store(ctx)
    entries = store.filter(EntryFilter(tag))
    if as_json:
        click.echo(encode_snapshot(entries))
        return
    print_entries(Console(), entries, total=len(store))


@main.command(name="show")
@click.argument("entry_id", metavar="ID")
@click.pass_context
def show_cmd(ctx: click.Context, entry_id: str) -> None:
    """Show every field of one entry."""
    try:
        entry = _require(_open_store(ctx).get(entry_id), entry_id)
    except MixtapeError as e:
        raise click.ClickException(e.message) from e
    print_entry_card(Console(), entry)


@main.command(name="fav")
@click.argument("entry_id", metavar="ID")
@click.pass_context
def fav_cmd(ctx: click.Context, entry_id: str) -> None:
    """Toggle the favorite flag of an entry."""
    try:
        entry = _require(_open_store(ctx).toggle_favorite(entry_id), entry_id)
    except MixtapeError as e:
        raise click.ClickException(e.message) from e
    state = "favorite" if entry.favorite else "not a favorite"
    Console().print(f"{escape(entry.label)} is now {state}")


@main.command(name="rename")
@click.argument("entry_id", metavar="ID")
@click.argument("name")
@click.pass_context
def rename_cmd(ctx: click.Context, entry_id: str, name: str) -> None:
    """Change the title of an entry."""
    try:
        entry = _require(_open_store(ctx).update_name(entry_id, name), entry_id)
    except MixtapeError as e:
        raise click.ClickException(e.message) from e
    Console().print(f"Renamed {entry.id} to {escape(entry.label)}")


@main.command(name="note")
@click.argument("entry_id", metavar="ID")
@click.argument("text")
@click.pass_context
def note_cmd(ctx: click.Context, entry_id: str, text: str) -> None:
    """Replace the note of an entry. Pass "" to clear it."""
    try:
        entry = _require(_open_store(ctx).update_note(entry_id, text), entry_id)
    except MixtapeError as e:
        raise click.ClickException(e.message) from e
    Console().print(f"Updated note for {escape(entry.label)}")


@main.command(name="rm")
@click.argument("entry_id", metavar="ID")
@click.pass_context
def rm_cmd(ctx: click.Context, entry_id: str) -> None:
    """Delete an entry."""
    if not _open_store(ctx).remove(entry_id):
        raise click.ClickException(EntryNotFoundError(entry_id).message)
    Console().print(f"Removed {entry_id}")


@main.command(name="embed")
@click.argument("entry_id", metavar="ID")
@click.pass_context
def embed_cmd(ctx: click.Context, entry_id: str) -> None:
    """Print the HTML iframe for an entry."""
    try:
        entry = _require(_open_store(ctx).get(entry_id), entry_id)
    except MixtapeError as e:
        raise click.ClickException(e.message) from e
    click.echo(embed_html(entry))


@main.command(name="resolve")
@click.argument("url", metavar="URL")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def resolve_cmd(url: str, as_json: bool) -> None:
    """Resolve a link without adding it to the playlist."""
    result = resolve(url)
    if isinstance(result, ResolutionFailure):
        raise click.ClickException(result.message)
    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return
    print_reference(Console(), result)


@main.command(name="export")
@click.argument(
    "output",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default=Path(DEFAULT_EXPORT_FILENAME),
    metavar="[PATH]",
)
@click.pass_context
def export_cmd(ctx: click.Context, output: Path) -> None:
    """Export the playlist as JSON (default: mixtape-playlist.json, - for stdout)."""
    store = _open_store(ctx)
    snapshot = store.export_snapshot()
    if str(output) == "-":
        click.echo(snapshot)
        return
    try:
        output.write_text(snapshot + "\n", encoding="utf-8")
    except OSError as e:
        logger.error("Export failed: %s", e)
        raise click.ClickException(f"Could not write {output}: {e}") from e
    Console().print(f"Exported {len(store)} item(s) to {escape(str(output))}")


@main.command(name="import")
@click.argument(
    "source",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
    metavar="PATH",
)
@click.pass_context
def import_cmd(ctx: click.Context, source: Path) -> None:
    """Replace the playlist with a previously exported JSON file."""
    try:
        data = sys.stdin.buffer.read() if str(source) == "-" else source.read_bytes()
    except OSError as e:
        logger.error("Import failed: %s", e)
        raise click.ClickException(f"Could not read {source}: {e}") from e
    result = _open_store(ctx).import_snapshot(data)
    if isinstance(result, ImportFailure):
        raise click.ClickException(result.message)
    Console().print(f"Imported {result.count} item(s)")


if __name__ == "__main__":
    main()
