"""CLI commands for the musicbox application."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..catalog.models import Collection
from ..catalog.services import CatalogService
from ..catalog.timestamps import format_duration, parse_duration
from ..core.config import AppInfo, ParserOptions
from ..core.exceptions import (
    MusicboxError,
    AlbumNotFoundError,
    CatalogReadError,
    FormatError,
)
from .display import CatalogDisplay

# Initialize Rich console and Typer app
console = Console()
app = typer.Typer(
    name=AppInfo.NAME,
    help=AppInfo.DESCRIPTION,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

display = CatalogDisplay(console)


def handle_error(error: Exception) -> None:
    """Centralized error handling."""
    if isinstance(error, MusicboxError):
        display.show_error_message(error.message)
        if error.details:
            console.print(f"Details: {error.details}", style="dim", markup=False)
        if isinstance(error, FormatError) and error.line_number is not None:
            console.print(
                f"Line {error.line_number}: {error.line!r}", style="dim", markup=False
            )
        if isinstance(error, CatalogReadError) and error.file_path:
            console.print(f"File: {error.file_path}", style="dim", markup=False)
    else:
        display.show_error_message(f"Unexpected error: {str(error)}")

    raise typer.Exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(ctx: typer.Context, catalog_file: Path) -> Collection:
    service = CatalogService(ctx.obj["options"])
    return service.load(catalog_file)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging"
    ),
    allow_preamble: bool = typer.Option(
        False,
        "--allow-preamble",
        help="Collect tracks before the first header into a placeholder album",
    ),
    flush_trailing: bool = typer.Option(
        True,
        "--flush-trailing/--no-flush-trailing",
        help="Keep the last album when the file ends",
    ),
    skip_blank: bool = typer.Option(
        False, "--skip-blank", help="Ignore empty lines instead of failing"
    ),
    inherit_artist: bool = typer.Option(
        False, "--inherit-artist", help="Give each song its album's artist"
    ),
):
    """Browse a plain-text music catalog."""
    _configure_logging(verbose)

    if verbose and ctx.invoked_subcommand:
        display.show_app_header()

    # Store global configuration in context
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["options"] = ParserOptions(
        allow_preamble=allow_preamble,
        flush_trailing=flush_trailing,
        skip_blank_lines=skip_blank,
        inherit_artist=inherit_artist,
    )


@app.command()
def albums(
    ctx: typer.Context,
    catalog_file: Path = typer.Argument(help="Catalog text file"),
):
    """List the names of every album in a catalog."""
    try:
        collection = _load(ctx, catalog_file)
        display.show_album_names(collection.list_album_names())

    except (CatalogReadError, FormatError) as e:
        handle_error(e)


@app.command()
def show(
    ctx: typer.Context,
    catalog_file: Path = typer.Argument(help="Catalog text file"),
    album: str = typer.Argument(help="Exact album name"),
):
    """Show one album and its songs."""
    try:
        collection = _load(ctx, catalog_file)
        display.show_album(collection.find_album(album))

    except (CatalogReadError, FormatError, AlbumNotFoundError) as e:
        handle_error(e)


@app.command()
def overview(
    ctx: typer.Context,
    catalog_file: Path = typer.Argument(help="Catalog text file"),
):
    """Summarize every album with song counts and running times."""
    try:
        collection = _load(ctx, catalog_file)
        if not collection.albums:
            display.show_warning_message("No albums in this catalog.")
            return
        display.show_collection_table(collection)

    except (CatalogReadError, FormatError) as e:
        handle_error(e)


@app.command("to-seconds")
def to_seconds(
    timestamp: str = typer.Argument(help="Timestamp in H:M:S form"),
):
    """Convert an H:M:S timestamp into seconds."""
    try:
        console.print(str(parse_duration(timestamp)))

    except FormatError as e:
        handle_error(e)


@app.command("to-timestamp")
def to_timestamp(
    seconds: int = typer.Argument(min=0, help="Duration in seconds"),
):
    """Convert a number of seconds into an H:M:S timestamp."""
    console.print(format_duration(seconds))
