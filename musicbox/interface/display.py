"""Rich console display components for the musicbox application."""

from typing import List, Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.align import Align

from ..catalog.models import Album, Collection
from ..catalog.timestamps import format_duration
from ..core.config import AppInfo


class CatalogDisplay:
    """Handles all rich console output for catalog browsing."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize with optional console instance."""
        self.console = console or Console()

    def show_app_header(self) -> None:
        """Display application header with branding."""
        header_text = Text()
        header_text.append(AppInfo.NAME.upper(), style="bold blue")
        header_text.append(f" v{AppInfo.VERSION}", style="dim")
        header_text.append(f"\n{AppInfo.DESCRIPTION}", style="italic")

        panel = Panel(Align.center(header_text), border_style="blue", padding=(1, 2))
        self.console.print(panel)

    def show_album_names(self, names: List[str]) -> None:
        """Display album names, one per line."""
        for name in names:
            self.console.print(name, markup=False, highlight=False)

        if names:
            self.console.print(f"\n[green]Found {len(names)} album(s)[/green]")
        else:
            self.console.print("[yellow]No albums in this catalog.[/yellow]")

    def show_album(self, album: Album) -> None:
        """Display an album summary followed by one line per song."""
        self.console.print(Text(album.summary, style="bold blue"))
        for song in album.songs:
            self.console.print(song.display_line, markup=False, highlight=False)

    def show_collection_table(self, collection: Collection) -> None:
        """Display every album with its song count and running time."""
        table = Table(title="Catalog Overview")
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Album", style="blue")
        table.add_column("Artist", style="magenta")
        table.add_column("Songs", justify="right", style="green")
        table.add_column("Length", justify="right", style="yellow")

        for i, album in enumerate(collection.albums, 1):
            table.add_row(
                str(i),
                Text(album.name),
                Text(album.artist),
                str(album.song_count),
                format_duration(album.total_length),
            )

        self.console.print(table)
        self.console.print(
            f"\n[green]{collection.count} album(s), "
            f"{collection.total_songs} song(s), "
            f"{format_duration(collection.total_length)} total[/green]"
        )

    def show_warning_message(self, message: str) -> None:
        """Display a warning message."""
        self.console.print(f"[yellow]⚠ {message}[/yellow]")

    def show_error_message(self, message: str) -> None:
        """Display an error message."""
        self.console.print(Text(f"✗ {message}", style="red"))

