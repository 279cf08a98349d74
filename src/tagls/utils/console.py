"""Rich console setup and shared output helpers."""

import logging
import os
from collections.abc import Iterable

from rich.console import Console
from rich.logging import RichHandler
from rich.measure import Measurement
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from tagls.core.entry import Entry, Track

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "success": "bold green",
        "path": "bold",
    }
)

console = Console(theme=custom_theme, highlight=False)
err_console = Console(stderr=True, theme=custom_theme)

# Upper bound used when measuring a table for non-terminal output.
UNBOUNDED_WIDTH = 1_000_000

SIZE_SUFFIXES = ("B", "kiB", "MiB", "GiB", "TiB", "PiB", "EiB")
ENTRY_COLUMNS = ("NAME", "SIZE", "TITLE", "ARTIST", "ALBUM", "YEAR", "TRACK", "GENRE")


def format_size(size_bytes: int) -> str:
    """Format byte size as human-readable base-1024 string (8080 -> "7.9 kiB")."""
    if size_bytes < 10:
        return f"{size_bytes} {SIZE_SUFFIXES[0]}"

    exponent = 0
    while exponent < len(SIZE_SUFFIXES) - 1 and size_bytes >= 1024 ** (exponent + 1):
        exponent += 1

    value = int(size_bytes / 1024**exponent * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {SIZE_SUFFIXES[exponent]}"
    return f"{value:.0f} {SIZE_SUFFIXES[exponent]}"


def format_track(track: Track) -> str:
    if track.is_empty:
        return ""
    if track.total is None:
        return str(track.number)
    return f"{track.number}/{track.total}"


def join_values(values: Iterable[str]) -> str:
    return "/".join(values)


def entry_row(entry: Entry) -> list[str]:
    return [
        entry.display_name,
        format_size(entry.size),
        join_values(entry.title),
        join_values(entry.artist),
        join_values(entry.album),
        "" if entry.year is None else str(entry.year),
        format_track(entry.track),
        join_values(entry.genre),
    ]


def make_entry_table(entries: Iterable[Entry]) -> Table:
    """Create a borderless, left aligned table listing entries."""
    table = Table(box=None, show_header=True, header_style="bold", show_edge=False, pad_edge=False)
    for column in ENTRY_COLUMNS:
        table.add_column(column, justify="left", no_wrap=True)
    for entry in entries:
        # Text cells keep brackets in tag values from being parsed as markup.
        table.add_row(*(Text(cell) for cell in entry_row(entry)))
    return table


def print_table(table: Table) -> None:
    """Print a table, at its full natural width when stdout is not a terminal."""
    if console.is_terminal:
        console.print(table)
        return

    options = console.options.update_width(UNBOUNDED_WIDTH)
    width = Measurement.get(console, options, table).maximum
    Console(theme=custom_theme, highlight=False, width=max(width, 1)).print(table)


def display_path(path: str) -> str:
    """Printable form of a path that may hold undecodable bytes."""
    return os.fsencode(path).decode("utf-8", errors="replace")


def setup_logging(verbose: bool = False) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
