"""Listing command: show tagged audio files as a table or JSON."""

import json
from enum import Enum
from pathlib import Path
from typing import NoReturn

import typer
from rich.text import Text

from tagls.core.entry import Entry, Info
from tagls.core.errors import ListingError
from tagls.core.scanner import ListOptions, list_paths
from tagls.core.sorting import SortKey, SortSpec, merge_file_infos
from tagls.utils.config import config_path, load_ls_defaults
from tagls.utils.console import console, display_path, err_console, make_entry_table, print_table


class OutputFormat(str, Enum):
    TABLE = "table"
    JSON = "json"


Block = tuple[str | None, list[Entry]]


def _capitalize(message: str) -> str:
    return message[:1].upper() + message[1:]


def _fail(message: str) -> NoReturn:
    err_console.print(Text(_capitalize(message), style="error"), soft_wrap=True)
    raise typer.Exit(1)


def build_blocks(results: list[Info], spec: SortSpec) -> list[Block]:
    """Group results for output.

    A single result is shown on its own. Otherwise the entries of all file
    arguments are merged into one unnamed block, followed by one block per
    directory.
    """
    if len(results) == 1:
        return [(None, list(results[0].entries))]

    merged, dirs = merge_file_infos(results, spec)
    blocks: list[Block] = []
    if merged:
        blocks.append((None, merged))
    blocks.extend((info.path, list(info.entries)) for info in dirs)
    return blocks


def print_blocks(blocks: list[Block]) -> None:
    for index, (path, entries) in enumerate(blocks):
        if index:
            console.print()
        if path is not None:
            console.print(Text(f"{display_path(path)}:", style="path"), soft_wrap=True)
        if entries:
            print_table(make_entry_table(entries))


def blocks_to_json(blocks: list[Block]) -> str:
    values = []
    for path, entries in blocks:
        data = [entry.to_dict() for entry in entries]
        values.append(data if path is None else {"path": display_path(path), "values": data})
    return json.dumps(values[0] if len(values) == 1 else values, ensure_ascii=False)


def list_files(
    files: list[str] = typer.Argument(
        None, help="The FILEs to list information about (the current directory by default)"
    ),
    output_format: OutputFormat = typer.Option(None, "--format", "-f", help="Output format: table or json"),
    reverse: bool = typer.Option(None, "--reverse/--no-reverse", "-r", help="Reverse order while sorting"),
    recursive: bool = typer.Option(
        None, "--recursive/--no-recursive", "-R", help="List subdirectories recursively"
    ),
    sort: list[SortKey] = typer.Option(None, "--sort", "-s", help="Sort by KEY (can be set multiple times)"),
):
    """List ID3-tagged audio files with title, artist, album, year, track and genre."""
    config_file = config_path()
    try:
        defaults = load_ls_defaults(config_file)
        output_format = output_format or OutputFormat(defaults.format)
        keys = sort or [SortKey(key) for key in defaults.sort]
        spec = SortSpec(keys=tuple(keys), reverse=defaults.reverse if reverse is None else reverse)
    except ValueError as e:
        _fail(f"invalid configuration in {config_file}: {e}")

    # Unset flags fall back to the config file.
    options = ListOptions(sort=spec, recursive=defaults.recursive if recursive is None else recursive)

    try:
        results = list_paths(files or [], options, default_path=Path.cwd())
    except ListingError as e:
        _fail(str(e))
    except KeyboardInterrupt:
        err_console.print("\n[warning]Operation cancelled by user[/warning]")
        raise typer.Exit(130)

    blocks = build_blocks(results, spec)
    if output_format is OutputFormat.JSON:
        typer.echo(blocks_to_json(blocks))
    else:
        print_blocks(blocks)
