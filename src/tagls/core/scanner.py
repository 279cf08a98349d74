"""Directory walker producing one Info per listed path."""

import logging
import os
import stat
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from tagls.core.entry import Entry, Info, PathType, make_entry
from tagls.core.errors import InvalidPath, NotAudioFormat, ReadFault, TagReadFault
from tagls.core.sorting import SortSpec, sort_entries
from tagls.core.tags import read_tags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListOptions:
    sort: SortSpec = field(default_factory=SortSpec)
    recursive: bool = False


def list_paths(paths: Sequence[str], options: ListOptions, default_path: str | Path) -> list[Info]:
    """List each path in order, or default_path when no paths are given.

    Files yield a single Info holding their entry. Directories yield one Info for
    themselves followed, when recursive, by one per subdirectory, depth-first.
    The first fault aborts the whole listing.
    """
    if not paths:
        paths = [str(default_path)]

    results: list[Info] = []
    for path in paths:
        path = os.fsdecode(path)
        target = Path(path)
        if target.is_dir():
            results.extend(_walk_directory(path, options))
        elif target.is_file():
            results.append(_list_file(path))
        else:
            raise InvalidPath(path)
    return results


def _stat(path: str) -> os.stat_result:
    try:
        return os.stat(path)
    except OSError as e:
        raise ReadFault(path, e) from e


def _list_file(path: str) -> Info:
    """List a file named on the command line. A missing tag is fatal here."""
    size = _stat(path).st_size
    try:
        tags = read_tags(Path(path))
    except NotAudioFormat as e:
        raise TagReadFault(path, e.reason) from e

    entry = make_entry(os.fsencode(Path(path).name), size, tags)
    return Info(path=path, path_type=PathType.FILE, entries=(entry,))


def _name_key(path: str) -> bytes:
    return os.fsencode(os.path.basename(path))


def _scan_directory(path: str, recursive: bool) -> tuple[list[str], list[str]]:
    """Split the immediate children of a directory into files and subdirectories.

    Both lists are ordered by raw file name bytes. Subdirectories are only
    collected when recursive.
    """
    try:
        children = list(Path(path).iterdir())
    except OSError as e:
        raise ReadFault(path, e) from e

    files, subdirs = [], []
    for child in children:
        child_path = os.path.join(path, child.name)
        try:
            mode = child.stat().st_mode
        except FileNotFoundError as e:
            if child.is_symlink():
                logger.debug("Ignoring dangling symlink %s", child_path)
                continue
            raise ReadFault(child_path, e) from e
        except OSError as e:
            raise ReadFault(child_path, e) from e

        if stat.S_ISREG(mode):
            files.append(child_path)
        elif stat.S_ISDIR(mode):
            if recursive:
                subdirs.append(child_path)
        else:
            logger.debug("Ignoring special file %s", child_path)

    return sorted(files, key=_name_key), sorted(subdirs, key=_name_key)


def _read_entries(paths: list[str]) -> list[Entry]:
    entries = []
    for path in paths:
        size = _stat(path).st_size
        try:
            tags = read_tags(Path(path))
        except NotAudioFormat as e:
            logger.debug("Skipping %s: %s", path, e.reason)
            continue
        entries.append(make_entry(os.fsencode(os.path.basename(path)), size, tags))
    return entries


def _walk_directory(root: str, options: ListOptions) -> list[Info]:
    results = []
    pending = [root]
    while pending:
        path = pending.pop()
        logger.debug("Listing directory %s", path)
        files, subdirs = _scan_directory(path, options.recursive)
        entries = sort_entries(_read_entries(files), options.sort)
        results.append(Info(path=path, path_type=PathType.DIRECTORY, entries=tuple(entries)))
        # Reversed so the first subdirectory is visited next.
        pending.extend(reversed(subdirs))
    return results
