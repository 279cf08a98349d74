"""Multi-key entry comparison and ordering."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key

from tagls.core.entry import Entry, Info, PathType, Track


class SortKey(str, Enum):
    FILE_NAME = "file-name"
    FILE_SIZE = "file-size"
    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    YEAR = "year"
    TRACK = "track"
    GENRE = "genre"


@dataclass(frozen=True)
class SortSpec:
    """Ordered sort keys plus a reverse flag applied to the whole key chain."""

    keys: tuple[SortKey, ...] = (SortKey.FILE_NAME,)
    reverse: bool = False

    def __post_init__(self):
        if not self.keys:
            raise ValueError("At least one sort key is required")
        object.__setattr__(self, "keys", tuple(SortKey(key) for key in self.keys))


# String keys that may carry a sort-order override, by override attribute.
_OVERRIDES = {
    SortKey.TITLE: ("title", "title_sort_order"),
    SortKey.ARTIST: ("artist", "artist_sort_order"),
    SortKey.ALBUM: ("album", "album_sort_order"),
    SortKey.GENRE: ("genre", None),
}


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def _optional(value):
    """Absent values sort before present ones."""
    return (value is not None, value if value is not None else 0)


def _folded(entry: Entry, key: SortKey) -> list[str]:
    attr, override_attr = _OVERRIDES[key]
    values = getattr(entry, override_attr) if override_attr else None
    if values is None:
        values = getattr(entry, attr)
    return [value.casefold() for value in values]


def _track_key(track: Track):
    return _optional(track.number), _optional(track.total)


def compare_key(a: Entry, b: Entry, key: SortKey) -> int:
    """Compare two entries on a single key."""
    if key is SortKey.FILE_NAME:
        return _cmp(a.name, b.name)
    if key is SortKey.FILE_SIZE:
        return _cmp(a.size, b.size)
    if key is SortKey.YEAR:
        return _cmp(_optional(a.year), _optional(b.year))
    if key is SortKey.TRACK:
        return _cmp(_track_key(a.track), _track_key(b.track))
    return _cmp(_folded(a, key), _folded(b, key))


def compare_entries(a: Entry, b: Entry, keys: Sequence[SortKey]) -> int:
    """Compare keys left to right, returning the first non-equal result."""
    for key in keys:
        result = compare_key(a, b, key)
        if result:
            return result
    return 0


def sort_entries(entries: Iterable[Entry], spec: SortSpec) -> list[Entry]:
    return sorted(
        entries,
        key=cmp_to_key(lambda a, b: compare_entries(a, b, spec.keys)),
        reverse=spec.reverse,
    )


def merge_file_infos(infos: Sequence[Info], spec: SortSpec) -> tuple[list[Entry], list[Info]]:
    """Pool the entries of every file argument and re-sort them together.

    Returns the merged file entries and the directory infos in their original order.
    """
    files = [info for info in infos if info.path_type is PathType.FILE]
    dirs = [info for info in infos if info.path_type is PathType.DIRECTORY]
    merged = sort_entries((entry for info in files for entry in info.entries), spec)
    return merged, dirs
