"""Listing records: one Entry per tagged file, one Info per listed path."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tagls.core.tags import TagData


class PathType(Enum):
    FILE = "file"
    DIRECTORY = "directory"


STRING_FIELDS = ("title", "artist", "album", "genre")
SORT_ORDER_FIELDS = ("title_sort_order", "artist_sort_order", "album_sort_order")


@dataclass(frozen=True)
class Track:
    """Track number and total. Empty when there is no number."""

    number: int | None = None
    total: int | None = None

    @property
    def is_empty(self) -> bool:
        return self.number is None

    def to_dict(self) -> dict[str, int]:
        data = {}
        if self.number is not None:
            data["number"] = self.number
        if self.total is not None:
            data["total"] = self.total
        return data


@dataclass(frozen=True)
class Entry:
    """Metadata for one tagged audio file.

    The name is kept as raw bytes so undecodable file names survive intact.
    The *_sort_order fields only influence sorting and are never displayed.
    """

    name: bytes
    size: int
    title: tuple[str, ...] = ()
    artist: tuple[str, ...] = ()
    album: tuple[str, ...] = ()
    genre: tuple[str, ...] = ()
    title_sort_order: tuple[str, ...] | None = None
    artist_sort_order: tuple[str, ...] | None = None
    album_sort_order: tuple[str, ...] | None = None
    year: int | None = None
    track: Track = field(default_factory=Track)

    def __post_init__(self):
        for key in STRING_FIELDS + SORT_ORDER_FIELDS:
            values = getattr(self, key)
            if values is not None and not isinstance(values, tuple):
                object.__setattr__(self, key, tuple(values))

    @property
    def display_name(self) -> str:
        return self.name.decode("utf-8", errors="replace")

    def to_dict(self) -> dict[str, Any]:
        """Structured form, leaving out every empty or absent field except size."""
        data: dict[str, Any] = {"name": self.display_name, "size": self.size}
        for key in ("title", "artist", "album"):
            _put_values(data, key, getattr(self, key))
        if self.year is not None:
            data["year"] = self.year
        if not self.track.is_empty:
            data["track"] = self.track.to_dict()
        _put_values(data, "genre", self.genre)
        return data


def _put_values(data: dict[str, Any], key: str, values: tuple[str, ...]) -> None:
    if len(values) == 1:
        data[key] = values[0]
    elif values:
        data[key] = list(values)


@dataclass(frozen=True)
class Info:
    """Entries found for one path argument or one visited directory."""

    path: str
    path_type: PathType
    entries: tuple[Entry, ...] = ()


def _non_empty(values: list[str]) -> tuple[str, ...]:
    return tuple(value for value in values if value)


def make_entry(name: bytes | str, size: int, tags: TagData) -> Entry:
    """Normalize raw tag data for one file into an Entry."""
    if isinstance(name, str):
        name = os.fsencode(name)

    overrides = {}
    for key in SORT_ORDER_FIELDS:
        values = _non_empty(tags.get(key))
        overrides[key] = values or None

    return Entry(
        name=name,
        size=size,
        title=_non_empty(tags.get("title")),
        artist=_non_empty(tags.get("artist")),
        album=_non_empty(tags.get("album")),
        genre=_non_empty(tags.get("genre")),
        year=tags.year,
        track=Track(number=tags.track_number, total=tags.track_total),
        **overrides,
    )
