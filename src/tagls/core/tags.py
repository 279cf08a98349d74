"""ID3 tag reading wrapping mutagen."""

from dataclasses import dataclass, field
from pathlib import Path

from mutagen import MutagenError
from mutagen.id3 import ID3, ID3NoHeaderError

from tagls.core.errors import NotAudioFormat, ReadFault, TagReadFault

# Semantic field -> ID3v2.4 frame id. Sort-order frames are only used for comparison.
FIELD_FRAMES = {
    "title": "TIT2",
    "artist": "TPE1",
    "album": "TALB",
    "genre": "TCON",
    "title_sort_order": "TSOT",
    "artist_sort_order": "TSOP",
    "album_sort_order": "TSOA",
}

YEAR_FRAME = "TYER"
RECORDING_DATE_FRAME = "TDRC"
TRACK_FRAME = "TRCK"


@dataclass
class TagData:
    """Raw values pulled from one file's tag."""

    values: dict[str, list[str]] = field(default_factory=dict)
    year: int | None = None
    track_number: int | None = None
    track_total: int | None = None

    def get(self, name: str) -> list[str]:
        if name not in FIELD_FRAMES:
            raise KeyError(f"Unknown tag field: {name}")
        return self.values.get(name, [])


def _text_values(tag: ID3, name: str) -> list[str]:
    frame_id = FIELD_FRAMES[name]
    values = []
    for frame in tag.getall(frame_id):
        if frame_id == "TCON":
            values.extend(frame.genres)
        else:
            values.extend(str(text) for text in frame.text)
    return values


def _parse_number(text: str) -> int | None:
    text = text.strip()
    return int(text) if text.isdecimal() else None


def _read_year(tag: ID3) -> int | None:
    """Explicit year frame first, then the year of the recording timestamp."""
    for frame in tag.getall(YEAR_FRAME):
        for text in frame.text:
            year = _parse_number(str(text))
            if year is not None:
                return year

    for frame in tag.getall(RECORDING_DATE_FRAME):
        for stamp in frame.text:
            if getattr(stamp, "year", None) is not None:
                return stamp.year
    return None


def _read_track(tag: ID3) -> tuple[int | None, int | None]:
    frames = tag.getall(TRACK_FRAME)
    if not frames or not frames[0].text:
        return None, None

    number, _, total = str(frames[0].text[0]).partition("/")
    return _parse_number(number), _parse_number(total)


def _os_error(err: MutagenError) -> OSError | None:
    """Return the OSError a mutagen error was raised from, if any."""
    if err.args and isinstance(err.args[0], OSError):
        return err.args[0]
    for cause in (err.__cause__, err.__context__):
        if isinstance(cause, OSError):
            return cause
    return None


def read_tags(path: Path) -> TagData:
    """Read the ID3 tag of a file.

    Raises NotAudioFormat when the file has no ID3 tag, ReadFault when the file
    cannot be opened or read, and TagReadFault when the tag is malformed.
    """
    try:
        tag = ID3(str(path))
    except ID3NoHeaderError as e:
        raise NotAudioFormat(str(path), str(e)) from e
    except MutagenError as e:
        os_error = _os_error(e)
        if os_error is not None:
            raise ReadFault(str(path), os_error) from e
        raise TagReadFault(str(path), str(e)) from e
    except OSError as e:
        raise ReadFault(str(path), e) from e

    number, total = _read_track(tag)
    return TagData(
        values={name: _text_values(tag, name) for name in FIELD_FRAMES},
        year=_read_year(tag),
        track_number=number,
        track_total=total,
    )
