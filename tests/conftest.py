"""Pytest fixtures and test utilities."""

from pathlib import Path

import pytest
from mutagen.id3 import ID3, TALB, TCON, TDRC, TIT2, TPE1, TRCK, TSOA, TSOP, TSOT

# A few MPEG frame headers; ID3 does not care what follows the tag.
AUDIO_PAYLOAD = b"\xff\xfb\x90\x00" * 64

FRAMES = {
    "title": TIT2,
    "artist": TPE1,
    "album": TALB,
    "genre": TCON,
    "year": TDRC,
    "track": TRCK,
    "title_sort": TSOT,
    "artist_sort": TSOP,
    "album_sort": TSOA,
}


def create_tagged_file(path: Path, v2_version: int = 4, **fields) -> Path:
    """Write a small file carrying an ID3v2 tag built from keyword fields.

    Values may be a string or a list of strings; year and track may be ints.
    """
    path.write_bytes(AUDIO_PAYLOAD)
    tags = ID3()
    for name, value in fields.items():
        if value is None:
            continue
        text = [str(v) for v in value] if isinstance(value, list) else str(value)
        tags.add(FRAMES[name](encoding=3, text=text))
    tags.save(str(path), v2_version=v2_version)
    return path


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point the config lookup at an empty home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def temp_music_dir(tmp_path):
    """Create a temporary directory for test music files."""
    music_dir = tmp_path / "music"
    music_dir.mkdir()
    return music_dir


@pytest.fixture
def sample_mp3(temp_music_dir):
    """Create an MP3 file with the common ID3v2 frames."""
    return create_tagged_file(
        temp_music_dir / "sample.mp3",
        title="Best Song Ever",
        artist="Someone",
        album="Billboard Year-End Hot 100 singles of 2002",
        year=2002,
        track="3",
        genre="Pop",
    )


@pytest.fixture
def untagged_file(temp_music_dir):
    """Create a file without any ID3 tag."""
    path = temp_music_dir / "no_id3.mp3"
    path.write_bytes(AUDIO_PAYLOAD)
    return path


@pytest.fixture
def sample_library(temp_music_dir):
    """Create a small library with nested directories and some non-audio files.

    music/
        b.mp3, a.mp3, notes.txt
        Rock/
            rock.mp3
            Live/
                live.mp3
        Jazz/
            jazz.mp3
    """
    create_tagged_file(temp_music_dir / "b.mp3", title="alpha", artist="Zed", track="2/9")
    create_tagged_file(temp_music_dir / "a.mp3", title="Beta", artist="amy", track="1/9")
    (temp_music_dir / "notes.txt").write_text("Not audio")

    rock = temp_music_dir / "Rock"
    live = rock / "Live"
    jazz = temp_music_dir / "Jazz"
    live.mkdir(parents=True)
    jazz.mkdir()

    create_tagged_file(rock / "rock.mp3", title="Rock Song", artist="Rock Band")
    create_tagged_file(live / "live.mp3", title="Live Song", artist="Rock Band")
    create_tagged_file(jazz / "jazz.mp3", title="Jazz Track", artist="Jazz Artist")

    return temp_music_dir
