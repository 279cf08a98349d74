"""Tests for utils.console output helpers."""

import io

import pytest
from rich.console import Console

from tagls.core.entry import Entry, Track
from tagls.utils.console import display_path, format_size, format_track, join_values, make_entry_table, print_table
from tests.test_entry import get_test_entries


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (4, "4 B"),
        (10, "10 B"),
        (1023, "1023 B"),
        (1024, "1.0 kiB"),
        (8080, "7.9 kiB"),
        (23017, "22 kiB"),
        (5 * 1024**2, "5.0 MiB"),
        (3 * 1024**3 + 512 * 1024**2, "3.5 GiB"),
    ],
)
def test_format_size(size, expected):
    assert format_size(size) == expected


def test_format_track():
    assert format_track(Track()) == ""
    assert format_track(Track(total=4)) == ""
    assert format_track(Track(number=2)) == "2"
    assert format_track(Track(number=2, total=3)) == "2/3"


def test_join_values():
    assert join_values([]) == ""
    assert join_values(["Trip-Hop", "Hip-Hop"]) == "Trip-Hop/Hip-Hop"


def test_display_path_replaces_undecodable_bytes():
    assert display_path("music/\udcff.mp3") == "music/�.mp3"


def test_make_entry_table():
    """Test the rendered table holds headers and formatted values."""
    capture = Console(file=io.StringIO(), width=200, record=True)
    capture.print(make_entry_table(get_test_entries()))
    lines = capture.export_text().splitlines()

    assert lines[0].split() == ["NAME", "SIZE", "TITLE", "ARTIST", "ALBUM", "YEAR", "TRACK", "GENRE"]
    assert lines[1].split() == [
        "Some.mp3",
        "7.9",
        "kiB",
        "Two/titles",
        "Three/cool/artists",
        "Dual/Album",
        "2020",
        "2/3",
        "Trip-Hop/Hip-Hop",
    ]
    assert lines[2].split() == ["None.mp3", "4", "B"]


def test_make_entry_table_keeps_brackets():
    """Test that tag values are not interpreted as markup."""
    capture = Console(file=io.StringIO(), width=200, record=True)
    capture.print(make_entry_table([Entry(name=b"[live].mp3", size=1, title=["[bold]x"])]))

    text = capture.export_text()
    assert "[live].mp3" in text
    assert "[bold]x" in text


def test_print_table_keeps_full_width_when_redirected(capsys):
    """Test that redirected output is never truncated to the default 80 columns."""
    title = "A Very Long Song Title That Goes On And On For Quite A While Really"
    album = "An Album Whose Name Is Also Far Longer Than Any Terminal Default"
    print_table(make_entry_table([Entry(name=b"long.mp3", size=8080, title=[title], album=[album], year=2001)]))

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == ["NAME", "SIZE", "TITLE", "ARTIST", "ALBUM", "YEAR", "TRACK", "GENRE"]
    assert "…" not in lines[1]
    assert lines[1].startswith("long.mp3")
    assert title in lines[1]
    assert album in lines[1]
    assert "2001" in lines[1]
