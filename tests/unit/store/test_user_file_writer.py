"""Unit tests for user file layouts and writers."""

from __future__ import annotations

from pathlib import Path

import pytest

from core.errors import UserDBOutputError
from core.types import UserRecord
from store.user_file_writer import (
    MD380TOOLS_LAYOUT,
    MD2017_LAYOUT,
    format_md380tools_line,
    format_md2017_line,
    render_user_file,
    write_user_file,
)

_USERS = [
    UserRecord("1234567", "DL1ABC", "Hans", "Bonn", "NRW", "Germany"),
    UserRecord("3100001", "K1TEST", "", "", "", "United States"),
]


def test_format_md380tools_line_places_empty_field_before_country() -> None:
    """md380tools lines carry the placeholder between state and country."""
    assert format_md380tools_line(_USERS[0]) == "1234567,DL1ABC,Hans,Bonn,NRW,,Germany\n"


def test_format_md2017_line_places_empty_field_after_name() -> None:
    """md2017 lines carry the placeholder between name and city."""
    assert format_md2017_line(_USERS[0]) == "1234567,DL1ABC,Hans,,Bonn,NRW,Germany\n"


def test_render_user_file_prefixes_byte_length_for_md380tools() -> None:
    """The header line is the byte length of all record lines."""
    content = render_user_file(_USERS, MD380TOOLS_LAYOUT).decode("utf-8")
    header, body = content.split("\n", 1)

    assert int(header) == len(body.encode("utf-8"))
    assert body.splitlines() == [
        "1234567,DL1ABC,Hans,Bonn,NRW,,Germany",
        "3100001,K1TEST,,,,,United States",
    ]


def test_render_user_file_has_no_header_for_md2017() -> None:
    """The plain layout is just the record lines."""
    content = render_user_file(_USERS, MD2017_LAYOUT).decode("utf-8")

    assert content == (
        "1234567,DL1ABC,Hans,,Bonn,NRW,Germany\n"
        "3100001,K1TEST,,,,,United States\n"
    )


def test_render_user_file_handles_empty_directory() -> None:
    """An empty directory still gets a zero-length header."""
    assert render_user_file([], MD380TOOLS_LAYOUT) == b"0\n"


def test_write_user_file_overwrites_existing_file(tmp_path: Path) -> None:
    """Existing output is replaced, with LF line endings."""
    output_path = tmp_path / "users.csv"
    output_path.write_text("stale content\n", encoding="utf-8")

    written = write_user_file(output_path, _USERS, MD2017_LAYOUT)

    assert written == output_path
    assert output_path.read_bytes().count(b"\r") == 0
    assert output_path.read_text(encoding="utf-8").startswith("1234567,")


def test_write_user_file_raises_for_missing_directory(tmp_path: Path) -> None:
    """Unwritable destinations become output errors."""
    with pytest.raises(UserDBOutputError):
        write_user_file(tmp_path / "missing" / "users.csv", _USERS, MD2017_LAYOUT)
