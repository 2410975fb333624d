"""User file layouts and writers.

This module renders user records into the line formats consumed by
radio programming tools and frames them into output files.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from core.errors import UserDBOutputError
from core.logging_config import get_logger
from core.types import UserRecord

_LOGGER = get_logger(__name__)


def format_md380tools_line(user: UserRecord) -> str:
    """Render ``id,callsign,name,city,state,,country``."""
    return (
        f"{user.radio_id},{user.callsign},{user.name},"
        f"{user.city},{user.state},,{user.country}\n"
    )


def format_md2017_line(user: UserRecord) -> str:
    """Render ``id,callsign,name,,city,state,country``."""
    return (
        f"{user.radio_id},{user.callsign},{user.name},,"
        f"{user.city},{user.state},{user.country}\n"
    )


@dataclass(frozen=True)
class UserFileLayout:
    """Output layout selection.

    Attributes:
        name: Layout identifier.
        format_line: Record to newline-terminated line formatter.
        length_prefixed: Whether a byte-length header line precedes records.
    """

    name: str
    format_line: Callable[[UserRecord], str]
    length_prefixed: bool


MD380TOOLS_LAYOUT = UserFileLayout(
    name="md380tools",
    format_line=format_md380tools_line,
    length_prefixed=True,
)
MD2017_LAYOUT = UserFileLayout(
    name="md2017",
    format_line=format_md2017_line,
    length_prefixed=False,
)
USER_FILE_LAYOUTS = {layout.name: layout for layout in (MD380TOOLS_LAYOUT, MD2017_LAYOUT)}


def render_user_file(users: Iterable[UserRecord], layout: UserFileLayout) -> bytes:
    """Render users into complete file content.

    Args:
        users: Sorted, normalized users.
        layout: Output layout.

    Returns:
        Encoded file bytes.
    """
    body = "".join(layout.format_line(user) for user in users).encode("utf-8")
    if not layout.length_prefixed:
        return body
    return f"{len(body)}\n".encode("ascii") + body


def write_user_file(path: Path, users: list[UserRecord], layout: UserFileLayout) -> Path:
    """Write users to ``path``, replacing any existing file.

    Args:
        path: Destination file.
        users: Sorted, normalized users.
        layout: Output layout.

    Returns:
        Written file path.

    Raises:
        UserDBOutputError: If the file cannot be written.
    """
    content = render_user_file(users, layout)
    destination = path.expanduser()
    try:
        destination.write_bytes(content)
    except OSError as error:
        raise UserDBOutputError(
            f"Failed to write user file {destination}: {error.strerror or error}. "
            "Check that the directory exists and is writable."
        ) from error
    _LOGGER.info(
        "user_file_written",
        path=str(destination),
        layout=layout.name,
        record_count=len(users),
        byte_count=len(content),
    )
    return destination
