"""Text cleanup for merged user records.

Fields are folded to ASCII, trimmed, and space-collapsed, and commas
become semicolons so the comma-delimited output stays well-formed.
"""

from __future__ import annotations

import re
from typing import Iterable

from core.types import UserRecord
from transforms.transliteration import asciify

_SPACE_RUN_PATTERN = re.compile(r" {2,}")


def normalize_text(text: str) -> str:
    """Normalize one free-text field.

    Args:
        text: Raw field text.

    Returns:
        ASCII text without leading/trailing or repeated spaces and
        with commas replaced by semicolons.
    """
    folded = asciify(text).strip()
    collapsed = _SPACE_RUN_PATTERN.sub(" ", folded)
    return collapsed.replace(",", ";")


def normalize_record(record: UserRecord) -> UserRecord:
    """Normalize every text field of a record; the radio id is untouched."""
    return UserRecord(
        radio_id=record.radio_id,
        callsign=normalize_text(record.callsign),
        name=normalize_text(record.name),
        city=normalize_text(record.city),
        state=normalize_text(record.state),
        country=normalize_text(record.country),
    )


def normalize_records(records: Iterable[UserRecord]) -> list[UserRecord]:
    """Normalize a record sequence, preserving order."""
    return [normalize_record(record) for record in records]
