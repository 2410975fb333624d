"""Radio id parsing helpers.

Radio ids are decimal strings that fit in 24 unsigned bits. Some
registries prefix them with ``#``; the canonical form drops it.
"""

from __future__ import annotations

from core.constants import MAX_RADIO_ID


def canonical_radio_id(raw_id: str) -> str:
    """Strip one leading ``#`` from a raw radio id."""
    return raw_id.removeprefix("#")


def parse_radio_id(raw_id: str) -> int | None:
    """Parse a raw radio id into its integer key.

    Args:
        raw_id: Identifier text as found in a registry feed.

    Returns:
        Integer radio id, or None if the text is not a valid id.
    """
    canonical_id = canonical_radio_id(raw_id)
    if not canonical_id.isascii() or not canonical_id.isdigit():
        return None
    value = int(canonical_id)
    if value > MAX_RADIO_ID:
        return None
    return value
