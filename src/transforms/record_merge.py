"""Radio-id keyed merge of registry records.

This module folds the ordered record list into one record per radio
id. Later records overlay earlier ones field by field, and empty
fields never erase data. Output is sorted by integer radio id.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from core.errors import UserDBKeyError
from core.identifiers import canonical_radio_id, parse_radio_id
from core.logging_config import get_logger
from core.types import UserRecord

_LOGGER = get_logger(__name__)

_TEXT_FIELDS = ("callsign", "name", "city", "state", "country")


def merge_and_sort(records: Iterable[UserRecord]) -> list[UserRecord]:
    """Merge records by radio id and sort ascending.

    Args:
        records: Records in source job order.

    Returns:
        One record per radio id, ascending by integer id.

    Raises:
        UserDBKeyError: If any record has an empty or unparseable radio id.
    """
    merged: dict[int, UserRecord] = {}
    input_count = 0
    for record in records:
        input_count += 1
        key = _merge_key(record.radio_id)
        existing = merged.get(key)
        if existing is None:
            merged[key] = replace(record, radio_id=canonical_radio_id(record.radio_id))
            continue
        merged[key] = overlay_record(existing, record)
    sorted_records = [merged[key] for key in sorted(merged)]
    _LOGGER.info("users_merged", input_count=input_count, output_count=len(sorted_records))
    return sorted_records


def overlay_record(existing: UserRecord, update: UserRecord) -> UserRecord:
    """Overlay non-empty text fields of ``update`` onto ``existing``.

    The radio id of ``existing`` is kept.
    """
    changes = {
        field_name: getattr(update, field_name)
        for field_name in _TEXT_FIELDS
        if getattr(update, field_name)
    }
    if not changes:
        return existing
    return replace(existing, **changes)


def _merge_key(raw_id: str) -> int:
    """Parse a radio id into its integer merge key."""
    key = parse_radio_id(raw_id)
    if key is None:
        raise UserDBKeyError(
            f"Invalid radio id '{raw_id}': expected a decimal number between 0 and 16777215, "
            "optionally prefixed with '#'."
        )
    return key
