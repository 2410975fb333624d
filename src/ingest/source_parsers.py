"""Line parsers for registry feed formats.

Each parser turns feed lines into candidate user records. Lines too
short for the feed's field layout are skipped rather than padded.
"""

from __future__ import annotations

from typing import Iterable

from core.constants import SPECIAL_MIN_FIELD_COUNT
from core.identifiers import parse_radio_id
from core.types import UserRecord


def parse_quoted_users(lines: Iterable[str]) -> list[UserRecord]:
    """Parse six-field quoted CSV lines.

    Fields are ``"id","callsign","name","city","state","country"``.

    Args:
        lines: Feed lines.

    Returns:
        Parsed records.
    """
    records: list[UserRecord] = []
    for line in lines:
        fields = line.removeprefix('"').removesuffix('"').split('","')
        if len(fields) < 6:
            continue
        records.append(
            UserRecord(
                radio_id=fields[0],
                callsign=fields[1],
                name=fields[2],
                city=fields[3],
                state=fields[4],
                country=fields[5],
            )
        )
    return records


def parse_fixed_users(lines: Iterable[str]) -> list[UserRecord]:
    """Parse two-field ``id,callsign`` lines."""
    records: list[UserRecord] = []
    for line in lines:
        fields = line.split(",")
        if len(fields) < 2:
            continue
        records.append(UserRecord(radio_id=fields[0], callsign=fields[1]))
    return records


def parse_reflector_users(lines: list[str]) -> list[UserRecord]:
    """Parse ``@``-delimited reflector lines.

    The first line is a header and is skipped. The first two ``@`` on
    each remaining line act as field separators.

    Args:
        lines: Feed lines including the header.

    Returns:
        Parsed records.
    """
    records: list[UserRecord] = []
    for line in lines[1:]:
        fields = line.replace("@", ",", 2).split(",")
        if len(fields) < 2:
            continue
        records.append(UserRecord(radio_id=fields[0], callsign=fields[1]))
    return records


def parse_special_users(lines: Iterable[str]) -> list[UserRecord]:
    """Parse special-registry CSV lines.

    Id, callsign and name come from fields 0-2 and country from field 6.
    Lines with fewer than seven fields or an unparseable id are dropped.

    Args:
        lines: Feed lines.

    Returns:
        Parsed records.
    """
    records: list[UserRecord] = []
    for line in lines:
        fields = line.split(",")
        if len(fields) < SPECIAL_MIN_FIELD_COUNT:
            continue
        if parse_radio_id(fields[0]) is None:
            continue
        records.append(
            UserRecord(
                radio_id=fields[0],
                callsign=fields[1],
                name=fields[2],
                country=fields[6],
            )
        )
    return records
