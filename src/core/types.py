"""Shared typed models.

This module defines the data models passed between the ingest,
transform, and store layers to keep interfaces explicit and stable.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Callable

from core.constants import SPECIAL_USERS_PATH
from core.errors import UserDBError

ProgressCallback = Callable[[int], bool]


@dataclass(frozen=True)
class UserRecord:
    """One radio subscriber identity.

    Attributes:
        radio_id: Numeric identifier string, the merge key.
        callsign: Station callsign.
        name: Operator name.
        city: City of residence.
        state: State or region.
        country: Country name.
    """

    radio_id: str
    callsign: str = ""
    name: str = ""
    city: str = ""
    state: str = ""
    country: str = ""


@dataclass(frozen=True)
class SpecialRegistry:
    """Directory entry describing one dynamically discovered registry node.

    Attributes:
        node_id: Node identifier reported by the directory.
        country: Country reported by the directory.
        address: Network address (host or host:port) of the node.
    """

    node_id: str
    country: str
    address: str

    @property
    def users_url(self) -> str:
        """URL of this node's special-user feed."""
        return f"http://{self.address}/{SPECIAL_USERS_PATH}"


@dataclass(frozen=True)
class FetchJob:
    """Index-tagged unit of retrieval work.

    Attributes:
        index: Position in the fixed job ordering.
        source_name: Human-readable source label for logs and errors.
        fetch: Retrieval and parse function. Receives the run's abort event.
    """

    index: int
    source_name: str
    fetch: Callable[[threading.Event], list[UserRecord]]


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch job."""

    index: int
    source_name: str
    records: list[UserRecord] = field(default_factory=list)
    error: UserDBError | None = None
