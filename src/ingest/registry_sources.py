"""Registry source jobs.

This module pairs each registry endpoint with its parser and failure
policy, and builds the ordered fetch job list for a run. Fixed
registries fail the run on any error; special registries degrade to
an empty contribution.
"""

from __future__ import annotations

import threading
from typing import Callable

from core.config import RegistryUrls
from core.constants import MIN_QUOTED_USER_LINES
from core.errors import UserDBContentError, UserDBFetchError
from core.logging_config import get_logger
from core.types import FetchJob, UserRecord
from ingest.http_client import RegistryHttpClient, split_lines
from ingest.source_parsers import (
    parse_fixed_users,
    parse_quoted_users,
    parse_reflector_users,
    parse_special_users,
)

_LOGGER = get_logger(__name__)

SourceFetch = Callable[[threading.Event], list[UserRecord]]


def fetch_quoted_users(
    http_client: RegistryHttpClient,
    source_name: str,
    url: str,
    cancel_event: threading.Event,
) -> list[UserRecord]:
    """Fetch a large quoted-CSV registry and enforce its line floor.

    Raises:
        UserDBFetchError: If the feed cannot be retrieved.
        UserDBContentError: If the feed has fewer lines than expected.
    """
    lines = _fetch_lines(http_client, source_name, url, cancel_event)
    if len(lines) < MIN_QUOTED_USER_LINES:
        raise UserDBContentError(
            f"Too few {source_name} users database entries: {url}: {len(lines)} lines, "
            f"expected at least {MIN_QUOTED_USER_LINES}."
        )
    return parse_quoted_users(lines)


def fetch_fixed_users(
    http_client: RegistryHttpClient,
    url: str,
    cancel_event: threading.Event,
) -> list[UserRecord]:
    """Fetch the two-field fixed-users feed."""
    return parse_fixed_users(_fetch_lines(http_client, "fixed", url, cancel_event))


def fetch_reflector_users(
    http_client: RegistryHttpClient,
    url: str,
    cancel_event: threading.Event,
) -> list[UserRecord]:
    """Fetch the ``@``-delimited reflector feed."""
    return parse_reflector_users(_fetch_lines(http_client, "reflector", url, cancel_event))


def fetch_special_users(
    http_client: RegistryHttpClient,
    url: str,
    cancel_event: threading.Event,
) -> list[UserRecord]:
    """Fetch one special-registry feed, absorbing retrieval failures.

    Returns:
        Parsed records, or an empty list when the node is unreachable.
    """
    try:
        text = http_client.get_text(url, cancel_event)
    except UserDBFetchError as error:
        _LOGGER.warning("special_registry_skipped", url=url, reason=str(error))
        return []
    return parse_special_users(split_lines(text))


def build_fetch_jobs(
    http_client: RegistryHttpClient,
    registry_urls: RegistryUrls,
    special_urls: list[str],
) -> list[FetchJob]:
    """Build the ordered job list: fixed registries, then specials.

    Args:
        http_client: Shared registry client.
        registry_urls: Fixed registry endpoints.
        special_urls: Discovered special feeds in discovery order.

    Returns:
        Index-tagged jobs in merge priority order.
    """
    sources: list[tuple[str, SourceFetch]] = [
        (
            "fixed",
            lambda event: fetch_fixed_users(http_client, registry_urls.fixed, event),
        ),
        (
            "hamdigital",
            lambda event: fetch_quoted_users(
                http_client, "hamdigital", registry_urls.hamdigital, event
            ),
        ),
        (
            "radioid",
            lambda event: fetch_quoted_users(http_client, "radioid", registry_urls.radioid, event),
        ),
        (
            "reflector",
            lambda event: fetch_reflector_users(http_client, registry_urls.reflector, event),
        ),
    ]
    for special_url in special_urls:
        sources.append((f"special:{special_url}", _special_fetch(http_client, special_url)))
    return [
        FetchJob(index=index, source_name=source_name, fetch=fetch)
        for index, (source_name, fetch) in enumerate(sources)
    ]


def _special_fetch(http_client: RegistryHttpClient, url: str) -> SourceFetch:
    """Bind one special URL into a job function."""
    return lambda event: fetch_special_users(http_client, url, event)


def _fetch_lines(
    http_client: RegistryHttpClient,
    source_name: str,
    url: str,
    cancel_event: threading.Event,
) -> list[str]:
    """Fetch feed lines, adding source context to retrieval failures."""
    try:
        text = http_client.get_text(url, cancel_event)
    except UserDBFetchError as error:
        raise UserDBFetchError(
            f"Error getting {source_name} users database: {error}"
        ) from error
    return split_lines(text)
