"""Special-registry discovery.

This module resolves the node directory into the list of per-node
special-user feed URLs. Discovery must finish before any fetch job is
dispatched, so every failure here is fatal.
"""

from __future__ import annotations

import json
from typing import Any

from core.errors import UserDBDiscoveryError, UserDBFetchError
from core.logging_config import get_logger
from core.types import SpecialRegistry
from ingest.http_client import RegistryHttpClient

_LOGGER = get_logger(__name__)


def discover_special_registries(
    http_client: RegistryHttpClient,
    directory_url: str,
) -> list[SpecialRegistry]:
    """Fetch and decode the special-registry directory.

    Args:
        http_client: Shared registry client.
        directory_url: Directory endpoint returning a JSON array.

    Returns:
        Registries in directory order.

    Raises:
        UserDBDiscoveryError: If the directory cannot be fetched or decoded.
    """
    try:
        body = http_client.get_text(directory_url)
    except UserDBFetchError as error:
        raise UserDBDiscoveryError(
            f"Failed to fetch special registry directory {directory_url}: {error}"
        ) from error
    registries = parse_special_directory(body, directory_url)
    _LOGGER.info("special_registries_discovered", url=directory_url, count=len(registries))
    return registries


def discover_special_urls(http_client: RegistryHttpClient, directory_url: str) -> list[str]:
    """Return special-user feed URLs in directory order."""
    return [
        registry.users_url
        for registry in discover_special_registries(http_client, directory_url)
    ]


def parse_special_directory(body: str, directory_url: str) -> list[SpecialRegistry]:
    """Decode directory JSON into registry descriptors.

    Entries without an address are skipped with a warning.

    Args:
        body: JSON text.
        directory_url: Source URL for error context.

    Returns:
        Parsed registries.

    Raises:
        UserDBDiscoveryError: If the payload is not a JSON array of objects.
    """
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as error:
        raise UserDBDiscoveryError(
            f"Failed to decode special registry directory {directory_url}: "
            f"{error.msg} at line {error.lineno} column {error.colno}."
        ) from error
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise UserDBDiscoveryError(
            f"Invalid special registry directory {directory_url}: "
            f"expected a JSON array, got {type(payload).__name__}."
        )
    registries: list[SpecialRegistry] = []
    for position, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise UserDBDiscoveryError(
                f"Invalid special registry directory {directory_url}: "
                f"entry {position} is not an object."
            )
        registry = _registry_from_entry(entry)
        if not registry.address:
            _LOGGER.warning("special_registry_without_address", url=directory_url, entry=position)
            continue
        registries.append(registry)
    return registries


def _registry_from_entry(entry: dict[str, Any]) -> SpecialRegistry:
    """Build a registry from a directory object, matching keys case-insensitively."""
    fields = {str(key).lower(): value for key, value in entry.items()}
    return SpecialRegistry(
        node_id=_as_text(fields.get("id")),
        country=_as_text(fields.get("country")),
        address=_as_text(fields.get("address")).strip(),
    )


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)
