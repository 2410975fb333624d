"""Runtime configuration model for UserDB.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from core.constants import (
    DEFAULT_CLIENT_TIMEOUT_SECONDS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_TRANSPORT_TIMEOUT_SECONDS,
    FIXED_USERS_URL,
    HAMDIGITAL_USERS_URL,
    RADIOID_USERS_URL,
    REFLECTOR_USERS_URL,
    SPECIAL_DIRECTORY_URL,
)
from core.errors import UserDBConfigError

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RegistryUrls:
    """Endpoints of the fixed registries and the special-registry directory."""

    special_directory: str = SPECIAL_DIRECTORY_URL
    fixed: str = FIXED_USERS_URL
    hamdigital: str = HAMDIGITAL_USERS_URL
    radioid: str = RADIOID_USERS_URL
    reflector: str = REFLECTOR_USERS_URL


@dataclass(frozen=True)
class UserDBConfig:
    """Validated runtime configuration.

    Attributes:
        transport_timeout_seconds: Connect and response-header wait window.
        client_timeout_seconds: Total window for one request, body included.
        registry_urls: Registry endpoints.
        log_level: Minimum level for structured log events.
    """

    transport_timeout_seconds: float = DEFAULT_TRANSPORT_TIMEOUT_SECONDS
    client_timeout_seconds: float = DEFAULT_CLIENT_TIMEOUT_SECONDS
    registry_urls: RegistryUrls = RegistryUrls()
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "UserDBConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            UserDBConfigError: If environment values are invalid.
        """
        transport_timeout = _parse_timeout(
            "USERDB_TRANSPORT_TIMEOUT",
            os.getenv("USERDB_TRANSPORT_TIMEOUT", str(DEFAULT_TRANSPORT_TIMEOUT_SECONDS)),
        )
        client_timeout = _parse_timeout(
            "USERDB_CLIENT_TIMEOUT",
            os.getenv("USERDB_CLIENT_TIMEOUT", str(DEFAULT_CLIENT_TIMEOUT_SECONDS)),
        )
        registry_urls = RegistryUrls(
            special_directory=os.getenv("USERDB_SPECIAL_DIRECTORY_URL", SPECIAL_DIRECTORY_URL),
            fixed=os.getenv("USERDB_FIXED_URL", FIXED_USERS_URL),
            hamdigital=os.getenv("USERDB_HAMDIGITAL_URL", HAMDIGITAL_USERS_URL),
            radioid=os.getenv("USERDB_RADIOID_URL", RADIOID_USERS_URL),
            reflector=os.getenv("USERDB_REFLECTOR_URL", REFLECTOR_USERS_URL),
        )
        log_level = parse_log_level(os.getenv("USERDB_LOG_LEVEL", DEFAULT_LOG_LEVEL))
        return cls(
            transport_timeout_seconds=transport_timeout,
            client_timeout_seconds=client_timeout,
            registry_urls=registry_urls,
            log_level=log_level,
        )


def parse_log_level(raw_value: str) -> str:
    """Validate and normalize a log level name.

    Raises:
        UserDBConfigError: If the level name is unknown.
    """
    level = raw_value.strip().upper()
    if level not in _LOG_LEVELS:
        raise UserDBConfigError(
            f"Invalid log level '{raw_value}': expected one of {', '.join(_LOG_LEVELS)}. "
            "Set USERDB_LOG_LEVEL to a supported level."
        )
    return level


def _parse_timeout(variable_name: str, raw_value: str) -> float:
    """Parse a positive timeout value in seconds.

    Args:
        variable_name: Environment variable name for error context.
        raw_value: Raw string from environment.

    Returns:
        Parsed timeout in seconds.

    Raises:
        UserDBConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise UserDBConfigError(
            f"Invalid {variable_name} value: "
            f"expected number of seconds, got '{raw_value}'. "
            f"Set {variable_name} to a positive numeric value."
        ) from error
    if timeout <= 0:
        raise UserDBConfigError(
            f"Invalid {variable_name} value: expected positive seconds, got {timeout}. "
            f"Set {variable_name} to a positive numeric value."
        )
    return timeout
