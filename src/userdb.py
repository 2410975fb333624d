"""Public SDK surface for UserDB.

This module provides a stable import path for library users.
It re-exports the client, the output entry points, and typed models.
"""

from __future__ import annotations

from core.config import RegistryUrls, UserDBConfig
from core.constants import MAX_PROGRESS, MIN_PROGRESS
from core.errors import (
    UserDBCancelledError,
    UserDBConfigError,
    UserDBContentError,
    UserDBDiscoveryError,
    UserDBError,
    UserDBFetchError,
    UserDBKeyError,
    UserDBOutputError,
)
from core.types import ProgressCallback, SpecialRegistry, UserRecord
from store.directory_sdk import UserDirectoryClient, write_md2017_file, write_md380tools_file
from store.user_file_writer import MD380TOOLS_LAYOUT, MD2017_LAYOUT, UserFileLayout

__all__ = [
    "MAX_PROGRESS",
    "MD2017_LAYOUT",
    "MD380TOOLS_LAYOUT",
    "MIN_PROGRESS",
    "ProgressCallback",
    "RegistryUrls",
    "SpecialRegistry",
    "UserDBCancelledError",
    "UserDBConfig",
    "UserDBConfigError",
    "UserDBContentError",
    "UserDBDiscoveryError",
    "UserDBError",
    "UserDBFetchError",
    "UserDBKeyError",
    "UserDBOutputError",
    "UserDirectoryClient",
    "UserFileLayout",
    "UserRecord",
    "write_md2017_file",
    "write_md380tools_file",
]
