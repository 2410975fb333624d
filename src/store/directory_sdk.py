"""Python SDK for user directory builds.

This module exposes high-level APIs that run the registry pipeline
and write the result in one of the supported file layouts.
"""

from __future__ import annotations

from pathlib import Path

from core.config import UserDBConfig
from core.types import ProgressCallback, UserRecord
from ingest.http_client import RegistryHttpClient
from ingest.pipeline import collect_users
from store.user_file_writer import (
    MD380TOOLS_LAYOUT,
    MD2017_LAYOUT,
    UserFileLayout,
    write_user_file,
)


class UserDirectoryClient:
    """Primary SDK entry point for building user directories."""

    def __init__(
        self,
        config: UserDBConfig | None = None,
        http_client: RegistryHttpClient | None = None,
    ) -> None:
        """Create SDK client.

        Args:
            config: Optional runtime configuration.
            http_client: Optional registry client shared across runs.
        """
        self._config = config or UserDBConfig.from_env()
        self._http_client = http_client or RegistryHttpClient(self._config)

    def users(self, progress: ProgressCallback | None = None) -> list[UserRecord]:
        """Fetch, merge, and normalize users from all registries.

        Args:
            progress: Optional observer; returning False cancels the run.

        Returns:
            Users in ascending radio id order.
        """
        return collect_users(self._config, self._http_client, progress)

    def write_file(
        self,
        path: str | Path,
        layout: UserFileLayout,
        progress: ProgressCallback | None = None,
    ) -> Path:
        """Build the directory and write it with the given layout.

        The file is only opened after the build succeeds, so a failed
        run leaves any existing file untouched.
        """
        users = self.users(progress)
        return write_user_file(Path(path), users, layout)

    def write_md380tools_file(
        self,
        path: str | Path,
        progress: ProgressCallback | None = None,
    ) -> Path:
        """Write the length-prefixed md380tools layout."""
        return self.write_file(path, MD380TOOLS_LAYOUT, progress)

    def write_md2017_file(
        self,
        path: str | Path,
        progress: ProgressCallback | None = None,
    ) -> Path:
        """Write the plain md2017 layout."""
        return self.write_file(path, MD2017_LAYOUT, progress)

    def close(self) -> None:
        """Release the registry client connections."""
        self._http_client.close()


def write_md380tools_file(
    path: str | Path,
    progress: ProgressCallback | None = None,
    config: UserDBConfig | None = None,
) -> Path:
    """Build the user directory and write the md380tools layout.

    Args:
        path: Destination file, overwritten if present.
        progress: Optional observer; returning False cancels the run.
        config: Optional runtime configuration.

    Returns:
        Written file path.
    """
    client = UserDirectoryClient(config)
    try:
        return client.write_md380tools_file(path, progress)
    finally:
        client.close()


def write_md2017_file(
    path: str | Path,
    progress: ProgressCallback | None = None,
    config: UserDBConfig | None = None,
) -> Path:
    """Build the user directory and write the md2017 layout.

    Args:
        path: Destination file, overwritten if present.
        progress: Optional observer; returning False cancels the run.
        config: Optional runtime configuration.

    Returns:
        Written file path.
    """
    client = UserDirectoryClient(config)
    try:
        return client.write_md2017_file(path, progress)
    finally:
        client.close()
