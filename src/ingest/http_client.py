"""HTTP retrieval for registry feeds.

This module wraps one requests session shared by every fetch worker of
a run. It enforces the connect/header window and the total request
window, and validates the response status before returning content.
"""

from __future__ import annotations

import threading
import time
from typing import Any

import requests

from core.config import UserDBConfig
from core.constants import DOWNLOAD_CHUNK_SIZE, USER_AGENT
from core.errors import UserDBCancelledError, UserDBFetchError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class RegistryHttpClient:
    """Reusable GET client for registry endpoints."""

    def __init__(self, config: UserDBConfig, session: Any | None = None) -> None:
        """Create the client.

        Args:
            config: Runtime configuration providing timeout windows.
            session: Optional preconfigured requests-compatible session.
        """
        self._transport_timeout = config.transport_timeout_seconds
        self._client_timeout = config.client_timeout_seconds
        self._session = session or _build_session()

    def get_bytes(self, url: str, cancel_event: threading.Event | None = None) -> bytes:
        """Fetch a URL and return the raw response body.

        Args:
            url: Registry URL.
            cancel_event: Optional abort signal checked while reading the body.

        Returns:
            Response body bytes.

        Raises:
            UserDBFetchError: On transport failure, timeout, or non-200 status.
            UserDBCancelledError: If the abort signal is set mid-download.
        """
        deadline = time.monotonic() + self._client_timeout
        _LOGGER.debug("registry_fetch_started", url=url)
        try:
            response = self._session.get(
                url,
                timeout=(self._transport_timeout, self._transport_timeout),
                stream=True,
            )
        except requests.RequestException as error:
            raise UserDBFetchError(f"Failed to fetch {url}: {error}") from error
        try:
            if response.status_code != 200:
                raise UserDBFetchError(
                    f"Failed to fetch {url}: HTTP {response.status_code} {response.reason or ''}".rstrip()
                )
            body = _read_body(response, url, deadline, cancel_event)
        finally:
            response.close()
        _LOGGER.debug("registry_fetch_completed", url=url, byte_count=len(body))
        return body

    def get_text(self, url: str, cancel_event: threading.Event | None = None) -> str:
        """Fetch a URL and decode the body as UTF-8.

        Undecodable bytes become replacement characters, which the
        transliteration table later drops.
        """
        return self.get_bytes(url, cancel_event).decode("utf-8", errors="replace")

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()


def split_lines(text: str) -> list[str]:
    """Split feed text into lines.

    A trailing empty remainder after the last newline is dropped, and a
    trailing carriage return is removed from each line.

    Args:
        text: Decoded feed body.

    Returns:
        Feed lines in order.
    """
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _build_session() -> requests.Session:
    """Build a pooled session with the client user agent."""
    session = requests.Session()
    session.headers["User-Agent"] = USER_AGENT
    return session


def _read_body(
    response: Any,
    url: str,
    deadline: float,
    cancel_event: threading.Event | None,
) -> bytes:
    """Read a streamed body while enforcing deadline and abort signal."""
    chunks: list[bytes] = []
    try:
        for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
            if cancel_event is not None and cancel_event.is_set():
                raise UserDBCancelledError(f"Fetch of {url} abandoned: run was aborted.")
            if time.monotonic() > deadline:
                raise UserDBFetchError(
                    f"Failed to fetch {url}: total request time exceeded the client timeout."
                )
            chunks.append(chunk)
    except requests.RequestException as error:
        raise UserDBFetchError(f"Failed to fetch {url}: {error}") from error
    return b"".join(chunks)
