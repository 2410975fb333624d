"""Progress reporting with cancellation.

This module drives an optional caller-supplied observer as fetch jobs
complete. The observer may abort the run by returning False.
"""

from __future__ import annotations

from core.constants import MAX_PROGRESS, MIN_PROGRESS
from core.errors import UserDBCancelledError
from core.types import ProgressCallback


class ProgressReporter:
    """Scale job completion onto ``[MIN_PROGRESS, max_progress]``."""

    def __init__(
        self,
        callback: ProgressCallback | None = None,
        max_progress: int = MAX_PROGRESS,
    ) -> None:
        self._callback = callback
        self._max_progress = max_progress
        self._increment = 0
        self._current = MIN_PROGRESS

    @property
    def current(self) -> int:
        """Last value reported to the observer."""
        return self._current

    def start(self, job_count: int) -> None:
        """Compute the per-job increment and report the initial value.

        Raises:
            UserDBCancelledError: If the observer declines to continue.
        """
        if self._callback is None:
            return
        self._increment = self._max_progress // max(job_count, 1)
        self._current = MIN_PROGRESS
        self._report(self._current)

    def step(self) -> None:
        """Advance by one job and report.

        Raises:
            UserDBCancelledError: If the observer declines to continue.
        """
        if self._callback is None:
            return
        self._current = min(self._current + self._increment, self._max_progress)
        self._report(self._current)

    def finish(self) -> None:
        """Report the maximum once the whole run has completed."""
        if self._callback is None:
            return
        self._current = self._max_progress
        self._callback(self._max_progress)

    def _report(self, value: int) -> None:
        if not self._callback(value):
            raise UserDBCancelledError(
                f"User database build cancelled by progress observer at {value}/{self._max_progress}."
            )
