"""Unit tests for concurrent fetch aggregation."""

from __future__ import annotations

import threading

import pytest

from core.errors import UserDBCancelledError, UserDBFetchError
from core.types import FetchJob, UserRecord
from ingest.fetch_aggregator import gather_source_records
from ingest.progress import ProgressReporter


def _job(index: int, fetch) -> FetchJob:
    return FetchJob(index=index, source_name=f"source-{index}", fetch=fetch)


def test_gather_source_records_keeps_job_order_despite_completion_order() -> None:
    """Records are concatenated by job index, not by finish time."""
    second_done = threading.Event()

    def slow_first(_: threading.Event) -> list[UserRecord]:
        second_done.wait(timeout=5)
        return [UserRecord("1", callsign="FIRST")]

    def fast_second(_: threading.Event) -> list[UserRecord]:
        second_done.set()
        return [UserRecord("1", callsign="SECOND"), UserRecord("2")]

    records = gather_source_records([_job(0, slow_first), _job(1, fast_second)])

    assert [record.callsign for record in records] == ["FIRST", "SECOND", ""]


def test_gather_source_records_raises_first_fatal_error_without_waiting() -> None:
    """A failing job aborts the run while slower jobs are abandoned."""
    lingering_started = threading.Event()
    observed_abort = threading.Event()

    def failing(_: threading.Event) -> list[UserRecord]:
        lingering_started.wait(timeout=5)
        raise UserDBFetchError("Failed to fetch https://registry.example/a: HTTP 500")

    def lingering(abort_event: threading.Event) -> list[UserRecord]:
        lingering_started.set()
        if abort_event.wait(timeout=5):
            observed_abort.set()
        return []

    with pytest.raises(UserDBFetchError, match="HTTP 500"):
        gather_source_records([_job(0, failing), _job(1, lingering)])

    assert observed_abort.wait(timeout=5)


def test_gather_source_records_stops_when_progress_observer_declines() -> None:
    """A False observer return on the third call cancels the run."""
    calls: list[int] = []

    def observer(current: int) -> bool:
        calls.append(current)
        return len(calls) < 3

    jobs = [_job(index, lambda _: [UserRecord("7")]) for index in range(6)]

    with pytest.raises(UserDBCancelledError):
        gather_source_records(jobs, ProgressReporter(observer))

    assert len(calls) == 3


def test_gather_source_records_steps_progress_once_per_job() -> None:
    """The observer sees the initial value plus one call per job."""
    calls: list[int] = []

    def observer(current: int) -> bool:
        calls.append(current)
        return True

    jobs = [_job(index, lambda _: []) for index in range(4)]

    gather_source_records(jobs, ProgressReporter(observer, max_progress=100))

    assert calls == [0, 25, 50, 75, 100]


def test_gather_source_records_returns_empty_for_no_jobs() -> None:
    """No jobs means no records and no worker threads."""
    assert gather_source_records([]) == []
