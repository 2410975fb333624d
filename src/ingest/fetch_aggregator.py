"""Concurrent fan-out and ordered fan-in of fetch jobs.

One worker thread runs per job. Results are stored back by job index
as they arrive, so the flattened output follows job order regardless
of completion order. The first fatal error or cancellation returns
immediately; in-flight workers are abandoned and signalled to stop.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from core.errors import UserDBError
from core.logging_config import get_logger
from core.types import FetchJob, FetchResult, UserRecord
from ingest.progress import ProgressReporter

_LOGGER = get_logger(__name__)


def gather_source_records(
    jobs: list[FetchJob],
    reporter: ProgressReporter | None = None,
) -> list[UserRecord]:
    """Run all jobs concurrently and concatenate their records in job order.

    Args:
        jobs: Index-tagged jobs; ``jobs[i].index`` must equal ``i``.
        reporter: Optional progress reporter stepped once per completed job.

    Returns:
        Records of job 0, then job 1, and so on.

    Raises:
        UserDBError: The first fatal job error, or UserDBCancelledError
            when the progress observer aborts.
    """
    reporter = reporter or ProgressReporter()
    if not jobs:
        return []
    abort_event = threading.Event()
    results: list[FetchResult | None] = [None] * len(jobs)
    reporter.start(len(jobs))
    executor = ThreadPoolExecutor(max_workers=len(jobs), thread_name_prefix="userdb-fetch")
    try:
        futures = [executor.submit(_run_job, job, abort_event) for job in jobs]
        for future in as_completed(futures):
            result = future.result()
            if result.error is not None:
                _LOGGER.error(
                    "source_fetch_failed", source=result.source_name, error=str(result.error)
                )
                raise result.error
            results[result.index] = result
            _LOGGER.info(
                "source_records_gathered",
                source=result.source_name,
                record_count=len(result.records),
            )
            reporter.step()
    except BaseException:
        abort_event.set()
        raise
    finally:
        executor.shutdown(wait=False, cancel_futures=True)
    return _flatten_results(results)


def _run_job(job: FetchJob, abort_event: threading.Event) -> FetchResult:
    """Execute one job, capturing domain errors into its result."""
    try:
        records = job.fetch(abort_event)
    except UserDBError as error:
        return FetchResult(index=job.index, source_name=job.source_name, error=error)
    return FetchResult(index=job.index, source_name=job.source_name, records=records)


def _flatten_results(results: list[FetchResult | None]) -> list[UserRecord]:
    """Concatenate result records in slot order."""
    records: list[UserRecord] = []
    for result in results:
        if result is not None:
            records.extend(result.records)
    return records
