"""User directory build orchestration.

This module sequences discovery, concurrent retrieval, merge, and
normalization into one run that yields the sorted user directory.
"""

from __future__ import annotations

from core.config import UserDBConfig
from core.logging_config import get_logger
from core.types import ProgressCallback, UserRecord
from ingest.fetch_aggregator import gather_source_records
from ingest.http_client import RegistryHttpClient
from ingest.progress import ProgressReporter
from ingest.registry_sources import build_fetch_jobs
from ingest.special_discovery import discover_special_urls
from transforms.record_merge import merge_and_sort
from transforms.text_normalization import normalize_records

_LOGGER = get_logger(__name__)


class UserDirectoryPipeline:
    """Single-run pipeline from registries to normalized sorted users."""

    def __init__(
        self,
        config: UserDBConfig,
        http_client: RegistryHttpClient,
        progress: ProgressCallback | None = None,
    ) -> None:
        self._config = config
        self._http_client = http_client
        self._reporter = ProgressReporter(progress)

    def run(self) -> list[UserRecord]:
        """Execute the pipeline and return the final user list."""
        special_urls = discover_special_urls(
            self._http_client, self._config.registry_urls.special_directory
        )
        jobs = build_fetch_jobs(self._http_client, self._config.registry_urls, special_urls)
        source_records = gather_source_records(jobs, self._reporter)
        users = normalize_records(merge_and_sort(source_records))
        self._reporter.finish()
        _LOGGER.info(
            "user_directory_built",
            job_count=len(jobs),
            special_count=len(special_urls),
            input_count=len(source_records),
            user_count=len(users),
        )
        return users


def collect_users(
    config: UserDBConfig,
    http_client: RegistryHttpClient,
    progress: ProgressCallback | None = None,
) -> list[UserRecord]:
    """Build the merged, normalized, id-sorted user directory.

    Args:
        config: Runtime configuration.
        http_client: Shared registry client.
        progress: Optional observer; returning False cancels the run.

    Returns:
        Users in ascending radio id order.

    Raises:
        UserDBDiscoveryError: If special-registry discovery fails.
        UserDBFetchError: If a fixed registry cannot be retrieved.
        UserDBContentError: If a quoted registry is implausibly small.
        UserDBKeyError: If any merged record has an invalid radio id.
        UserDBCancelledError: If the progress observer aborts.
    """
    pipeline = UserDirectoryPipeline(config, http_client, progress)
    return pipeline.run()
