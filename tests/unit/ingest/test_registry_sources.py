"""Unit tests for registry source jobs."""

from __future__ import annotations

import threading

import pytest

from core.config import RegistryUrls
from core.errors import UserDBContentError, UserDBFetchError
from ingest.registry_sources import build_fetch_jobs, fetch_quoted_users, fetch_special_users
from tests.fake_registry import FakeRegistryClient, build_quoted_feed
from tests.fixture_paths import read_feed

_URLS = RegistryUrls(
    special_directory="http://directory.example/nodes",
    fixed="http://feeds.example/fixed.csv",
    hamdigital="http://feeds.example/hamdigital.csv",
    radioid="http://feeds.example/radioid.csv",
    reflector="http://feeds.example/reflector.db",
)


def test_fetch_quoted_users_rejects_feeds_below_line_floor() -> None:
    """A 10,000-line quoted feed is treated as an outage."""
    feed = build_quoted_feed([], total_lines=10_000)
    client = FakeRegistryClient({_URLS.radioid: feed})

    with pytest.raises(UserDBContentError, match="10000 lines"):
        fetch_quoted_users(client, "radioid", _URLS.radioid, threading.Event())


def test_fetch_quoted_users_parses_feed_at_line_floor() -> None:
    """A feed with exactly the floor line count is accepted."""
    feed = build_quoted_feed([("1234567", "DL1ABC", "Hans", "Bonn", "NRW", "Germany")], 50_000)
    client = FakeRegistryClient({_URLS.radioid: feed})

    records = fetch_quoted_users(client, "radioid", _URLS.radioid, threading.Event())

    assert len(records) == 50_000
    assert records[0].city == "Bonn"


def test_fetch_quoted_users_adds_source_context_to_fetch_errors() -> None:
    """Fixed-registry fetch errors are fatal and name the source."""
    client = FakeRegistryClient({})

    with pytest.raises(UserDBFetchError, match="hamdigital"):
        fetch_quoted_users(client, "hamdigital", _URLS.hamdigital, threading.Event())


def test_fetch_special_users_absorbs_fetch_errors() -> None:
    """An unreachable special node contributes nothing instead of failing."""
    client = FakeRegistryClient({})

    assert fetch_special_users(client, "http://node.example/x.csv", threading.Event()) == []


def test_build_fetch_jobs_orders_fixed_sources_before_specials() -> None:
    """Jobs follow fixed, hamdigital, radioid, reflector, then discovery order."""
    special_urls = ["http://a.example/special.csv", "http://b.example/special.csv"]

    jobs = build_fetch_jobs(FakeRegistryClient({}), _URLS, special_urls)

    assert [job.index for job in jobs] == list(range(6))
    assert [job.source_name for job in jobs] == [
        "fixed",
        "hamdigital",
        "radioid",
        "reflector",
        "special:http://a.example/special.csv",
        "special:http://b.example/special.csv",
    ]


def test_build_fetch_jobs_binds_each_special_url() -> None:
    """Each special job fetches its own URL."""
    special_urls = ["http://a.example/special.csv", "http://b.example/special.csv"]
    client = FakeRegistryClient({special_urls[1]: read_feed("special_IDs.csv")})

    jobs = build_fetch_jobs(client, _URLS, special_urls)
    first = jobs[4].fetch(threading.Event())
    second = jobs[5].fetch(threading.Event())

    assert first == []
    assert [record.radio_id for record in second] == ["2501001", "2501002"]
    assert client.requested_urls == special_urls
