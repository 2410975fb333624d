"""Unit tests for CLI command handling."""

from __future__ import annotations

from pathlib import Path

import pytest

from cli.main import main
from core.errors import UserDBFetchError


class _FakeDirectoryClient:
    instances: list["_FakeDirectoryClient"] = []

    def __init__(self, config) -> None:
        self.config = config
        self.writes: list[tuple[str, str, bool]] = []
        self.closed = False
        self.error: Exception | None = None
        _FakeDirectoryClient.instances.append(self)

    def write_file(self, path, layout, progress=None) -> Path:
        self.writes.append((str(path), layout.name, progress is not None))
        if self.error is not None:
            raise self.error
        if progress is not None:
            progress(0)
            progress(1_000_000)
        return Path(path)

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def _fake_client(monkeypatch: pytest.MonkeyPatch) -> None:
    _FakeDirectoryClient.instances = []
    monkeypatch.setattr("cli.main.UserDirectoryClient", _FakeDirectoryClient)


def test_cli_md380tools_writes_selected_layout(tmp_path, capsys) -> None:
    """The md380tools command should write the sized layout and print the path."""
    output_path = tmp_path / "users.csv"

    exit_code = main(["md380tools", str(output_path)])
    output = capsys.readouterr().out.strip()

    client = _FakeDirectoryClient.instances[0]
    assert exit_code == 0
    assert output == str(output_path)
    assert client.writes == [(str(output_path), "md380tools", False)]
    assert client.closed is True


def test_cli_md2017_reports_progress_on_stderr(tmp_path, capsys) -> None:
    """--progress should render percentages on stderr only."""
    exit_code = main(["md2017", str(tmp_path / "users.csv"), "--progress"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "100%" in captured.err
    assert "%" not in captured.out
    assert _FakeDirectoryClient.instances[0].writes[0][1:] == ("md2017", True)


def test_cli_returns_error_code_for_domain_errors(tmp_path, capsys, monkeypatch) -> None:
    """Domain errors should map to exit code 1 with a stderr message."""
    original_init = _FakeDirectoryClient.__init__

    def failing_init(self, config) -> None:
        original_init(self, config)
        self.error = UserDBFetchError("Failed to fetch http://feeds.example: HTTP 500")

    monkeypatch.setattr(_FakeDirectoryClient, "__init__", failing_init)

    exit_code = main(["md2017", str(tmp_path / "users.csv")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "HTTP 500" in captured.err
    assert _FakeDirectoryClient.instances[0].closed is True


def test_cli_rejects_invalid_configuration(tmp_path, capsys, monkeypatch) -> None:
    """Invalid environment configuration fails before any build starts."""
    monkeypatch.setenv("USERDB_CLIENT_TIMEOUT", "never")

    exit_code = main(["md2017", str(tmp_path / "users.csv")])

    assert exit_code == 1
    assert "USERDB_CLIENT_TIMEOUT" in capsys.readouterr().err
    assert _FakeDirectoryClient.instances == []


def test_cli_requires_a_command() -> None:
    """Argparse should reject a missing subcommand."""
    with pytest.raises(SystemExit):
        main([])
