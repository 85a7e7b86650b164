"""Tests for the --check status report."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from claude_setup import doctor
from claude_setup.config import Settings
from claude_setup.doctor import check_source_reachable, run_doctor


@pytest.fixture
def offline(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Replace requests.head and report git as installed."""
    head = MagicMock(return_value=MagicMock(status_code=200))
    monkeypatch.setattr(doctor.requests, "head", head)
    monkeypatch.setattr(doctor, "git_available", lambda: True)
    return head


class TestCheckSourceReachable:
    def test_ok_status(self, offline: MagicMock) -> None:
        assert check_source_reachable("https://example.com/r.git") == (True, "HTTP 200")
        offline.assert_called_once_with(
            "https://example.com/r.git", timeout=5, allow_redirects=True
        )

    def test_not_found(self, offline: MagicMock) -> None:
        offline.return_value = MagicMock(status_code=404)
        assert check_source_reachable("https://example.com/r.git") == (False, "HTTP 404")

    def test_connection_error(self, offline: MagicMock) -> None:
        offline.side_effect = requests.ConnectionError("no route to host")
        reachable, detail = check_source_reachable("https://example.com/r.git")
        assert reachable is False
        assert "no route to host" in detail


class TestRunDoctor:
    def test_valid_installation(
        self,
        home: Path,
        settings: Settings,
        bundle_factory,
        offline: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        bundle_factory(home / ".claude", agents=("reviewer",))
        (home / ".claude.backup.20240101_000000").mkdir()

        assert run_doctor(settings) == 0
        output = capsys.readouterr().out
        assert "reviewer" in output
        assert "1 backup(s)" in output

    def test_not_installed(
        self, settings: Settings, offline: MagicMock, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run_doctor(settings) == 1
        assert "not installed" in capsys.readouterr().out

    def test_missing_git_fails(
        self,
        home: Path,
        settings: Settings,
        bundle_factory,
        offline: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        bundle_factory(home / ".claude")
        monkeypatch.setattr(doctor, "git_available", lambda: False)

        assert run_doctor(settings) == 1

    def test_unreachable_source_is_only_a_warning(
        self, home: Path, settings: Settings, bundle_factory, offline: MagicMock
    ) -> None:
        bundle_factory(home / ".claude")
        offline.side_effect = requests.Timeout("timed out")

        assert run_doctor(settings) == 0

    def test_non_http_source_is_not_requested(
        self, home: Path, bundle_factory, offline: MagicMock
    ) -> None:
        bundle_factory(home / ".claude")
        settings = Settings.from_environment(repo_url="git@example.com:a/b.git")

        assert run_doctor(settings) == 0
        offline.assert_not_called()

    def test_bracketed_locator_is_shown_literally(
        self,
        home: Path,
        bundle_factory,
        offline: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test square brackets in a locator are not parsed as rich markup."""
        bundle_factory(home / ".claude")
        monkeypatch.setattr(doctor.console, "width", 200)
        settings = Settings.from_environment(repo_url="/srv/git/[red]team[/red].git")

        assert run_doctor(settings) == 0
        assert "/srv/git/[red]team[/red].git" in capsys.readouterr().out
