"""Tests for the command-line entry point."""

from pathlib import Path

import pytest

from claude_setup import installer, main
from claude_setup.clone import CloneResult
from claude_setup.config import DEFAULT_REPO_URL


class TestParseArgs:
    def test_defaults(self) -> None:
        args = main.parse_args([])
        assert args.repo_url is None
        assert args.target is None
        assert args.yes is False
        assert args.check is False
        assert args.verbose is False

    def test_positional_repo_url_and_flags(self) -> None:
        args = main.parse_args(["https://example.com/b.git", "-y", "--target", "/tmp/x", "-v"])
        assert args.repo_url == "https://example.com/b.git"
        assert args.yes is True
        assert args.target == Path("/tmp/x")
        assert args.verbose is True


class TestMain:
    def test_install_uses_default_locator(
        self, home: Path, bundle_factory, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a plain invocation clones the default repository into ~/.claude."""
        calls = []

        def fake_clone(repo_url: str, target_dir: Path) -> CloneResult:
            calls.append((repo_url, target_dir))
            bundle_factory(target_dir)
            return CloneResult(repo_url=repo_url, target_dir=target_dir)

        monkeypatch.setattr(installer, "clone_repository", fake_clone)

        assert main.main([]) == 0
        assert calls == [(DEFAULT_REPO_URL, home / ".claude")]

    def test_decline_returns_nonzero(
        self, home: Path, bundle_factory, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        bundle_factory(home / ".claude")
        monkeypatch.setattr("prompt_toolkit.prompt", lambda *a, **kw: "n")

        assert main.main([]) == 1
        assert (home / ".claude").exists()

    def test_check_mode_does_not_install(
        self, home: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from claude_setup import doctor

        monkeypatch.setattr(doctor, "check_source_reachable", lambda url: (True, "HTTP 200"))

        assert main.main(["--check"]) == 1
        assert not (home / ".claude").exists()


class TestCliMain:
    def test_exit_code_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(main, "main", lambda: 1)
        with pytest.raises(SystemExit) as exc_info:
            main.cli_main()
        assert exc_info.value.code == 1

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def interrupted():
            raise KeyboardInterrupt

        monkeypatch.setattr(main, "main", interrupted)
        with pytest.raises(SystemExit) as exc_info:
            main.cli_main()
        assert exc_info.value.code == 130
