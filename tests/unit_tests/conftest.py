"""Shared fixtures: an isolated home directory and a fake git clone."""

from pathlib import Path

import pytest

from claude_setup.clone import CloneResult
from claude_setup.config import Settings, console


@pytest.fixture(autouse=True)
def wide_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep rich from wrapping long paths in captured output."""
    monkeypatch.setattr(console, "_width", 200)


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point Path.home() at a temporary directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setattr("pathlib.Path.home", lambda: home_dir)
    monkeypatch.delenv("CLAUDE_SETUP_REPO_URL", raising=False)
    monkeypatch.delenv("CLAUDE_SETUP_TARGET_DIR", raising=False)
    return home_dir


@pytest.fixture
def settings(home: Path) -> Settings:
    return Settings.from_environment()


def make_bundle(
    target_dir: Path,
    *,
    agents: tuple[str, ...] = ("code-reviewer", "architect"),
    with_descriptor: bool = True,
    with_agents_dir: bool = True,
    with_artifacts: bool = True,
    marker: str = "",
) -> None:
    """Write a bundle layout like the one a clone produces."""
    target_dir.mkdir(parents=True)
    if with_descriptor:
        (target_dir / "CLAUDE.md").write_text(f"# Instructions {marker}")
    if with_agents_dir:
        agents_dir = target_dir / "agents"
        agents_dir.mkdir()
        for name in agents:
            (agents_dir / f"{name}.md").write_text(f"# {name}")
    (target_dir / "docs").mkdir()
    (target_dir / "docs" / "clean-code.md").write_text("# Clean code")
    if with_artifacts:
        (target_dir / "README.md").write_text("# Readme")
        (target_dir / "setup-claude-config.sh").write_text("#!/bin/bash")
        (target_dir / ".git" / "objects").mkdir(parents=True)
        (target_dir / ".git" / "HEAD").write_text("ref: refs/heads/main")
        (target_dir / ".idea").mkdir()
        (target_dir / ".idea" / "workspace.xml").write_text("<project/>")


class FakeCloner:
    """Stands in for clone_repository, recording every call."""

    def __init__(self, error: Exception | None = None, **bundle_options) -> None:
        self.error = error
        self.bundle_options = bundle_options
        self.calls: list[tuple[str, Path]] = []

    def __call__(self, repo_url: str, target_dir: Path) -> CloneResult:
        self.calls.append((repo_url, target_dir))
        if self.error is not None:
            raise self.error
        make_bundle(target_dir, **self.bundle_options)
        return CloneResult(repo_url=repo_url, target_dir=target_dir)


@pytest.fixture
def cloner_factory():
    """Build FakeCloner instances."""
    return FakeCloner


@pytest.fixture
def bundle_factory():
    """Write bundle layouts on disk."""
    return make_bundle
