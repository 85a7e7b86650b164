"""Configuration and constants for the installer."""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

import dotenv
from rich.console import Console

dotenv.load_dotenv()

# Color scheme
COLORS = {
    "primary": "#10b981",
    "dim": "#6b7280",
    "warning": "#fbbf24",
    "error": "#ef4444",
}

DEFAULT_REPO_URL = "https://github.com/itai-sagi/vibe-coding.git"

# Backup naming: <path>.backup.<YYYYmmdd_HHMMSS>
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
BACKUP_INFIX = ".backup."

# Files used only to author the bundle, removed after cloning
PRUNE_ARTIFACTS = ("README.md", ".git", ".idea", "setup-claude-config.sh")

# Paths a usable bundle must contain
DESCRIPTOR_FILE = "CLAUDE.md"
AGENTS_DIR = "agents"

# What a bundle ships, shown after a successful install
BUNDLE_CONTENTS = (
    ("CLAUDE.md", "project instructions"),
    ("agents/", "agent definitions"),
    ("docs/", "clean code documentation"),
    ("checklists/", "code review checklists"),
)

# Rich console instance
# Force UTF-8 encoding on Windows to support the check marks
if sys.platform == "win32":
    import io

    console = Console(
        highlight=False, file=io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8")
    )
else:
    console = Console(highlight=False)


@dataclass
class Settings:
    """Settings for one installer invocation.

    Attributes:
        repo_url: Source locator handed to ``git clone``
        target_dir: Directory the bundle is installed into
        marker_file: Home-level CLAUDE.md that gets a courtesy backup
        assume_yes: Skip the overwrite confirmation prompt
    """

    repo_url: str
    target_dir: Path
    marker_file: Path
    assume_yes: bool = False

    @classmethod
    def from_environment(
        cls,
        *,
        repo_url: str | None = None,
        target_dir: Path | None = None,
        assume_yes: bool = False,
    ) -> "Settings":
        """Create settings from the environment, letting explicit values win.

        Args:
            repo_url: Source locator from the command line
            target_dir: Target directory from the command line
            assume_yes: Whether to skip the confirmation prompt

        Returns:
            Settings instance with resolved paths
        """
        home = Path.home()

        if repo_url is None:
            repo_url = os.environ.get("CLAUDE_SETUP_REPO_URL") or DEFAULT_REPO_URL

        if target_dir is None:
            env_target = os.environ.get("CLAUDE_SETUP_TARGET_DIR")
            target_dir = Path(env_target).expanduser() if env_target else home / ".claude"

        return cls(
            repo_url=repo_url,
            target_dir=Path(target_dir),
            marker_file=home / DESCRIPTOR_FILE,
            assume_yes=assume_yes,
        )

    @property
    def descriptor_path(self) -> Path:
        """Path to the CLAUDE.md expected inside the target directory."""
        return self.target_dir / DESCRIPTOR_FILE

    @property
    def agents_dir(self) -> Path:
        """Path to the agent definitions directory inside the target."""
        return self.target_dir / AGENTS_DIR

    @property
    def is_remote_http(self) -> bool:
        """Check if the source locator is an http(s) URL."""
        return self.repo_url.startswith(("http://", "https://"))


def get_version() -> str:
    """Return the installed package version."""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("claude-setup")
    except PackageNotFoundError:
        return "0.1.0"
