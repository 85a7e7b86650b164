"""Fetching the configuration bundle with git."""

import logging
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from claude_setup.errors import CloneError, ErrorCategory

logger = logging.getLogger(__name__)


@dataclass
class CloneResult:
    """Result of a successful clone.

    Attributes:
        repo_url: Source locator that was cloned
        target_dir: Directory the repository was cloned into
    """

    repo_url: str
    target_dir: Path


def git_available() -> bool:
    """Check if a git executable is on PATH."""
    return shutil.which("git") is not None


def clone_repository(repo_url: str, target_dir: Path) -> CloneResult:
    """Clone ``repo_url`` into ``target_dir``.

    git inherits the terminal, so its "Cloning into..." line, progress and
    any fatal message reach the user directly. Failures are reported by
    exit code.

    Args:
        repo_url: Repository URL or path to clone
        target_dir: Directory to create

    Returns:
        CloneResult describing the clone

    Raises:
        CloneError: If git is missing or exits with a non-zero status
    """
    cmd = ["git", "clone", repo_url, str(target_dir)]
    logger.debug("Running %s", " ".join(cmd))

    try:
        result = subprocess.run(cmd, check=False)
    except FileNotFoundError as e:
        msg = "git executable not found on PATH"
        raise CloneError(
            msg,
            category=ErrorCategory.COMMAND_NOT_FOUND,
            context={"command": "git"},
        ) from e

    if result.returncode != 0:
        logger.debug("git clone exited with %s", result.returncode)
        msg = f"git clone failed (exit code {result.returncode})"
        raise CloneError(
            msg,
            context={"repo_url": repo_url, "path": str(target_dir)},
        )

    return CloneResult(repo_url=repo_url, target_dir=target_dir)
