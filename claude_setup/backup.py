"""Timestamped backups of an existing installation.

Backups live next to the original path:

~/.claude                          # current installation
~/.claude.backup.20250101_120000   # moved aside by a previous run
~/CLAUDE.md.backup.20250101_120000 # courtesy copy of the home-level file
"""

import logging
import shutil
from datetime import datetime
from pathlib import Path

from claude_setup.config import BACKUP_INFIX, TIMESTAMP_FORMAT
from claude_setup.errors import BackupError, ErrorCategory

logger = logging.getLogger(__name__)


def timestamp_suffix(now: datetime | None = None) -> str:
    """Format a capture time as YYYYmmdd_HHMMSS (whole seconds)."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def backup_path_for(path: Path, now: datetime | None = None) -> Path:
    """Get an unused sibling backup path for ``path``.

    Two backups captured within the same second get ``-1``, ``-2``, ...
    appended so that each run produces a distinct path.

    Args:
        path: Path being backed up
        now: Capture time (defaults to the current time)

    Returns:
        Path like ``<path>.backup.<timestamp>`` that does not exist yet
    """
    base = path.with_name(f"{path.name}{BACKUP_INFIX}{timestamp_suffix(now)}")
    candidate = base
    counter = 1
    while candidate.exists():
        candidate = base.with_name(f"{base.name}-{counter}")
        counter += 1
    return candidate


def backup_directory(path: Path, now: datetime | None = None) -> Path:
    """Move an existing directory aside with a single rename.

    Args:
        path: Directory to back up
        now: Capture time (defaults to the current time)

    Returns:
        Path the directory was moved to

    Raises:
        BackupError: If the rename fails
    """
    destination = backup_path_for(path, now)
    logger.debug("Renaming %s -> %s", path, destination)
    try:
        path.rename(destination)
    except PermissionError as e:
        msg = f"Could not back up {path}: permission denied"
        raise BackupError(msg, context={"path": str(path)}) from e
    except OSError as e:
        msg = f"Could not back up {path}: {e.strerror or e}"
        raise BackupError(
            msg, category=ErrorCategory.SYSTEM_ERROR, context={"path": str(path)}
        ) from e
    return destination


def backup_file(path: Path, now: datetime | None = None) -> Path | None:
    """Copy a file aside, keeping the original in place.

    Args:
        path: File to back up
        now: Capture time (defaults to the current time)

    Returns:
        Path of the copy, or None if ``path`` is not a file
    """
    if not path.is_file():
        return None
    destination = backup_path_for(path, now)
    logger.debug("Copying %s -> %s", path, destination)
    try:
        shutil.copy2(path, destination)
    except PermissionError as e:
        msg = f"Could not back up {path}: permission denied"
        raise BackupError(msg, context={"path": str(path)}) from e
    except OSError as e:
        msg = f"Could not back up {path}: {e.strerror or e}"
        raise BackupError(
            msg, category=ErrorCategory.SYSTEM_ERROR, context={"path": str(path)}
        ) from e
    return destination


def _backup_sort_key(backup: Path, prefix: str) -> tuple[str, int]:
    # <prefix><timestamp>[-<counter>]; the counter orders same-second backups
    suffix = backup.name[len(prefix):]
    timestamp, _, counter = suffix.partition("-")
    return timestamp, int(counter) if counter.isdigit() else 0


def list_backups(path: Path) -> list[Path]:
    """List existing backups of ``path``, oldest first."""
    parent = path.parent
    if not parent.is_dir():
        return []
    prefix = f"{path.name}{BACKUP_INFIX}"
    backups = [p for p in parent.iterdir() if p.name.startswith(prefix)]
    return sorted(backups, key=lambda p: _backup_sort_key(p, prefix))
