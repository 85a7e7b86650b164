"""Removal of authoring-only artifacts from a freshly cloned bundle."""

import logging
import os
import shutil
import stat
import sys
from collections.abc import Iterable
from pathlib import Path

from claude_setup.config import PRUNE_ARTIFACTS

logger = logging.getLogger(__name__)


def _make_writable_and_retry(func, path, _exc) -> None:
    # git marks object files read-only, which rmtree cannot remove on Windows
    os.chmod(path, stat.S_IWRITE)
    func(path)


def _remove_tree(path: Path) -> None:
    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=_make_writable_and_retry)
    else:
        shutil.rmtree(path, onerror=_make_writable_and_retry)


def prune_artifacts(
    target_dir: Path, artifacts: Iterable[str] = PRUNE_ARTIFACTS
) -> list[str]:
    """Delete the listed artifacts from ``target_dir``.

    Missing artifacts are skipped, so pruning is idempotent.

    Args:
        target_dir: Installed bundle directory
        artifacts: Names relative to ``target_dir``

    Returns:
        Names of the artifacts that were actually removed
    """
    removed = []
    for name in artifacts:
        path = target_dir / name
        if path.is_dir() and not path.is_symlink():
            _remove_tree(path)
        elif path.exists() or path.is_symlink():
            path.unlink()
        else:
            continue
        logger.debug("Removed %s", path)
        removed.append(name)
    return removed
