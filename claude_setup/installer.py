"""The installation procedure.

Runs strictly in order, stopping at the first fault:

1. Pre-flight: confirm replacing an existing target directory
2. Backup: rename the existing target aside
3. Materialize: git clone the bundle into the target
4. Prune: drop authoring-only files from the clone
5. Courtesy backup of ~/CLAUDE.md
6. Verify: CLAUDE.md and agents/ must exist
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from claude_setup import ui
from claude_setup.backup import backup_directory, backup_file
from claude_setup.clone import CloneResult, clone_repository
from claude_setup.config import Settings, console
from claude_setup.errors import (
    ErrorHandler,
    SetupCancelled,
    SetupError,
    VerificationError,
)
from claude_setup.prune import prune_artifacts
from claude_setup.verify import VerificationResult, verify_installation

logger = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = ("y", "yes")


def prompt_overwrite(target_dir: Path) -> bool:
    """Ask whether to back up and replace ``target_dir``.

    Returns:
        True only for an explicit "y"/"yes" answer
    """
    from prompt_toolkit import prompt

    try:
        answer = prompt("Do you want to backup and replace it? (y/N): ")
    except EOFError:
        return False
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


@dataclass
class InstallResult:
    """Outcome of one installer run.

    Attributes:
        exit_code: 0 on full success, 1 on any abort point
        backup_dir: Where the previous installation was moved, if anywhere
        marker_backup: Copy of the home-level CLAUDE.md, if one was made
        pruned: Artifacts removed from the clone
        verification: Verification result, if the procedure got that far
        error: The fault that stopped the run, if any
    """

    exit_code: int
    backup_dir: Path | None = None
    marker_backup: Path | None = None
    pruned: list[str] = field(default_factory=list)
    verification: VerificationResult | None = None
    error: SetupError | None = None

    @property
    def success(self) -> bool:
        return self.exit_code == 0


class ConfigInstaller:
    """Installs a configuration bundle into the target directory."""

    def __init__(
        self,
        settings: Settings,
        *,
        confirm: Callable[[Path], bool] | None = None,
        cloner: Callable[[str, Path], CloneResult] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the installer.

        Args:
            settings: Paths and source locator for this run
            confirm: Overwrite confirmation callback (defaults to a prompt)
            cloner: Callable that materializes the repository (defaults to git clone)
            clock: Source of backup timestamps
        """
        self.settings = settings
        self.confirm = confirm or prompt_overwrite
        self.cloner = cloner or clone_repository
        self.clock = clock
        self.error_handler = ErrorHandler()

    def run(self) -> InstallResult:
        """Run the full procedure and report the outcome.

        Returns:
            InstallResult; never raises for installer faults
        """
        result = InstallResult(exit_code=1)
        try:
            self._install(result)
        except (SetupError, OSError) as e:
            context = {"path": str(self.settings.target_dir)}
            if result.backup_dir:
                context["backup_dir"] = str(result.backup_dir)
            result.error = self.error_handler.classify_error(e, context)
            ui.show_error(self.error_handler.describe(result.error))
            return result

        result.exit_code = 0
        return result

    def _install(self, result: InstallResult) -> None:
        settings = self.settings
        target = settings.target_dir

        if target.exists():
            ui.show_warning(f"Warning: {target} directory already exists.")
            if not (settings.assume_yes or self.confirm(target)):
                msg = "Setup cancelled."
                raise SetupCancelled(msg, context={"path": str(target)})
            result.backup_dir = backup_directory(target, self.clock())
            ui.show_success(f"Backed up existing {target} to {result.backup_dir}")

        ui.show_step("Cloning repository...")
        self.cloner(settings.repo_url, target)
        ui.show_success("Repository cloned successfully!")

        ui.show_step("Cleaning up unnecessary files...")
        result.pruned = prune_artifacts(target)
        logger.debug("Pruned: %s", result.pruned)

        result.marker_backup = backup_file(settings.marker_file, self.clock())
        if result.marker_backup:
            ui.show_warning(f"Backed up existing {settings.marker_file}")

        ui.show_step("Verifying installation...")
        result.verification = verify_installation(target)
        ui.show_verification(result.verification)

        if not result.verification.ok:
            ui.show_failure_banner()
            missing = ", ".join(result.verification.missing)
            msg = f"Installed bundle is missing: {missing}"
            raise VerificationError(msg, context={"path": str(target)})

        ui.show_install_summary()
        console.print()
