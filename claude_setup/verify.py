"""Post-install verification of the bundle layout."""

from dataclasses import dataclass, field
from pathlib import Path

from claude_setup.config import AGENTS_DIR, DESCRIPTOR_FILE


@dataclass
class VerificationResult:
    """Outcome of checking an installed bundle.

    Attributes:
        descriptor_found: Whether CLAUDE.md exists in the target
        agents_dir_found: Whether the agents/ directory exists in the target
        agents: Agent names found in agents/ (file stems, sorted)
    """

    descriptor_found: bool
    agents_dir_found: bool
    agents: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Check if both expected paths are present."""
        return self.descriptor_found and self.agents_dir_found

    @property
    def missing(self) -> list[str]:
        """Names of the expected paths that are absent."""
        missing = []
        if not self.descriptor_found:
            missing.append(DESCRIPTOR_FILE)
        if not self.agents_dir_found:
            missing.append(f"{AGENTS_DIR}/")
        return missing


def discover_agents(agents_dir: Path) -> list[str]:
    """List agent definition names in ``agents_dir``.

    Args:
        agents_dir: Directory holding one ``<name>.md`` per agent

    Returns:
        Sorted agent names with the ``.md`` extension stripped
    """
    if not agents_dir.is_dir():
        return []
    return sorted(p.stem for p in agents_dir.glob("*.md") if p.is_file())


def verify_installation(target_dir: Path) -> VerificationResult:
    """Check that ``target_dir`` holds a usable configuration bundle."""
    agents_dir = target_dir / AGENTS_DIR
    return VerificationResult(
        descriptor_found=(target_dir / DESCRIPTOR_FILE).is_file(),
        agents_dir_found=agents_dir.is_dir(),
        agents=discover_agents(agents_dir),
    )
