"""UI rendering and display utilities for the installer."""

from rich.markup import escape

from claude_setup.config import BUNDLE_CONTENTS, COLORS, console
from claude_setup.errors import ErrorReport
from claude_setup.verify import VerificationResult


def show_banner() -> None:
    """Display the installer title."""
    console.print("Claude Code Configuration Setup", style=f"bold {COLORS['primary']}")
    console.print("================================")


def show_step(message: str) -> None:
    """Display a phase header (e.g. "Cloning repository...")."""
    console.print(message, style=COLORS["primary"])


def show_success(message: str) -> None:
    console.print(f"✓ {escape(message)}", style=COLORS["primary"])


def show_warning(message: str) -> None:
    console.print(escape(message), style=COLORS["warning"])


def show_error(report: ErrorReport) -> None:
    """Display an error report with its suggestion."""
    console.print(f"✗ {escape(report.message)}", style=f"bold {COLORS['error']}")
    if report.suggestion:
        console.print(escape(report.suggestion), style=COLORS["dim"])


def show_verification(result: VerificationResult) -> None:
    """Display verification results and the discovered agent names."""
    if result.descriptor_found:
        show_success("CLAUDE.md found")
    else:
        console.print("✗ CLAUDE.md not found", style=COLORS["error"])

    if not result.agents_dir_found:
        console.print("✗ agents/ directory not found", style=COLORS["error"])
        return

    show_success("Agent definitions found:")
    if not result.agents:
        console.print("  (none)", style=COLORS["dim"])
    for agent_name in result.agents:
        console.print(f"  - {escape(agent_name)}")


def show_install_summary() -> None:
    """Display the closing banner after a successful install."""
    console.print()
    console.print(
        "Claude Code configuration setup complete!", style=f"bold {COLORS['primary']}"
    )
    console.print()
    console.print("Your configuration includes:")
    for name, description in BUNDLE_CONTENTS:
        console.print(f"  - {name} ({description})")
    console.print()
    console.print(
        "You can now use Claude Code with your custom configuration!",
        style=COLORS["primary"],
    )


def show_failure_banner() -> None:
    console.print(
        "Setup verification failed. Please check the installation.",
        style=f"bold {COLORS['error']}",
    )
