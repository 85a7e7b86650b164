"""Main entry point for the claude-setup command.

Usage:
    claude-setup                       # install the default bundle
    claude-setup <repo-url>            # install from another repository
    claude-setup --yes                 # replace an existing install without asking
    claude-setup --check               # report status, change nothing
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.logging import RichHandler

from claude_setup.config import DEFAULT_REPO_URL, Settings, console, get_version


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="claude-setup",
        description="Install a Claude Code configuration bundle into ~/.claude",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "repo_url",
        nargs="?",
        default=None,
        help=f"Repository to clone (default: {DEFAULT_REPO_URL})",
    )
    parser.add_argument(
        "--target",
        type=Path,
        default=None,
        help="Install into this directory instead of ~/.claude",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Back up and replace an existing installation without prompting",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Check the current installation without changing anything",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {get_version()}",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    """Route log records through rich, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the command and return its exit code."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    settings = Settings.from_environment(
        repo_url=args.repo_url,
        target_dir=args.target.expanduser() if args.target else None,
        assume_yes=args.yes,
    )

    if args.check:
        from claude_setup.doctor import run_doctor

        return run_doctor(settings)

    from claude_setup import ui
    from claude_setup.installer import ConfigInstaller

    ui.show_banner()
    return ConfigInstaller(settings).run().exit_code


def cli_main() -> None:
    """Entry point for console script."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        # Clean exit on Ctrl+C - suppress ugly traceback
        console.print("\n\n[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli_main()
