"""claude-setup - install a Claude Code configuration bundle."""

from claude_setup.main import cli_main

__all__ = ["cli_main"]
