"""Installation status check (``claude-setup --check``).

Reports on git availability, the installed bundle, backups and the
source repository without changing anything on disk.
"""

import requests
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from claude_setup.backup import list_backups
from claude_setup.clone import git_available
from claude_setup.config import Settings, console
from claude_setup.verify import verify_installation

OK = "✓"
FAIL = "✗"
WARN = "⚠"
INFO = "ℹ"


def check_source_reachable(repo_url: str, timeout: float = 5) -> tuple[bool, str]:
    """Probe an http(s) source locator.

    Returns:
        (reachable, detail) where detail is the status code or error
    """
    try:
        response = requests.head(repo_url, timeout=timeout, allow_redirects=True)
    except requests.RequestException as e:
        return False, str(e)
    # 405: some hosts reject HEAD but are up
    if response.status_code < 400 or response.status_code == 405:  # noqa: PLR2004
        return True, f"HTTP {response.status_code}"
    return False, f"HTTP {response.status_code}"


def run_doctor(settings: Settings) -> int:
    """Run the status check.

    Returns:
        Exit code: 0 if the installation verifies, 1 otherwise
    """
    console.print()
    console.print(Panel.fit("[bold]Claude Code Configuration Status[/bold]", border_style="cyan"))
    console.print()

    all_passed = True
    results = []

    # Check 1: git on PATH
    if git_available():
        results.append((OK, "git found on PATH", ""))
    else:
        results.append((FAIL, "git not found on PATH", "Required to install"))
        all_passed = False

    # Check 2: installed bundle
    target = settings.target_dir
    if target.is_dir():
        verification = verify_installation(target)
        results.append(
            (OK if verification.descriptor_found else FAIL, "CLAUDE.md", settings.descriptor_path)
        )
        if verification.agents_dir_found:
            names = ", ".join(verification.agents) or "none"
            results.append(
                (OK, f"{len(verification.agents)} agent definition(s)", names)
            )
        else:
            results.append((FAIL, "agents/ directory", settings.agents_dir))
        all_passed = all_passed and verification.ok
    else:
        results.append((FAIL, "Configuration not installed", target))
        results.append((INFO, "Run 'claude-setup' to install it", ""))
        all_passed = False

    # Check 3: backups (informational)
    backups = list_backups(target)
    if backups:
        results.append((INFO, f"{len(backups)} backup(s) of {target.name}", backups[-1]))
    marker_backups = list_backups(settings.marker_file)
    if marker_backups:
        results.append(
            (INFO, f"{len(marker_backups)} backup(s) of {settings.marker_file.name}", marker_backups[-1])
        )

    # Check 4: source repository (informational, does not fail the check)
    if settings.is_remote_http:
        reachable, detail = check_source_reachable(settings.repo_url)
        results.append(
            (OK if reachable else WARN, f"Source repository {'reachable' if reachable else 'unreachable'}", detail)
        )
    else:
        results.append((INFO, "Source repository is not an http(s) URL", settings.repo_url))

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Status", style="bold", width=3)
    table.add_column("Check")
    table.add_column("Details", style="dim")

    for status, check, details in results:
        status_style = {
            OK: "green",
            FAIL: "red",
            WARN: "yellow",
            INFO: "blue",
        }.get(status, "white")

        table.add_row(
            f"[{status_style}]{status}[/{status_style}]",
            escape(check),
            escape(str(details)) if details else "",
        )

    console.print(table)
    console.print()

    if all_passed:
        console.print("[bold green]Configuration is installed and valid.[/bold green]")
    else:
        console.print(
            "[bold yellow]Some checks failed. Please review the issues above.[/bold yellow]"
        )

    console.print()
    return 0 if all_passed else 1
