"""Rich UI components for the CLI.

Kept apart from the commands so tables and panels can be reused by
`init` and `rewrite`.
"""

from __future__ import annotations

from pathlib import Path

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import RewriteReport


def print_banner(console: Console) -> None:
    title = Text("rn-scaffold", style="bold cyan")
    subtitle = Text("React Native template • Android • iOS", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def build_report_table(report: RewriteReport, *, root: Path) -> Table:
    """One row per rewritten file or relocated directory."""

    table = Table(title=f"{report.previous_package} → {report.package_identifier}")
    table.add_column("Path", style="cyan")
    table.add_column("Change", style="white")
    table.add_column("Count", style="green", justify="right")
    for change in report.changes:
        count = str(change.replacements) if change.replacements else "[yellow]0[/yellow]"
        table.add_row(_display_path(change.path, root), change.description, count)
    return table
