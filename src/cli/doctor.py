"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil
import subprocess

import typer
from rich.console import Console
from rich.table import Table

from core.config import (
    DEFAULT_TEMPLATE_REPO,
    AppSettings,
    get_user_env_file,
    read_user_env_vars,
    write_user_env_vars,
)

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_executable(name: str) -> tuple[bool, str]:
    path = shutil.which(name)
    if path is None:
        return False, f"{name} not found on PATH"
    try:
        proc = subprocess.run([path, "--version"], capture_output=True, text=True, check=False, timeout=15)
    except (OSError, subprocess.TimeoutExpired) as exc:
        return False, str(exc)
    version = (proc.stdout or proc.stderr).strip().splitlines()
    return proc.returncode == 0, version[0] if version else path


@app.command()
def run() -> None:
    """Check the tools and settings `init` relies on."""

    settings = AppSettings()

    table = Table(title="rn-scaffold Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_git, detail_git = _check_executable(settings.git_executable)
    table.add_row("git", "OK" if ok_git else "FAIL", detail_git)

    ok_install, detail_install = _check_executable(settings.install_command)
    table.add_row(settings.install_command, "OK" if ok_install else "FAIL", detail_install)

    if settings.template_repo == DEFAULT_TEMPLATE_REPO:
        table.add_row("Template repo", "WARN", "Placeholder URL; run `doctor setup-template`")
    else:
        table.add_row("Template repo", "OK", settings.template_repo)

    env_file = get_user_env_file()
    if env_file.exists():
        table.add_row("User config", "OK", f"{env_file} ({len(read_user_env_vars())} keys)")
    else:
        table.add_row("User config", "OPTIONAL", str(env_file))

    _console.print(table)

    if not (ok_git and ok_install):
        raise typer.Exit(code=1)


@app.command(name="setup-template")
def setup_template() -> None:
    """Store the template repository and package manager in the user config .env."""

    settings = AppSettings()
    repo = typer.prompt("Template repository URL", default=settings.template_repo, show_default=True).strip()
    installer = typer.prompt(
        "Package manager (npm/yarn)",
        default=settings.install_command,
        show_default=True,
    ).strip().lower()

    if not repo:
        raise typer.BadParameter("template repository is required")
    if installer not in ("npm", "yarn"):
        raise typer.BadParameter("package manager must be npm or yarn")

    env_path = write_user_env_vars(
        {
            "RN_SCAFFOLD_TEMPLATE_REPO": repo,
            "RN_SCAFFOLD_INSTALL_COMMAND": installer,
        }
    )

    _console.print(f"[green]Saved template config to:[/green] {env_path}")
