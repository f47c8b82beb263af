"""Typer application: `init`, `rewrite` and the `doctor` sub-commands.

The CLI only prompts, prints and maps `ScaffoldError` to exit code 1;
cloning, rewriting and installing live in adapters/services.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.git_client import clone_template
from adapters.package_installer import START_COMMANDS, install_dependencies
from cli import doctor
from cli.ui_components import build_report_table, print_banner
from core.config import AppSettings
from core.domain.identifiers import EXAMPLE_PACKAGE_IDENTIFIER, is_valid_package_identifier
from core.domain.models import ScaffoldRequest
from core.errors import ScaffoldError
from core.services.identifier_rewriter import rewrite_project

app = typer.Typer(
    no_args_is_help=True,
    help="React Native project generator using a custom template.",
)
app.add_typer(doctor.app, name="doctor")

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging."),
) -> None:
    configure_logging(verbose)


def prompt_package_identifier() -> str:
    """Ask until the answer is a valid reversed-domain identifier."""

    while True:
        value = typer.prompt(f"Enter the Android package name (e.g., {EXAMPLE_PACKAGE_IDENTIFIER})").strip()
        if is_valid_package_identifier(value):
            return value
        err_console.print(f"[red]Please enter a valid package name (e.g., {EXAMPLE_PACKAGE_IDENTIFIER})[/red]")


def collect_request(
    project_name: str,
    *,
    app_name: str | None,
    package_name: str | None,
    version: str,
    assume_defaults: bool,
) -> ScaffoldRequest:
    if app_name is None:
        app_name = project_name if assume_defaults else typer.prompt("What is your app name?", default=project_name)
    if package_name is None:
        package_name = prompt_package_identifier()
    if not assume_defaults:
        version = typer.prompt(
            "Enter the version of the template you want to use (e.g., v1.0.0), or press Enter for latest",
            default=version,
        )

    try:
        return ScaffoldRequest(
            project_name=project_name,
            app_name=app_name,
            package_identifier=package_name,
            template_version=version,
        )
    except ValidationError as exc:
        details = "; ".join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in exc.errors())
        raise typer.BadParameter(details) from exc


def _fail(message: str, exc: Exception) -> NoReturn:
    err_console.print(f"[red]{message}[/red] {escape(str(exc))}", soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def init(
    project_name: str = typer.Argument(..., help="Directory to create the project in."),
    version: Optional[str] = typer.Option(None, "--version", "-v", help="Template version (git tag/branch)."),
    app_name: Optional[str] = typer.Option(None, "--app-name", help="App name (skips the prompt)."),
    package_name: Optional[str] = typer.Option(None, "--package-name", help="Package identifier (skips the prompt)."),
    template_repo: Optional[str] = typer.Option(None, "--template-repo", help="Override the template repository."),
    skip_install: bool = typer.Option(False, "--skip-install", help="Do not install JavaScript dependencies."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Accept defaults instead of prompting."),
    banner: bool = typer.Option(True, "--banner/--no-banner", help="Show the banner."),
) -> None:
    """Create a new React Native project with the custom template."""

    settings = AppSettings()
    if banner:
        print_banner(console)

    request = collect_request(
        project_name,
        app_name=app_name,
        package_name=package_name,
        version=version or settings.default_template_version,
        assume_defaults=yes,
    )
    repo = template_repo or settings.template_repo
    project_root = Path.cwd() / request.project_name

    console.print(f"[green]Cloning template version {request.template_version} from {repo}[/green]")
    try:
        clone_template(dest_dir=project_root, ref=request.clone_ref, repo=repo, settings=settings)
        report = rewrite_project(
            app_name=request.app_name,
            package_identifier=request.package_identifier,
            project_name=request.project_name,
            project_root=project_root,
        )
        console.print(build_report_table(report, root=project_root))

        if not skip_install:
            console.print("[green]Installing dependencies...[/green]")
            install_dependencies(project_root, settings=settings)
    except ScaffoldError as exc:
        _fail("Error while cloning or setting up the project:", exc)

    console.print("[green]Your project is ready![/green]")
    console.print(f"[green]cd {request.project_name} && {START_COMMANDS[settings.install_command]}[/green]")


@app.command()
def rewrite(
    project_root: Path = typer.Argument(..., exists=True, file_okay=False, help="Existing template checkout."),
    package_name: str = typer.Option(..., "--package-name", help="New package identifier."),
    app_name: Optional[str] = typer.Option(None, "--app-name", help="App name (defaults to the directory name)."),
    project_name: Optional[str] = typer.Option(
        None,
        "--project-name",
        help="Template project name the old Android package derives from (defaults to the directory name).",
    ),
) -> None:
    """Rewrite app name and package identifiers of an already cloned template."""

    project_name = project_name or project_root.resolve().name
    try:
        report = rewrite_project(
            app_name=app_name or project_name,
            package_identifier=package_name,
            project_name=project_name,
            project_root=project_root,
        )
    except ScaffoldError as exc:
        _fail("Error while rewriting the project:", exc)
    console.print(build_report_table(report, root=project_root))


def run() -> None:
    app()
