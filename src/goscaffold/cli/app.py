"""Typer CLI application for goscaffold."""

from __future__ import annotations

import getpass
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import goscaffold
from goscaffold.cli._config import DEFAULT_GO_VERSION, ScaffoldConfig, validate_go_version
from goscaffold.cli._prompts import prompt_author, prompt_license, prompt_module, prompt_tidy
from goscaffold.cli._renderer import TemplateError, render_project
from goscaffold.cli._tidy import TidyError, run_go_mod_tidy
from goscaffold.cli._types import License

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"goscaffold {goscaffold.__version__}")
        raise Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """goscaffold — scaffolding tool for Go service projects."""


_FILE_DESCRIPTIONS: dict[str, str] = {
    "go.mod": "module descriptor",
    "cmd/app/main.go": "entry point",
    "configs/config.yaml": "configuration",
    "Dockerfile": "container build",
    "Makefile": "build automation",
    "README.md": "readme",
    ".gitignore": "ignore rules",
    "LICENSE": "license text",
}


def _error(message: str) -> None:
    _console.print(f"[bold red]Error:[/] {escape(message)}")


def _echo_answer(question: str, answer: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(answer)}")
    _console.print("[dim]│[/]")


def _default_author() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "author"


def _print_licenses() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available licenses")
    _console.print("[dim]│[/]")
    for lic in License:
        _console.print(f"[dim]│[/]  [bold cyan]{lic.value:<14}[/] [bold]{lic.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 14} [dim]{lic.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_licenses_callback(value: bool) -> None:
    if value:
        _print_licenses()
        raise Exit()


@app.command()
def create(
    project_name: Annotated[str, Argument(help="Name for the new project directory")],
    module_name: Annotated[
        str | None,
        Option(
            "--module",
            "-m",
            help="Go module path (e.g. github.com/user/pkg). Defaults to the project name.",
            show_default=False,
        ),
    ] = None,
    author: Annotated[
        str | None,
        Option(
            "--author",
            "-a",
            help="Copyright holder for LICENSE and README.md.",
            envvar="GOSCAFFOLD_AUTHOR",
            show_default=False,
        ),
    ] = None,
    license_str: Annotated[
        str | None,
        Option(
            "--license",
            "-L",
            help="Project license. Run with --list-licenses / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    go_version: Annotated[
        str, Option("--go-version", help="Go version for go.mod and the Dockerfile")
    ] = DEFAULT_GO_VERSION,
    tidy: Annotated[
        bool | None,
        Option("--tidy/--no-tidy", help="Run 'go mod tidy' in the new project"),
    ] = None,
    force: Annotated[
        bool,
        Option("--force", "-f", help="Overwrite scaffold files in an existing directory."),
    ] = False,
    list_licenses: Annotated[
        bool,
        Option(
            "--list-licenses",
            "-l",
            help="List all available licenses and exit.",
            callback=_list_licenses_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Go project."""
    project_dir = Path(project_name)

    if project_dir.exists() and not force:
        _error(f"Directory '{project_name}' already exists. Use --force to overwrite.")
        raise Exit(code=1)

    license_: License | None = None
    if license_str is not None:
        try:
            license_ = License(license_str)
        except ValueError:
            valid = ", ".join(f"'{lic.value}'" for lic in License)
            _console.print()
            _console.print(
                f"[bold red]Error:[/] [bold]{escape(repr(license_str))}[/] is not a valid license."
            )
            _console.print(f"[dim]Valid values:[/] {valid}")
            _print_licenses()
            raise Exit(code=2) from None

    try:
        validate_go_version(go_version)
    except ValueError as e:
        _error(str(e))
        raise Exit(code=2) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  goscaffold v{goscaffold.__version__}")
    _console.print("[dim]│[/]")

    # Interactive prompts for missing options
    if module_name is None:
        module_name = prompt_module(default=project_dir.name)
    else:
        _echo_answer("Go module path", module_name)

    if author is None:
        author = prompt_author(default=_default_author())
    else:
        _echo_answer("Author", author)

    if license_ is None:
        license_ = prompt_license()
    else:
        _echo_answer("Choose a license", license_.label)

    if tidy is None:
        tidy = prompt_tidy()
    else:
        _echo_answer("Run go mod tidy?", "Yes" if tidy else "No")

    try:
        config = ScaffoldConfig(
            project_name=project_dir.name,
            module_name=module_name,
            author=author,
            license=license_,
            go_version=go_version,
        )
    except ValueError as e:
        _error(str(e))
        raise Exit(code=2) from None

    # Render
    _console.print(f"[bold green]◇[/]  Creating {escape(project_name)}/...")

    try:
        created = render_project(project_dir, config, overwrite=force)
    except (OSError, TemplateError) as e:
        _error(str(e))
        raise Exit(code=1) from None

    for name in created:
        desc = _FILE_DESCRIPTIONS.get(name, "")
        desc_str = f" [dim]— {desc}[/]" if desc else ""
        _console.print(f"[dim]│[/]  {name}{desc_str}")

    _console.print("[dim]│[/]")

    if tidy:
        _console.print("[bold green]◇[/]  Running go mod tidy...")
        try:
            run_go_mod_tidy(project_dir)
        except TidyError as e:
            _error(str(e))
            raise Exit(code=1) from None
        _console.print("[dim]│[/]")

    _console.print(f"[bold cyan]●[/]  Done! cd {escape(project_name)} && make run")
    _console.print()
