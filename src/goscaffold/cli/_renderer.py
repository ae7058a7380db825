"""Orchestrates template rendering to files on disk."""

from __future__ import annotations

import importlib.resources as ilr
from pathlib import Path
import re

from goscaffold.cli._config import ScaffoldConfig

_SCAFFOLD_PKG = "goscaffold.cli.scaffold"
_LICENSES_PKG = "goscaffold.cli.scaffold.licenses"

_PLACEHOLDER_RE = re.compile(r"__[A-Z][A-Z0-9_]*__")

DIRECTORIES: list[str] = [
    "cmd/app",
    "internal/handler",
    "internal/service",
    "internal/repository",
    "pkg",
    "configs",
]

# Target path -> template resource name. LICENSE is resolved per license.
FILES: dict[str, str] = {
    "go.mod": "go.mod.tmpl",
    "cmd/app/main.go": "main.go.tmpl",
    "configs/config.yaml": "config.yaml.tmpl",
    "Dockerfile": "Dockerfile.tmpl",
    "Makefile": "Makefile.tmpl",
    "README.md": "README.md.tmpl",
    ".gitignore": "gitignore.tmpl",
}


class TemplateError(ValueError):
    """A template references a placeholder with no value."""


def _read(pkg: str, filename: str) -> str:
    return ilr.files(pkg).joinpath(filename).read_text(encoding="utf-8")


def _substitute(name: str, content: str, variables: dict[str, str]) -> str:
    # Validate the raw template, not the substituted output.
    unknown = sorted(set(_PLACEHOLDER_RE.findall(content)) - variables.keys())
    if unknown:
        raise TemplateError(f"unresolved placeholders in {name}: {', '.join(unknown)}")

    for placeholder, value in variables.items():
        content = content.replace(placeholder, value)
    return content


def render_files(config: ScaffoldConfig) -> dict[str, str]:
    """Render every template in memory. Returns relative path -> content."""
    variables = config.variables
    rendered = {
        path: _substitute(path, _read(_SCAFFOLD_PKG, resource), variables)
        for path, resource in FILES.items()
    }
    rendered["LICENSE"] = _substitute(
        "LICENSE", _read(_LICENSES_PKG, config.license.template), variables
    )
    return rendered


def render_project(
    project_dir: Path,
    config: ScaffoldConfig,
    overwrite: bool = False,
) -> list[str]:
    """Render the scaffold to files on disk. Returns list of created file/dir names."""
    if project_dir.exists() and not overwrite:
        raise FileExistsError(f"Directory '{project_dir}' already exists.")

    # Render before touching the disk so a bad template leaves nothing behind.
    files = render_files(config)

    project_dir.mkdir(parents=True, exist_ok=overwrite)
    for directory in DIRECTORIES:
        (project_dir / directory).mkdir(parents=True, exist_ok=True)

    for name, content in files.items():
        path = project_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    return [*files.keys(), *(f"{d}/" for d in DIRECTORIES)]
