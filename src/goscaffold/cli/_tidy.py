"""Dependency resolution for generated projects via `go mod tidy`."""

from __future__ import annotations

from pathlib import Path
import shutil
import subprocess

TIDY_COMMAND: list[str] = ["go", "mod", "tidy"]


class TidyError(RuntimeError):
    """`go mod tidy` could not be run or exited with an error."""


def run_go_mod_tidy(project_dir: Path) -> None:
    """Run `go mod tidy` inside *project_dir*, streaming its output to the terminal."""
    go = shutil.which(TIDY_COMMAND[0])
    if go is None:
        raise TidyError("'go' executable not found on PATH.")

    try:
        subprocess.run([go, *TIDY_COMMAND[1:]], cwd=project_dir, check=True)
    except subprocess.CalledProcessError as e:
        raise TidyError(f"'go mod tidy' exited with status {e.returncode}.") from e
