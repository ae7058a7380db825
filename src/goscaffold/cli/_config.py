"""Configuration dataclass for a single scaffold run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
import re

from goscaffold.cli._types import License

DEFAULT_GO_VERSION = "1.20"

_GO_VERSION_RE = re.compile(r"^\d+\.\d+(\.\d+)?$")
_WHITESPACE_RE = re.compile(r"\s")


def validate_go_version(go_version: str) -> None:
    """Raise `ValueError` unless *go_version* looks like MAJOR.MINOR[.PATCH]."""
    if not _GO_VERSION_RE.match(go_version):
        raise ValueError(f"go version must look like MAJOR.MINOR[.PATCH], got {go_version!r}.")


@dataclass(kw_only=True)
class ScaffoldConfig:
    """
    Values substituted into the project templates.

    Attributes:
        project_name: Name of the project directory. Lowercased for the image name.
        module_name: Go module path written to go.mod.
        author: Copyright holder written to LICENSE and README.md.
        license: License whose text is written to LICENSE.
        go_version: Go toolchain version for go.mod and the Dockerfile.
        year: Copyright year.
    """

    project_name: str
    module_name: str
    author: str
    license: License = License.MIT
    go_version: str = DEFAULT_GO_VERSION
    year: int = field(default_factory=lambda: date.today().year)

    def __post_init__(self) -> None:
        if not self.project_name or _WHITESPACE_RE.search(self.project_name):
            raise ValueError(
                f"project name must be non-empty without whitespace, got {self.project_name!r}."
            )
        if not self.module_name or _WHITESPACE_RE.search(self.module_name):
            raise ValueError(
                f"module name must be non-empty without whitespace, got {self.module_name!r}."
            )
        if self.module_name.startswith("/") or self.module_name.endswith("/"):
            raise ValueError(
                f"module name must not start or end with '/', got {self.module_name!r}."
            )
        if "//" in self.module_name:
            raise ValueError(f"module name must not contain '//', got {self.module_name!r}.")
        if not self.author.strip():
            raise ValueError("author must be non-empty.")
        validate_go_version(self.go_version)
        if self.year <= 0:
            raise ValueError(f"year must be positive, got {self.year}.")

    @property
    def variables(self) -> dict[str, str]:
        """Placeholder -> replacement mapping used by the renderer."""
        return {
            "__MODULE_NAME__": self.module_name,
            "__PROJECT_NAME__": self.project_name,
            "__IMAGE_NAME__": self.project_name.lower(),
            "__YEAR__": str(self.year),
            "__AUTHOR__": self.author.strip(),
            "__GO_VERSION__": self.go_version,
        }
