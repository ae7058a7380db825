"""Shared fixtures for the goscaffold test suite."""

from pathlib import Path

import pytest

from goscaffold.cli._config import ScaffoldConfig
from goscaffold.cli._types import License


@pytest.fixture
def config() -> ScaffoldConfig:
    return ScaffoldConfig(
        project_name="my-service",
        module_name="github.com/acme/my-service",
        author="Jane Doe",
        license=License.MIT,
        go_version="1.20",
        year=2024,
    )


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    return tmp_path / "my-service"
