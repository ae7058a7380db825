"""Unit tests for the project renderer."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
import re

import pytest

from goscaffold.cli import _renderer
from goscaffold.cli._config import ScaffoldConfig
from goscaffold.cli._renderer import (
    DIRECTORIES,
    FILES,
    TemplateError,
    render_files,
    render_project,
)
from goscaffold.cli._types import License

_PLACEHOLDER_RE = re.compile(r"__[A-Z][A-Z0-9_]*__")


class TestRenderProject:
    def test_creates_directory_structure(self, project_dir: Path, config: ScaffoldConfig) -> None:
        created = render_project(project_dir, config)

        assert project_dir.is_dir()
        for directory in DIRECTORIES:
            assert (project_dir / directory).is_dir()
            assert f"{directory}/" in created

    def test_creates_all_files(self, project_dir: Path, config: ScaffoldConfig) -> None:
        created = render_project(project_dir, config)

        for name in [*FILES, "LICENSE"]:
            assert (project_dir / name).is_file()
            assert name in created

    def test_files_listed_before_directories(
        self, project_dir: Path, config: ScaffoldConfig
    ) -> None:
        created = render_project(project_dir, config)

        assert created[: len(FILES)] == list(FILES)
        assert created[len(FILES)] == "LICENSE"
        assert all(entry.endswith("/") for entry in created[len(FILES) + 1 :])

    def test_raises_on_existing_directory(self, project_dir: Path, config: ScaffoldConfig) -> None:
        project_dir.mkdir()

        with pytest.raises(FileExistsError):
            render_project(project_dir, config)

    def test_overwrite_replaces_scaffold_files(
        self, project_dir: Path, config: ScaffoldConfig
    ) -> None:
        project_dir.mkdir()
        (project_dir / "go.mod").write_text("stale")
        (project_dir / "notes.txt").write_text("keep me")

        render_project(project_dir, config, overwrite=True)

        assert (project_dir / "go.mod").read_text().startswith("module github.com/acme/my-service")
        assert (project_dir / "notes.txt").read_text() == "keep me"

    def test_rerun_with_overwrite_is_stable(
        self, project_dir: Path, config: ScaffoldConfig
    ) -> None:
        first = render_project(project_dir, config)
        snapshot = {name: (project_dir / name).read_text() for name in [*FILES, "LICENSE"]}

        second = render_project(project_dir, config, overwrite=True)

        assert first == second
        for name, content in snapshot.items():
            assert (project_dir / name).read_text() == content

    def test_no_placeholders_left(self, project_dir: Path, config: ScaffoldConfig) -> None:
        render_project(project_dir, config)

        for name in [*FILES, "LICENSE"]:
            content = (project_dir / name).read_text()
            assert not _PLACEHOLDER_RE.search(content), name


class TestRenderedContent:
    def test_go_mod(self, config: ScaffoldConfig) -> None:
        go_mod = render_files(config)["go.mod"]
        assert go_mod == "module github.com/acme/my-service\n\ngo 1.20\n"

    def test_main_go(self, config: ScaffoldConfig) -> None:
        main_go = render_files(config)["cmd/app/main.go"]
        assert main_go.startswith("package main\n")
        assert 'fmt.Println("Hello, World!")' in main_go

    def test_config_yaml(self, config: ScaffoldConfig) -> None:
        config_yaml = render_files(config)["configs/config.yaml"]
        assert "port: 8080" in config_yaml
        assert "dbname: mydb" in config_yaml

    def test_dockerfile_uses_go_version(self, config: ScaffoldConfig) -> None:
        newer = replace(config, go_version="1.22")
        dockerfile = render_files(newer)["Dockerfile"]
        assert "FROM golang:1.22-alpine" in dockerfile
        assert "RUN go build -o main ./cmd/app" in dockerfile

    def test_makefile_recipes_use_tabs(self, config: ScaffoldConfig) -> None:
        makefile = render_files(config)["Makefile"]
        assert "\tgo build -o bin/app ./cmd/app" in makefile
        assert "\tdocker build -t my-service ." in makefile
        for line in makefile.splitlines():
            assert not line.startswith(" "), line

    def test_makefile_image_name_is_lowercase(self, config: ScaffoldConfig) -> None:
        makefile = render_files(replace(config, project_name="MyService"))["Makefile"]
        assert "\tdocker build -t myservice ." in makefile
        assert "\tdocker run -p 8080:8080 myservice" in makefile

    def test_readme(self, config: ScaffoldConfig) -> None:
        readme = render_files(config)["README.md"]
        assert readme.startswith("# my-service\n")
        assert "`github.com/acme/my-service`" in readme
        assert "Copyright (c) 2024 Jane Doe" in readme

    def test_gitignore(self, config: ScaffoldConfig) -> None:
        assert "bin/" in render_files(config)[".gitignore"].splitlines()

    @pytest.mark.parametrize(
        ("license_", "marker"),
        [
            (License.MIT, "MIT License"),
            (License.BSD_3_CLAUSE, "BSD 3-Clause License"),
            (License.APACHE_2_0, "Apache License, Version 2.0"),
            (License.UNLICENSE, "public domain"),
        ],
    )
    def test_license_text(self, config: ScaffoldConfig, license_: License, marker: str) -> None:
        text = render_files(replace(config, license=license_))["LICENSE"]
        assert marker in text

    @pytest.mark.parametrize(
        "license_", [License.MIT, License.BSD_3_CLAUSE, License.APACHE_2_0]
    )
    def test_license_copyright_line(self, config: ScaffoldConfig, license_: License) -> None:
        text = render_files(replace(config, license=license_))["LICENSE"]
        assert "2024" in text
        assert "Jane Doe" in text


class TestTemplateErrors:
    def test_unresolved_placeholder_raises(
        self, monkeypatch: pytest.MonkeyPatch, config: ScaffoldConfig
    ) -> None:
        monkeypatch.setattr(_renderer, "_read", lambda pkg, filename: "x = __UNKNOWN__\n")

        with pytest.raises(TemplateError, match="__UNKNOWN__"):
            render_files(config)

    def test_placeholder_like_values_pass_through(self, config: ScaffoldConfig) -> None:
        text = render_files(replace(config, author="__DUNDER__ Corp"))["LICENSE"]
        assert "__DUNDER__ Corp" in text

    def test_template_error_writes_nothing(
        self, monkeypatch: pytest.MonkeyPatch, project_dir: Path, config: ScaffoldConfig
    ) -> None:
        monkeypatch.setattr(_renderer, "_read", lambda pkg, filename: "__BROKEN__")

        with pytest.raises(TemplateError):
            render_project(project_dir, config)

        assert not project_dir.exists()
