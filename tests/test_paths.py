"""Unit tests for destination path resolution."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from jinja2 import UndefinedError

from initializer.core.models import TemplateRequest
from initializer.rendering.paths import (
    PathResolutionError,
    relative_template_path,
    render_relative_path,
    resolve_destination,
)
from initializer.rendering.walker import SourceEntry


class TestPackageToPath:
    def test_dotted_identifier_becomes_nested_path(self, tmp_path: Path) -> None:
        request = TemplateRequest(root_dir=tmp_path)
        assert request.package_to_path("com.acme.app") == os.path.join("com", "acme", "app")

    def test_flat_identifier_unchanged(self, tmp_path: Path) -> None:
        request = TemplateRequest(root_dir=tmp_path)
        assert request.package_to_path("acme") == "acme"


class TestRelativeTemplatePath:
    def test_root_is_empty(self, tmp_path: Path) -> None:
        assert relative_template_path(tmp_path, tmp_path) == ""

    def test_nested_entry(self, tmp_path: Path) -> None:
        assert relative_template_path(tmp_path, tmp_path / "a" / "b.txt") == os.path.join("a", "b.txt")

    def test_trailing_separator_on_root_is_irrelevant(self, tmp_path: Path) -> None:
        root = Path(f"{tmp_path}{os.sep}")
        assert relative_template_path(root, tmp_path / "x") == "x"


class TestRenderRelativePath:
    def test_top_level_file(self, request_factory) -> None:
        rendered = render_relative_path("{{type}}.txt", False, request_factory(type="greeting"))
        assert rendered == "greeting.txt"

    def test_package_directory_expands(self, request_factory) -> None:
        rendered = render_relative_path(
            os.path.join("{{pkg}}", "Main.java"), False, request_factory(pkg="com.acme.app")
        )
        assert rendered == os.path.join("com", "acme", "app", "Main.java")

    def test_filename_dots_are_kept(self, request_factory) -> None:
        rendered = render_relative_path(
            os.path.join("conf", "{{ name }}.config.yaml"), False, request_factory(name="app")
        )
        assert rendered == os.path.join("conf", "app.config.yaml")

    def test_directory_entry_renders_whole_path(self, request_factory) -> None:
        rendered = render_relative_path(
            os.path.join("src", "{{ pkg }}"), True, request_factory(pkg="a.b.c")
        )
        assert rendered == os.path.join("src", "a", "b", "c")

    def test_flat_segment_single_level(self, request_factory) -> None:
        rendered = render_relative_path("{{ pkg }}", True, request_factory(pkg="acme"))
        assert rendered == "acme"

    def test_root_renders_empty(self, request_factory) -> None:
        assert render_relative_path("", True, request_factory()) == ""

    def test_undefined_name_raises(self, request_factory) -> None:
        with pytest.raises(UndefinedError):
            render_relative_path("{{ nope }}.txt", False, request_factory())


class TestResolveDestination:
    def test_root_entry_is_destination_root(self, tmp_path: Path, request_factory) -> None:
        request = request_factory()
        entry = SourceEntry(path=tmp_path, is_dir=True)
        assert resolve_destination(tmp_path, entry, request) == request.root_dir

    def test_file_under_package(self, tmp_path: Path, request_factory) -> None:
        request = request_factory(pkg="com.acme.app")
        entry = SourceEntry(path=tmp_path / "{{pkg}}" / "Main.java", is_dir=False)
        assert resolve_destination(tmp_path, entry, request) == (
            request.root_dir / "com" / "acme" / "app" / "Main.java"
        )

    def test_escaping_path_rejected(self, tmp_path: Path, request_factory) -> None:
        request = request_factory(name="../../etc/passwd")
        entry = SourceEntry(path=tmp_path / "{{ name }}", is_dir=False)
        with pytest.raises(PathResolutionError):
            resolve_destination(tmp_path, entry, request)

    def test_absolute_path_rejected(self, tmp_path: Path, request_factory) -> None:
        request = request_factory(where="/tmp/elsewhere")
        entry = SourceEntry(path=tmp_path / "{{ where }}", is_dir=True)
        with pytest.raises(PathResolutionError):
            resolve_destination(tmp_path, entry, request)
