"""Shared pytest fixtures for the initializer test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from initializer.core.models import TemplateRequest
from initializer.core.settings import get_settings


# ---------------------------------------------------------------------------
# Template trees
# ---------------------------------------------------------------------------

JAR_BYTES = b"PK\x03\x04\x00\x00{{ name }}\xff\xfe\x00binary"


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        path = root / rel
        if rel.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Factory building a template tree under ``tmp_path/template``."""

    def _make(files: dict[str, str | bytes]) -> Path:
        return write_tree(tmp_path / "template", files)

    return _make


@pytest.fixture
def dest_root(tmp_path: Path) -> Path:
    """Destination root that already exists."""
    dest = tmp_path / "out"
    dest.mkdir()
    return dest


@pytest.fixture
def java_template(tmp_path: Path) -> Path:
    """A small Java project template."""
    return write_tree(
        tmp_path / "templates" / "java-library",
        {
            "build.gradle": "group = '{{ package }}'\nversion = '{{ version }}'\n",
            "src/main/java/{{ package }}/{{ name }}.java": (
                "package {{ package }};\n\npublic class {{ name }} {}\n"
            ),
            "src/test/resources/": "",
            "gradle/wrapper/gradle-wrapper.jar": JAR_BYTES,
            "README.md": "# {{ name }}\n",
        },
    )


@pytest.fixture
def request_factory(dest_root: Path) -> Callable[..., TemplateRequest]:
    def _make(**variables: object) -> TemplateRequest:
        return TemplateRequest(root_dir=dest_root, variables=variables)

    return _make


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
