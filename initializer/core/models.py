"""Domain models for template tree rendering requests and results."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TemplateRequest(BaseModel):
    """Bindings for a single project instantiation."""

    model_config = ConfigDict(frozen=True)

    root_dir: Path = Field(..., description="Destination root directory")
    project_type: str | None = Field(
        default=None, description="Template directory name under the template path"
    )
    variables: dict[str, Any] = Field(
        default_factory=dict, description="Named template variables"
    )

    def as_context(self) -> dict[str, Any]:
        """Return the mapping templates are rendered against."""
        context: dict[str, Any] = {
            "root_dir": str(self.root_dir),
            "project_type": self.project_type,
        }
        context.update(self.variables)
        return context

    def package_to_path(self, value: str) -> str:
        """Convert a dotted identifier such as ``com.acme.app`` to ``com/acme/app``."""
        return value.replace(".", os.sep)


def normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = f".{ext}"
    return ext


class RenderOptions(BaseModel):
    """Knobs controlling how entries are materialized."""

    model_config = ConfigDict(frozen=True)

    binary_extensions: frozenset[str] = Field(
        default=frozenset({".jar"}),
        description="File extensions copied verbatim instead of rendered",
    )
    overwrite: bool = Field(
        default=True, description="Replace files already present at the destination"
    )

    @field_validator("binary_extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: Iterable[str]) -> frozenset[str]:
        return frozenset(e for e in map(normalize_extension, value) if e)


class EntryKind(str, Enum):
    """How a source entry is materialized."""

    DIRECTORY = "directory"
    BINARY = "binary"
    TEXT = "text"


class EntryStatus(str, Enum):
    """Outcome of materializing a single entry."""

    CREATED = "created"
    COPIED = "copied"
    RENDERED = "rendered"
    SKIPPED = "skipped"
    FAILED = "failed"


class EntryResult(BaseModel):
    """Result of processing one source entry."""

    source: Path
    destination: Path | None = None
    kind: EntryKind | None = None
    status: EntryStatus
    error: str | None = None


class RenderReport(BaseModel):
    """Per-entry results of a full tree rendering."""

    source_root: Path
    dest_root: Path
    entries: list[EntryResult] = Field(default_factory=list)

    @property
    def failures(self) -> list[EntryResult]:
        return [e for e in self.entries if e.status is EntryStatus.FAILED]

    @property
    def ok(self) -> bool:
        return not self.failures

    def count(self, status: EntryStatus) -> int:
        return sum(1 for e in self.entries if e.status is status)
