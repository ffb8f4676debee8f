"""Materialization of resolved template entries on disk."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from jinja2 import TemplateError

from ..core.models import (
    EntryKind,
    EntryResult,
    EntryStatus,
    RenderOptions,
    TemplateRequest,
)
from .engine import render_text
from .io import atomic_write_text, copy_binary
from .walker import SourceEntry

logger = logging.getLogger(__name__)


def classify(entry: SourceEntry, binary_extensions: frozenset[str]) -> EntryKind:
    """Decide how an entry is materialized.

    Args:
        entry: Entry to classify
        binary_extensions: Lower-case extensions copied verbatim

    Returns:
        The entry kind
    """
    if entry.is_dir:
        return EntryKind.DIRECTORY
    if entry.path.suffix.lower() in binary_extensions:
        return EntryKind.BINARY
    return EntryKind.TEXT


def _create_directory(destination: Path) -> EntryStatus:
    destination.mkdir(parents=True, exist_ok=True)
    return EntryStatus.CREATED


def _copy_binary(source: Path, destination: Path) -> EntryStatus:
    copy_binary(source, destination)
    return EntryStatus.COPIED


def _render_text(source: Path, destination: Path, request: TemplateRequest) -> EntryStatus:
    with source.open(encoding="utf-8", newline="") as handle:
        template_text = handle.read()
    rendered = render_text(template_text, request)
    atomic_write_text(destination, rendered, mode=stat.S_IMODE(source.stat().st_mode))
    return EntryStatus.RENDERED


def materialize(
    entry: SourceEntry,
    destination: Path,
    request: TemplateRequest,
    options: RenderOptions,
) -> EntryResult:
    """Create a directory, copy a binary file, or render a text file.

    Failures are returned as a ``failed`` result rather than raised so the
    caller can move on to the next entry.

    Args:
        entry: Source entry
        destination: Resolved destination path
        request: Request supplying bindings
        options: Materialization options

    Returns:
        Result describing what happened to the entry
    """
    kind = classify(entry, options.binary_extensions)

    if (
        kind is not EntryKind.DIRECTORY
        and not options.overwrite
        and destination.exists()
    ):
        logger.info(f"Skipping existing file: {destination}")
        return EntryResult(
            source=entry.path,
            destination=destination,
            kind=kind,
            status=EntryStatus.SKIPPED,
        )

    try:
        if kind is EntryKind.DIRECTORY:
            status = _create_directory(destination)
        elif kind is EntryKind.BINARY:
            status = _copy_binary(entry.path, destination)
        else:
            status = _render_text(entry.path, destination, request)
    except (OSError, UnicodeDecodeError, TemplateError) as exc:
        logger.error(f"Could not materialize {entry.path} → {destination}: {exc}")
        return EntryResult(
            source=entry.path,
            destination=destination,
            kind=kind,
            status=EntryStatus.FAILED,
            error=f"{type(exc).__name__}: {exc}",
        )

    logger.debug(f"{status.value.capitalize()} {entry.path} → {destination}")
    return EntryResult(
        source=entry.path, destination=destination, kind=kind, status=status
    )
