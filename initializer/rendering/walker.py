"""Depth-first traversal of a template tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)


class TemplateSourceError(Exception):
    """Raised when the template tree cannot be traversed."""


@dataclass(frozen=True)
class SourceEntry:
    """A directory or file found under the template root."""

    path: Path
    is_dir: bool


def _list_children(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise TemplateSourceError(f"Cannot list template directory {directory}: {exc}") from exc


def walk_template(source_root: Path) -> Iterator[SourceEntry]:
    """Yield every directory and file under ``source_root`` in pre-order.

    The root itself is yielded first and every directory is yielded before
    any of its descendants. Siblings come in name order. Symlinked
    directories are yielded as directories but not descended into.

    Args:
        source_root: Template root directory

    Raises:
        TemplateSourceError: The root is missing, is not a directory, or a
            directory in the tree cannot be listed
    """
    if not source_root.exists():
        raise TemplateSourceError(f"Template directory not found: {source_root}")
    if not source_root.is_dir():
        raise TemplateSourceError(f"Template path is not a directory: {source_root}")

    # Listing the root up front surfaces permission errors before anything is yielded.
    root_children = _list_children(source_root)
    logger.debug(f"Walking template tree: {source_root}")

    yield SourceEntry(path=source_root, is_dir=True)

    stack: list[Iterator[Path]] = [iter(root_children)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue
        if child.is_symlink() and child.is_dir():
            # Linked directories are created but never descended into
            logger.debug(f"Not following directory symlink: {child}")
            yield SourceEntry(path=child, is_dir=True)
        elif child.is_dir():
            yield SourceEntry(path=child, is_dir=True)
            stack.append(iter(_list_children(child)))
        else:
            yield SourceEntry(path=child, is_dir=False)
