"""Destination path resolution for template entries."""

from __future__ import annotations

import os
from pathlib import Path

from ..core.models import TemplateRequest
from .engine import render_text
from .walker import SourceEntry


class PathResolutionError(ValueError):
    """Raised when a rendered path cannot be placed under the destination root."""


def relative_template_path(source_root: Path, entry_path: Path) -> str:
    """Return ``entry_path`` relative to ``source_root``; empty for the root itself."""
    relative = entry_path.relative_to(source_root)
    return "" if relative == Path(".") else str(relative)


def render_relative_path(
    relative: str, is_dir: bool, request: TemplateRequest
) -> str:
    """Render a relative template path into a relative destination path.

    The filename of a file entry is rendered on its own. The directory part is
    rendered and then expanded with ``request.package_to_path`` so a single
    ``{{ package }}`` token can yield several nested directories.

    Args:
        relative: Path relative to the template root
        is_dir: Whether the entry is a directory
        request: Request supplying bindings

    Returns:
        Relative destination path, empty for the template root
    """
    filename: str | None = None
    dir_template = relative
    if not is_dir:
        dir_template, filename = os.path.split(relative)
        filename = render_text(filename, request)

    rendered = request.package_to_path(render_text(dir_template, request))

    if filename is not None:
        rendered = f"{rendered}{os.sep}{filename}" if rendered else filename
    return rendered


def resolve_destination(
    source_root: Path, entry: SourceEntry, request: TemplateRequest
) -> Path:
    """Compute the destination path for a template entry.

    Args:
        source_root: Template root directory
        entry: Entry being processed
        request: Request supplying bindings and the destination root

    Returns:
        Destination path under ``request.root_dir``

    Raises:
        PathResolutionError: The rendered path is absolute or escapes the
            destination root
        jinja2.TemplateError: A path segment failed to render
    """
    relative = relative_template_path(source_root, entry.path)
    rendered = render_relative_path(relative, entry.is_dir, request)
    if not rendered:
        return request.root_dir

    rendered_path = Path(rendered)
    if rendered_path.is_absolute() or ".." in rendered_path.parts:
        raise PathResolutionError(
            f"Rendered path {rendered!r} for {relative!r} escapes {request.root_dir}"
        )
    return request.root_dir / rendered_path
