"""Tree rendering: walk, resolve and materialize a template directory."""

from __future__ import annotations

import logging
from pathlib import Path

from jinja2 import TemplateError

from ..core.models import (
    EntryResult,
    EntryStatus,
    RenderOptions,
    RenderReport,
    TemplateRequest,
)
from ..core.settings import Settings
from .materializer import classify, materialize
from .paths import PathResolutionError, resolve_destination
from .walker import TemplateSourceError, walk_template

logger = logging.getLogger(__name__)


def render_tree(
    source_root: Path,
    request: TemplateRequest,
    options: RenderOptions | None = None,
) -> RenderReport:
    """Render every entry of a template tree under ``request.root_dir``.

    Entries are processed one at a time in pre-order, so a directory exists
    before anything inside it is written. A failing entry is recorded in the
    report and the walk continues.

    Args:
        source_root: Template root directory
        request: Request supplying bindings and the destination root
        options: Materialization options (defaults apply when omitted)

    Returns:
        Report with one result per entry

    Raises:
        TemplateSourceError: The template tree cannot be traversed
    """
    options = options or RenderOptions()
    report = RenderReport(source_root=source_root, dest_root=request.root_dir)
    logger.info(f"Rendering template {source_root} → {request.root_dir}")

    for entry in walk_template(source_root):
        try:
            destination = resolve_destination(source_root, entry, request)
        except (PathResolutionError, TemplateError) as exc:
            logger.error(f"Could not resolve destination for {entry.path}: {exc}")
            report.entries.append(
                EntryResult(
                    source=entry.path,
                    kind=classify(entry, options.binary_extensions),
                    status=EntryStatus.FAILED,
                    error=f"{type(exc).__name__}: {exc}",
                )
            )
            continue
        report.entries.append(materialize(entry, destination, request, options))

    failures = report.failures
    if failures:
        logger.warning(
            f"Rendered {len(report.entries) - len(failures)} of "
            f"{len(report.entries)} entries; {len(failures)} failed"
        )
    else:
        logger.info(f"Successfully rendered {len(report.entries)} entries")
    return report


def list_project_types(template_path: Path) -> list[str]:
    """Return the template directory names available under ``template_path``."""
    if not template_path.is_dir():
        raise TemplateSourceError(f"Template path is not a directory: {template_path}")
    return sorted(
        p.name
        for p in template_path.iterdir()
        if p.is_dir() and not p.name.startswith(".")
    )


def create_application(request: TemplateRequest, settings: Settings) -> RenderReport:
    """Instantiate the template named by ``request.project_type``.

    Args:
        request: Request naming the project type and supplying bindings
        settings: Settings supplying the template path and options

    Returns:
        Report of the rendered tree

    Raises:
        TemplateSourceError: No project type was given or its template
            directory cannot be traversed
    """
    if not request.project_type:
        raise TemplateSourceError("A project type is required to locate the template")

    source_root = settings.template_path / request.project_type
    return render_tree(source_root, request, settings.render_options())


__all__ = [
    "create_application",
    "list_project_types",
    "render_tree",
]
