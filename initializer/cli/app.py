"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.models import EntryStatus, TemplateRequest
from ..core.settings import get_settings
from ..environment import processor
from ..rendering import TemplateSourceError, create_application, list_project_types
from .parsers import parse_variables

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="initializer",
    help="Instantiate a project from a template directory tree.",
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


@app.command()
def create(
    project_type: Annotated[
        str,
        typer.Argument(help="Template directory name under the template path."),
    ],
    dest: Annotated[
        str,
        typer.Option(
            "--dest",
            help="Destination root directory (default: cwd).",
            metavar="DIR",
        ),
    ] = "",
    templates: Annotated[
        str,
        typer.Option(
            "--templates",
            help="Directory holding one template per project type (default: INITIALIZER_TEMPLATE_PATH).",
            metavar="DIR",
        ),
    ] = "",
    variables: Annotated[
        list[str],
        typer.Option(
            "--var",
            help="Template variable (format: KEY=VALUE). Repeatable.",
            metavar="KEY=VALUE",
        ),
    ] = [],
    env_prefix: Annotated[
        str,
        typer.Option(
            "--env-prefix",
            help="Also read variables from environment variables named PREFIX<KEY>.",
            metavar="PREFIX",
        ),
    ] = "",
    binary_exts: Annotated[
        list[str],
        typer.Option(
            "--binary-ext",
            help="Extension copied verbatim instead of rendered. Repeatable (default: INITIALIZER_BINARY_EXTENSIONS).",
            metavar=".EXT",
        ),
    ] = [],
    typed: Annotated[
        bool,
        typer.Option(
            "--typed",
            help="Coerce variable values that look like booleans or numbers.",
        ),
    ] = False,
    overwrite: Annotated[
        Optional[bool],
        typer.Option(
            "--overwrite/--no-overwrite",
            help="Replace files already present at the destination (default: INITIALIZER_OVERWRITE).",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Render a project template into the destination directory."""
    _configure_logging(verbose)

    settings = get_settings()
    updates: dict[str, object] = {}
    if overwrite is not None:
        updates["overwrite"] = overwrite
    if templates:
        updates["template_path"] = Path(templates)
    if binary_exts:
        updates["binary_extensions"] = binary_exts
    settings = settings.model_copy(update=updates)

    # Explicit --var values take precedence over environment bindings
    bindings = processor.collect_env_bindings(env_prefix, typed) if env_prefix else {}
    bindings.update(parse_variables(variables, typed))

    request = TemplateRequest(
        root_dir=Path(dest) if dest else Path.cwd(),
        project_type=project_type,
        variables=bindings,
    )
    logger.debug(f"Bindings: {sorted(request.variables)}")

    try:
        report = create_application(request, settings)
    except TemplateSourceError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=2) from exc

    typer.echo(
        f"{report.count(EntryStatus.CREATED)} directories, "
        f"{report.count(EntryStatus.RENDERED)} rendered, "
        f"{report.count(EntryStatus.COPIED)} copied, "
        f"{report.count(EntryStatus.SKIPPED)} skipped, "
        f"{len(report.failures)} failed"
    )
    for failure in report.failures:
        typer.echo(f"FAILED {failure.source}: {failure.error}", err=True)

    if not report.ok:
        raise typer.Exit(code=1)


@app.command("list")
def list_types(
    templates: Annotated[
        str,
        typer.Option(
            "--templates",
            help="Directory holding one template per project type (default: INITIALIZER_TEMPLATE_PATH).",
            metavar="DIR",
        ),
    ] = "",
) -> None:
    """List the available project types."""
    _configure_logging(False)

    template_path = Path(templates) if templates else get_settings().template_path
    try:
        names = list_project_types(template_path)
    except TemplateSourceError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=2) from exc

    for name in names:
        typer.echo(name)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
