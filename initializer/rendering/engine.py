"""Template rendering engine."""

from __future__ import annotations

from functools import lru_cache

from jinja2 import Environment, StrictUndefined

from ..core.models import TemplateRequest


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the shared Jinja2 environment.

    Undefined variables raise instead of rendering as empty strings, so a
    template that references a missing binding fails loudly.
    """
    return Environment(
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_text(template_text: str, bindings: TemplateRequest) -> str:
    """Render a template string against the request bindings.

    Used alike for a single path segment and for a whole file body.

    Args:
        template_text: Template source
        bindings: Request whose context supplies the variables

    Returns:
        Rendered text

    Raises:
        jinja2.TemplateError: The template is malformed or references an
            undefined variable
    """
    template = get_environment().from_string(template_text)
    return template.render(bindings.as_context())
