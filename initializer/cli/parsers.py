"""CLI argument parsers and validators."""

from __future__ import annotations

from typing import Any

import typer

from ..environment.processor import coerce_value


def parse_variable(value: str, typed: bool = False) -> tuple[str, Any]:
    """Parse a variable argument in format KEY=VALUE.

    The value is kept verbatim unless ``typed`` is set, in which case it is
    coerced to bool, int or float where it looks like one.
    """
    if "=" not in value:
        raise typer.BadParameter(f"Must be KEY=VALUE, got: {value!r}")
    key, raw = value.split("=", 1)
    key = key.strip()
    if not key.isidentifier():
        raise typer.BadParameter(f"Invalid variable name: {key!r}")
    return key, coerce_value(raw) if typed else raw


def parse_variables(values: list[str], typed: bool = False) -> dict[str, Any]:
    """Parse repeated KEY=VALUE arguments; later keys win."""
    return dict(parse_variable(value, typed) for value in values)
