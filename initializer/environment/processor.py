"""Template bindings sourced from environment variables."""

from __future__ import annotations

import logging
import os
import re
from typing import Any

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"^-?\d+$")
_FLOAT_PATTERN = re.compile(r"^-?\d+\.\d+$")


def coerce_value(value: str) -> bool | int | float | str:
    """Coerce a string value to its appropriate type.

    Dotted identifiers such as ``com.acme`` stay strings; only plain decimal
    numbers become floats.

    Args:
        value: String value to coerce

    Returns:
        Coerced value (bool, int, float, or str)
    """
    value_lower = value.lower()

    if value_lower in ("true", "false"):
        return value_lower == "true"

    if _INT_PATTERN.match(value):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return value

    if _FLOAT_PATTERN.match(value):
        try:
            return float(value)
        except (ValueError, OverflowError):
            return value

    return value


def collect_env_bindings(prefix: str, typed: bool = False) -> dict[str, Any]:
    """Collect template bindings from prefixed environment variables.

    ``PREFIX_GROUP_ID=com.acme`` becomes the binding ``group_id``.

    Args:
        prefix: Variable prefix (e.g., "INIT_VAR_")
        typed: Coerce values with ``coerce_value`` instead of keeping the raw text

    Returns:
        Dictionary with lower-cased, prefix-stripped keys
    """
    prefix_upper = prefix.upper()
    bindings: dict[str, Any] = {
        key[len(prefix_upper):].lower(): coerce_value(value) if typed else value
        for key, value in os.environ.items()
        if key.upper().startswith(prefix_upper) and len(key) > len(prefix_upper)
    }

    logger.debug(f"Collected environment bindings: {sorted(bindings)}")
    return bindings
