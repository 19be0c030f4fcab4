"""Text normalization used for card names, property names and query values."""

from __future__ import annotations

import math
import re
from typing import Any

_SEPARATORS = re.compile(r"[_\-]+")
_DISALLOWED = re.compile(r"[^a-z0-9 ]+")
_WHITESPACE = re.compile(r"\s+")


def stringify(value: Any) -> str:
    """Render a raw JSON value the way it prints in a card record.

    None becomes an empty string, booleans are ``true``/``false``, integral
    floats drop their ``.0`` and lists are joined with commas.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(v) for v in value)
    return str(value)


def normalize(text: Any = "") -> str:
    """Canonicalize text for comparison.

    Lowercases, turns runs of ``_``/``-`` into a space, strips everything
    outside ``[a-z0-9 ]`` and collapses whitespace.

    >>> normalize("Dark-Magician_Girl")
    'dark magician girl'
    """
    s = stringify(text).lower()
    s = _SEPARATORS.sub(" ", s)
    s = _DISALLOWED.sub("", s)
    s = _WHITESPACE.sub(" ", s)
    return s.strip()


def compact_key(text: Any = "") -> str:
    """Normalized form with all spaces removed ("DarkMagician" == "Dark Magician")."""
    return normalize(text).replace(" ", "")


def format_quantity(qty: float) -> str:
    """Print a quantity without a trailing ``.0`` when it is integral."""
    if float(qty).is_integer():
        return str(int(qty))
    return str(qty)
