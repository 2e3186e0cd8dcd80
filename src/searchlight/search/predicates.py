"""Search predicates – blankness and boolean coercion of raw option values.

The two predicates disagree on purpose::

    value      is_blank   boolean_coerce
    None       True       False
    ""  / " "  True       False
    False      False      False
    0          False      False
    "0"        False      False
    "false"    False      False

``is_blank`` decides whether a search method runs; ``boolean_coerce`` backs the
generated ``is_<option>`` accessors. ``False``, ``0`` and ``"0"`` are real
values to search on even though they read as false.
"""
from __future__ import annotations

from numbers import Number
from typing import Any

_FALSE_STRINGS = frozenset({"0", "false"})


def is_blank(value: Any) -> bool:
    """Return ``True`` for ``None`` and for empty or whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def boolean_coerce(value: Any) -> bool:
    """Coerce a raw option value the way a form checkbox would be read."""
    if value is None or value is False:
        return False
    if isinstance(value, str):
        text = value.strip().lower()
        return bool(text) and text not in _FALSE_STRINGS
    if isinstance(value, Number):
        return value != 0
    return True


__all__ = ["boolean_coerce", "is_blank"]
