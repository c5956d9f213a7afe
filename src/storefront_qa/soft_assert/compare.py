"""Deep equality used by soft checks."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def values_equal(actual: Any, expected: Any) -> bool:
    """
    Structural equality.

    Mappings compare key sets and values recursively, lists and tuples
    compare length and items pairwise, booleans only equal booleans.
    Everything else falls back to ``==``; an ``==`` whose result has no
    truth value (array-like results) counts as a mismatch.
    """
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected

    if isinstance(actual, Mapping) and isinstance(expected, Mapping):
        if set(actual.keys()) != set(expected.keys()):
            return False
        return all(values_equal(actual[key], expected[key]) for key in actual)

    if isinstance(actual, (list, tuple)) and isinstance(expected, (list, tuple)):
        if len(actual) != len(expected):
            return False
        return all(values_equal(a, e) for a, e in zip(actual, expected, strict=True))

    try:
        return bool(actual == expected)
    except (TypeError, ValueError):
        return False
