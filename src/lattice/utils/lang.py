# lattice/utils/lang.py
"""
Predicates over plain Python values.

None of these raise. "Array" means a ``list`` or ``tuple``; strings are
never treated as arrays.
"""
from __future__ import annotations

from typing import Any, Mapping


def is_defined(value: Any) -> bool:
    return value is not None


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_empty_array(value: Any) -> bool:
    return is_array(value) and len(value) == 0


def is_non_empty_array(value: Any) -> bool:
    return is_array(value) and len(value) > 0


def is_non_empty_object(value: Any) -> bool:
    return isinstance(value, Mapping) and len(value) > 0


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_non_empty_string(value: Any) -> bool:
    """True for strings with at least one non-whitespace character."""
    return isinstance(value, str) and len(value.strip()) > 0


def is_non_empty_string_array(value: Any) -> bool:
    return is_non_empty_array(value) and all(is_non_empty_string(v) for v in value)


def dedupe(values: Any) -> tuple:
    """Drop repeated values, keeping the first occurrence of each."""
    return tuple(dict.fromkeys(values))
