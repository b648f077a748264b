# lattice/utils/serialization.py
"""Conversion of SDK values into plain JSON-compatible structures."""
from __future__ import annotations

from enum import Enum
from typing import Any, Mapping
from uuid import UUID


def to_json_value(value: Any) -> Any:
    """
    Recursively convert ``value`` for transport.

    Models are rendered through their ``to_dict()``, enums through their
    value, UUIDs as strings, and tuples/lists/sets as lists. Sets are sorted
    so the output is stable.
    """
    if hasattr(value, "to_dict") and callable(value.to_dict):
        return to_json_value(value.to_dict())
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Mapping):
        return {str(k): to_json_value(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted((to_json_value(v) for v in value), key=repr)
    if isinstance(value, (list, tuple)):
        return [to_json_value(v) for v in value]
    return value
