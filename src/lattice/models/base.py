# lattice/models/base.py
"""
Shared behaviour for the SDK's value objects.

Models are frozen dataclasses. Equality and hashing are structural and are
derived from a canonical JSON rendering of ``to_dict()`` (sorted keys), so
two instances built from the same values are interchangeable in sets and
dict keys even though they are distinct objects.
"""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping

from lattice.core.exceptions import InvalidParameterError
from lattice.utils.serialization import to_json_value
from lattice.utils.validation import parse_enum


class ValueObject(ABC):
    """Base for immutable models with a wire representation."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    def to_json(self) -> str:
        return json.dumps(to_json_value(self.to_dict()), sort_keys=True, separators=(",", ":"))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_json() == other.to_json()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.to_json()))


def get_property(candidate: Any, attr: str, key: str | None = None) -> Any:
    """
    Read a field from a model instance or a plain mapping.

    Mappings are looked up by their wire ``key`` (camelCase) first and then by
    ``attr``; other objects by attribute. Missing fields read as None.
    """
    if isinstance(candidate, Mapping):
        if key is not None and key in candidate:
            return candidate[key]
        return candidate.get(attr)
    return getattr(candidate, attr, None)


def has_property(candidate: Any, attr: str, key: str | None = None) -> bool:
    if isinstance(candidate, Mapping):
        return (key is not None and key in candidate) or attr in candidate
    return hasattr(candidate, attr)


def coerce_enum_field(model: Any, attr: str, enum_cls: type[Enum], field: str | None = None) -> None:
    """Replace ``model.attr`` on a frozen dataclass with its ``enum_cls`` member."""
    parsed = parse_enum(enum_cls, getattr(model, attr))
    if parsed is None:
        raise InvalidParameterError(field or attr, f"must be a valid {enum_cls.__name__}")
    object.__setattr__(model, attr, parsed)


def coerce_enum_tuple_field(model: Any, attr: str, enum_cls: type[Enum], field: str | None = None) -> None:
    """Like :func:`coerce_enum_field` for tuple-valued fields."""
    parsed = tuple(parse_enum(enum_cls, v) for v in getattr(model, attr))
    if any(p is None for p in parsed):
        raise InvalidParameterError(field or attr, f"must only contain valid {enum_cls.__name__} values")
    object.__setattr__(model, attr, parsed)
