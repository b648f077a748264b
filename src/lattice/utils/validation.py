# lattice/utils/validation.py
"""
Predicates for domain primitives: UUIDs and enum members.

Enum parsing lives here too so builders and API modules share one rule for
what counts as a valid ``PermissionType``/``PrincipalType``/...
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Any, Callable, TypeVar
from uuid import UUID

from lattice.constants.types import ActionType, GrantType, PermissionType, PrincipalType
from lattice.utils.lang import is_non_empty_array

E = TypeVar("E", bound=Enum)

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def is_valid_uuid(value: Any) -> bool:
    """Lexical 8-4-4-4-12 hex check; ``uuid.UUID`` instances pass."""
    if isinstance(value, UUID):
        return True
    return isinstance(value, str) and UUID_PATTERN.fullmatch(value) is not None


def normalize_uuid(value: str | UUID) -> str:
    return str(value)


def validate_non_empty_array(value: Any, predicate: Callable[[Any], bool]) -> bool:
    """All-or-nothing: False unless ``value`` is a non-empty array of valid items."""
    if not is_non_empty_array(value):
        return False
    return all(predicate(item) for item in value)


def is_valid_uuid_array(value: Any) -> bool:
    return validate_non_empty_array(value, is_valid_uuid)


def parse_enum(enum_cls: type[E], value: Any) -> E | None:
    """Return the matching member of ``enum_cls`` or None."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def is_valid_permission(value: Any) -> bool:
    return parse_enum(PermissionType, value) is not None


def is_valid_permission_array(value: Any) -> bool:
    return validate_non_empty_array(value, is_valid_permission)


def is_valid_principal_type(value: Any) -> bool:
    return parse_enum(PrincipalType, value) is not None


def is_valid_grant_type(value: Any) -> bool:
    return parse_enum(GrantType, value) is not None


def is_valid_action_type(value: Any) -> bool:
    return parse_enum(ActionType, value) is not None
