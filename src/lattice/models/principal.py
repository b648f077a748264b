# lattice/models/principal.py
"""
Principals: the users, roles and organizations permissions are granted to.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from lattice.constants.types import PrincipalType
from lattice.core.exceptions import InvalidParameterError, LatticeError, MissingPropertyError
from lattice.models.base import ValueObject, coerce_enum_field, get_property, has_property
from lattice.utils.lang import is_defined, is_non_empty_string
from lattice.utils.validation import parse_enum, validate_non_empty_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Principal(ValueObject):
    type: PrincipalType
    id: str

    def __post_init__(self) -> None:
        coerce_enum_field(self, "type", PrincipalType)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "id": self.id}


class PrincipalBuilder:
    def __init__(self) -> None:
        self._type: PrincipalType | None = None
        self._id: str | None = None

    def set_type(self, principal_type: PrincipalType | str) -> PrincipalBuilder:
        parsed = parse_enum(PrincipalType, principal_type)
        if parsed is None:
            raise InvalidParameterError("type", "must be a valid PrincipalType")

        self._type = parsed
        return self

    def set_id(self, principal_id: str) -> PrincipalBuilder:
        if not is_non_empty_string(principal_id):
            raise InvalidParameterError("id", "must be a non-empty string")

        self._id = principal_id
        return self

    def build(self) -> Principal:
        if self._type is None:
            raise MissingPropertyError("type")

        if self._id is None:
            raise MissingPropertyError("id")

        return Principal(self._type, self._id)


def to_principal(value: Any) -> Principal:
    """Validate ``value`` (a Principal or a mapping) and return it as a Principal."""
    return (
        PrincipalBuilder()
        .set_type(get_property(value, "type"))
        .set_id(get_property(value, "id"))
        .build()
    )


def is_valid_principal(principal: Any) -> bool:
    if not is_defined(principal):
        logger.warning("invalid parameter: principal must be defined")
        return False

    if not has_property(principal, "type") or not has_property(principal, "id"):
        logger.warning("missing properties: principal is missing required properties")
        return False

    try:
        to_principal(principal)
        return True
    except LatticeError as exc:
        logger.warning("invalid principal: %s", exc)
        return False


def is_valid_principal_array(principals: Any) -> bool:
    return validate_non_empty_array(principals, is_valid_principal)
