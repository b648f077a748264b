# lattice/models/grant.py
"""
Grants describe how principals obtain a role (manually, by email domain, ...).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from lattice.constants.types import GrantType
from lattice.core.exceptions import InvalidParameterError, LatticeError, MissingPropertyError
from lattice.models.base import ValueObject, coerce_enum_field, get_property, has_property
from lattice.utils.lang import dedupe, is_defined, is_empty_array, is_non_empty_string_array
from lattice.utils.validation import parse_enum, validate_non_empty_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Grant(ValueObject):
    grant_type: GrantType
    mappings: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        coerce_enum_field(self, "grant_type", GrantType, "grantType")

    def to_dict(self) -> dict[str, Any]:
        return {
            "grantType": self.grant_type.value,
            "mappings": sorted(self.mappings),
        }


class GrantBuilder:
    def __init__(self) -> None:
        self._grant_type: GrantType | None = None
        self._mappings: tuple[str, ...] | None = None

    def set_grant_type(self, grant_type: GrantType | str) -> GrantBuilder:
        parsed = parse_enum(GrantType, grant_type)
        if parsed is None:
            raise InvalidParameterError("grantType", "must be a valid GrantType")

        self._grant_type = parsed
        return self

    def set_mappings(self, mappings: Sequence[str] | None) -> GrantBuilder:
        if not is_defined(mappings) or is_empty_array(mappings):
            return self

        if not is_non_empty_string_array(mappings):
            raise InvalidParameterError("mappings", "must be a non-empty array of strings")

        self._mappings = dedupe(mappings)
        return self

    def build(self) -> Grant:
        if self._grant_type is None:
            raise MissingPropertyError("grantType")

        return Grant(self._grant_type, self._mappings or ())


def is_valid_grant(grant: Any) -> bool:
    if not is_defined(grant):
        logger.warning("invalid parameter: grant must be defined")
        return False

    if not has_property(grant, "grant_type", "grantType"):
        logger.warning("missing properties: grant is missing required properties")
        return False

    try:
        (
            GrantBuilder()
            .set_grant_type(get_property(grant, "grant_type", "grantType"))
            .set_mappings(get_property(grant, "mappings"))
            .build()
        )
        return True
    except LatticeError as exc:
        logger.warning("invalid grant: %s", exc)
        return False


def is_valid_grant_array(grants: Any) -> bool:
    return validate_non_empty_array(grants, is_valid_grant)
