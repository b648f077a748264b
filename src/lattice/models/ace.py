# lattice/models/ace.py
"""Access control entries: one principal and the permissions it holds."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

from lattice.constants.types import PermissionType
from lattice.core.exceptions import InvalidParameterError, LatticeError, MissingPropertyError
from lattice.models.access_check import parse_permissions
from lattice.models.base import ValueObject, coerce_enum_tuple_field, get_property, has_property
from lattice.models.principal import Principal, is_valid_principal, to_principal
from lattice.utils.lang import is_defined, is_empty_array
from lattice.utils.validation import is_valid_permission_array, validate_non_empty_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Ace(ValueObject):
    principal: Principal
    permissions: tuple[PermissionType, ...] = ()

    def __post_init__(self) -> None:
        coerce_enum_tuple_field(self, "permissions", PermissionType)

    def to_dict(self) -> dict[str, Any]:
        return {
            "principal": self.principal.to_dict(),
            "permissions": sorted(p.value for p in self.permissions),
        }


class AceBuilder:
    def __init__(self) -> None:
        self._principal: Principal | None = None
        self._permissions: tuple[PermissionType, ...] | None = None

    def set_principal(self, principal: Any) -> AceBuilder:
        if not is_valid_principal(principal):
            raise InvalidParameterError("principal", "must be a valid Principal")

        self._principal = to_principal(principal)
        return self

    def set_permissions(self, permissions: Sequence[PermissionType | str] | None) -> AceBuilder:
        if not is_defined(permissions) or is_empty_array(permissions):
            return self

        if not is_valid_permission_array(permissions):
            raise InvalidParameterError("permissions", "must be an array of valid Permissions")

        self._permissions = parse_permissions(permissions)
        return self

    def build(self) -> Ace:
        if self._principal is None:
            raise MissingPropertyError("principal")

        return Ace(self._principal, self._permissions or ())


def to_ace(value: Any) -> Ace:
    return (
        AceBuilder()
        .set_principal(get_property(value, "principal"))
        .set_permissions(get_property(value, "permissions"))
        .build()
    )


def is_valid_ace(ace: Any) -> bool:
    if not is_defined(ace):
        logger.warning("invalid parameter: ace must be defined")
        return False

    if not has_property(ace, "principal"):
        logger.warning("missing properties: ace is missing required properties")
        return False

    try:
        to_ace(ace)
        return True
    except LatticeError as exc:
        logger.warning("invalid ace: %s", exc)
        return False


def is_valid_ace_array(aces: Any) -> bool:
    return validate_non_empty_array(aces, is_valid_ace)
