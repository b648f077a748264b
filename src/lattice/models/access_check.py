# lattice/models/access_check.py
"""
Access checks: "which of these permissions do I hold on this ACL key?"
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence
from uuid import UUID

from lattice.constants.types import PermissionType
from lattice.core.exceptions import InvalidParameterError, LatticeError
from lattice.models.base import ValueObject, coerce_enum_tuple_field, get_property, has_property
from lattice.utils.lang import dedupe, is_defined, is_empty_array
from lattice.utils.validation import (
    is_valid_permission_array,
    is_valid_uuid_array,
    normalize_uuid,
    parse_enum,
    validate_non_empty_array,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class AccessCheck(ValueObject):
    acl_key: tuple[str, ...] = ()
    permissions: tuple[PermissionType, ...] = ()

    def __post_init__(self) -> None:
        coerce_enum_tuple_field(self, "permissions", PermissionType)

    def to_dict(self) -> dict[str, Any]:
        return {
            "aclKey": list(self.acl_key),
            "permissions": sorted(p.value for p in self.permissions),
        }


def parse_permissions(permissions: Sequence[PermissionType | str]) -> tuple[PermissionType, ...]:
    """Parse and deduplicate a permission array that already passed validation."""
    return dedupe(parse_enum(PermissionType, p) for p in permissions)


class AccessCheckBuilder:
    def __init__(self) -> None:
        self._acl_key: tuple[str, ...] | None = None
        self._permissions: tuple[PermissionType, ...] | None = None

    def set_acl_key(self, acl_key: Sequence[str | UUID] | None) -> AccessCheckBuilder:
        if not is_defined(acl_key) or is_empty_array(acl_key):
            return self

        if not is_valid_uuid_array(acl_key):
            raise InvalidParameterError("aclKey", "must be an array of valid UUIDs")

        self._acl_key = tuple(normalize_uuid(k) for k in acl_key)
        return self

    def set_permissions(self, permissions: Sequence[PermissionType | str] | None) -> AccessCheckBuilder:
        if not is_defined(permissions) or is_empty_array(permissions):
            return self

        if not is_valid_permission_array(permissions):
            raise InvalidParameterError("permissions", "must be an array of valid Permissions")

        self._permissions = parse_permissions(permissions)
        return self

    def build(self) -> AccessCheck:
        return AccessCheck(self._acl_key or (), self._permissions or ())


def is_valid_access_check(access_check: Any) -> bool:
    if not is_defined(access_check):
        logger.warning("invalid parameter: accessCheck must be defined")
        return False

    if not has_property(access_check, "acl_key", "aclKey") or not has_property(access_check, "permissions"):
        logger.warning("missing properties: accessCheck is missing required properties")
        return False

    try:
        (
            AccessCheckBuilder()
            .set_acl_key(get_property(access_check, "acl_key", "aclKey"))
            .set_permissions(get_property(access_check, "permissions"))
            .build()
        )
        return True
    except LatticeError as exc:
        logger.warning("invalid accessCheck: %s", exc)
        return False


def is_valid_access_check_array(access_checks: Any) -> bool:
    return validate_non_empty_array(access_checks, is_valid_access_check)
