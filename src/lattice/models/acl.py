# lattice/models/acl.py
"""
Access control lists (an ACL key plus its entries) and the ``AclData``
envelope the permissions API expects when updating them.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence
from uuid import UUID

from lattice.constants.types import ActionType
from lattice.core.exceptions import InvalidParameterError, LatticeError, MissingPropertyError
from lattice.models.ace import Ace, is_valid_ace_array, to_ace
from lattice.models.base import ValueObject, coerce_enum_field, get_property, has_property
from lattice.utils.lang import is_defined, is_empty_array
from lattice.utils.validation import is_valid_uuid_array, normalize_uuid, parse_enum

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Acl(ValueObject):
    acl_key: tuple[str, ...]
    aces: tuple[Ace, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "aclKey": list(self.acl_key),
            "aces": [ace.to_dict() for ace in self.aces],
        }


class AclBuilder:
    def __init__(self) -> None:
        self._acl_key: tuple[str, ...] | None = None
        self._aces: tuple[Ace, ...] | None = None

    def set_acl_key(self, acl_key: Sequence[str | UUID]) -> AclBuilder:
        if not is_valid_uuid_array(acl_key):
            raise InvalidParameterError("aclKey", "must be a non-empty array of valid UUIDs")

        self._acl_key = tuple(normalize_uuid(k) for k in acl_key)
        return self

    def set_aces(self, aces: Sequence[Any] | None) -> AclBuilder:
        if not is_defined(aces) or is_empty_array(aces):
            return self

        if not is_valid_ace_array(aces):
            raise InvalidParameterError("aces", "must be an array of valid Aces")

        self._aces = tuple(to_ace(a) for a in aces)
        return self

    def build(self) -> Acl:
        if self._acl_key is None:
            raise MissingPropertyError("aclKey")

        return Acl(self._acl_key, self._aces or ())


def to_acl(value: Any) -> Acl:
    return (
        AclBuilder()
        .set_acl_key(get_property(value, "acl_key", "aclKey"))
        .set_aces(get_property(value, "aces"))
        .build()
    )


def is_valid_acl(acl: Any) -> bool:
    if not is_defined(acl):
        logger.warning("invalid parameter: acl must be defined")
        return False

    if not has_property(acl, "acl_key", "aclKey"):
        logger.warning("missing properties: acl is missing required properties")
        return False

    try:
        to_acl(acl)
        return True
    except LatticeError as exc:
        logger.warning("invalid acl: %s", exc)
        return False


@dataclass(frozen=True, eq=False)
class AclData(ValueObject):
    acl: Acl
    action: ActionType

    def __post_init__(self) -> None:
        coerce_enum_field(self, "action", ActionType)

    def to_dict(self) -> dict[str, Any]:
        return {"acl": self.acl.to_dict(), "action": self.action.value}


class AclDataBuilder:
    def __init__(self) -> None:
        self._acl: Acl | None = None
        self._action: ActionType | None = None

    def set_acl(self, acl: Any) -> AclDataBuilder:
        if not is_valid_acl(acl):
            raise InvalidParameterError("acl", "must be a valid Acl")

        self._acl = to_acl(acl)
        return self

    def set_action(self, action: ActionType | str) -> AclDataBuilder:
        parsed = parse_enum(ActionType, action)
        if parsed is None:
            raise InvalidParameterError("action", "must be a valid ActionType")

        self._action = parsed
        return self

    def build(self) -> AclData:
        if self._acl is None:
            raise MissingPropertyError("acl")

        if self._action is None:
            raise MissingPropertyError("action")

        return AclData(self._acl, self._action)


def is_valid_acl_data(acl_data: Any) -> bool:
    if not is_defined(acl_data):
        logger.warning("invalid parameter: aclData must be defined")
        return False

    if not has_property(acl_data, "acl") or not has_property(acl_data, "action"):
        logger.warning("missing properties: aclData is missing required properties")
        return False

    try:
        (
            AclDataBuilder()
            .set_acl(get_property(acl_data, "acl"))
            .set_action(get_property(acl_data, "action"))
            .build()
        )
        return True
    except LatticeError as exc:
        logger.warning("invalid aclData: %s", exc)
        return False
