# lattice/models/organization.py
"""
Organizations group principals and carry the e-mail domains whose users are
approved automatically.

Only ``title`` is required. Array-valued fields are validated element by
element and a single bad element rejects the whole array.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence
from uuid import UUID

from lattice.core.exceptions import InvalidParameterError, LatticeError, MissingPropertyError
from lattice.models.base import ValueObject, get_property, has_property
from lattice.models.principal import Principal, is_valid_principal_array, to_principal
from lattice.utils.lang import (
    dedupe,
    is_defined,
    is_empty_array,
    is_non_empty_string,
    is_non_empty_string_array,
    is_string,
)
from lattice.utils.validation import is_valid_uuid, normalize_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Organization(ValueObject):
    title: str
    id: str | None = None
    description: str = ""
    members: tuple[Principal, ...] = ()
    roles: tuple[Principal, ...] = ()
    emails: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data.update(
            {
                "title": self.title,
                "description": self.description,
                "members": [m.to_dict() for m in self.members],
                "roles": [r.to_dict() for r in self.roles],
                "emails": sorted(self.emails),
            }
        )
        return data


class OrganizationBuilder:
    def __init__(self) -> None:
        self._id: str | None = None
        self._title: str | None = None
        self._description: str | None = None
        self._members: tuple[Principal, ...] | None = None
        self._roles: tuple[Principal, ...] | None = None
        self._emails: tuple[str, ...] | None = None

    def set_id(self, organization_id: str | UUID | None) -> OrganizationBuilder:
        if not is_defined(organization_id):
            return self

        if not is_valid_uuid(organization_id):
            raise InvalidParameterError("id", "must be a valid UUID")

        self._id = normalize_uuid(organization_id)
        return self

    def set_title(self, title: str) -> OrganizationBuilder:
        if not is_non_empty_string(title):
            raise InvalidParameterError("title", "must be a non-empty string")

        self._title = title
        return self

    def set_description(self, description: str | None) -> OrganizationBuilder:
        if not is_defined(description):
            return self

        if not is_string(description):
            raise InvalidParameterError("description", "must be a string")

        self._description = description
        return self

    def set_members(self, members: Sequence[Any] | None) -> OrganizationBuilder:
        self._members = _principals_or_current("members", members, self._members)
        return self

    def set_roles(self, roles: Sequence[Any] | None) -> OrganizationBuilder:
        self._roles = _principals_or_current("roles", roles, self._roles)
        return self

    def set_auto_approved_emails(self, emails: Sequence[str] | None) -> OrganizationBuilder:
        if not is_defined(emails) or is_empty_array(emails):
            return self

        if not is_non_empty_string_array(emails):
            raise InvalidParameterError("emails", "must be a non-empty array of non-empty strings")

        self._emails = dedupe(emails)
        return self

    def build(self) -> Organization:
        if self._title is None:
            raise MissingPropertyError("title")

        return Organization(
            title=self._title,
            id=self._id,
            description=self._description or "",
            members=self._members or (),
            roles=self._roles or (),
            emails=self._emails or (),
        )


def _principals_or_current(
    field: str,
    principals: Sequence[Any] | None,
    current: tuple[Principal, ...] | None,
) -> tuple[Principal, ...] | None:
    if not is_defined(principals) or is_empty_array(principals):
        return current

    if not is_valid_principal_array(principals):
        raise InvalidParameterError(field, "must be a non-empty array of valid Principals")

    return tuple(to_principal(p) for p in principals)


def to_organization(value: Any) -> Organization:
    """Validate ``value`` (an Organization or a mapping) and return it as an Organization."""
    return (
        OrganizationBuilder()
        .set_id(get_property(value, "id"))
        .set_title(get_property(value, "title"))
        .set_description(get_property(value, "description"))
        .set_members(get_property(value, "members"))
        .set_roles(get_property(value, "roles"))
        .set_auto_approved_emails(get_property(value, "emails"))
        .build()
    )


def is_valid_organization(organization: Any) -> bool:
    if not is_defined(organization):
        logger.warning("invalid parameter: organization must be defined")
        return False

    if not has_property(organization, "title"):
        logger.warning("missing properties: organization is missing required properties")
        return False

    try:
        to_organization(organization)
        return True
    except LatticeError as exc:
        logger.warning("invalid organization: %s", exc)
        return False
