# lattice/api/organizations_api.py
"""
Organizations: CRUD, auto-approved e-mail domains and principal membership.

Endpoints are relative to ``{base_url}/datastore/organizations``. Every
operation keyed by an organization validates the id as a UUID before any
request is made. E-mail domain and principal lists are deduplicated before
they are sent.
"""
from __future__ import annotations

from typing import Any, Sequence
from uuid import UUID

from lattice.constants.api_names import ORGANIZATIONS_API
from lattice.constants.types import PrincipalType
from lattice.constants.url_constants import (
    DESCRIPTION_PATH,
    EMAIL_DOMAINS_PATH,
    MEMBERS_PATH,
    PRINCIPALS_PATH,
    ROLES_PATH,
    TITLE_PATH,
)
from lattice.core.exceptions import InvalidParameterError
from lattice.core.transport import HttpMethod, Transport, get_transport
from lattice.models.organization import Organization, is_valid_organization, to_organization
from lattice.models.principal import Principal, is_valid_principal_array, to_principal
from lattice.utils.lang import dedupe, is_non_empty_string, is_non_empty_string_array
from lattice.utils.validation import is_valid_uuid, normalize_uuid, parse_enum


def _organization_url(transport: Transport, organization_id: Any) -> str:
    if not is_valid_uuid(organization_id):
        raise InvalidParameterError("organizationId", "must be a valid UUID")
    return f"{transport.resolve_base_url(ORGANIZATIONS_API)}/{normalize_uuid(organization_id)}"


def _email_domains_or_raise(email_domains: Any) -> list[str]:
    if not is_non_empty_string_array(email_domains):
        raise InvalidParameterError("emailDomains", "must be a non-empty array of non-empty strings")
    return list(dedupe(email_domains))


def _principals_or_raise(principals: Any) -> list[Principal]:
    if not is_valid_principal_array(principals):
        raise InvalidParameterError("principals", "must be a non-empty array of valid Principals")
    return list(dedupe(to_principal(p) for p in principals))


def _principal_path(principal_type: Any, principal_id: Any) -> str:
    parsed = parse_enum(PrincipalType, principal_type)
    if parsed is None:
        raise InvalidParameterError("principalType", "must be a valid PrincipalType")

    if not is_non_empty_string(principal_id):
        raise InvalidParameterError("principalId", "must be a non-empty string")

    return f"{PRINCIPALS_PATH}/{parsed.value}/{principal_id}"


# ---------------------------------------------------------------------------
# organizations
# ---------------------------------------------------------------------------


async def get_organization(organization_id: str | UUID, *, transport: Transport | None = None) -> Any:
    """``GET /{organizationId}``"""
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, _organization_url(transport, organization_id))


async def get_all_organizations(*, transport: Transport | None = None) -> Any:
    """``GET /``"""
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, f"{transport.resolve_base_url(ORGANIZATIONS_API)}/")


async def create_organization(organization: Organization | Any, *, transport: Transport | None = None) -> Any:
    """``POST /``: create an organization; the response is the new id.

    Accepts an :class:`Organization` or a mapping with the same wire keys.
    """
    if not is_valid_organization(organization):
        raise InvalidParameterError("organization", "must be a valid Organization")

    organization = to_organization(organization)
    transport = transport or get_transport()
    url = f"{transport.resolve_base_url(ORGANIZATIONS_API)}/"
    return await transport.send_request(HttpMethod.POST, url, organization)


async def delete_organization(organization_id: str | UUID, *, transport: Transport | None = None) -> Any:
    """``DELETE /{organizationId}``"""
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.DELETE, _organization_url(transport, organization_id))


async def update_title(organization_id: str | UUID, title: str, *, transport: Transport | None = None) -> Any:
    """``PUT /{organizationId}/title`` with the title as a plain-text body."""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    if not is_non_empty_string(title):
        raise InvalidParameterError("title", "must be a non-empty string")

    return await transport.send_request(HttpMethod.PUT, f"{url}/{TITLE_PATH}", title)


async def update_description(
    organization_id: str | UUID,
    description: str,
    *,
    transport: Transport | None = None,
) -> Any:
    """``PUT /{organizationId}/description`` with the description as a plain-text body."""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    if not is_non_empty_string(description):
        raise InvalidParameterError("description", "must be a non-empty string")

    return await transport.send_request(HttpMethod.PUT, f"{url}/{DESCRIPTION_PATH}", description)


# ---------------------------------------------------------------------------
# auto-approved e-mail domains
# ---------------------------------------------------------------------------


async def get_auto_approved_email_domains(
    organization_id: str | UUID,
    *,
    transport: Transport | None = None,
) -> Any:
    """``GET /{organizationId}/email-domains``"""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    return await transport.send_request(HttpMethod.GET, f"{url}/{EMAIL_DOMAINS_PATH}")


async def add_auto_approved_email_domain(
    organization_id: str | UUID,
    email_domain: str,
    *,
    transport: Transport | None = None,
) -> Any:
    """``PUT /{organizationId}/email-domains/{emailDomain}``"""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    if not is_non_empty_string(email_domain):
        raise InvalidParameterError("emailDomain", "must be a non-empty string")

    return await transport.send_request(HttpMethod.PUT, f"{url}/{EMAIL_DOMAINS_PATH}/{email_domain}")


async def add_auto_approved_email_domains(
    organization_id: str | UUID,
    email_domains: Sequence[str],
    *,
    transport: Transport | None = None,
) -> Any:
    """``POST /{organizationId}/email-domains``: add to the existing domains."""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    body = _email_domains_or_raise(email_domains)
    return await transport.send_request(HttpMethod.POST, f"{url}/{EMAIL_DOMAINS_PATH}", body)


async def set_auto_approved_email_domains(
    organization_id: str | UUID,
    email_domains: Sequence[str],
    *,
    transport: Transport | None = None,
) -> Any:
    """``PUT /{organizationId}/email-domains``: replace the existing domains."""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    body = _email_domains_or_raise(email_domains)
    return await transport.send_request(HttpMethod.PUT, f"{url}/{EMAIL_DOMAINS_PATH}", body)


async def remove_auto_approved_email_domain(
    organization_id: str | UUID,
    email_domain: str,
    *,
    transport: Transport | None = None,
) -> Any:
    """``DELETE /{organizationId}/email-domains/{emailDomain}``"""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    if not is_non_empty_string(email_domain):
        raise InvalidParameterError("emailDomain", "must be a non-empty string")

    return await transport.send_request(HttpMethod.DELETE, f"{url}/{EMAIL_DOMAINS_PATH}/{email_domain}")


async def remove_auto_approved_email_domains(
    organization_id: str | UUID,
    email_domains: Sequence[str],
    *,
    transport: Transport | None = None,
) -> Any:
    """``DELETE /{organizationId}/email-domains`` with the domains as the body."""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    body = _email_domains_or_raise(email_domains)
    return await transport.send_request(HttpMethod.DELETE, f"{url}/{EMAIL_DOMAINS_PATH}", body)


# ---------------------------------------------------------------------------
# principals
# ---------------------------------------------------------------------------


async def get_all_principals(organization_id: str | UUID, *, transport: Transport | None = None) -> Any:
    """``GET /{organizationId}/principals``"""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    return await transport.send_request(HttpMethod.GET, f"{url}/{PRINCIPALS_PATH}")


async def add_principal(
    organization_id: str | UUID,
    principal_type: PrincipalType | str,
    principal_id: str,
    *,
    transport: Transport | None = None,
) -> Any:
    """``PUT /{organizationId}/principals/{principalType}/{principalId}``"""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    path = _principal_path(principal_type, principal_id)
    return await transport.send_request(HttpMethod.PUT, f"{url}/{path}")


async def add_principals(
    organization_id: str | UUID,
    principals: Sequence[Any],
    *,
    transport: Transport | None = None,
) -> Any:
    """``POST /{organizationId}/principals``"""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    body = _principals_or_raise(principals)
    return await transport.send_request(HttpMethod.POST, f"{url}/{PRINCIPALS_PATH}", body)


async def set_principals(
    organization_id: str | UUID,
    principals: Sequence[Any],
    *,
    transport: Transport | None = None,
) -> Any:
    """``PUT /{organizationId}/principals``: replace the organization's principals."""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    body = _principals_or_raise(principals)
    return await transport.send_request(HttpMethod.PUT, f"{url}/{PRINCIPALS_PATH}", body)


async def remove_principal(
    organization_id: str | UUID,
    principal_type: PrincipalType | str,
    principal_id: str,
    *,
    transport: Transport | None = None,
) -> Any:
    """``DELETE /{organizationId}/principals/{principalType}/{principalId}``"""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    path = _principal_path(principal_type, principal_id)
    return await transport.send_request(HttpMethod.DELETE, f"{url}/{path}")


async def remove_principals(
    organization_id: str | UUID,
    principals: Sequence[Any],
    *,
    transport: Transport | None = None,
) -> Any:
    """``DELETE /{organizationId}/principals`` with the principals as the body."""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    body = _principals_or_raise(principals)
    return await transport.send_request(HttpMethod.DELETE, f"{url}/{PRINCIPALS_PATH}", body)


async def get_all_roles(organization_id: str | UUID, *, transport: Transport | None = None) -> Any:
    """``GET /{organizationId}/principals/roles``"""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    return await transport.send_request(HttpMethod.GET, f"{url}/{PRINCIPALS_PATH}/{ROLES_PATH}")


async def get_all_members(organization_id: str | UUID, *, transport: Transport | None = None) -> Any:
    """``GET /{organizationId}/principals/members``"""
    transport = transport or get_transport()
    url = _organization_url(transport, organization_id)
    return await transport.send_request(HttpMethod.GET, f"{url}/{PRINCIPALS_PATH}/{MEMBERS_PATH}")
