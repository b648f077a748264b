# lattice/api/permissions_api.py
"""Reading and updating access control lists (``datastore/permissions``)."""
from __future__ import annotations

from typing import Any, Sequence
from uuid import UUID

from lattice.constants.api_names import PERMISSIONS_API
from lattice.core.exceptions import InvalidParameterError
from lattice.core.transport import HttpMethod, Transport, get_transport
from lattice.models.acl import AclData, AclDataBuilder, is_valid_acl_data
from lattice.models.base import get_property
from lattice.utils.validation import is_valid_uuid_array, normalize_uuid


async def get_acl(acl_key: Sequence[str | UUID], *, transport: Transport | None = None) -> Any:
    """``POST /`` with the ACL key; the response is the :class:`~lattice.models.acl.Acl` data."""
    if not is_valid_uuid_array(acl_key):
        raise InvalidParameterError("aclKey", "must be a non-empty array of valid UUIDs")

    body = [normalize_uuid(k) for k in acl_key]
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.POST, f"{transport.resolve_base_url(PERMISSIONS_API)}/", body)


async def update_acl(acl_data: AclData | Any, *, transport: Transport | None = None) -> Any:
    """``PATCH /``: apply ``acl_data.action`` to the aces of ``acl_data.acl``."""
    if not is_valid_acl_data(acl_data):
        raise InvalidParameterError("aclData", "must be a valid AclData")

    body = (
        AclDataBuilder()
        .set_acl(get_property(acl_data, "acl"))
        .set_action(get_property(acl_data, "action"))
        .build()
    )
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.PATCH, f"{transport.resolve_base_url(PERMISSIONS_API)}/", body)
