# lattice/api/authorizations_api.py
"""Authorization checks against ACL keys (``datastore/authorizations``)."""
from __future__ import annotations

from typing import Any, Sequence

from lattice.constants.api_names import AUTHORIZATIONS_API
from lattice.core.exceptions import InvalidParameterError
from lattice.core.transport import HttpMethod, Transport, get_transport
from lattice.models.access_check import AccessCheckBuilder, is_valid_access_check_array
from lattice.models.base import get_property


async def check_authorizations(access_checks: Sequence[Any], *, transport: Transport | None = None) -> Any:
    """``POST /``

    For each access check the server answers which of the requested
    permissions the caller holds on the ACL key.
    """
    if not is_valid_access_check_array(access_checks):
        raise InvalidParameterError("accessChecks", "must be a non-empty array of valid AccessChecks")

    body = [
        AccessCheckBuilder()
        .set_acl_key(get_property(check, "acl_key", "aclKey"))
        .set_permissions(get_property(check, "permissions"))
        .build()
        for check in access_checks
    ]
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.POST, f"{transport.resolve_base_url(AUTHORIZATIONS_API)}/", body)
