# lattice/api/principals_api.py
"""Users and roles known to the platform (``datastore/principals``)."""
from __future__ import annotations

from typing import Any

from lattice.constants.api_names import PRINCIPALS_API
from lattice.constants.url_constants import CURRENT_PATH, ROLES_PATH, SEARCH_PATH, USERS_PATH
from lattice.core.exceptions import InvalidParameterError
from lattice.core.transport import HttpMethod, Transport, get_transport
from lattice.utils.lang import is_non_empty_string


def _base(transport: Transport) -> str:
    return transport.resolve_base_url(PRINCIPALS_API)


async def get_all_users(*, transport: Transport | None = None) -> Any:
    """``GET /users``"""
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, f"{_base(transport)}/{USERS_PATH}")


async def get_user(user_id: str, *, transport: Transport | None = None) -> Any:
    """``GET /users/{userId}``"""
    if not is_non_empty_string(user_id):
        raise InvalidParameterError("userId", "must be a non-empty string")

    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, f"{_base(transport)}/{USERS_PATH}/{user_id}")


async def get_all_roles(*, transport: Transport | None = None) -> Any:
    """``GET /roles``"""
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, f"{_base(transport)}/{ROLES_PATH}")


async def get_current_roles(*, transport: Transport | None = None) -> Any:
    """``GET /roles/current``: roles held by the calling user."""
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, f"{_base(transport)}/{ROLES_PATH}/{CURRENT_PATH}")


async def search_all_users(search_query: str, *, transport: Transport | None = None) -> Any:
    """``GET /users/search/{query}``"""
    if not is_non_empty_string(search_query):
        raise InvalidParameterError("searchQuery", "must be a non-empty string")

    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, f"{_base(transport)}/{USERS_PATH}/{SEARCH_PATH}/{search_query}")
