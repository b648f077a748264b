# lattice/api/edm_api.py
"""Entity data model: schemas and entity sets."""
from __future__ import annotations

from typing import Any
from uuid import UUID

from lattice.constants.api_names import EDM_API
from lattice.constants.url_constants import ENTITY_SET_PATH, IDS_PATH, SCHEMA_PATH
from lattice.core.exceptions import InvalidParameterError
from lattice.core.transport import HttpMethod, Transport, get_transport
from lattice.models.fqn import FullyQualifiedName, is_valid_fqn
from lattice.utils.lang import is_non_empty_string
from lattice.utils.validation import is_valid_uuid, normalize_uuid


def _entity_set_id_or_raise(entity_set_id: Any) -> str:
    if not is_valid_uuid(entity_set_id):
        raise InvalidParameterError("entitySetId", "must be a valid UUID")
    return normalize_uuid(entity_set_id)


async def get_entity_data_model(*, transport: Transport | None = None) -> Any:
    """``GET /``: the full entity data model."""
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, f"{transport.resolve_base_url(EDM_API)}/")


async def get_all_schemas(*, transport: Transport | None = None) -> Any:
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, f"{transport.resolve_base_url(EDM_API)}/{SCHEMA_PATH}")


async def get_schema(schema_fqn: Any, *, transport: Transport | None = None) -> Any:
    """``GET /schema/{namespace}/{name}``"""
    if not is_valid_fqn(schema_fqn):
        raise InvalidParameterError("schemaFqn", "must be a valid FQN")

    fqn = FullyQualifiedName.of(schema_fqn)
    transport = transport or get_transport()
    url = f"{transport.resolve_base_url(EDM_API)}/{SCHEMA_PATH}/{fqn.namespace}/{fqn.name}"
    return await transport.send_request(HttpMethod.GET, url)


async def get_all_entity_sets(*, transport: Transport | None = None) -> Any:
    transport = transport or get_transport()
    url = f"{transport.resolve_base_url(EDM_API)}/{ENTITY_SET_PATH}"
    return await transport.send_request(HttpMethod.GET, url)


async def get_entity_set(entity_set_id: str | UUID, *, transport: Transport | None = None) -> Any:
    """``GET /entity/set/{entitySetId}``"""
    set_id = _entity_set_id_or_raise(entity_set_id)
    transport = transport or get_transport()
    url = f"{transport.resolve_base_url(EDM_API)}/{ENTITY_SET_PATH}/{set_id}"
    return await transport.send_request(HttpMethod.GET, url)


async def get_entity_set_id(entity_set_name: str, *, transport: Transport | None = None) -> Any:
    """``GET /ids/entity/set/{entitySetName}``: look up an entity set id by name."""
    if not is_non_empty_string(entity_set_name):
        raise InvalidParameterError("entitySetName", "must be a non-empty string")

    transport = transport or get_transport()
    url = f"{transport.resolve_base_url(EDM_API)}/{IDS_PATH}/{ENTITY_SET_PATH}/{entity_set_name}"
    return await transport.send_request(HttpMethod.GET, url)


async def delete_entity_set(entity_set_id: str | UUID, *, transport: Transport | None = None) -> Any:
    """``DELETE /entity/set/{entitySetId}``"""
    set_id = _entity_set_id_or_raise(entity_set_id)
    transport = transport or get_transport()
    url = f"{transport.resolve_base_url(EDM_API)}/{ENTITY_SET_PATH}/{set_id}"
    return await transport.send_request(HttpMethod.DELETE, url)
