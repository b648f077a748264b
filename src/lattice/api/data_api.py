# lattice/api/data_api.py
"""
Reading and writing entity data against an existing entity data model.

Endpoints are relative to ``{base_url}/datastore/data``::

    GET  /entitydata/{namespace}/{name}
    GET  /entitydata/{namespace}/{name}/{entitySetName}
    PUT  /entitydata/{namespace}/{name}/{entitySetName}/selected
    PUT  /entitydata/multiple
    POST /entitydata

Entity type and property type FQNs may be given as
:class:`~lattice.models.fqn.FullyQualifiedName` instances, ``{"namespace",
"name"}`` mappings or ``"namespace.name"`` strings.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Sequence

from lattice.constants.api_names import DATA_API
from lattice.constants.url_constants import ENTITY_DATA_PATH, FILE_TYPE, MULTIPLE_PATH, SELECTED_PATH
from lattice.core.exceptions import InvalidParameterError
from lattice.core.transport import HttpMethod, Transport, get_transport
from lattice.models.fqn import FullyQualifiedName, is_valid_fqn, is_valid_fqn_array
from lattice.utils.lang import is_non_empty_object, is_non_empty_string

logger = logging.getLogger(__name__)

FILE_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "csv": "csv",
        "CSV": "csv",
        "json": "json",
        "JSON": "json",
    }
)


def _fqn_or_raise(entity_type_fqn: Any) -> FullyQualifiedName:
    if not is_valid_fqn(entity_type_fqn):
        raise InvalidParameterError("entityTypeFqn", "must be a valid FQN")
    return FullyQualifiedName.of(entity_type_fqn)


def _entity_type_url(transport: Transport, fqn: FullyQualifiedName) -> str:
    return f"{transport.resolve_base_url(DATA_API)}/{ENTITY_DATA_PATH}/{fqn.namespace}/{fqn.name}"


async def get_all_entities_of_type(entity_type_fqn: Any, *, transport: Transport | None = None) -> Any:
    """``GET /entitydata/{namespace}/{name}``: all entity data for an entity type."""
    fqn = _fqn_or_raise(entity_type_fqn)
    transport = transport or get_transport()
    return await transport.send_request(HttpMethod.GET, _entity_type_url(transport, fqn))


def get_all_entities_of_type_file_url(
    entity_type_fqn: Any,
    file_type: str,
    *,
    transport: Transport | None = None,
) -> str | None:
    """Direct download URL for all entity data of a type, or None on invalid input."""
    if not is_valid_fqn(entity_type_fqn):
        logger.warning("invalid parameter: entityTypeFqn must be a valid FQN: %r", entity_type_fqn)
        return None

    if file_type not in FILE_TYPES:
        logger.warning("invalid parameter: fileType must be a valid file type string: %r", file_type)
        return None

    transport = transport or get_transport()
    url = _entity_type_url(transport, FullyQualifiedName.of(entity_type_fqn))
    return f"{url}?{FILE_TYPE}={FILE_TYPES[file_type]}"


async def get_all_entities_of_type_in_set(
    entity_type_fqn: Any,
    entity_set_name: str,
    *,
    transport: Transport | None = None,
) -> Any:
    """``GET /entitydata/{namespace}/{name}/{entitySetName}``"""
    fqn = _fqn_or_raise(entity_type_fqn)
    if not is_non_empty_string(entity_set_name):
        raise InvalidParameterError("entitySetName", "must be a non-empty string")

    transport = transport or get_transport()
    url = f"{_entity_type_url(transport, fqn)}/{entity_set_name}"
    return await transport.send_request(HttpMethod.GET, url)


def get_all_entities_of_type_in_set_file_url(
    entity_type_fqn: Any,
    entity_set_name: str,
    file_type: str,
    *,
    transport: Transport | None = None,
) -> str | None:
    """Direct download URL for the entity data in one entity set, or None on invalid input."""
    if not is_valid_fqn(entity_type_fqn):
        logger.warning("invalid parameter: entityTypeFqn must be a valid FQN: %r", entity_type_fqn)
        return None

    if not is_non_empty_string(entity_set_name):
        logger.warning("invalid parameter: entitySetName must be a non-empty string: %r", entity_set_name)
        return None

    if file_type not in FILE_TYPES:
        logger.warning("invalid parameter: fileType must be a valid file type string: %r", file_type)
        return None

    transport = transport or get_transport()
    url = _entity_type_url(transport, FullyQualifiedName.of(entity_type_fqn))
    return f"{url}/{entity_set_name}?{FILE_TYPE}={FILE_TYPES[file_type]}"


async def get_selected_entities_of_type_in_set(
    entity_type_fqn: Any,
    entity_set_name: str,
    property_type_fqns: Sequence[Any],
    *,
    transport: Transport | None = None,
) -> Any:
    """``PUT /entitydata/{namespace}/{name}/{entitySetName}/selected``

    Entity data filtered down to the given property types.
    """
    fqn = _fqn_or_raise(entity_type_fqn)
    if not is_non_empty_string(entity_set_name):
        raise InvalidParameterError("entitySetName", "must be a non-empty string")

    if not is_valid_fqn_array(property_type_fqns):
        raise InvalidParameterError("propertyTypeFqns", "must be a non-empty array of valid FQNs")

    body = [FullyQualifiedName.of(p) for p in property_type_fqns]
    transport = transport or get_transport()
    url = f"{_entity_type_url(transport, fqn)}/{entity_set_name}/{SELECTED_PATH}"
    return await transport.send_request(HttpMethod.PUT, url, body)


async def get_all_entities_of_types(
    entity_type_fqns: Sequence[Any],
    *,
    transport: Transport | None = None,
) -> Any:
    """``PUT /entitydata/multiple``: entity data for several entity types at once."""
    if not is_valid_fqn_array(entity_type_fqns):
        raise InvalidParameterError("entityTypeFqns", "must be a non-empty array of valid FQNs")

    body = [FullyQualifiedName.of(f) for f in entity_type_fqns]
    transport = transport or get_transport()
    url = f"{transport.resolve_base_url(DATA_API)}/{ENTITY_DATA_PATH}/{MULTIPLE_PATH}"
    return await transport.send_request(HttpMethod.PUT, url, body)


async def create_entity(
    create_entity_request: Mapping[str, Any],
    *,
    transport: Transport | None = None,
) -> Any:
    """``POST /entitydata``

    ``create_entity_request`` is sent as-is, e.g.::

        {
            "type": {"namespace": "LOOM", "name": "MyEntity"},
            "entitySetName": "MyEntityCollection",
            "properties": [{"LOOM.MyProperty": "value"}],
        }
    """
    if not is_non_empty_object(create_entity_request):
        raise InvalidParameterError("createEntityRequest", "must be a non-empty mapping")

    transport = transport or get_transport()
    url = f"{transport.resolve_base_url(DATA_API)}/{ENTITY_DATA_PATH}"
    return await transport.send_request(HttpMethod.POST, url, create_entity_request)
