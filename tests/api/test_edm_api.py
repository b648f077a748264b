# tests/api/test_edm_api.py
from __future__ import annotations

import uuid

import pytest

from lattice.api import edm_api
from lattice.core.exceptions import InvalidParameterError

EDM = "http://loom.test/datastore/edm"
SET_ID = "4b08e1f9-4a00-4169-92ea-10e377070220"


class TestSchemas:
    @pytest.mark.asyncio
    async def test_entity_data_model(self, fake_transport):
        await edm_api.get_entity_data_model()
        assert fake_transport.last["method"] == "GET"
        assert fake_transport.last["url"] == f"{EDM}/"

    @pytest.mark.asyncio
    async def test_all_schemas(self, fake_transport):
        await edm_api.get_all_schemas()
        assert fake_transport.last["url"] == f"{EDM}/schema"

    @pytest.mark.asyncio
    async def test_schema(self, fake_transport):
        await edm_api.get_schema({"namespace": "LOOM", "name": "core"})
        assert fake_transport.last["url"] == f"{EDM}/schema/LOOM/core"

    @pytest.mark.asyncio
    async def test_schema_requires_fqn(self, fake_transport):
        with pytest.raises(InvalidParameterError):
            await edm_api.get_schema("core")
        assert fake_transport.calls == []


class TestEntitySets:
    @pytest.mark.asyncio
    async def test_all(self, fake_transport):
        await edm_api.get_all_entity_sets()
        assert fake_transport.last["url"] == f"{EDM}/entity/set"

    @pytest.mark.asyncio
    async def test_by_id(self, fake_transport):
        await edm_api.get_entity_set(uuid.UUID(SET_ID))
        assert fake_transport.last["url"] == f"{EDM}/entity/set/{SET_ID}"

    @pytest.mark.asyncio
    async def test_id_by_name(self, fake_transport):
        await edm_api.get_entity_set_id("people")
        assert fake_transport.last["url"] == f"{EDM}/ids/entity/set/people"

    @pytest.mark.asyncio
    async def test_delete(self, fake_transport):
        await edm_api.delete_entity_set(SET_ID)
        assert fake_transport.last["method"] == "DELETE"
        assert fake_transport.last["url"] == f"{EDM}/entity/set/{SET_ID}"

    @pytest.mark.asyncio
    async def test_validation(self, fake_transport):
        with pytest.raises(InvalidParameterError):
            await edm_api.get_entity_set("people")
        with pytest.raises(InvalidParameterError):
            await edm_api.get_entity_set(SET_ID + "\n")
        with pytest.raises(InvalidParameterError):
            await edm_api.delete_entity_set(None)
        with pytest.raises(InvalidParameterError):
            await edm_api.get_entity_set_id("")
        assert fake_transport.calls == []
