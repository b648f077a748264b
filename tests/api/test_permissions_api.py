# tests/api/test_permissions_api.py
from __future__ import annotations

import pytest

from lattice.api import authorizations_api, permissions_api, principals_api
from lattice.constants import ActionType, PermissionType
from lattice.core.exceptions import InvalidParameterError
from lattice.models import AccessCheck, AclBuilder, AclData, AclDataBuilder

ACL_KEY = ["0c8be4b7-0bd5-4dd1-a623-da78871c9d0e", "4b08e1f9-4a00-4169-92ea-10e377070220"]
ALICE = {"type": "USER", "id": "auth0|alice"}
DATASTORE = "http://loom.test/datastore"


class TestPermissionsApi:
    @pytest.mark.asyncio
    async def test_get_acl(self, fake_transport):
        await permissions_api.get_acl(ACL_KEY)
        assert fake_transport.last["method"] == "POST"
        assert fake_transport.last["url"] == f"{DATASTORE}/permissions/"
        assert fake_transport.last["body"] == ACL_KEY

    @pytest.mark.asyncio
    async def test_get_acl_requires_uuids(self, fake_transport):
        with pytest.raises(InvalidParameterError):
            await permissions_api.get_acl(["nope"])
        assert fake_transport.calls == []

    @pytest.mark.asyncio
    async def test_update_acl(self, fake_transport):
        acl = AclBuilder().set_acl_key(ACL_KEY).set_aces([{"principal": ALICE, "permissions": ["READ"]}]).build()
        acl_data = AclDataBuilder().set_acl(acl).set_action(ActionType.ADD).build()

        await permissions_api.update_acl(acl_data)

        assert fake_transport.last["method"] == "PATCH"
        assert fake_transport.last["url"] == f"{DATASTORE}/permissions/"
        assert fake_transport.last["body"] == acl_data

    @pytest.mark.asyncio
    async def test_update_acl_from_mapping(self, fake_transport):
        await permissions_api.update_acl({"acl": {"aclKey": ACL_KEY, "aces": [{"principal": ALICE}]}, "action": "SET"})
        body = fake_transport.last["body"]
        assert isinstance(body, AclData)
        assert body.action is ActionType.SET

    @pytest.mark.asyncio
    async def test_update_acl_rejects_invalid(self, fake_transport):
        with pytest.raises(InvalidParameterError):
            await permissions_api.update_acl({"acl": {"aclKey": ACL_KEY}, "action": "DESTROY"})
        assert fake_transport.calls == []


class TestAuthorizationsApi:
    @pytest.mark.asyncio
    async def test_check_authorizations(self, fake_transport):
        await authorizations_api.check_authorizations([{"aclKey": ACL_KEY, "permissions": ["READ", "WRITE"]}])

        assert fake_transport.last["method"] == "POST"
        assert fake_transport.last["url"] == f"{DATASTORE}/authorizations/"
        assert fake_transport.last["body"] == [
            AccessCheck(tuple(ACL_KEY), (PermissionType.READ, PermissionType.WRITE)),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("checks", [None, [], [{"aclKey": ACL_KEY}], {"aclKey": ACL_KEY, "permissions": []}])
    async def test_rejects_invalid(self, fake_transport, checks):
        with pytest.raises(InvalidParameterError):
            await authorizations_api.check_authorizations(checks)
        assert fake_transport.calls == []


class TestPrincipalsApi:
    @pytest.mark.asyncio
    async def test_users_and_roles(self, fake_transport):
        await principals_api.get_all_users()
        await principals_api.get_user("auth0|alice")
        await principals_api.get_all_roles()
        await principals_api.get_current_roles()
        await principals_api.search_all_users("ali")

        assert [c["url"] for c in fake_transport.calls] == [
            f"{DATASTORE}/principals/users",
            f"{DATASTORE}/principals/users/auth0|alice",
            f"{DATASTORE}/principals/roles",
            f"{DATASTORE}/principals/roles/current",
            f"{DATASTORE}/principals/users/search/ali",
        ]
        assert {c["method"] for c in fake_transport.calls} == {"GET"}

    @pytest.mark.asyncio
    async def test_validation(self, fake_transport):
        with pytest.raises(InvalidParameterError):
            await principals_api.get_user("")
        with pytest.raises(InvalidParameterError):
            await principals_api.search_all_users(None)
        assert fake_transport.calls == []
