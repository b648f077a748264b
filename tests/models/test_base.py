# tests/models/test_base.py
from __future__ import annotations

from types import SimpleNamespace

import pytest

from lattice.constants import PrincipalType
from lattice.models import Model, Principal
from lattice.models.base import ValueObject, get_property, has_property


class TestValueObject:
    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            ValueObject()

    def test_to_json_is_canonical(self):
        assert Principal(PrincipalType.USER, "a").to_json() == '{"id":"a","type":"USER"}'

    def test_different_types_never_equal(self):
        assert Model("x") != Principal(PrincipalType.USER, "x")

    def test_usable_as_dict_key(self):
        lookup = {Principal(PrincipalType.USER, "a"): 1}
        assert lookup[Principal(PrincipalType.USER, "a")] == 1


class TestPropertyAccess:
    def test_mapping_prefers_wire_key(self):
        assert get_property({"aclKey": 1, "acl_key": 2}, "acl_key", "aclKey") == 1

    def test_mapping_falls_back_to_attr_name(self):
        assert get_property({"acl_key": 2}, "acl_key", "aclKey") == 2

    def test_object_attribute(self):
        assert get_property(SimpleNamespace(title="t"), "title") == "t"
        assert get_property(SimpleNamespace(), "title") is None

    def test_has_property(self):
        assert has_property({"aclKey": None}, "acl_key", "aclKey") is True
        assert has_property({}, "title") is False
        assert has_property(SimpleNamespace(title="t"), "title") is True
