# tests/core/test_transport.py
from __future__ import annotations

import json

import httpx
import pytest

from lattice.constants import PrincipalType, api_names
from lattice.core.config import Settings
from lattice.core.exceptions import LatticeError, TransportError, UnknownApiError
from lattice.core.transport import (
    API_TO_PATH_MAP,
    HttpMethod,
    HttpxTransport,
    get_api_base_url,
    get_transport,
    set_transport,
)
from lattice.models import Principal

BASE = "http://loom.test"


@pytest.fixture
def mock_http(monkeypatch):
    """Route every ``httpx.AsyncClient`` through ``handler`` and record requests."""
    seen: list[httpx.Request] = []
    state = {"handler": lambda request: httpx.Response(200, json={})}

    def dispatch(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return state["handler"](request)

    transport = httpx.MockTransport(dispatch)
    real_client = httpx.AsyncClient

    monkeypatch.setattr(
        httpx,
        "AsyncClient",
        lambda **kw: real_client(transport=transport, **kw),
    )

    def use(handler):
        state["handler"] = handler
        return seen

    return use


class TestGetApiBaseUrl:
    def test_known_apis(self):
        assert get_api_base_url(api_names.ORGANIZATIONS_API, BASE) == f"{BASE}/datastore/organizations"
        assert get_api_base_url(api_names.EDM_API, BASE + "/") == f"{BASE}/datastore/edm"

    def test_every_api_has_a_path(self):
        assert set(API_TO_PATH_MAP) == set(api_names.ALL_API_NAMES)

    def test_unknown_api_message_lists_known_apis(self):
        with pytest.raises(UnknownApiError) as exc:
            get_api_base_url("SearchApi", BASE)
        for name in api_names.ALL_API_NAMES:
            assert name in str(exc.value)

    @pytest.mark.parametrize("name", ["", "   ", None, "SearchApi"])
    def test_unknown_api(self, name):
        with pytest.raises(UnknownApiError):
            get_api_base_url(name, BASE)


class TestHttpxTransport:
    def test_defaults_from_settings(self):
        cfg = Settings(_env_file=None, base_url="http://custom:9000/", http_timeout_seconds=5)
        transport = HttpxTransport(settings=cfg)
        assert transport.base_url == "http://custom:9000"
        assert transport.timeout == 5
        assert transport.resolve_base_url(api_names.DATA_API) == "http://custom:9000/datastore/data"

    def test_explicit_arguments_win(self):
        cfg = Settings(_env_file=None, base_url="http://custom:9000")
        transport = HttpxTransport(base_url="http://other", timeout=1.5, settings=cfg)
        assert transport.base_url == "http://other"
        assert transport.timeout == 1.5

    @pytest.mark.asyncio
    async def test_get_decodes_json(self, mock_http):
        seen = mock_http(lambda request: httpx.Response(200, json=[{"id": 1}]))

        result = await HttpxTransport(base_url=BASE).send_request(HttpMethod.GET, f"{BASE}/datastore/edm/schema")

        assert result == [{"id": 1}]
        assert seen[0].method == "GET"
        assert str(seen[0].url) == f"{BASE}/datastore/edm/schema"

    @pytest.mark.asyncio
    async def test_model_body_sent_as_json(self, mock_http):
        seen = mock_http(lambda request: httpx.Response(200, text="new-id"))

        body = [Principal(PrincipalType.USER, "alice")]
        result = await HttpxTransport(base_url=BASE).send_request("post", f"{BASE}/x", body)

        assert result == "new-id"
        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == [{"type": "USER", "id": "alice"}]

    @pytest.mark.asyncio
    async def test_string_body_sent_as_text(self, mock_http):
        seen = mock_http(lambda request: httpx.Response(200))

        result = await HttpxTransport(base_url=BASE).send_request(HttpMethod.PUT, f"{BASE}/title", "Acme")

        assert result is None
        assert seen[0].content == b"Acme"
        assert seen[0].headers["Content-Type"] == "text/plain"

    @pytest.mark.asyncio
    async def test_delete_with_body(self, mock_http):
        seen = mock_http(lambda request: httpx.Response(204))

        await HttpxTransport(base_url=BASE).send_request(HttpMethod.DELETE, f"{BASE}/domains", ["a.com"])

        assert seen[0].method == "DELETE"
        assert json.loads(seen[0].content) == ["a.com"]

    @pytest.mark.asyncio
    async def test_query_params(self, mock_http):
        seen = mock_http(lambda request: httpx.Response(200, json={}))

        await HttpxTransport(base_url=BASE).send_request(HttpMethod.GET, f"{BASE}/data", params={"fileType": "csv"})

        assert seen[0].url.params["fileType"] == "csv"

    @pytest.mark.asyncio
    async def test_error_status_raises(self, mock_http):
        mock_http(lambda request: httpx.Response(404, text="no such organization"))

        with pytest.raises(TransportError) as exc:
            await HttpxTransport(base_url=BASE).send_request(HttpMethod.GET, f"{BASE}/missing")

        assert exc.value.status_code == 404
        assert exc.value.url == f"{BASE}/missing"
        assert exc.value.method == "GET"
        assert "no such organization" in str(exc.value)
        assert isinstance(exc.value.__cause__, httpx.HTTPStatusError)

    @pytest.mark.asyncio
    async def test_malformed_json_body_raises(self, mock_http):
        mock_http(
            lambda request: httpx.Response(
                200, content=b"{oops", headers={"content-type": "application/json"}
            )
        )

        with pytest.raises(LatticeError) as exc:
            await HttpxTransport(base_url=BASE).send_request(HttpMethod.GET, f"{BASE}/x")

        assert isinstance(exc.value, TransportError)
        assert exc.value.status_code == 200
        assert "invalid JSON body" in str(exc.value)
        assert isinstance(exc.value.__cause__, ValueError)

    @pytest.mark.asyncio
    async def test_network_error_raises(self, mock_http):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        mock_http(fail)

        with pytest.raises(TransportError) as exc:
            await HttpxTransport(base_url=BASE).send_request(HttpMethod.GET, f"{BASE}/x")

        assert exc.value.status_code is None
        assert "connection refused" in str(exc.value)

    @pytest.mark.asyncio
    async def test_unknown_method_rejected(self):
        with pytest.raises(ValueError):
            await HttpxTransport(base_url=BASE).send_request("TRACE", f"{BASE}/x")


class TestDefaultTransport:
    def test_lazily_created_and_replaceable(self):
        set_transport(None)
        try:
            default = get_transport()
            assert isinstance(default, HttpxTransport)
            assert get_transport() is default

            replacement = HttpxTransport(base_url=BASE)
            set_transport(replacement)
            assert get_transport() is replacement
        finally:
            set_transport(None)
