# tests/conftest.py
from __future__ import annotations

from typing import Any, Iterator

import pytest

from lattice.core.transport import Transport, get_api_base_url, set_transport

BASE_URL = "http://loom.test"


class FakeTransport(Transport):
    """Records every request and answers with a canned response."""

    def __init__(self, response: Any = None) -> None:
        self.response = response
        self.calls: list[dict[str, Any]] = []

    def resolve_base_url(self, api_name: str) -> str:
        return get_api_base_url(api_name, BASE_URL)

    async def send_request(self, method, url, body=None, *, params=None):
        self.calls.append({"method": str(getattr(method, "value", method)), "url": url, "body": body, "params": params})
        return self.response

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def fake_transport() -> Iterator[FakeTransport]:
    transport = FakeTransport(response={"ok": True})
    set_transport(transport)
    yield transport
    set_transport(None)


@pytest.fixture
def principal_dicts() -> list[dict[str, str]]:
    return [
        {"type": "USER", "id": "auth0|alice"},
        {"type": "ROLE", "id": "admins"},
    ]


@pytest.fixture
def transport_factory():
    return FakeTransport
