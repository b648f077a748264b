# lattice/core/transport.py
"""
Transport collaborator: base URL resolution and the HTTP call.

API modules never touch httpx directly. They ask a :class:`Transport` for
the base URL of their API family, append their own path segments and hand
the finished URL back for the request.

Contract::

    resolve_base_url(api_name) -> "{base_url}/datastore/{api path}"
    await send_request(method, url, body=None, params=None) -> decoded body
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

import httpx

from lattice.constants import api_names, url_constants
from lattice.core.config import Settings, settings as default_settings
from lattice.core.exceptions import TransportError, UnknownApiError
from lattice.utils.serialization import to_json_value

logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


API_TO_PATH_MAP: Mapping[str, str] = MappingProxyType(
    {
        api_names.AUTHORIZATIONS_API: f"{url_constants.DATASTORE_PATH}/{url_constants.AUTHORIZATIONS_PATH}",
        api_names.DATA_API: f"{url_constants.DATASTORE_PATH}/{url_constants.DATA_PATH}",
        api_names.EDM_API: f"{url_constants.DATASTORE_PATH}/{url_constants.EDM_PATH}",
        api_names.ORGANIZATIONS_API: f"{url_constants.DATASTORE_PATH}/{url_constants.ORGANIZATIONS_PATH}",
        api_names.PERMISSIONS_API: f"{url_constants.DATASTORE_PATH}/{url_constants.PERMISSIONS_PATH}",
        api_names.PRINCIPALS_API: f"{url_constants.DATASTORE_PATH}/{url_constants.PRINCIPALS_PATH}",
    }
)


def get_api_base_url(api_name: str, base_url: str) -> str:
    """
    Build the base URL for an API family.

    Raises:
        UnknownApiError: If ``api_name`` is empty or not a known API.
    """
    if not isinstance(api_name, str) or not api_name.strip():
        raise UnknownApiError("invalid parameter: api must be a non-empty string")

    try:
        path = API_TO_PATH_MAP[api_name]
    except KeyError:
        raise UnknownApiError(
            f"unknown api: {api_name} (expected one of {', '.join(api_names.ALL_API_NAMES)})"
        ) from None

    return f"{base_url.rstrip('/')}/{path}"


class Transport(ABC):
    """Interface the API modules depend on."""

    @abstractmethod
    def resolve_base_url(self, api_name: str) -> str: ...

    @abstractmethod
    async def send_request(
        self,
        method: HttpMethod | str,
        url: str,
        body: Any = None,
        *,
        params: Mapping[str, str] | None = None,
    ) -> Any: ...


class HttpxTransport(Transport):
    """httpx-backed transport, one short-lived ``AsyncClient`` per request."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
        settings: Settings | None = None,
    ) -> None:
        cfg = settings or default_settings
        self._base = (base_url or cfg.resolved_base_url()).rstrip("/")
        self._timeout = timeout if timeout is not None else cfg.http_timeout_seconds
        self._headers = dict(headers or {})

    @property
    def base_url(self) -> str:
        return self._base

    @property
    def timeout(self) -> float:
        return self._timeout

    def resolve_base_url(self, api_name: str) -> str:
        return get_api_base_url(api_name, self._base)

    async def send_request(
        self,
        method: HttpMethod | str,
        url: str,
        body: Any = None,
        *,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        verb = HttpMethod(method.upper() if isinstance(method, str) else method).value
        request_kwargs: dict[str, Any] = {}
        if params:
            request_kwargs["params"] = dict(params)
        if isinstance(body, str):
            request_kwargs["content"] = body
            request_kwargs["headers"] = {"Content-Type": "text/plain"}
        elif body is not None:
            request_kwargs["json"] = to_json_value(body)

        logger.debug("Sending %s %s", verb, url)
        async with httpx.AsyncClient(timeout=self._timeout, headers=self._headers) as client:
            try:
                resp = await client.request(verb, url, **request_kwargs)
                resp.raise_for_status()
            except httpx.HTTPStatusError as ex:
                logger.warning(
                    "Request failed method=%s url=%s status=%s reason=%s",
                    verb,
                    url,
                    ex.response.status_code,
                    ex.response.text,
                )
                raise TransportError(verb, url, ex.response.status_code, ex.response.text) from ex
            except httpx.HTTPError as ex:
                logger.warning("Request failed method=%s url=%s error=%s", verb, url, ex)
                raise TransportError(verb, url, reason=str(ex)) from ex

        try:
            return decode_response(resp)
        except ValueError as ex:
            logger.warning("Undecodable response method=%s url=%s status=%s", verb, url, resp.status_code)
            raise TransportError(verb, url, resp.status_code, "invalid JSON body") from ex


def decode_response(resp: httpx.Response) -> Any:
    """Unwrap a response body: JSON when declared, text otherwise, None if empty.

    Raises:
        ValueError: If the body declares JSON but does not parse.
    """
    if not resp.content:
        return None
    content_type = resp.headers.get("content-type", "")
    if "json" in content_type:
        return resp.json()
    return resp.text


_default_transport: Transport | None = None


def get_transport() -> Transport:
    """Return the process-wide transport, creating it from settings on first use."""
    global _default_transport
    if _default_transport is None:
        _default_transport = HttpxTransport()
    return _default_transport


def set_transport(transport: Transport | None) -> None:
    """Replace the process-wide transport; ``None`` resets to the settings default."""
    global _default_transport
    _default_transport = transport
