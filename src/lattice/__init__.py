# lattice/__init__.py
"""
Python client for the Loom data-model platform.

Usage::

    import lattice
    from lattice.api import organizations_api

    lattice.configure(environment="PROD", log_level="INFO")
    orgs = await organizations_api.get_all_organizations()

Without :func:`configure`, the transport is built lazily from
``LATTICE_*`` environment variables.
"""
from __future__ import annotations

from typing import Any

from lattice import api, constants, models
from lattice.api import (
    authorizations_api,
    data_api,
    edm_api,
    organizations_api,
    permissions_api,
    principals_api,
)
from lattice.core.config import Settings
from lattice.core.exceptions import (
    InvalidParameterError,
    LatticeError,
    MissingPropertyError,
    TransportError,
    UnknownApiError,
)
from lattice.core.logging import configure_logging
from lattice.core.transport import HttpxTransport, Transport, get_transport, set_transport

__version__ = "0.1.0"


def configure(
    *,
    base_url: str | None = None,
    environment: str | None = None,
    timeout: float | None = None,
    log_level: str | None = None,
) -> Transport:
    """Rebuild the process-wide transport from explicit overrides.

    Arguments left as None fall back to the ``LATTICE_*`` settings. Logging is
    only configured when ``log_level`` is given.
    """
    overrides: dict[str, Any] = {}
    if base_url is not None:
        overrides["base_url"] = base_url
    if environment is not None:
        overrides["environment"] = environment
    if timeout is not None:
        overrides["http_timeout_seconds"] = timeout
    if log_level is not None:
        overrides["log_level"] = log_level

    cfg = Settings(**overrides)
    transport = HttpxTransport(settings=cfg)
    set_transport(transport)

    if log_level is not None:
        configure_logging(cfg.log_level)
    return transport


__all__ = [
    "__version__",
    "api",
    "authorizations_api",
    "configure",
    "configure_logging",
    "constants",
    "data_api",
    "edm_api",
    "get_transport",
    "HttpxTransport",
    "InvalidParameterError",
    "LatticeError",
    "MissingPropertyError",
    "models",
    "organizations_api",
    "permissions_api",
    "principals_api",
    "set_transport",
    "Settings",
    "Transport",
    "TransportError",
    "UnknownApiError",
]
