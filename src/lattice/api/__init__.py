"""One module per REST resource; every request function is a coroutine."""
from lattice.api import (
    authorizations_api,
    data_api,
    edm_api,
    organizations_api,
    permissions_api,
    principals_api,
)

__all__ = [
    "authorizations_api",
    "data_api",
    "edm_api",
    "organizations_api",
    "permissions_api",
    "principals_api",
]
