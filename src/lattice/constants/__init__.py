"""API names, URL path segments, environment URLs and enum types."""
from lattice.constants import api_names, url_constants
from lattice.constants.environments import ENVIRONMENT_URLS, Environment
from lattice.constants.types import ActionType, GrantType, PermissionType, PrincipalType

__all__ = [
    "api_names",
    "url_constants",
    "ENVIRONMENT_URLS",
    "Environment",
    "ActionType",
    "GrantType",
    "PermissionType",
    "PrincipalType",
]
