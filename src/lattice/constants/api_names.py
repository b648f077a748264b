# lattice/constants/api_names.py
"""Names of the REST API families exposed by the platform."""
from __future__ import annotations

AUTHORIZATIONS_API = "AuthorizationsApi"
DATA_API = "DataApi"
EDM_API = "EntityDataModelApi"
ORGANIZATIONS_API = "OrganizationsApi"
PERMISSIONS_API = "PermissionsApi"
PRINCIPALS_API = "PrincipalsApi"

ALL_API_NAMES: tuple[str, ...] = (
    AUTHORIZATIONS_API,
    DATA_API,
    EDM_API,
    ORGANIZATIONS_API,
    PERMISSIONS_API,
    PRINCIPALS_API,
)
