# lattice/constants/url_constants.py
"""Fixed URL path segments used when assembling request paths."""
from __future__ import annotations

# base
DATASTORE_PATH = "datastore"

# api families
AUTHORIZATIONS_PATH = "authorizations"
DATA_PATH = "data"
EDM_PATH = "edm"
ORGANIZATIONS_PATH = "organizations"
PERMISSIONS_PATH = "permissions"
PRINCIPALS_PATH = "principals"

# shared
ENTITY_SET_PATH = "entity/set"
IDS_PATH = "ids"
SCHEMA_PATH = "schema"

# data
ENTITY_DATA_PATH = "entitydata"
MULTIPLE_PATH = "multiple"
SELECTED_PATH = "selected"
FILE_TYPE = "fileType"

# organizations
DESCRIPTION_PATH = "description"
EMAIL_DOMAINS_PATH = "email-domains"
MEMBERS_PATH = "members"
ROLES_PATH = "roles"
TITLE_PATH = "title"

# principals
CURRENT_PATH = "current"
SEARCH_PATH = "search"
USERS_PATH = "users"
