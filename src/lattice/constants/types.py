# lattice/constants/types.py
"""
Closed enum types shared by models and API modules.

All enums are ``str`` subclasses so members serialize as their plain value
and compare equal to it (``PrincipalType.USER == "USER"``).
"""
from __future__ import annotations

from enum import Enum


class ActionType(str, Enum):
    ADD = "ADD"
    REMOVE = "REMOVE"
    REQUEST = "REQUEST"
    SET = "SET"


class GrantType(str, Enum):
    ATTRIBUTES = "ATTRIBUTES"
    AUTOMATIC = "AUTOMATIC"
    CLAIM = "CLAIM"
    EMAIL_DOMAIN = "EMAIL_DOMAIN"
    GROUP = "GROUP"
    MANUAL = "MANUAL"
    OTHER = "OTHER"


class PermissionType(str, Enum):
    DISCOVER = "DISCOVER"
    LINK = "LINK"
    MATERIALIZE = "MATERIALIZE"
    OWNER = "OWNER"
    READ = "READ"
    WRITE = "WRITE"


class PrincipalType(str, Enum):
    ORGANIZATION = "ORGANIZATION"
    ROLE = "ROLE"
    USER = "USER"
