# lattice/constants/environments.py
"""Known deployment environments and their base URLs."""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Environment(str, Enum):
    LOCAL = "LOCAL"
    PROD = "PROD"


ENVIRONMENT_URLS: Mapping[Environment, str] = MappingProxyType(
    {
        Environment.LOCAL: "http://localhost:8080",
        Environment.PROD: "https://api.loom.digital",
    }
)
