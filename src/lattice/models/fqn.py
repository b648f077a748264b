# lattice/models/fqn.py
"""
Fully qualified names (``namespace.name``) identifying entity types,
property types and schemas.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from lattice.core.exceptions import InvalidParameterError, LatticeError
from lattice.models.base import ValueObject
from lattice.utils.lang import is_non_empty_string
from lattice.utils.validation import validate_non_empty_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class FullyQualifiedName(ValueObject):
    namespace: str
    name: str

    def __post_init__(self) -> None:
        if not is_non_empty_string(self.namespace):
            raise InvalidParameterError("namespace", "must be a non-empty string")
        if not is_non_empty_string(self.name):
            raise InvalidParameterError("name", "must be a non-empty string")

    def __str__(self) -> str:
        return f"{self.namespace}.{self.name}"

    def to_dict(self) -> dict[str, Any]:
        return {"namespace": self.namespace, "name": self.name}

    @classmethod
    def from_string(cls, value: str) -> FullyQualifiedName:
        if not is_non_empty_string(value) or "." not in value:
            raise InvalidParameterError("fqn", "must be a string of the form 'namespace.name'")
        namespace, name = value.split(".", 1)
        return cls(namespace, name)

    @classmethod
    def of(cls, value: Any) -> FullyQualifiedName:
        """Coerce an FQN instance, a ``{namespace, name}`` mapping or a dotted string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls(value.get("namespace"), value.get("name"))
        if isinstance(value, str):
            return cls.from_string(value)
        raise InvalidParameterError("fqn", "must be a FullyQualifiedName, mapping or string")


def is_valid_fqn(value: Any) -> bool:
    try:
        FullyQualifiedName.of(value)
        return True
    except LatticeError as exc:
        logger.warning("invalid fqn %r: %s", value, exc)
        return False


def is_valid_fqn_array(values: Any) -> bool:
    return validate_non_empty_array(values, is_valid_fqn)
