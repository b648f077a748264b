# lattice/models/template.py
"""
Minimal model/builder pair that every other model follows.

The builder validates in each setter and only checks presence in
``build()``; ``is_valid_model`` replays a candidate through the builder.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from lattice.core.exceptions import InvalidParameterError, LatticeError, MissingPropertyError
from lattice.models.base import ValueObject, get_property
from lattice.utils.lang import is_defined
from lattice.utils.validation import is_valid_uuid, normalize_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Model(ValueObject):
    id: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id}


class ModelBuilder:
    def __init__(self) -> None:
        self._id: str | None = None

    def set_id(self, model_id: str | UUID) -> ModelBuilder:
        if not is_valid_uuid(model_id):
            raise InvalidParameterError("id", "must be a valid UUID")

        self._id = normalize_uuid(model_id)
        return self

    def build(self) -> Model:
        if not self._id:
            raise MissingPropertyError("id")

        return Model(self._id)


def is_valid_model(model: Any) -> bool:
    if not is_defined(model):
        logger.warning("invalid parameter: model must be defined")
        return False

    try:
        ModelBuilder().set_id(get_property(model, "id")).build()
        return True
    except LatticeError as exc:
        logger.warning("invalid model: %s", exc)
        return False
