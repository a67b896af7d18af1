"""Base model and protocol for OCPP payload models.

Every OCPP model inherits from :class:`OcppBaseModel` which provides
``alias_generator=to_camel`` so the camelCase wire keys of OCPP 1.6
(``startPeriod``, ``numberPhases``) map to snake_case fields, while
still accepting the snake_case names on construction.

Models that can be in a "constructible but not yet valid" state also
implement :class:`Validatable`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@runtime_checkable
class Validatable(Protocol):
    """Anything exposing a side-effect free ``validate() -> bool`` predicate."""

    def validate(self) -> bool: ...


class OcppBaseModel(BaseModel):
    """Base for OCPP payload models."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
