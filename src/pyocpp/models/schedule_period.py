"""Charging schedule period models.

A ``ChargingSchedulePeriod`` is one entry of an OCPP 1.6
``ChargingSchedule``: from ``start_period`` seconds after the start of
the schedule (up to the next period's start) the charge point may draw
at most ``limit`` Amperes over ``number_phases`` phases.

Two shapes are provided:

* :class:`SchedulePeriod` is the mutable draft. It can be built empty
  (sentinel values) and filled in field by field; ``validate()`` reports
  whether the current values are usable. Given well-typed values it never
  raises on its own.
* :class:`ValidSchedulePeriod` is the frozen form that can only exist
  with valid values. Obtain one via :meth:`SchedulePeriod.to_valid` or
  :meth:`ValidSchedulePeriod.from_draft`.

Ordering and overlap of periods inside a schedule are the schedule's
concern, not the period's.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

from pydantic import ConfigDict, Field, SerializationInfo, field_serializer

from pyocpp._constants import DEFAULT_NUMBER_PHASES, LIMIT_DECIMALS, UNSET_LIMIT, UNSET_START_PERIOD
from pyocpp.exceptions import OcppValidationError
from pyocpp.models._base import OcppBaseModel
from pyocpp.normalize import round_limit


class _PeriodModel(OcppBaseModel):
    """Serialization shared by both period shapes.

    ``model_dump(by_alias=True)`` yields the wire keys in declaration order
    (``startPeriod``, ``limit``, ``numberPhases``). ``limit`` is rounded to
    the ``limit_decimals`` passed in the serialization context.
    """

    @field_serializer("limit", check_fields=False)
    def _serialize_limit(self, value: float, info: SerializationInfo) -> float:
        context = info.context or {}
        return round_limit(value, context.get("limit_decimals", LIMIT_DECIMALS))


class SchedulePeriod(_PeriodModel):
    """Mutable charging schedule period.

    Parameters
    ----------
    start_period : int
        Seconds from the start of the schedule. Also the stop time of the
        previous period. Defaults to the ``-2`` "unset" sentinel.
    limit : float
        Power limit in Amperes. Producers must send at most one fractional
        digit (e.g. ``8.1``); this is not checked. Defaults to ``-2.0``.
    number_phases : int or None
        Number of phases usable for charging, ``None`` when absent.
        Defaults to 3.
    """

    # Assignments are type-checked, never range-checked.
    model_config = ConfigDict(validate_assignment=True)

    start_period: int = UNSET_START_PERIOD
    """Start of the period, in seconds from the start of the schedule."""

    limit: float = UNSET_LIMIT
    """Power limit during the period, in Amperes."""

    number_phases: int | None = DEFAULT_NUMBER_PHASES
    """Number of phases that can be used for charging (``None`` = absent)."""

    def __init__(
        self,
        start_period: int = UNSET_START_PERIOD,
        limit: float = UNSET_LIMIT,
        number_phases: int | None = DEFAULT_NUMBER_PHASES,
    ) -> None:
        super().__init__(start_period=start_period, limit=limit, number_phases=number_phases)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_start_period(self) -> int:
        return self.start_period

    def set_start_period(self, start_period: int) -> None:
        """Set the start offset. Not range-checked; a non-integral value such as
        ``1.5`` raises :class:`pydantic.ValidationError`.
        """
        self.start_period = start_period

    def get_limit(self) -> float:
        return self.limit

    def set_limit(self, limit: float) -> None:
        """Set the limit. Neither sign nor precision is checked; a non-numeric
        value raises :class:`pydantic.ValidationError`.
        """
        self.limit = limit

    def get_number_phases(self) -> int | None:
        return self.number_phases

    def set_number_phases(self, number_phases: int | None) -> None:
        """Set the phase count, ``None`` for absent. A non-integral value raises
        :class:`pydantic.ValidationError`.
        """
        self.number_phases = number_phases

    # ------------------------------------------------------------------
    # Validity
    # ------------------------------------------------------------------

    def validate(self) -> bool:  # type: ignore[override]
        """Return ``True`` when ``start_period`` and ``limit`` are both non-negative.

        ``number_phases`` is not considered. Evaluated on every call since
        the fields stay mutable.
        """
        return self.start_period >= 0 and self.limit >= 0

    @property
    def is_valid(self) -> bool:
        return self.validate()

    def to_valid(self) -> ValidSchedulePeriod | None:
        """Return a frozen :class:`ValidSchedulePeriod` copy, or ``None`` if invalid."""
        if not self.validate():
            return None
        return ValidSchedulePeriod(
            start_period=self.start_period,
            limit=self.limit,
            number_phases=self.number_phases,
        )

    # ------------------------------------------------------------------
    # Equality / hashing / representation
    # ------------------------------------------------------------------

    def _key(self) -> tuple[Any, ...]:
        # NaN != NaN would break reflexivity.
        limit: Any = "nan" if math.isnan(self.limit) else self.limit
        return (self.start_period, limit, self.number_phases)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, SchedulePeriod) or type(other) is not type(self):
            return False
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr_args__(self) -> Iterator[tuple[str | None, Any]]:
        yield "start_period", self.start_period
        yield "limit", self.limit
        yield "number_phases", self.number_phases
        yield "is_valid", self.validate()


class ValidSchedulePeriod(_PeriodModel):
    """Frozen charging schedule period that is valid by construction.

    Building one with a negative ``start_period`` or ``limit`` raises
    :class:`pydantic.ValidationError`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    start_period: int = Field(..., ge=0)
    """Start of the period, in seconds from the start of the schedule."""

    limit: float = Field(..., ge=0)
    """Power limit during the period, in Amperes."""

    number_phases: int | None = DEFAULT_NUMBER_PHASES
    """Number of phases that can be used for charging (``None`` = absent)."""

    @classmethod
    def from_draft(cls, draft: SchedulePeriod) -> ValidSchedulePeriod:
        """Promote *draft* or raise :class:`OcppValidationError` naming the offending field."""
        valid = draft.to_valid()
        if valid is None:
            field = "start_period" if draft.start_period < 0 else "limit"
            raise OcppValidationError(
                f"Schedule period is not valid: {draft!r}",
                field=field,
            )
        return valid

    def validate(self) -> bool:  # type: ignore[override]
        return True

    def to_draft(self) -> SchedulePeriod:
        """Return a new mutable :class:`SchedulePeriod` with the same values."""
        return SchedulePeriod(self.start_period, self.limit, self.number_phases)
