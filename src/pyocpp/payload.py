"""Wire mapping for charging schedule periods.

OCPP 1.6 carries a ``ChargingSchedulePeriod`` as an object with the keys
``startPeriod``, ``limit`` and the optional ``numberPhases``. Encoding
keeps that key order, leaves ``numberPhases`` out when it is absent and
always emits ``limit`` as a finite decimal.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pyocpp._constants import DEFAULT_NUMBER_PHASES
from pyocpp.config import OcppConfig
from pyocpp.exceptions import OcppPayloadError, OcppValidationError
from pyocpp.models.schedule_period import SchedulePeriod, ValidSchedulePeriod

_logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = OcppConfig()


def period_to_payload(
    period: SchedulePeriod | ValidSchedulePeriod,
    *,
    config: OcppConfig | None = None,
) -> dict[str, Any]:
    """Encode *period* as an OCPP ``ChargingSchedulePeriod`` dict.

    Raises
    ------
    OcppValidationError
        When ``limit`` is not finite, or when ``config.reject_invalid`` is
        set and the period is invalid.
    """
    cfg = config or _DEFAULT_CONFIG
    if not math.isfinite(period.limit):
        raise OcppValidationError(f"limit must be a finite number, got {period.limit!r}", field="limit")
    if cfg.reject_invalid and not period.validate():
        field = "startPeriod" if period.start_period < 0 else "limit"
        raise OcppValidationError(f"Refusing to encode invalid schedule period: {period!r}", field=field)

    exclude: set[str] | None = None
    if not cfg.emit_default_phases and period.number_phases == DEFAULT_NUMBER_PHASES:
        exclude = {"number_phases"}
    return period.model_dump(
        by_alias=True,
        exclude_none=True,
        exclude=exclude,
        context={"limit_decimals": cfg.limit_decimals},
    )


def period_from_payload(data: Any) -> SchedulePeriod:
    """Decode an OCPP ``ChargingSchedulePeriod`` dict into a :class:`SchedulePeriod`.

    Accepts camelCase or snake_case keys and numeric strings. A missing
    ``startPeriod`` or ``limit`` keeps the "unset" sentinel, so the result
    reports ``validate() == False`` instead of failing here. A missing or
    ``null`` ``numberPhases`` decodes as absent (``None``).

    Raises
    ------
    OcppPayloadError
        When *data* is not a mapping or a present value does not fit its
        field type (non-numeric, or non-integral for an integer field).
    """
    if not isinstance(data, Mapping):
        raise OcppPayloadError(f"Schedule period payload must be an object, got {type(data).__name__}")

    values = dict(data)
    # Absent on the wire means absent, not the protocol default.
    if "numberPhases" not in values and "number_phases" not in values:
        values["numberPhases"] = None

    try:
        period = SchedulePeriod.model_validate(values)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else ""
        raise OcppPayloadError(f"Invalid schedule period payload: {field}: {error['msg']}", field=field) from exc

    if not period.validate():
        _logger.debug("Decoded invalid schedule period %r from %s", period, values)
    return period


def period_to_json(
    period: SchedulePeriod | ValidSchedulePeriod,
    *,
    config: OcppConfig | None = None,
) -> str:
    """Encode *period* to a JSON string (see :func:`period_to_payload`)."""
    return json.dumps(period_to_payload(period, config=config), allow_nan=False)


def period_from_json(text: str | bytes) -> SchedulePeriod:
    """Decode a JSON ``ChargingSchedulePeriod`` (see :func:`period_from_payload`)."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as exc:
        raise OcppPayloadError(f"Invalid schedule period JSON: {exc}") from exc
    return period_from_payload(data)
