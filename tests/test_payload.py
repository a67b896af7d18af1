from __future__ import annotations

import json
import logging
import math

import pytest

from pyocpp.config import OcppConfig
from pyocpp.exceptions import OcppPayloadError, OcppValidationError
from pyocpp.models.schedule_period import SchedulePeriod, ValidSchedulePeriod
from pyocpp.payload import period_from_json, period_from_payload, period_to_json, period_to_payload


def test_payload_keys_follow_wire_order() -> None:
    payload = period_to_payload(SchedulePeriod(0, 16.0, 1))
    assert list(payload) == ["startPeriod", "limit", "numberPhases"]
    assert payload == {"startPeriod": 0, "limit": 16.0, "numberPhases": 1}


def test_absent_phases_are_omitted() -> None:
    payload = period_to_payload(SchedulePeriod(10, 8.1, None))
    assert payload == {"startPeriod": 10, "limit": 8.1}
    assert "numberPhases" not in payload


def test_default_phases_omitted_when_configured() -> None:
    config = OcppConfig(emit_default_phases=False)
    assert period_to_payload(SchedulePeriod(0, 6.0), config=config) == {"startPeriod": 0, "limit": 6.0}
    assert period_to_payload(SchedulePeriod(0, 6.0, 1), config=config)["numberPhases"] == 1


def test_limit_keeps_one_fractional_digit() -> None:
    assert period_to_json(SchedulePeriod(0, 16)) == '{"startPeriod": 0, "limit": 16.0, "numberPhases": 3}'


def test_limit_float_noise_is_stripped() -> None:
    period = SchedulePeriod(0, 0.1 + 0.2)
    assert period_to_payload(period)["limit"] == 0.3


def test_limit_decimals_configurable() -> None:
    config = OcppConfig(limit_decimals=2)
    assert period_to_payload(SchedulePeriod(0, 8.126), config=config)["limit"] == 8.13
    assert period_to_payload(SchedulePeriod(0, 8.126))["limit"] == 8.1


def test_invalid_period_rejected_by_default() -> None:
    with pytest.raises(OcppValidationError) as excinfo:
        period_to_payload(SchedulePeriod())
    assert excinfo.value.field == "startPeriod"

    with pytest.raises(OcppValidationError) as excinfo:
        period_to_payload(SchedulePeriod(0, -1.0))
    assert excinfo.value.field == "limit"


def test_invalid_period_encoded_when_allowed() -> None:
    payload = period_to_payload(SchedulePeriod(), config=OcppConfig(reject_invalid=False))
    assert payload == {"startPeriod": -2, "limit": -2.0, "numberPhases": 3}


def test_valid_period_encodes() -> None:
    payload = period_to_payload(ValidSchedulePeriod(start_period=120, limit=32.0, number_phases=None))
    assert payload == {"startPeriod": 120, "limit": 32.0}


def test_decode_camel_case() -> None:
    period = period_from_payload({"startPeriod": 10, "limit": 8.1, "numberPhases": 1})
    assert period == SchedulePeriod(10, 8.1, 1)


def test_decode_snake_case_and_strings() -> None:
    period = period_from_payload({"start_period": "60", "limit": "11.5", "number_phases": "2"})
    assert period == SchedulePeriod(60, 11.5, 2)


def test_decode_missing_or_null_phases_is_absent() -> None:
    assert period_from_payload({"startPeriod": 0, "limit": 6.0}).number_phases is None
    assert period_from_payload({"startPeriod": 0, "limit": 6.0, "numberPhases": None}).number_phases is None


def test_decode_missing_required_keeps_sentinels(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="pyocpp.payload"):
        period = period_from_payload({"limit": 6.0})
    assert period.start_period == -2
    assert period.validate() is False
    assert "Decoded invalid schedule period" in caplog.text


def test_decode_rejects_non_mapping() -> None:
    with pytest.raises(OcppPayloadError):
        period_from_payload([0, 16.0, 3])


@pytest.mark.parametrize(
    ("payload", "field"),
    [
        ({"startPeriod": "soon", "limit": 1.0}, "startPeriod"),
        ({"startPeriod": 0, "limit": "--"}, "limit"),
        ({"startPeriod": 0, "limit": 1.0, "numberPhases": 1.5}, "numberPhases"),
        ({"startPeriod": 7.9, "limit": 1.0}, "startPeriod"),
        ({"startPeriod": "7.9", "limit": 1.0}, "startPeriod"),
    ],
)
def test_decode_rejects_non_numeric(payload: dict, field: str) -> None:
    with pytest.raises(OcppPayloadError) as excinfo:
        period_from_payload(payload)
    assert excinfo.value.field == field


def test_json_round_trip_preserves_absent_phases() -> None:
    original = SchedulePeriod(10, 8.1, None)
    text = period_to_json(original)
    assert json.loads(text) == {"startPeriod": 10, "limit": 8.1}
    assert period_from_json(text) == original


def test_decode_malformed_json() -> None:
    with pytest.raises(OcppPayloadError):
        period_from_json("{startPeriod: 0")


def test_decode_keeps_large_integers_exact() -> None:
    start = 2**53 + 1
    period = period_from_payload({"startPeriod": start, "limit": 1.0})
    assert period.start_period == start
    assert period_from_json('{"startPeriod": 9007199254740993, "limit": 1.0}').start_period == 9007199254740993


def test_decode_ignores_unknown_keys() -> None:
    period = period_from_payload({"startPeriod": 0, "limit": 6.0, "numberPhases": 1, "chargingRateUnit": "A"})
    assert period == SchedulePeriod(0, 6.0, 1)


@pytest.mark.parametrize("limit", [math.inf, -math.inf, math.nan])
def test_non_finite_limit_never_encoded(limit: float) -> None:
    for config in (OcppConfig(), OcppConfig(reject_invalid=False)):
        with pytest.raises(OcppValidationError) as excinfo:
            period_to_json(SchedulePeriod(0, limit), config=config)
        assert excinfo.value.field == "limit"


def test_encoded_json_is_strict() -> None:
    text = period_to_json(SchedulePeriod(900, 32.0, None))

    def _reject_constant(name: str) -> None:
        raise ValueError(name)

    assert json.loads(text, parse_constant=_reject_constant) == {"startPeriod": 900, "limit": 32.0}
