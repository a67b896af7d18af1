"""Payload encoding configuration for pyocpp."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyocpp._constants import LIMIT_DECIMALS
from pyocpp.exceptions import OcppConfigError


def _env_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    raise OcppConfigError(f"{name} must be a boolean, got {value!r}")


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise OcppConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class OcppConfig:
    """Payload encoding configuration.

    Parameters
    ----------
    limit_decimals : int
        Fractional digits kept when encoding ``limit``. OCPP 1.6 allows
        one (e.g. ``8.1``). Must be ``>= 0``.
    reject_invalid : bool
        Refuse to encode a period whose ``validate()`` is ``False``.
    emit_default_phases : bool
        Emit ``numberPhases`` when it equals the protocol default (3).
        When ``False`` the key is left out and the receiver applies the
        default itself. An absent (``None``) value is never emitted.
    """

    limit_decimals: int = LIMIT_DECIMALS
    reject_invalid: bool = True
    emit_default_phases: bool = True

    def __post_init__(self) -> None:
        if self.limit_decimals < 0:
            raise OcppConfigError(f"limit_decimals must be >= 0, got {self.limit_decimals}")

    @classmethod
    def from_env(cls, **overrides: Any) -> OcppConfig:
        """Create configuration from environment variables.

        Reads ``OCPP_LIMIT_DECIMALS``, ``OCPP_REJECT_INVALID`` and
        ``OCPP_EMIT_DEFAULT_PHASES``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        OcppConfigError
            When an environment value cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        decimals_env = env.get("OCPP_LIMIT_DECIMALS")
        if decimals_env is not None and "limit_decimals" not in overrides:
            config_kwargs["limit_decimals"] = _env_int("OCPP_LIMIT_DECIMALS", decimals_env)

        if "reject_invalid" not in overrides:
            config_kwargs["reject_invalid"] = _env_bool(
                "OCPP_REJECT_INVALID",
                env.get("OCPP_REJECT_INVALID"),
                True,
            )

        if "emit_default_phases" not in overrides:
            config_kwargs["emit_default_phases"] = _env_bool(
                "OCPP_EMIT_DEFAULT_PHASES",
                env.get("OCPP_EMIT_DEFAULT_PHASES"),
                True,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
