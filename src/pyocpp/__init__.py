"""pyocpp - OCPP 1.6 charging schedule period model."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyocpp")
except PackageNotFoundError:
    __version__ = "0+local"
from pyocpp.config import OcppConfig
from pyocpp.exceptions import (
    OcppConfigError,
    OcppError,
    OcppPayloadError,
    OcppValidationError,
)
from pyocpp.models import (
    OcppBaseModel,
    SchedulePeriod,
    Validatable,
    ValidSchedulePeriod,
)
from pyocpp.payload import (
    period_from_json,
    period_from_payload,
    period_to_json,
    period_to_payload,
)

__all__ = [
    "__version__",
    "OcppBaseModel",
    "OcppConfig",
    "OcppConfigError",
    "OcppError",
    "OcppPayloadError",
    "OcppValidationError",
    "SchedulePeriod",
    "Validatable",
    "ValidSchedulePeriod",
    "period_from_json",
    "period_from_payload",
    "period_to_json",
    "period_to_payload",
]
