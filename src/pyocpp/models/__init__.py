"""Data models for OCPP payloads."""

from pyocpp.models._base import OcppBaseModel, Validatable
from pyocpp.models.schedule_period import SchedulePeriod, ValidSchedulePeriod

__all__ = [
    "OcppBaseModel",
    "SchedulePeriod",
    "Validatable",
    "ValidSchedulePeriod",
]
