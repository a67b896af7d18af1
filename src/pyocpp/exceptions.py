"""Custom exception hierarchy for pyocpp."""

from __future__ import annotations


class OcppError(Exception):
    """Base exception for all pyocpp errors."""


class OcppConfigError(OcppError):
    """Invalid or missing configuration."""


class OcppPayloadError(OcppError):
    """A wire payload could not be decoded (not a mapping, bad JSON, uncoercible value)."""

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)


class OcppValidationError(OcppError):
    """A model failed its ``validate()`` predicate where a valid one was required.

    The models themselves never raise this; it is raised by the boundary
    helpers (payload encoding, :meth:`ValidSchedulePeriod.from_draft`) that
    refuse to pass an invalid instance on.
    """

    def __init__(self, message: str, *, field: str = "") -> None:
        self.field = field
        super().__init__(message)
