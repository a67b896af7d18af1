"""Normalization helpers for wire values."""

from __future__ import annotations

import math

from pyocpp._constants import LIMIT_DECIMALS


def round_limit(value: float, decimals: int = LIMIT_DECIMALS) -> float:
    """Round a power limit to *decimals* fractional digits.

    Always returns a ``float`` so encoders emit at least one fractional
    digit (``16`` becomes ``16.0``), while float noise such as
    ``8.100000000000001`` collapses back to ``8.1``.
    """
    result = float(value)
    if math.isnan(result) or math.isinf(result):
        return result
    return float(round(result, decimals))
