"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# ChargingSchedulePeriod sentinels and defaults
# ------------------------------------------------------------------

# -2 marks "not set yet"; any negative value fails validation.
UNSET_START_PERIOD = -2
UNSET_LIMIT = -2.0

# Protocol default when the station does not restrict the phase count.
DEFAULT_NUMBER_PHASES = 3

# Producers may send at most one fractional digit for ``limit`` (e.g. 8.1).
LIMIT_DECIMALS = 1
