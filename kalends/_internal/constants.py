"""Internal constants for Kalends.

These constants define the unit sizes and approximations used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Exact unit conversions
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000
MS_PER_WEEK: int = 7 * MS_PER_DAY

# Fixed approximations for variable-length units (display/estimation only)
MS_PER_YEAR_APPROX: int = 31_557_600_000  # 365.25 days
MS_PER_MONTH_APPROX: int = 2_630_016_000  # 30.44 days

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days in a full 400-year Gregorian cycle
DAYS_PER_400_YEARS: int = 146_097

# Ordinal (0001-01-01 == 1) of the Unix epoch, 1970-01-01
UNIX_EPOCH_ORDINAL: int = 719_163

# 1970-01-01 was a Thursday (0=Sunday)
UNIX_EPOCH_WEEKDAY: int = 4

INVALID_DATE: str = "Invalid Date"


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "MS_PER_WEEK",
    "MS_PER_YEAR_APPROX",
    "MS_PER_MONTH_APPROX",
    "DAYS_IN_MONTH",
    "DAYS_PER_400_YEARS",
    "UNIX_EPOCH_ORDINAL",
    "UNIX_EPOCH_WEEKDAY",
    "INVALID_DATE",
]
