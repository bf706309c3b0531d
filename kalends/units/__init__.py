"""Unit types for Kalends.

This module provides:
    - TimeUnit: Calendar units (YEAR, MONTH, DAY, ...)
"""

from __future__ import annotations

from kalends.units.timeunit import TimeUnit

__all__: list[str] = [
    "TimeUnit",
]
