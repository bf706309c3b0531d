"""Internal utilities for Kalends.

This module contains private implementation details:
    - Calendar math (day numbers, field normalization, week numbers)
    - Constants and unit sizes
    - Validation of parsed components

Note: This module is not part of the public API.
"""

from __future__ import annotations

from kalends._internal.calendar import fields_to_ms, ms_to_fields
from kalends._internal.validation import (
    validate_day,
    validate_fields,
    validate_range,
)

__all__: list[str] = [
    "fields_to_ms",
    "ms_to_fields",
    "validate_day",
    "validate_fields",
    "validate_range",
]
