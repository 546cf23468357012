"""Helpers for numeric normalization."""

import math
from decimal import Decimal


def coerce_float(value) -> float:
    """Normalize numeric values to a finite float.

    Args:
        value: Raw numeric value from SQL or adapters (number, numeric
            string, Decimal or None).

    Returns:
        float: Parsed value, or 0.0 when parsing fails or the result is
        not finite.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        candidate = value
    elif isinstance(value, str):
        candidate = value.strip()
        if not candidate:
            return 0.0
    else:
        return 0.0
    try:
        number = float(candidate)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


__all__ = ["coerce_float"]
