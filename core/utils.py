"""
Core Utility Functions for the EVM Portfolio Dashboard

This module contains the numeric helpers shared by the calculation engine:
- Finite-number checks
- Tolerant coercion of record fields to floats
- Division with an explicit fallback value

None of these functions raise for bad numeric input; callers always receive
a finite float.
"""

from __future__ import annotations
import math
import logging
from typing import Any

# Set up logging
logger = logging.getLogger(__name__)


# ============================================================================
# VALIDATION & SAFETY FUNCTIONS
# ============================================================================

def is_valid_finite_number(value: Any) -> bool:
    """
    Check if a value is a valid finite number.

    Args:
        value: Value to check

    Returns:
        bool: True if the value converts to a finite float

    Examples:
        >>> is_valid_finite_number(1.5)
        True
        >>> is_valid_finite_number(float('nan'))
        False
        >>> is_valid_finite_number("abc")
        False
    """
    if value is None or isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (ValueError, TypeError, OverflowError):
        return False


def to_float(value: Any, default: float = 0.0) -> float:
    """
    Coerce a record field to a finite float.

    Args:
        value: Raw field value (number, numeric string, None, ...)
        default: Value used when the input is missing, non-numeric or not finite

    Returns:
        float: The coerced value
    """
    if is_valid_finite_number(value):
        return float(value)
    if value is not None:
        logger.debug(f"Non-numeric value {value!r} coerced to {default}")
    return default


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Divide two numbers, returning ``default`` instead of failing.

    The fallback applies when the denominator is not strictly positive or
    when the quotient is not finite.

    Args:
        numerator: The numerator value
        denominator: The denominator value
        default: Value returned on degenerate input

    Returns:
        float: numerator / denominator, or default

    Examples:
        >>> safe_divide(10, 4)
        2.5
        >>> safe_divide(10, 0, default=1.0)
        1.0
    """
    try:
        if not denominator > 0:
            return default
        result = numerator / denominator
        if math.isinf(result) or math.isnan(result):
            return default
        return result
    except (ZeroDivisionError, TypeError, ValueError, OverflowError):
        return default
