"""Math utilities for common operations."""

from __future__ import annotations

from typing import TypeVar

Number = TypeVar("Number", int, float)


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def inverse_lerp(a: float, b: float, x: float) -> float:
    """Position of x between a and b as a fraction.

    Args:
        a: Value mapped to 0.0
        b: Value mapped to 1.0
        x: Value to locate

    Returns:
        Fraction (unclamped); 0.0 when a == b
    """
    if b == a:
        return 0.0
    return (float(x) - float(a)) / (float(b) - float(a))
