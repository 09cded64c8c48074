"""
Total arithmetic helpers for the planning calculators.

Calculators never raise on degenerate inputs. Division by zero yields
+/-inf (or nan for 0/0) and caps propagate nan, following IEEE 754 float
semantics via numpy rather than Python's ZeroDivisionError.
"""

import numpy as np


def divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics (x/0 -> +/-inf, 0/0 -> nan)."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def power(base: float, exponent: float) -> float:
    """Raise to a power, overflowing to inf instead of raising."""
    with np.errstate(over="ignore", invalid="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))


def cap(value: float, upper: float = 100.0) -> float:
    """Cap a value from above; nan stays nan."""
    return float(np.minimum(value, upper))


def floor_at(value: float, lower: float = 0.0) -> float:
    """Bound a value from below; nan stays nan."""
    return float(np.maximum(value, lower))


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp a value into [lower, upper]; nan stays nan."""
    return float(np.minimum(upper, np.maximum(lower, value)))


def round_half_up(value: float) -> float:
    """Round to the nearest whole rupee, halves rounding up."""
    return float(np.floor(np.float64(value) + 0.5))
