"""Fitted-curve primitives used by the formula tables.

All fits are evaluated in IEEE double precision in the same operation order
as the published fits, so recommendations are reproducible bit for bit.
A negative target length (the unset sentinel) yields NaN instead of raising,
which then fails the length bound like any other out-of-range input.
"""

from __future__ import annotations

import math


def c_round(value: float) -> float:
    """Round to nearest integer, halves away from zero (C ``round()``).

    Python's built-in ``round`` rounds halves to even, which would move
    window sizes sitting exactly on .5. NaN and infinities pass through.
    """
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(whole, value)


def power_law(coefficient: float, exponent: float, length: float) -> float:
    """``coefficient * length ** exponent``."""
    if length < 0:
        return math.nan
    return coefficient * math.pow(length, exponent)


def log_fit(slope: float, intercept: float, length: float) -> float:
    """``slope * ln(length) + intercept``."""
    if length < 0:
        return math.nan
    if length == 0:
        return slope * -math.inf + intercept
    return slope * math.log(length) + intercept


def linear(slope: float, intercept: float, length: float) -> float:
    """``slope * length + intercept``."""
    return slope * length + intercept


def blend(first: float, second: float) -> float:
    """Average of two neighbouring fits, used across the gap between ranges."""
    return (first + second) / 2.0
