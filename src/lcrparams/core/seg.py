"""SEG parameter recommendations (window length, trigger and extension entropy).

Fits are piecewise in target length. Where two fitted ranges leave a gap
(for example 35 < T <= 45) the two neighbouring fits are both evaluated and
averaged; for the window length the average is taken before rounding.
Under a NARROW focus the window equals the target length and K1 equals K2.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from lcrparams.constants import MIN_TARGET_LENGTH, SEG_DIVERSE_40_MIN_LENGTH, SEG_MAX_K2
from lcrparams.core.formulas import blend, c_round, log_fit, power_law
from lcrparams.core.types import (
    Focus,
    InvalidReason,
    ParameterRow,
    RowSpec,
    SegEstimate,
    SegParameters,
)
from lcrparams.exceptions import RecommendationError


# ---------------------------------------------------------------- DIVERSE


def _diverse_2(length: int) -> SegEstimate:
    if length <= 35:
        window = power_law(1.274, 0.823, length)
        k2 = log_fit(0.701, 0.155, length)
    elif length > 45:
        window = power_law(1.004, 0.891, length)
        k2 = log_fit(0.447, 1.038, length)
    else:
        window = blend(power_law(1.274, 0.823, length), power_law(1.004, 0.891, length))
        k2 = blend(log_fit(0.701, 0.155, length), log_fit(0.447, 1.038, length))
    return SegEstimate(c_round(window), k2 - 0.3, k2)


def _diverse_5(length: int) -> SegEstimate:
    # No gap here; the K1 offset changes with the range.
    if length <= 50:
        window = power_law(1.385, 0.801, length)
        k2 = log_fit(0.716, 0.381, length)
        return SegEstimate(c_round(window), k2 - 0.3, k2)
    window = power_law(0.747, 0.912, length)
    k2 = log_fit(0.337, 1.883, length)
    return SegEstimate(c_round(window), k2 - 0.4, k2)


def _diverse_10(length: int) -> SegEstimate:
    if length <= 45:
        window = power_law(1.376, 0.799, length)
        k2 = log_fit(0.69, 0.625, length)
    elif length > 55:
        window = power_law(1.298, 0.809, length)
        k2 = log_fit(0.347, 1.93, length)
    else:
        window = blend(power_law(1.376, 0.799, length), power_law(1.298, 0.809, length))
        k2 = blend(log_fit(0.69, 0.625, length), log_fit(0.347, 1.93, length))
    return SegEstimate(c_round(window), k2 - 0.3, k2)


def _diverse_25(length: int) -> SegEstimate:
    window = power_law(1.507, 0.762, length)
    if length <= 45:
        k2 = log_fit(0.476, 1.566, length)
    elif length > 55:
        k2 = log_fit(0.314, 2.221, length)
    else:
        k2 = blend(log_fit(0.476, 1.566, length), log_fit(0.314, 2.221, length))
    return SegEstimate(c_round(window), k2 - 0.3, k2)


def _diverse_40(length: int) -> SegEstimate:
    if length <= 55:
        window = power_law(1.491, 0.793, length)
        k2 = log_fit(0.581, 1.316, length)
    elif length > 65:
        window = power_law(1.138, 0.86, length)
        k2 = log_fit(0.28, 2.442, length)
    else:
        window = blend(power_law(1.491, 0.793, length), power_law(1.138, 0.86, length))
        k2 = blend(log_fit(0.581, 1.316, length), log_fit(0.28, 2.442, length))
    return SegEstimate(c_round(window), k2 - 0.2, k2)


# ---------------------------------------------------------------- NARROW


def _narrow(short_fit: Tuple[float, float], long_fit: Tuple[float, float]) -> Callable[[int], SegEstimate]:
    """Build a NARROW row from its T<=45 and T>55 entropy fits."""

    def compute(length: int) -> SegEstimate:
        if length <= 45:
            k2 = log_fit(*short_fit, length)
        elif length > 55:
            k2 = log_fit(*long_fit, length)
        else:
            k2 = blend(log_fit(*short_fit, length), log_fit(*long_fit, length))
        return SegEstimate(float(length), k2, k2)

    return compute


SEG_TABLE: Dict[Tuple[Focus, int], RowSpec] = {
    (Focus.DIVERSE, 2): RowSpec(200, _diverse_2),
    (Focus.DIVERSE, 5): RowSpec(300, _diverse_5),
    (Focus.DIVERSE, 10): RowSpec(300, _diverse_10),
    (Focus.DIVERSE, 25): RowSpec(300, _diverse_25),
    (Focus.DIVERSE, 40): RowSpec(300, _diverse_40),
    (Focus.NARROW, 2): RowSpec(250, _narrow((0.818, -0.245), (0.418, 1.206))),
    (Focus.NARROW, 5): RowSpec(300, _narrow((0.824, -0.003), (0.355, 1.731))),
    (Focus.NARROW, 10): RowSpec(300, _narrow((0.803, 0.251), (0.3, 2.135))),
    (Focus.NARROW, 25): RowSpec(300, _narrow((0.788, 0.499), (0.278, 2.405))),
    (Focus.NARROW, 40): RowSpec(250, _narrow((0.705, 0.887), (0.257, 2.596))),
}


# ---------------------------------------------------------------- validity

SegRule = Callable[[int, Focus, int, int, SegEstimate], bool]


def _length_out_of_range(length, focus, coverage, max_length, estimate) -> bool:
    return length < MIN_TARGET_LENGTH or length > max_length


def _entropy_too_high(length, focus, coverage, max_length, estimate) -> bool:
    return estimate.k2 > SEG_MAX_K2


SEG_RULES: Tuple[SegRule, ...] = (
    _length_out_of_range,
    _entropy_too_high,
)


def _diverse_40_short(length: int, focus: Focus, coverage: int) -> bool:
    """DIVERSE 40% rows need T >= 10 and say so in their NA line."""
    return coverage == 40 and focus is Focus.DIVERSE and length < SEG_DIVERSE_40_MIN_LENGTH


def evaluate_row(length: int, focus: Focus, coverage: int) -> ParameterRow:
    """Compute and validate the SEG row for one coverage level."""
    try:
        spec = SEG_TABLE[(focus, coverage)]
    except KeyError:
        raise RecommendationError(
            f"No SEG formula for coverage level {coverage!r} ({focus})",
            convention="seg",
            coverage=coverage,
        ) from None

    estimate = spec.compute(length)
    if _diverse_40_short(length, focus, coverage):
        return ParameterRow(coverage, spec.max_length, reason=InvalidReason.LENGTH_BELOW_TEN)
    if any(rule(length, focus, coverage, spec.max_length, estimate) for rule in SEG_RULES):
        return ParameterRow(coverage, spec.max_length, reason=InvalidReason.OUT_OF_BOUNDS)

    parameters = SegParameters(
        window_length=int(estimate.window_length),
        k1=estimate.k1,
        k2=estimate.k2,
    )
    return ParameterRow(coverage, spec.max_length, parameters=parameters)
