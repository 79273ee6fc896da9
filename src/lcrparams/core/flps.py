"""fLPS parameter recommendations (minimum/maximum window size and threshold).

Each (focus, coverage) entry of ``FLPS_TABLE`` holds the regression fits
for that row. ``big_m`` and ``small_m`` are power laws in target length,
rounded to the nearest integer; the threshold is ``10 ** exponent`` where the
exponent is linear in target length. Under a NARROW focus the minimum and
maximum window sizes are always the same.
"""

from __future__ import annotations

from typing import Callable, Dict, Tuple

from lcrparams.constants import (
    FLPS_MAX_THRESHOLD_EXPONENT,
    FLPS_MIN_SMALL_M,
    MIN_TARGET_LENGTH,
)
from lcrparams.core.formulas import blend, c_round, linear, power_law
from lcrparams.core.types import (
    FlpsEstimate,
    FlpsParameters,
    Focus,
    InvalidReason,
    ParameterRow,
    RowSpec,
)
from lcrparams.exceptions import RecommendationError


# ---------------------------------------------------------------- DIVERSE


def _diverse_2(length: int) -> FlpsEstimate:
    big_m = c_round(power_law(2.534, 0.506, length))
    return FlpsEstimate(big_m - 2, big_m, linear(-0.153, -3.994, length))


def _diverse_5(length: int) -> FlpsEstimate:
    big_m = c_round(power_law(3.46, 0.508, length))
    return FlpsEstimate(big_m - 4, big_m, linear(-0.098, -3.305, length))


def _diverse_10(length: int) -> FlpsEstimate:
    big_m = c_round(power_law(3.912, 0.543, length))
    return FlpsEstimate(big_m - 10, big_m, linear(-0.055, -3.635, length))


def _diverse_25(length: int) -> FlpsEstimate:
    if length <= 105:
        big_m = c_round(power_law(5.647, 0.56, length))
        small_m = c_round(power_law(0.872, 0.797, length))
        return FlpsEstimate(small_m, big_m, linear(-0.039, -2.381, length))
    big_m = c_round(power_law(6.096, 0.552, length))
    return FlpsEstimate(big_m - 50, big_m, linear(-0.031, -2.93, length))


def _diverse_40(length: int) -> FlpsEstimate:
    if length <= 105:
        big_m = c_round(power_law(9.82, 0.522, length))
        small_m = c_round(power_law(0.481, 0.876, length))
        return FlpsEstimate(small_m, big_m, linear(-0.022, -2.709, length))
    big_m = c_round(power_law(11.126, 0.484, length))
    return FlpsEstimate(big_m - 80, big_m, linear(-0.025, -2.762, length))


# ---------------------------------------------------------------- NARROW


def _narrow_2(length: int) -> FlpsEstimate:
    big_m = c_round(power_law(2.324, 0.539, length))
    return FlpsEstimate(big_m, big_m, linear(-0.149, -3.883, length))


def _narrow_5(length: int) -> FlpsEstimate:
    big_m = c_round(power_law(2.976, 0.556, length))
    if length <= 28:
        exponent = linear(-0.127, -2.183, length)
    elif length >= 33:
        exponent = linear(-0.09, -3.173, length)
    else:
        exponent = blend(linear(-0.127, -2.183, length), linear(-0.09, -3.173, length))
    return FlpsEstimate(big_m, big_m, exponent)


def _narrow_10(length: int) -> FlpsEstimate:
    big_m = c_round(power_law(3.493, 0.572, length))
    return FlpsEstimate(big_m, big_m, linear(-0.058, -2.731, length))


def _narrow_25(length: int) -> FlpsEstimate:
    big_m = c_round(power_law(3.394, 0.672, length))
    exponent = -4.0 if length <= 90 else linear(-0.028, -1.695, length)
    return FlpsEstimate(big_m, big_m, exponent)


def _narrow_40(length: int) -> FlpsEstimate:
    big_m = c_round(power_law(0.889, 0.977, length))
    return FlpsEstimate(big_m, big_m, -4.0)


FLPS_TABLE: Dict[Tuple[Focus, int], RowSpec] = {
    (Focus.DIVERSE, 2): RowSpec(100, _diverse_2),
    (Focus.DIVERSE, 5): RowSpec(200, _diverse_5),
    (Focus.DIVERSE, 10): RowSpec(250, _diverse_10),
    (Focus.DIVERSE, 25): RowSpec(300, _diverse_25),
    (Focus.DIVERSE, 40): RowSpec(300, _diverse_40),
    (Focus.NARROW, 2): RowSpec(100, _narrow_2),
    (Focus.NARROW, 5): RowSpec(200, _narrow_5),
    (Focus.NARROW, 10): RowSpec(200, _narrow_10),
    (Focus.NARROW, 25): RowSpec(300, _narrow_25),
    (Focus.NARROW, 40): RowSpec(300, _narrow_40),
}


# ---------------------------------------------------------------- validity

# Each rule gets (length, focus, coverage, max_length, estimate) and returns
# True when the row must be reported as NA.
FlpsRule = Callable[[int, Focus, int, int, FlpsEstimate], bool]


def _length_out_of_range(length, focus, coverage, max_length, estimate) -> bool:
    return length < MIN_TARGET_LENGTH or length > max_length


def _threshold_too_permissive(length, focus, coverage, max_length, estimate) -> bool:
    return estimate.threshold_exponent > FLPS_MAX_THRESHOLD_EXPONENT


def _small_window(length, focus, coverage, max_length, estimate) -> bool:
    return estimate.small_m < FLPS_MIN_SMALL_M


def _narrow_25_short(length, focus, coverage, max_length, estimate) -> bool:
    return focus is Focus.NARROW and coverage == 25 and length < 50


def _narrow_40_short(length, focus, coverage, max_length, estimate) -> bool:
    return focus is Focus.NARROW and coverage == 40 and length < 100


def _diverse_40_short(length, focus, coverage, max_length, estimate) -> bool:
    return focus is Focus.DIVERSE and coverage == 40 and length <= 15


def _narrow_very_short(length, focus, coverage, max_length, estimate) -> bool:
    return focus is Focus.NARROW and length <= 10


FLPS_RULES: Tuple[FlpsRule, ...] = (
    _length_out_of_range,
    _threshold_too_permissive,
    _small_window,
    _narrow_25_short,
    _narrow_40_short,
    _diverse_40_short,
    _narrow_very_short,
)


def evaluate_row(length: int, focus: Focus, coverage: int) -> ParameterRow:
    """Compute and validate the fLPS row for one coverage level."""
    try:
        spec = FLPS_TABLE[(focus, coverage)]
    except KeyError:
        raise RecommendationError(
            f"No fLPS formula for coverage level {coverage!r} ({focus})",
            convention="flps",
            coverage=coverage,
        ) from None

    estimate = spec.compute(length)
    if any(rule(length, focus, coverage, spec.max_length, estimate) for rule in FLPS_RULES):
        return ParameterRow(coverage, spec.max_length, reason=InvalidReason.OUT_OF_BOUNDS)

    parameters = FlpsParameters(
        small_m=int(estimate.small_m),
        big_m=int(estimate.big_m),
        threshold_exponent=estimate.threshold_exponent,
    )
    return ParameterRow(coverage, spec.max_length, parameters=parameters)
