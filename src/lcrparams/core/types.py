"""Value types shared by the fLPS and SEG recommenders."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union


class Focus(str, Enum):
    """How tightly parameters are tuned to the exact target length."""

    DIVERSE = "DIVERSE"  # length variance allowed
    NARROW = "NARROW"  # length variance minimized


class Convention(str, Enum):
    """Which region finder the parameters are meant for."""

    FLPS = "flps"  # small_m, big_m, t
    SEG = "seg"  # L, K1, K2


class InvalidReason(Enum):
    """Which NA wording an invalid row is reported with."""

    OUT_OF_BOUNDS = "out_of_bounds"
    LENGTH_BELOW_TEN = "length_below_ten"


@dataclass(frozen=True)
class FlpsParameters:
    """Window-size bounds and binomial threshold for fLPS."""

    small_m: int
    big_m: int
    threshold_exponent: float

    @property
    def threshold(self) -> float:
        """P-value threshold, 10 ** threshold_exponent."""
        return math.pow(10.0, self.threshold_exponent)


@dataclass(frozen=True)
class SegParameters:
    """Window length and trigger/extension entropies for SEG."""

    window_length: int
    k1: float
    k2: float


Parameters = Union[FlpsParameters, SegParameters]


@dataclass(frozen=True)
class ParameterRow:
    """One coverage level's recommendation.

    ``parameters`` is None for invalid rows; ``upper_bound`` is the row's
    maximum target length and is reported in the NA line.
    """

    coverage: int
    upper_bound: int
    parameters: Optional[Parameters] = None
    reason: Optional[InvalidReason] = None

    @property
    def valid(self) -> bool:
        return self.parameters is not None


@dataclass(frozen=True)
class FlpsEstimate:
    """Raw fLPS formula outputs before validation.

    Window sizes stay floats so that an unset (negative) target length
    can flow through as NaN.
    """

    small_m: float
    big_m: float
    threshold_exponent: float


@dataclass(frozen=True)
class SegEstimate:
    """Raw SEG formula outputs before validation."""

    window_length: float
    k1: float
    k2: float


@dataclass(frozen=True)
class RowSpec:
    """Formula table entry: row upper bound and the formula evaluating it."""

    max_length: int
    compute: Callable[[int], Union[FlpsEstimate, SegEstimate]]
