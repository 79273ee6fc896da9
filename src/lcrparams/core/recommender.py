"""Dispatch from (convention, focus, target length) to the five coverage rows."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Tuple

from lcrparams.constants import COVERAGE_LEVELS
from lcrparams.core import flps, seg
from lcrparams.core.types import Convention, Focus, ParameterRow
from lcrparams.exceptions import RecommendationError

RowEvaluator = Callable[[int, Focus, int], ParameterRow]

EVALUATORS: Dict[Convention, RowEvaluator] = {
    Convention.FLPS: flps.evaluate_row,
    Convention.SEG: seg.evaluate_row,
}


def recommend_row(
    target_length: int,
    focus: Focus,
    convention: Convention,
    coverage: int,
) -> ParameterRow:
    """Compute a single coverage level's row.

    Rows do not depend on each other, so any subset can be computed in any
    order with identical results.

    Raises:
        RecommendationError: unknown convention or coverage level
    """
    try:
        evaluate = EVALUATORS[Convention(convention)]
    except (KeyError, ValueError):
        raise RecommendationError(
            f"Unknown convention: {convention!r}", convention=convention
        ) from None
    return evaluate(target_length, Focus(focus), coverage)


def recommend(
    target_length: int,
    focus: Focus,
    convention: Convention,
    coverages: Iterable[int] = COVERAGE_LEVELS,
) -> Tuple[ParameterRow, ...]:
    """Compute the rows for every coverage level, in the order given.

    With the default ``coverages`` this is always five rows ordered
    2%, 5%, 10%, 25%, 40%; out-of-bounds rows are returned as invalid rows,
    never raised.
    """
    return tuple(
        recommend_row(target_length, focus, convention, coverage) for coverage in coverages
    )
