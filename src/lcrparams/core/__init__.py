"""Parameter recommendation core."""

from lcrparams.core.recommender import recommend, recommend_row
from lcrparams.core.types import (
    Convention,
    Focus,
    FlpsParameters,
    InvalidReason,
    ParameterRow,
    SegParameters,
)

__all__ = [
    "recommend",
    "recommend_row",
    "Convention",
    "Focus",
    "FlpsParameters",
    "InvalidReason",
    "ParameterRow",
    "SegParameters",
]
