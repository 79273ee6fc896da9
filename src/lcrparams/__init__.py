"""lcrparams: parameter recommendations for low-complexity region finders."""

from lcrparams.__version__ import __version__
from lcrparams.core.recommender import recommend, recommend_row
from lcrparams.core.types import Convention, Focus, ParameterRow

__all__ = [
    "__version__",
    "recommend",
    "recommend_row",
    "Convention",
    "Focus",
    "ParameterRow",
]
