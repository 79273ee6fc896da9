"""Shared constants for lcrparams.

Bounds and defaults used by both the fLPS and SEG recommenders and by the
command line.
"""

# ================== Target Length ==================
# Accepted range of -l (inclusive)
MIN_TARGET_LENGTH: int = 5
MAX_TARGET_LENGTH: int = 300

# Substituted when -l is out of range (and, by default, when it is omitted)
DEFAULT_TARGET_LENGTH: int = 15

# Value a target length holds before -l is read
UNSET_TARGET_LENGTH: int = -1


# ================== Coverage Levels ==================
# Approximate percentage of proteins annotated; output order is fixed
COVERAGE_LEVELS: tuple = (2, 5, 10, 25, 40)


# ================== fLPS Bounds ==================
# log10 of the binomial p-value threshold must not exceed this (t <= 0.001)
FLPS_MAX_THRESHOLD_EXPONENT: float = -3.0

# Smallest usable minimum window size
FLPS_MIN_SMALL_M: int = 5


# ================== SEG Bounds ==================
# Largest usable extension entropy
SEG_MAX_K2: float = 4.2

# DIVERSE 40% rows need at least this target length
SEG_DIVERSE_40_MIN_LENGTH: int = 10


# ================== Unset Length Policies ==================
MISSING_LENGTH_DEFAULT = "default"
MISSING_LENGTH_SENTINEL = "sentinel"
MISSING_LENGTH_POLICIES = (MISSING_LENGTH_DEFAULT, MISSING_LENGTH_SENTINEL)
