"""Version information for lcrparams."""

__version__ = "1.0.0"
__license__ = "BSD-3-Clause"
__description__ = "Recommended fLPS and SEG parameters for a target low-complexity region length"
