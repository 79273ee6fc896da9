"""Utility functions (lcrparams)."""

from lcrparams.utils.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
