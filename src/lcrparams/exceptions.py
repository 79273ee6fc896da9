"""Custom exceptions for lcrparams."""


class LcrParamsError(Exception):
    """Base exception for all lcrparams errors."""

    pass


class ConfigurationError(LcrParamsError):
    """Raised when configuration is invalid or cannot be read."""

    pass


class RecommendationError(LcrParamsError, ValueError):
    """Raised when the recommender is asked for something it has no formula for.

    An out-of-bounds parameter row is *not* an error; it is reported as an
    ``NA`` row. This is only raised for arguments outside the closed set of
    coverage levels and conventions.
    """

    def __init__(self, message="", convention=None, coverage=None):
        """Initialize RecommendationError with the offending lookup key.

        Args:
            message: Error message
            convention: Convention that was requested
            coverage: Coverage level that was requested
        """
        super().__init__(message)
        self.convention = convention
        self.coverage = coverage
