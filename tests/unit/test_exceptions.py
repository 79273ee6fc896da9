"""Tests for exceptions module."""

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lcrparams.exceptions import ConfigurationError, LcrParamsError, RecommendationError


class TestExceptions:
    """Exception hierarchy."""

    def test_base_error(self):
        error = LcrParamsError("Test error message")
        assert str(error) == "Test error message"
        assert isinstance(error, Exception)

    def test_configuration_error_inherits_base(self):
        with pytest.raises(LcrParamsError):
            raise ConfigurationError("bad config")

    def test_recommendation_error_details(self):
        error = RecommendationError("no formula", convention="seg", coverage=3)
        assert isinstance(error, LcrParamsError)
        assert isinstance(error, ValueError)
        assert error.convention == "seg"
        assert error.coverage == 3

    def test_recommendation_error_defaults(self):
        error = RecommendationError()
        assert str(error) == ""
        assert error.convention is None
        assert error.coverage is None
