"""Pytest configuration for lcrparams tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to Python path
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def reset_logging_after_test():
    """Reset lcrparams logger state after each test.

    setup_logging() sets propagate=False and installs handlers bound to the
    stream of the test that called it.
    """
    yield
    app_logger = logging.getLogger("lcrparams")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


@pytest.fixture
def runner():
    """Click test runner; stdout and stderr are captured separately."""
    from click.testing import CliRunner

    return CliRunner()
