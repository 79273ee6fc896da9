"""Tests for the -f / -l value readers."""

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lcrparams.core.types import Focus
from lcrparams.utils.validators import in_target_range, parse_focus, parse_target_length


class TestParseFocus:
    """Only the exact string 'narrow' selects NARROW."""

    def test_narrow(self):
        assert parse_focus("narrow") is Focus.NARROW

    @pytest.mark.parametrize("value", ["diverse", "NARROW", "Narrow", "narow", "narrow ", "", None])
    def test_everything_else_is_diverse(self, value):
        assert parse_focus(value) is Focus.DIVERSE


class TestParseTargetLength:
    """Leading-integer reads."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("15", 15),
            (" 20", 20),
            ("20aa", 20),
            ("+7", 7),
            ("-3", -3),
            ("301", 301),
            ("12.9", 12),
        ],
    )
    def test_leading_integer(self, value, expected):
        assert parse_target_length(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "x15", "-", " "])
    def test_no_integer(self, value):
        assert parse_target_length(value) is None


class TestInTargetRange:
    """Inclusive 5-300."""

    @pytest.mark.parametrize("value", [5, 15, 300])
    def test_inside(self, value):
        assert in_target_range(value)

    @pytest.mark.parametrize("value", [4, 301, -1, None])
    def test_outside(self, value):
        assert not in_target_range(value)
