"""Tests for the fitted-curve primitives."""

from pathlib import Path
import math
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lcrparams.core.formulas import blend, c_round, linear, log_fit, power_law


class TestCRound:
    """Rounding follows C round(): halves go away from zero."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (2.5, 3.0),
            (3.5, 4.0),
            (0.5, 1.0),
            (2.4999, 2.0),
            (9.975, 10.0),
            (-2.5, -3.0),
            (-2.4, -2.0),
            (7.0, 7.0),
        ],
    )
    def test_rounding(self, value, expected):
        assert c_round(value) == expected

    def test_differs_from_builtin_round_on_even_halves(self):
        assert round(2.5) == 2
        assert c_round(2.5) == 3

    def test_nan_passes_through(self):
        assert math.isnan(c_round(math.nan))

    def test_infinity_passes_through(self):
        assert c_round(math.inf) == math.inf


class TestFits:
    """Power-law, log and linear fits."""

    def test_power_law_matches_direct_expression(self):
        assert power_law(2.534, 0.506, 15) == 2.534 * 15 ** 0.506

    def test_power_law_negative_length_is_nan(self):
        assert math.isnan(power_law(2.534, 0.506, -1))

    def test_power_law_zero_length(self):
        assert power_law(2.534, 0.506, 0) == 0.0

    def test_log_fit_matches_direct_expression(self):
        assert log_fit(0.701, 0.155, 15) == 0.701 * math.log(15) + 0.155

    def test_log_fit_negative_intercept_matches_subtraction(self):
        assert log_fit(0.818, -0.245, 40) == 0.818 * math.log(40) - 0.245

    def test_log_fit_negative_length_is_nan(self):
        assert math.isnan(log_fit(0.701, 0.155, -1))

    def test_log_fit_zero_length_is_negative_infinity(self):
        assert log_fit(0.701, 0.155, 0) == -math.inf

    def test_linear_matches_direct_expression(self):
        assert linear(-0.153, -3.994, 15) == -0.153 * 15 - 3.994

    def test_blend_is_mean(self):
        assert blend(2.0, 3.0) == 2.5
        assert blend(-5.0, -4.0) == -4.5
