"""Tests for the recommender dispatch and its whole-table properties."""

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from lcrparams import recommend, recommend_row
from lcrparams.constants import COVERAGE_LEVELS, UNSET_TARGET_LENGTH
from lcrparams.core.formulas import c_round
from lcrparams.core.types import Convention, Focus, InvalidReason
from lcrparams.exceptions import RecommendationError

ALL_LENGTHS = range(5, 301)


@pytest.mark.parametrize("convention", list(Convention))
@pytest.mark.parametrize("focus", list(Focus))
class TestWholeTable:
    """Properties over every valid target length."""

    def test_five_rows_in_coverage_order(self, convention, focus):
        for length in ALL_LENGTHS:
            rows = recommend(length, focus, convention)
            assert [row.coverage for row in rows] == [2, 5, 10, 25, 40]

    def test_deterministic(self, convention, focus):
        for length in ALL_LENGTHS:
            assert recommend(length, focus, convention) == recommend(length, focus, convention)

    def test_reverse_order_gives_same_rows(self, convention, focus):
        for length in ALL_LENGTHS:
            forward = recommend(length, focus, convention)
            backward = recommend(length, focus, convention, coverages=reversed(COVERAGE_LEVELS))
            assert tuple(reversed(backward)) == forward

    def test_single_row_matches_full_table(self, convention, focus):
        rows = recommend(60, focus, convention)
        for row in rows:
            assert recommend_row(60, focus, convention, row.coverage) == row


class TestSpecificCases:
    """Cases called out for the two conventions."""

    def test_flps_diverse_15(self):
        rows = recommend(15, Focus.DIVERSE, Convention.FLPS)
        assert rows[0].valid
        assert rows[0].parameters.big_m == c_round(2.534 * 15 ** 0.506)
        assert not rows[-1].valid

    def test_flps_narrow_10_all_invalid(self):
        rows = recommend(10, Focus.NARROW, Convention.FLPS)
        assert not any(row.valid for row in rows)

    def test_flps_narrow_small_m_equals_big_m(self):
        for length in ALL_LENGTHS:
            for row in recommend(length, Focus.NARROW, Convention.FLPS):
                if row.valid:
                    assert row.parameters.small_m == row.parameters.big_m

    def test_seg_diverse_9_coverage_40(self):
        row = recommend(9, Focus.DIVERSE, Convention.SEG)[-1]
        assert row.coverage == 40
        assert row.reason is InvalidReason.LENGTH_BELOW_TEN

    def test_seg_k1_never_exceeds_k2(self):
        for focus in Focus:
            for length in ALL_LENGTHS:
                for row in recommend(length, focus, Convention.SEG):
                    if row.valid:
                        assert row.parameters.k1 <= row.parameters.k2


class TestUnsetLength:
    """Computing on the unset value -1 gives NA rows without raising."""

    @pytest.mark.parametrize("convention", list(Convention))
    @pytest.mark.parametrize("focus", list(Focus))
    def test_all_rows_invalid(self, convention, focus):
        rows = recommend(UNSET_TARGET_LENGTH, focus, convention)
        assert len(rows) == 5
        assert not any(row.valid for row in rows)

    def test_seg_diverse_40_keeps_below_ten_wording(self):
        row = recommend(UNSET_TARGET_LENGTH, Focus.DIVERSE, Convention.SEG)[-1]
        assert row.reason is InvalidReason.LENGTH_BELOW_TEN


class TestDispatch:
    """Argument handling."""

    def test_string_values_accepted(self):
        assert recommend(15, "NARROW", "seg") == recommend(15, Focus.NARROW, Convention.SEG)

    def test_unknown_convention(self):
        with pytest.raises(RecommendationError):
            recommend_row(15, Focus.DIVERSE, "blast", 2)

    def test_unknown_coverage(self):
        with pytest.raises(RecommendationError):
            recommend_row(15, Focus.DIVERSE, Convention.FLPS, 3)
