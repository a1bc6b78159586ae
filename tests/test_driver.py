"""
Tests for the comparison driver and the command line entry point.

Tallies for small widths are checked against hand-derived counts: for abs
and neg, only ranges starting at signed_min differ. The singleton
{signed_min} goes to the decomposed side (its result is empty), every
other range starting there goes to the composite side.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from transfer_precision.bitwidth import BitWidth
from transfer_precision.cli import DEFAULT_BITWIDTH, main
from transfer_precision.constant_range import ConstantRange
from transfer_precision.driver import ComparisonResult, compare_range, run_comparison
from transfer_precision.precision import Outcome
from transfer_precision.transfer import make_transfer_pair


def tally(result: ComparisonResult):
    return (
        result.total,
        result.composite_more_precise,
        result.decomposed_more_precise,
        result.incomparable,
    )


class TestComparisonResult:
    """Counter bookkeeping."""

    def test_record_each_outcome(self):
        result = ComparisonResult(bitwidth=3)
        for outcome in Outcome:
            result.record(outcome)
        assert tally(result) == (4, 1, 1, 1)
        assert result.identical == 1

    def test_summary(self):
        result = ComparisonResult(bitwidth=3, composite_more_precise=6,
                                  decomposed_more_precise=1, total=29)
        assert result.summary().splitlines() == [
            "Total abstract values: 29",
            "Tests where composite fn was more precise: 6",
            "Tests where decomposed fn was more precise: 1",
            "Incomparable results: 0",
        ]


class TestCompareRange:
    """Single-input classification."""

    def test_signed_min_singleton(self):
        composite, decomposed = make_transfer_pair("abs")
        r = ConstantRange.single(3, -4)
        assert compare_range(r, composite, decomposed) is Outcome.DECOMPOSED

    def test_signed_min_pair(self):
        composite, decomposed = make_transfer_pair("abs")
        r = ConstantRange(BitWidth(3), -4, -2)
        assert compare_range(r, composite, decomposed) is Outcome.COMPOSITE

    def test_range_without_signed_min(self):
        composite, decomposed = make_transfer_pair("abs")
        r = ConstantRange(BitWidth(3), -3, 3)
        assert compare_range(r, composite, decomposed) is Outcome.IDENTICAL


class TestRunComparison:
    """Whole-width runs."""

    @pytest.mark.parametrize("bits, expected", [
        (1, (2, 0, 1, 0)),
        (2, (7, 2, 1, 0)),
        (3, (29, 6, 1, 0)),
        (5, (497, 30, 1, 0)),
    ])
    def test_abs_tally(self, bits, expected):
        result = run_comparison(bits, *make_transfer_pair("abs"))
        assert tally(result) == expected
        assert result.bitwidth == bits

    def test_abs_poison_tally(self):
        result = run_comparison(3, *make_transfer_pair("abs", int_min_is_poison=True))
        assert tally(result) == (29, 0, 0, 0)
        assert result.identical == 29

    def test_neg_tally(self):
        result = run_comparison(3, *make_transfer_pair("neg"))
        assert tally(result) == (29, 6, 1, 0)

    @pytest.mark.parametrize("bits", [2, 3, 4])
    def test_conservation(self, bits):
        result = run_comparison(bits, *make_transfer_pair("abs"))
        counted = (result.composite_more_precise
                   + result.decomposed_more_precise
                   + result.incomparable)
        assert counted <= result.total
        assert result.identical == result.total - counted

    def test_deterministic(self):
        first = run_comparison(4, *make_transfer_pair("abs"))
        second = run_comparison(4, *make_transfer_pair("abs"))
        assert first == second

    def test_accepts_bitwidth_instance(self):
        result = run_comparison(BitWidth(2), *make_transfer_pair("abs"))
        assert result.total == 7


class TestMain:
    """Command line entry point."""

    @pytest.fixture(autouse=True)
    def reset_logger(self):
        yield
        logger.remove()

    def test_default_bitwidth(self):
        assert DEFAULT_BITWIDTH == 5

    def test_prints_summary(self, capsys):
        main(["--bitwidth", "3", "-q"])
        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Analysis for signed integers with bitwidth 3:",
            "Total abstract values: 29",
            "Tests where composite fn was more precise: 6",
            "Tests where decomposed fn was more precise: 1",
            "Incomparable results: 0",
        ]

    def test_default_run(self, capsys):
        main(["-q"])
        out = capsys.readouterr().out
        assert "bitwidth 5:" in out
        assert "Total abstract values: 497" in out

    def test_invalid_bitwidth_exits(self):
        with pytest.raises(SystemExit) as exc:
            main(["--bitwidth", "0", "-q"])
        assert exc.value.code == 1

    def test_neg_poison_exits(self):
        with pytest.raises(SystemExit) as exc:
            main(["--operation", "neg", "--int-min-is-poison", "-q"])
        assert exc.value.code == 1
