"""Unit tests for the timing calculator.

WHY: The keyframe percentages and delays must agree or words overlap or
leave gaps. A zero word count must never leak NaN into the CSS.

RULES:
- Floating-point comparisons use pytest.approx with default tolerance.
"""

import math

import pytest

from mstr_animation.core.timing import compute_timeline
from mstr_animation.errors import InvalidInput


class TestComputeTimeline:

    def test_three_words(self):
        timeline = compute_timeline(3, 2)
        assert timeline.total_duration == 6
        assert timeline.visible_percentage == pytest.approx(33.3333333)
        assert timeline.fade_percentage == pytest.approx(6.6666667)
        assert timeline.opaque_until == pytest.approx(26.6666667)
        assert timeline.delays == (0, 2, 4)

    def test_formula_holds_for_many_counts(self):
        for n in range(1, 25):
            timeline = compute_timeline(n, 1.5)
            assert timeline.visible_percentage == 100 / n
            assert timeline.fade_percentage == pytest.approx(0.2 * (100 / n))
            assert timeline.delays == tuple(i * 1.5 for i in range(n))
            assert timeline.total_duration == pytest.approx(1.5 * n)
            assert timeline.word_count == n

    def test_two_words(self):
        timeline = compute_timeline(2, 2)
        assert timeline.visible_percentage == 50
        assert timeline.fade_percentage == 10
        assert timeline.opaque_until == 40
        assert timeline.delays == (0, 2)

    def test_single_word_is_not_special_cased(self):
        """One word still fades over the last 20% of every cycle."""
        timeline = compute_timeline(1, 2)
        assert timeline.visible_percentage == 100
        assert timeline.fade_percentage == 20
        assert timeline.opaque_until == 80
        assert timeline.total_duration == 2
        assert timeline.delays == (0,)

    def test_fractional_duration(self):
        timeline = compute_timeline(4, 0.5)
        assert timeline.total_duration == 2
        assert timeline.delays == (0, 0.5, 1.0, 1.5)


class TestDegenerateTiming:

    def test_zero_words_rejected(self):
        with pytest.raises(InvalidInput):
            compute_timeline(0, 2)

    def test_negative_count_rejected(self):
        with pytest.raises(InvalidInput):
            compute_timeline(-1, 2)

    @pytest.mark.parametrize("duration", [0, -1, math.nan, math.inf])
    def test_bad_duration_rejected(self, duration):
        with pytest.raises(InvalidInput):
            compute_timeline(3, duration)

    def test_overflowing_cycle_rejected(self):
        """A finite per-word duration can still overflow once multiplied by N."""
        with pytest.raises(InvalidInput):
            compute_timeline(2, 1e308)
