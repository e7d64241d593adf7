"""Unit tests for span building and segment splitting.

WHY: The splitter decides exactly which characters render bold. It must
keep the original casing and never drop or duplicate a character.

HOW: Hand-computed spans for "master" and mixed-case words, the
reconstruction property over a word list, and invalid index handling.
"""

import pytest

from mstr_animation.core.matcher import filter_words, find_match_indices
from mstr_animation.core.models import Segment, Span
from mstr_animation.core.segments import build_spans, split_segments, split_word
from mstr_animation.errors import InvalidInput


class TestBuildSpans:

    def test_master_spans(self):
        assert build_spans("master", (0, 2, 3, 5)) == [
            Span(0, 0, False),
            Span(0, 1, True),
            Span(1, 2, False),
            Span(2, 3, True),
            Span(3, 3, False),
            Span(3, 4, True),
            Span(4, 5, False),
            Span(5, 6, True),
            Span(6, 6, False),
        ]

    def test_always_two_k_plus_one(self):
        assert len(build_spans("mstr", (0, 1, 2, 3))) == 9
        assert len(build_spans("abc", (1,))) == 3

    def test_emphasized_spans_are_one_character(self):
        for span in build_spans("armstrong", (2, 3, 4, 5)):
            if span.emphasized:
                assert span.end - span.start == 1


class TestSplitWord:
    """split_word keeps every candidate segment, empties included."""

    def test_master_candidates(self):
        segments = split_word("master", (0, 2, 3, 5))
        assert [s.text for s in segments] == ["", "m", "a", "s", "", "t", "e", "r", ""]
        assert [s.emphasized for s in segments] == [
            False, True, False, True, False, True, False, True, False,
        ]

    def test_reconstruction(self):
        words = ["master", "Monster", "MUSTARD", "armstrong", "mmssttrr", "a-m-s-t-r-z", "İmstr"]
        for word in filter_words(words):
            segments = split_word(word, find_match_indices(word))
            assert len(segments) == 9
            assert "".join(s.text for s in segments) == word


class TestSplitSegments:
    """split_segments drops empty runs and keeps casing."""

    def test_master(self):
        assert split_segments("master", (0, 2, 3, 5)) == [
            Segment("m", True),
            Segment("a", False),
            Segment("s", True),
            Segment("t", True),
            Segment("e", False),
            Segment("r", True),
        ]

    def test_original_casing_kept(self):
        word = "MaSTeR"
        segments = split_segments(word, find_match_indices(word))
        assert [(s.text, s.emphasized) for s in segments] == [
            ("M", True),
            ("a", False),
            ("S", True),
            ("T", True),
            ("e", False),
            ("R", True),
        ]

    def test_sentinel_is_all_bold(self):
        segments = split_segments("mstr", (0, 1, 2, 3))
        assert [s.text for s in segments] == ["m", "s", "t", "r"]
        assert all(s.emphasized for s in segments)

    def test_no_empty_segments(self):
        for word in ["master", "mstr", "xmstrx", "Armstrong"]:
            indices = find_match_indices(word)
            assert all(s.text for s in split_segments(word, indices))

    def test_leading_and_trailing_runs(self):
        segments = split_segments("Armstrong", (2, 3, 4, 5))
        assert segments[0] == Segment("Ar", False)
        assert segments[-1] == Segment("ong", False)


class TestInvalidIndices:

    @pytest.mark.parametrize("indices", [(2, 1, 3, 4), (0, 0, 1, 2), (0, 2, 3, 10), (-1, 2, 3, 4)])
    def test_rejected(self, indices):
        with pytest.raises(InvalidInput):
            split_segments("master", indices)
