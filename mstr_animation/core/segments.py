"""Split a word into emphasised and plain runs around its matched letters.

WHY: The emitter renders each word as a row of ``<tspan>`` runs, bold for
the matched letters, grey for everything between. Computing the runs as
index spans first keeps the text untouched (original casing, no
re-allocation per slice) and works for any number of target letters.

HOW: For k match indices, emit 2k + 1 spans alternating plain and
emphasised: the run before the first letter, the letter, the run up to
the next letter, ... , the run after the last letter. Segments are the
spans materialised against the original word.

RULES:
- k indices always give 2k + 1 spans, in left-to-right order
- Emphasised spans are exactly one character wide
- Plain spans may be empty (adjacent letters, letter at either end)
- Concatenating every span's text reproduces the word exactly
- split_segments drops empty runs; split_word keeps them
"""

from __future__ import annotations

from typing import List, Sequence

from mstr_animation.core.models import Segment, Span
from mstr_animation.errors import InvalidInput


def _check_indices(word: str, indices: Sequence[int]) -> None:
    previous = -1
    for index in indices:
        if index <= previous or index >= len(word):
            raise InvalidInput(
                "Match indices {!r} are not strictly increasing positions in {!r}".format(
                    tuple(indices), word
                )
            )
        previous = index


def build_spans(word: str, indices: Sequence[int]) -> List[Span]:
    """Build the 2k + 1 plain/emphasised spans for ``word``.

    Args:
        word: The word as it will be displayed.
        indices: Strictly increasing positions of the matched letters.

    Raises:
        InvalidInput: If the indices are unordered, repeated, or outside
            the word.
    """
    _check_indices(word, indices)

    spans: List[Span] = []
    cursor = 0
    for index in indices:
        spans.append(Span(start=cursor, end=index, emphasized=False))
        spans.append(Span(start=index, end=index + 1, emphasized=True))
        cursor = index + 1
    spans.append(Span(start=cursor, end=len(word), emphasized=False))
    return spans


def split_word(word: str, indices: Sequence[int]) -> List[Segment]:
    """Every candidate segment of ``word``, empty runs included."""
    return [
        Segment(text=span.text_of(word), emphasized=span.emphasized)
        for span in build_spans(word, indices)
    ]


def split_segments(word: str, indices: Sequence[int]) -> List[Segment]:
    """The non-empty segments of ``word``, ready for rendering."""
    return [
        Segment(text=span.text_of(word), emphasized=span.emphasized)
        for span in build_spans(word, indices)
        if span.end > span.start
    ]
