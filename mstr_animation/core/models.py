"""Value types shared by the core stages and the markup emitter.

WHY: The splitter, timing calculator, and emitter each pass structured
data downstream. Small frozen dataclasses give those hand-offs a single,
well-typed form instead of loose tuples and dicts.

HOW: Three dataclasses plus one alias:
  MatchIndices: one position per target letter, strictly increasing
  Span: a [start, end) slice of a word, emphasised or plain
  Segment: the materialised text of a span
  Timeline: derived timing for one rendered word list

RULES:
- All types are frozen; stages build new values instead of mutating
- Span.end is exclusive, matching Python slicing
- Timeline percentages are in 0..100, durations in seconds
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MatchIndices = Tuple[int, ...]
"""Positions of the first in-order occurrence of each target letter."""


@dataclass(frozen=True)
class Span:
    """A half-open slice ``[start, end)`` of a word.

    Emphasised spans always cover exactly one character (a matched target
    letter). Plain spans cover the runs between them and may be empty.
    """

    start: int
    end: int
    emphasized: bool

    def text_of(self, word: str) -> str:
        return word[self.start:self.end]


@dataclass(frozen=True)
class Segment:
    """One run of display text and whether it renders bold."""

    text: str
    emphasized: bool


@dataclass(frozen=True)
class Timeline:
    """Derived animation timing for one final word list.

    WHY: Every word element shares one keyframe rule and one cycle length;
    only the start delay differs. Computing these once keeps the emitter
    free of arithmetic.

    RULES:
    - total_duration: seconds for one full pass over every word
    - visible_percentage: share of the cycle (in %) owned by one word
    - fade_percentage: trailing part of that share spent fading out
    - delays: per-word animation-delay in seconds, index-aligned with words
    """

    total_duration: float
    visible_percentage: float
    fade_percentage: float
    delays: Tuple[float, ...]

    @property
    def opaque_until(self) -> float:
        """Keyframe offset (in %) where the fade-out begins."""
        return self.visible_percentage - self.fade_percentage

    @property
    def word_count(self) -> int:
        return len(self.delays)
