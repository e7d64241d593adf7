"""MSTR word-reveal animation: self-contained animated SVG generator.

WHY: A logo-style animation cycles through words that contain the letters
m, s, t, r in order, showing those four letters in bold and everything else
in muted grey. Browsers play CSS keyframe animations embedded in an SVG with
no script, so one string of markup is the whole deliverable.

HOW: Four-stage pipeline: filter (ordered-letter predicate), sequence
(shuffle + sentinel word), time (shared keyframe cycle with per-word delay),
emit (structured document → schema check → SVG text). Each stage is
independently testable.

RULES:
- The shuffle is the only non-deterministic step; inject ``rng`` to fix it
- "mstr" is always the first word shown
- Invalid configuration fails before any markup is built
"""

from mstr_animation.pipeline import (
    generate_mstr_animation,
    prepare_word_list,
    render_animation,
)

__version__ = "0.1.0"

__all__ = [
    "generate_mstr_animation",
    "prepare_word_list",
    "render_animation",
]
