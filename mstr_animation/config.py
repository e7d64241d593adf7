"""Configuration constants for the animation generator.

WHY: Centralizes every fixed value (target letters, option defaults, CSS
names) so they are easy to find and update. They are plain data, not
buried in rendering logic, so the emitter and the tests read the same
source of truth.

HOW: Module-level strings and numbers. Option parsing and validation live
in ``core/options.py``; this module only holds the raw defaults.

RULES:
- TARGET_LETTERS are lowercase; words are folded to lowercase before matching
- Defaults: 500 x 150 px, 50px text, 2s per word
- CSS class names double as the ``class`` attribute values on ``<tspan>``
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Word matching
# ---------------------------------------------------------------------------

TARGET_LETTERS = "mstr"
"""Letters that must appear, in this order, for a word to be shown."""

# ---------------------------------------------------------------------------
# Option defaults (pixels / seconds)
# ---------------------------------------------------------------------------

DEFAULT_WIDTH = 500
DEFAULT_HEIGHT = 150
DEFAULT_FONT_SIZE = 50
DEFAULT_DURATION_PER_WORD = 2
DEFAULT_FONT_FAMILY = "Times New Roman, serif"

# ---------------------------------------------------------------------------
# Animation timing
# ---------------------------------------------------------------------------

FADE_FRACTION = 0.2
"""Trailing share of a word's visibility slot spent fading out."""

# ---------------------------------------------------------------------------
# Markup names
# ---------------------------------------------------------------------------

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
KEYFRAMES_NAME = "wordAnimation"
GROUP_ID = "animated-text"
WORD_ID_PREFIX = "word"

EMPHASIS_CLASS = "bold"
MUTED_CLASS = "grey"
MUTED_FILL = "grey"
