"""Top-level pipeline: word list + options in, SVG string out.

WHY: Callers want one call that does everything, but tests (and callers
that cache a word order) need the random step and the deterministic
rendering step separately. The three functions here expose exactly that
split.

HOW:
  generate_mstr_animation: validate options, prepare the list, render
  prepare_word_list: filter, shuffle, prepend "mstr"
  render_animation: timing, segments, document, schema, markup

RULES:
- Options are validated before any word is looked at
- An input with no qualifying word still renders (sentinel only) and logs
  a warning
- render_animation is deterministic: same list + same config → same bytes
- Inputs are never mutated
"""

from __future__ import annotations

import logging
import random
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from mstr_animation.config import TARGET_LETTERS
from mstr_animation.core.matcher import filter_words
from mstr_animation.core.options import AnimationConfig
from mstr_animation.core.sequencer import build_word_sequence
from mstr_animation.core.timing import compute_timeline
from mstr_animation.markup.document import build_document
from mstr_animation.markup.serializer import render_document

logger = logging.getLogger(__name__)


def prepare_word_list(
    words: Iterable[str],
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Filter ``words`` and return the final display order.

    Args:
        words: Candidate words in any order.
        rng: Random source for the shuffle; a fresh one when None.

    Returns:
        ``["mstr", <qualifying words in random order>...]``.
    """
    candidates = list(words)
    qualifying = filter_words(candidates, TARGET_LETTERS)
    if not qualifying:
        logger.warning(
            "None of %d candidate words contain %r in order; rendering the sentinel only",
            len(candidates),
            TARGET_LETTERS,
        )
    else:
        logger.debug("%d of %d candidate words qualify", len(qualifying), len(candidates))
    return build_word_sequence(qualifying, rng, TARGET_LETTERS)


def render_animation(final_words: Sequence[str], config: AnimationConfig) -> str:
    """Render an already-ordered word list to SVG markup.

    WHY: This is the deterministic half of the pipeline. Given the same
    list and config it always returns the same string, which is what
    makes the output cacheable and testable.

    Args:
        final_words: Words in display order, sentinel first.
        config: Validated rendering options.

    Returns:
        The SVG document as a string.

    Raises:
        InvalidInput: If the list is empty or holds a word without the
            target letters in order.
        jsonschema.ValidationError: If the assembled document is malformed.
    """
    timeline = compute_timeline(len(final_words), config.duration_per_word)
    document = build_document(final_words, timeline, config, TARGET_LETTERS)
    logger.debug(
        "Rendering %d words over a %ss cycle", timeline.word_count, timeline.total_duration
    )
    return render_document(document)


def generate_mstr_animation(
    words: Iterable[str],
    options: Optional[Mapping[str, Any]] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Generate the full animated SVG for ``words``.

    Args:
        words: Candidate words; those without m, s, t, r in order are dropped.
        options: Optional rendering options (width, height, font_size,
                 duration_per_word, font_family; camelCase accepted).
                 Falsy values fall back to defaults.
        rng: Random source for the word order.

    Returns:
        A self-contained SVG string.

    Raises:
        InvalidConfig: If an option is negative, non-finite, or malformed.
    """
    config = AnimationConfig.from_options(options)
    final_words = prepare_word_list(words, rng)
    return render_animation(final_words, config)
