"""Keyframe timing for the shared word cycle.

WHY: All words run the same keyframe rule over one shared cycle; each is
phase-shifted by its position so they take turns. The percentages and
delays must agree exactly or two words overlap (or the screen goes blank
between them).

HOW: The cycle lasts ``D * N`` seconds. Each word owns ``100 / N`` percent
of it, is fully opaque until the last 20% of that share, fades to 0 by the
end of its share, and stays transparent for the rest of the cycle. Word i
starts ``i * D`` seconds late.

RULES:
- N <= 0 is rejected; it would divide by zero and print NaN into CSS
- N == 1 is not special-cased: the single word fades over the last 20%
  of every cycle
- Delays are index-aligned with the final word list
- A cycle too long to represent as a finite float is rejected
"""

from __future__ import annotations

import math

from mstr_animation.config import FADE_FRACTION
from mstr_animation.core.models import Timeline
from mstr_animation.errors import InvalidInput


def compute_timeline(word_count: int, duration_per_word: float) -> Timeline:
    """Derive cycle length, visibility share, fade share, and delays.

    Args:
        word_count: Number of words in the final (sentinel-prefixed) list.
        duration_per_word: Seconds each word is allotted.

    Returns:
        A frozen Timeline.

    Raises:
        InvalidInput: If ``word_count`` is below 1 or the duration is not a
            positive finite number, or the whole cycle overflows.
    """
    if word_count < 1:
        raise InvalidInput(
            "Cannot time an animation of {} words; at least one is required".format(word_count)
        )
    if not math.isfinite(duration_per_word) or duration_per_word <= 0:
        raise InvalidInput(
            "Duration per word must be positive and finite, got {!r}".format(duration_per_word)
        )

    total_duration = duration_per_word * word_count
    if not math.isfinite(total_duration):
        raise InvalidInput(
            "Cycle of {} words at {!r}s each overflows to {!r}".format(
                word_count, duration_per_word, total_duration
            )
        )

    visible_percentage = 100 / word_count
    return Timeline(
        total_duration=total_duration,
        visible_percentage=visible_percentage,
        fade_percentage=visible_percentage * FADE_FRACTION,
        delays=tuple(i * duration_per_word for i in range(word_count)),
    )
