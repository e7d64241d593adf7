"""Word ordering: shuffle the qualifying words and prepend the sentinel.

WHY: Each generated animation should show the words in a fresh random
order, but always open with "mstr" itself so the viewer sees the letters
on their own before they appear inside other words.

HOW: A descending Fisher-Yates shuffle over a copy of the list, drawing
from an injected random source, then the sentinel word is put in front.

RULES:
- The caller's list is never mutated
- for i = n-1 .. 1: swap item i with item rng.randrange(i + 1)
- Without an injected source, a private random.Random() is created per
  call; the module-level ``random`` functions are never used
- The sentinel is never filtered or shuffled; it is always index 0
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional

from mstr_animation.config import TARGET_LETTERS
from mstr_animation.core.matcher import normalize_letters


def sentinel_word(letters: str = TARGET_LETTERS) -> str:
    """The word shown first: the target letters themselves, lowercase."""
    return normalize_letters(letters)


def shuffle_words(words: Iterable[str], rng: random.Random) -> List[str]:
    """Return a uniformly random permutation of ``words``.

    Args:
        words: Words to permute.
        rng: Any object with a ``randrange(stop)`` method returning an int
             in ``[0, stop)``; usually a seeded ``random.Random``.

    Returns:
        A new list containing the same words.
    """
    shuffled = list(words)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def build_word_sequence(
    words: Iterable[str],
    rng: Optional[random.Random] = None,
    letters: str = TARGET_LETTERS,
) -> List[str]:
    """Shuffle already-filtered words and put the sentinel in front.

    An empty ``words`` yields ``[sentinel]``.
    """
    if rng is None:
        rng = random.Random()
    return [sentinel_word(letters)] + shuffle_words(words, rng)
