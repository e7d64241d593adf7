"""Ordered target-letter matching and word filtering.

WHY: Only words that contain m, s, t, r in that order can be shown with
those letters emphasised. The same index search drives both the filter
and the segment splitter, so it lives in one function.

HOW: Fold the word to lowercase, then ``str.find`` each letter starting
just past the previous match. The first hit wins; there is no backtracking
to try an earlier or later occurrence.

RULES:
- First occurrence after the previous match only (greedy, single scan)
- An empty word never matches
- Letters may be separated by anything, including repeated target letters
- Only A-Z are folded, so an index into the fold is an index into the word
- Display casing is untouched; only the fold is searched
"""

from __future__ import annotations

import string
from typing import Iterable, List, Optional

from mstr_animation.config import TARGET_LETTERS
from mstr_animation.core.models import MatchIndices
from mstr_animation.errors import InvalidInput

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def normalize_letters(letters: str) -> str:
    """Lowercase and check a target-letter sequence.

    Raises:
        InvalidInput: If ``letters`` is empty or not a string.
    """
    if not isinstance(letters, str) or not letters:
        raise InvalidInput("Target letters must be a non-empty string, got {!r}".format(letters))
    return letters.translate(_ASCII_FOLD)


def find_match_indices(word: str, letters: str = TARGET_LETTERS) -> Optional[MatchIndices]:
    """Locate each target letter in order inside ``word``.

    Args:
        word: Candidate word (any casing).
        letters: Target letters, in required order.

    Returns:
        A tuple with one strictly increasing index per letter, or None if
        some letter is not found after the previous match.
    """
    if not isinstance(word, str):
        raise InvalidInput("Words must be strings, got {!r}".format(word))

    folded = word.translate(_ASCII_FOLD)
    indices: List[int] = []
    position = 0
    for letter in normalize_letters(letters):
        found = folded.find(letter, position)
        if found == -1:
            return None
        indices.append(found)
        position = found + 1
    return tuple(indices)


def contains_target_sequence(word: str, letters: str = TARGET_LETTERS) -> bool:
    return find_match_indices(word, letters) is not None


def filter_words(words: Iterable[str], letters: str = TARGET_LETTERS) -> List[str]:
    """Keep the words that contain the target letters in order.

    Returns a new list; the relative order of ``words`` is preserved.
    """
    return [word for word in words if contains_target_sequence(word, letters)]
