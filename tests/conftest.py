"""Shared test fixtures for the mstr_animation test suite.

WHY: Several test modules need the same sample words, a default config,
and random sources whose choices are known in advance so permutations can
be asserted exactly.

HOW: Plain pytest fixtures plus two tiny stub classes exposing the
``randrange`` method the sequencer draws from.

RULES:
- IdentityRandom never moves anything (always picks the current index)
- ZeroRandom always picks index 0
- RecordingRandom remembers every ``stop`` it was asked for
"""

from typing import List

import pytest

from mstr_animation.core.options import AnimationConfig


class IdentityRandom:
    """randrange(stop) -> stop - 1, so every swap is a no-op."""

    def randrange(self, stop):
        return stop - 1


class ZeroRandom:
    """randrange(stop) -> 0, so item i is always swapped with the head."""

    def randrange(self, stop):
        return 0


class RecordingRandom(IdentityRandom):
    def __init__(self):
        self.calls: List[int] = []

    def randrange(self, stop):
        self.calls.append(stop)
        return super().randrange(stop)


SAMPLE_WORDS: List[str] = [
    "master",
    "mists",
    "xyz",
    "Monster",
    "MUSTARD",
    "trams",
    "",
]

QUALIFYING_SAMPLE_WORDS: List[str] = ["master", "Monster", "MUSTARD"]


@pytest.fixture
def sample_words():
    return list(SAMPLE_WORDS)


@pytest.fixture
def default_config():
    return AnimationConfig()


@pytest.fixture
def identity_rng():
    return IdentityRandom()


@pytest.fixture
def zero_rng():
    return ZeroRandom()


@pytest.fixture
def recording_rng():
    return RecordingRandom()
