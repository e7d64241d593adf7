"""Exception types raised by the animation pipeline.

WHY: Callers need typed exceptions to tell a bad option apart from a
degenerate word list or a programming error. Both derive from ValueError
so existing ``except ValueError`` handlers keep working.

RULES:
- InvalidConfig is raised before any markup is built
- InvalidInput covers word lists, match indices, and timing inputs
- Generation is all-or-nothing: nothing partial is ever returned
"""

from __future__ import annotations


class AnimationError(ValueError):
    """Base class for every error the package raises on purpose."""


class InvalidConfig(AnimationError):
    """Raised when an animation option is negative, non-finite, or malformed.

    WHY: A NaN width or a negative duration would produce markup that
    renders nothing (or renders garbage) without any visible failure.
    Failing fast surfaces the bad value at the call site.

    HOW: Raised by ``AnimationConfig.from_options`` with the pydantic
    ValidationError chained as ``__cause__``.
    """


class InvalidInput(AnimationError):
    """Raised when pipeline inputs cannot produce a meaningful animation.

    Covers an empty final word list (zero-length timing cycle), match
    indices that are not strictly increasing, and malformed target letters.
    """
