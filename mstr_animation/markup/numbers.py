"""Number formatting for CSS and SVG attribute values.

Whole numbers print without a fractional part (``250``, ``6s``); anything
else prints as the shortest decimal that round-trips (``33.333333333333336``).
For ordinary magnitudes this is the same text a browser's Number
toString would give, so hand-written CSS and generated CSS line up.
"""

from __future__ import annotations

import math


def format_number(value: float) -> str:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError("Cannot print non-finite number {!r} into markup".format(value))
    if value.is_integer():
        return str(int(value))
    return repr(value)
