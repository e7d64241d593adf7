"""Core word selection, timing, and segmentation modules.

WHY: The core package holds the deterministic heart of the generator:
the value types and the algorithms that turn a word list into timed,
segmented words. The markup package consumes these and never re-derives
them.

HOW: models.py defines the value types, options.py the validated
configuration, matcher.py the ordered-letter predicate, sequencer.py the
shuffle, timing.py the keyframe math, and segments.py the span splitting.

RULES:
- No markup or CSS knowledge in this package
- Every function returns new sequences; inputs are never mutated
"""
