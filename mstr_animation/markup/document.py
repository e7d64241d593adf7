"""Structured SVG document builder.

WHY: Building markup by string concatenation mixes the decisions (which
rules, which words, which delays) with the text layout, so neither can be
tested on its own. A small document model holds the decisions; the
serializer turns it into text exactly once.

HOW: SvgDocument collects style blocks (plain rules and one @keyframes
block) and text elements. ``build_document`` fills it from the final word
list, the Timeline, and the AnimationConfig. ``to_dict`` produces the
plain-data form the JSON Schema checks.

RULES:
- Style order: ``text`` rule, ``.bold``, ``.grey``, @keyframes, then one
  ``#wordN`` rule per word
- Word ids are 1-based (``word1`` is the sentinel)
- Every word rule starts at opacity 0 so only the animation reveals it
- Every text element is centred at (width / 2, height / 2)
- Words are re-matched here; one without a valid match is an error
- A word holding a character XML 1.0 forbids is an error
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple, Union

from mstr_animation.config import (
    EMPHASIS_CLASS,
    GROUP_ID,
    KEYFRAMES_NAME,
    MUTED_CLASS,
    MUTED_FILL,
    TARGET_LETTERS,
    WORD_ID_PREFIX,
)
from mstr_animation.core.charset import first_invalid_xml_char
from mstr_animation.core.matcher import find_match_indices
from mstr_animation.core.models import Segment, Timeline
from mstr_animation.core.options import AnimationConfig
from mstr_animation.core.segments import split_segments
from mstr_animation.errors import InvalidInput
from mstr_animation.markup.numbers import format_number

Declaration = Tuple[str, str]


@dataclass(frozen=True)
class StyleRule:
    """A CSS rule: one selector and its ordered declarations."""

    selector: str
    declarations: Tuple[Declaration, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "rule",
            "selector": self.selector,
            "declarations": [list(d) for d in self.declarations],
        }


@dataclass(frozen=True)
class KeyframeStop:
    """One keyframe selector list (e.g. ``0%, 40%``) and its declarations."""

    offsets: Tuple[float, ...]
    declarations: Tuple[Declaration, ...]


@dataclass(frozen=True)
class Keyframes:
    """An ``@keyframes`` block."""

    name: str
    stops: Tuple[KeyframeStop, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": "keyframes",
            "name": self.name,
            "stops": [
                {
                    "offsets": list(stop.offsets),
                    "declarations": [list(d) for d in stop.declarations],
                }
                for stop in self.stops
            ],
        }


StyleBlock = Union[StyleRule, Keyframes]


@dataclass(frozen=True)
class TextRun:
    """One ``<tspan>``: display text and its CSS class."""

    text: str
    css_class: str


@dataclass(frozen=True)
class TextElement:
    """One ``<text>`` element: a whole word made of runs."""

    element_id: str
    x: float
    y: float
    runs: Tuple[TextRun, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.element_id,
            "x": self.x,
            "y": self.y,
            "runs": [{"text": run.text, "class": run.css_class} for run in self.runs],
        }


@dataclass
class SvgDocument:
    """The whole animation before serialisation.

    WHY: Keeps the style blocks and the word elements as data so tests can
    inspect exactly which rules and runs were produced without parsing
    markup.

    RULES:
    - width / height become the viewBox
    - style_blocks are emitted in insertion order
    - elements live in one ``<g>`` with id ``group_id``
    """

    width: float
    height: float
    group_id: str = GROUP_ID
    style_blocks: List[StyleBlock] = field(default_factory=list)
    elements: List[TextElement] = field(default_factory=list)

    def add_style(self, block: StyleBlock) -> None:
        self.style_blocks.append(block)

    def add_element(self, element: TextElement) -> None:
        self.elements.append(element)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "style": [block.to_dict() for block in self.style_blocks],
            "group": {
                "id": self.group_id,
                "elements": [element.to_dict() for element in self.elements],
            },
        }


def word_element_id(index: int) -> str:
    """Element id for the word at 0-based ``index`` (``word1``, ``word2``, ...)."""
    return "{}{}".format(WORD_ID_PREFIX, index + 1)


def _base_rules(config: AnimationConfig) -> List[StyleRule]:
    return [
        StyleRule(
            selector="text",
            declarations=(
                ("font-family", config.font_family),
                ("font-size", "{}px".format(format_number(config.font_size))),
                ("dominant-baseline", "middle"),
                ("text-anchor", "middle"),
            ),
        ),
        StyleRule(
            selector=".{}".format(EMPHASIS_CLASS),
            declarations=(("font-weight", "bold"),),
        ),
        StyleRule(
            selector=".{}".format(MUTED_CLASS),
            declarations=(("font-weight", "normal"), ("fill", MUTED_FILL)),
        ),
    ]


def _keyframes(timeline: Timeline) -> Keyframes:
    return Keyframes(
        name=KEYFRAMES_NAME,
        stops=(
            KeyframeStop(offsets=(0, timeline.opaque_until), declarations=(("opacity", "1"),)),
            KeyframeStop(offsets=(timeline.visible_percentage, 100), declarations=(("opacity", "0"),)),
        ),
    )


def _word_rule(index: int, timeline: Timeline) -> StyleRule:
    return StyleRule(
        selector="#{}".format(word_element_id(index)),
        declarations=(
            ("opacity", "0"),
            (
                "animation",
                "{} {}s infinite".format(KEYFRAMES_NAME, format_number(timeline.total_duration)),
            ),
            ("animation-delay", "{}s".format(format_number(timeline.delays[index]))),
        ),
    )


def _runs(segments: Sequence[Segment]) -> Tuple[TextRun, ...]:
    return tuple(
        TextRun(text=seg.text, css_class=EMPHASIS_CLASS if seg.emphasized else MUTED_CLASS)
        for seg in segments
    )


def build_document(
    words: Sequence[str],
    timeline: Timeline,
    config: AnimationConfig,
    letters: str = TARGET_LETTERS,
) -> SvgDocument:
    """Assemble the document for a final, already-ordered word list.

    Args:
        words: Final word list, sentinel first.
        timeline: Timing computed for exactly ``len(words)`` words.
        config: Validated rendering options.
        letters: Target letters to emphasise.

    Returns:
        A populated SvgDocument.

    Raises:
        InvalidInput: If the timeline does not match the word count, a
            word does not contain the target letters in order, or a word
            holds a character XML does not allow.
    """
    if timeline.word_count != len(words):
        raise InvalidInput(
            "Timeline covers {} words but {} were given".format(timeline.word_count, len(words))
        )

    document = SvgDocument(width=config.width, height=config.height)
    for rule in _base_rules(config):
        document.add_style(rule)
    document.add_style(_keyframes(timeline))

    center_x = config.width / 2
    center_y = config.height / 2
    for index, word in enumerate(words):
        indices = find_match_indices(word, letters)
        if indices is None:
            raise InvalidInput(
                "Word {!r} does not contain {!r} in order".format(word, letters)
            )
        invalid = first_invalid_xml_char(word)
        if invalid is not None:
            raise InvalidInput(
                "Word {!r} holds {!r}, which XML does not allow".format(word, invalid)
            )
        document.add_style(_word_rule(index, timeline))
        document.add_element(TextElement(
            element_id=word_element_id(index),
            x=center_x,
            y=center_y,
            runs=_runs(split_segments(word, indices)),
        ))

    return document
