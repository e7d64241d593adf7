"""Schema validation and SVG serialisation of an animation document.

WHY: The document must never be emitted half-valid. A missing keyframe
stop or an empty run renders as a blank or flickering animation with no
error anywhere. Checking the plain-data form against a JSON Schema first
makes generation fail closed.

HOW: ``render_document`` converts the SvgDocument to a dict, validates it
with jsonschema against the bundled animation_document.schema.json, then
lays out the markup from the validated dict in a single pass.

RULES:
- Validate before serialising; raise on failure
- Text content and attribute values are XML-escaped
- Two-space indentation, style blocks separated by a blank line
- Output is byte-for-byte deterministic for a given document
- No XML declaration and no trailing newline: the string can be inlined
  into HTML as well as saved as a .svg file
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional
from xml.sax.saxutils import escape, quoteattr

import jsonschema

from mstr_animation.config import SVG_NAMESPACE
from mstr_animation.markup.document import SvgDocument
from mstr_animation.markup.numbers import format_number

_SCHEMA_PATH = Path(__file__).resolve().parent / "animation_document.schema.json"

_CACHED_SCHEMA: Optional[Dict[str, Any]] = None

_INDENT = "  "


def _get_schema() -> Dict[str, Any]:
    """Load and cache the animation document schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH, encoding="utf-8") as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def validate_document(data: Dict[str, Any]) -> None:
    """Check a document dict against the bundled schema.

    Raises:
        jsonschema.ValidationError: If the dict does not conform.
    """
    jsonschema.validate(instance=data, schema=_get_schema())


def _declarations(declarations: List[List[str]], depth: int) -> List[str]:
    pad = _INDENT * depth
    return ["{}{}: {};".format(pad, prop, value) for prop, value in declarations]


def _style_block(block: Dict[str, Any]) -> List[str]:
    pad = _INDENT * 2
    if block["kind"] == "rule":
        lines = ["{}{} {{".format(pad, block["selector"])]
        lines.extend(_declarations(block["declarations"], 3))
        lines.append("{}}}".format(pad))
        return lines

    lines = ["{}@keyframes {} {{".format(pad, block["name"])]
    for stop in block["stops"]:
        offsets = ", ".join("{}%".format(format_number(o)) for o in stop["offsets"])
        lines.append("{}{}{} {{".format(pad, _INDENT, offsets))
        lines.extend(_declarations(stop["declarations"], 4))
        lines.append("{}{}}}".format(pad, _INDENT))
    lines.append("{}}}".format(pad))
    return lines


def _text_element(element: Dict[str, Any]) -> str:
    runs = "".join(
        "<tspan class={}>{}</tspan>".format(quoteattr(run["class"]), escape(run["text"]))
        for run in element["runs"]
    )
    return "{}<text id={} x=\"{}\" y=\"{}\">{}</text>".format(
        _INDENT * 2,
        quoteattr(element["id"]),
        format_number(element["x"]),
        format_number(element["y"]),
        runs,
    )


def serialize(data: Dict[str, Any]) -> str:
    """Lay out an already-validated document dict as SVG markup."""
    style_lines: List[str] = []
    for i, block in enumerate(data["style"]):
        if i:
            style_lines.append("")
        style_lines.extend(_style_block(block))

    lines = [
        "<svg viewBox=\"0 0 {} {}\" xmlns=\"{}\">".format(
            format_number(data["width"]),
            format_number(data["height"]),
            SVG_NAMESPACE,
        ),
        "{}<style>".format(_INDENT),
        escape("\n".join(style_lines)),
        "{}</style>".format(_INDENT),
        "{}<g id={}>".format(_INDENT, quoteattr(data["group"]["id"])),
    ]
    lines.extend(_text_element(element) for element in data["group"]["elements"])
    lines.append("{}</g>".format(_INDENT))
    lines.append("</svg>")
    return "\n".join(lines)


def render_document(document: SvgDocument) -> str:
    """Validate and serialise ``document`` to an SVG string.

    Raises:
        jsonschema.ValidationError: If the document is structurally invalid.
    """
    data = document.to_dict()
    validate_document(data)
    return serialize(data)
