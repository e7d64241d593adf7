"""Markup emission: structured SVG document, schema check, serialisation.

WHY: Separating "what goes in the SVG" (document.py) from "how it is
written out" (serializer.py) lets both be tested without parsing markup.

RULES:
- Everything emitted passes animation_document.schema.json first
- No core logic here; words, timing, and segments come from core/
"""
