"""Character checks for text that ends up inside SVG markup.

WHY: ``xml.sax.saxutils.escape`` handles ``& < >`` but passes control
characters through untouched, and XML 1.0 forbids most of them. One such
character in a word or a font family makes the whole document unparseable.

RULES:
- Allowed: tab, LF, CR, U+0020-U+D7FF, U+E000-U+FFFD, U+10000-U+10FFFF
"""

from __future__ import annotations

import re
from typing import Optional

_XML_INVALID = re.compile(r"[^\t\n\r\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def first_invalid_xml_char(text: str) -> Optional[str]:
    """Return the first character XML 1.0 does not allow, or None."""
    match = _XML_INVALID.search(text)
    return match.group() if match else None
