"""Small text helpers shared by the conversion passes."""

from __future__ import annotations

import re

# Leaves existing entities (&gt;, &#39;, &#x27;) alone: sources read from a
# document's inner HTML arrive already entity-encoded.
_HTML_ESCAPE_RE = re.compile(r"&(?!#?[a-zA-Z0-9]+;)|[<>\"']")

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

_LEADING_TAG_RE = re.compile(r"^</?([a-zA-Z][\w\-]*)(?:\s[^>]*)?/?>")


def escape_html(text: str) -> str:
    return _HTML_ESCAPE_RE.sub(lambda m: _HTML_ESCAPES[m.group(0)], text)


def leading_tag_name(line: str) -> str | None:
    """Return the lower-cased name of the start/end tag opening ``line``, if any."""
    match = _LEADING_TAG_RE.match(line.strip())
    if not match:
        return None
    return match.group(1).lower()


def replace_blocks(pattern: re.Pattern, text: str, render) -> str:
    """
    Substitute every match of a multi-line block ``pattern`` with ``render(block)``.

    Block patterns swallow the line terminator of their last line; it is put
    back after the rendered markup so the following line keeps its own line.
    """

    def replace(match):
        block = match.group(0)
        trailing = "\n" if block.endswith("\n") else ""
        return render(block) + trailing

    return pattern.sub(replace, text)
