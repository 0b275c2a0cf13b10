# litemark/markdown/blockprocessors/blockquotes.py
"""
Block processor that renders (nested) blockquotes.

Works on entity-encoded markers (``&gt;``); the quote marker encoder makes
sure raw ``>`` markers arrive in that form.

A quote block is a run of quote lines plus any non-blank lines that follow
them without a marker (lazy continuation), up to a blank line, a line that
is already block-level markup or a pipe-table row. Every line becomes a
QuoteLine:

    &gt; a            → QuoteLine(level=1, content="a", is_quote=True)
    &gt; &gt;&gt; b   → QuoteLine(level=3, content="b", is_quote=True)
    lazy text         → QuoteLine(level=0, content="lazy text", is_quote=False)

The nesting depth is the number of markers on a line, not its indentation.
A jump of several levels at once opens a single nested blockquote.

Each line's content is re-run through the conversion pipeline, so quoted
text gets lists, headings, emphasis and so on.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List

from ..placeholders import CODE_BLOCK_PREFIX
from ..utils import leading_tag_name

logger = logging.getLogger(__name__)

QUOTE_MARKER = "&gt;"
# Tables render after quotes, so their rows are still raw here
TABLE_ROW_MARKER = "|"
QUOTE_LINE_RE = re.compile(r"^((?:&gt;[ \t]*)+)(.*)$")

# A nested quote rendering to one of these is shown as a plain line break
EMPTY_QUOTES = ("<blockquote></blockquote>", "<blockquote><br></blockquote>")


@dataclass
class QuoteLine:
    level: int
    content: str
    is_quote: bool


def parse_quote_line(line: str) -> QuoteLine:
    match = QUOTE_LINE_RE.match(line)
    if not match:
        return QuoteLine(level=0, content=line.strip(), is_quote=False)
    level = match.group(1).count(QUOTE_MARKER)
    return QuoteLine(level=level, content=match.group(2).strip(), is_quote=True)


def _is_quote_line(line: str) -> bool:
    return line.startswith(QUOTE_MARKER)


def _is_continuation_line(line: str, block_tags) -> bool:
    stripped = line.strip()
    if not stripped or _is_quote_line(stripped):
        return False
    if stripped.startswith(CODE_BLOCK_PREFIX) or stripped.startswith(TABLE_ROW_MARKER):
        return False
    return leading_tag_name(stripped) not in block_tags


class QuoteRenderer:
    """Renders the QuoteLine records of one block, one nesting level at a time."""

    def __init__(self, context: dict, max_depth: int):
        self.context = context
        self.max_depth = max_depth
        self._warned = False

    def render_content(self, content: str) -> str:
        # Lazy import to avoid circular import
        from ..renderer import render_nested

        return render_nested(content, self.context)

    def render_quote(self, items: List[QuoteLine], level: int, depth: int = 1) -> str:
        parts: List[str] = []
        i = 0

        while i < len(items):
            item = items[i]

            if not item.is_quote:
                parts.append(self.render_content(item.content))
                i += 1
                continue

            if item.level <= level or depth >= self.max_depth:
                if item.level > level and not self._warned:
                    logger.warning(
                        f"Blockquote nesting deeper than {self.max_depth} levels, "
                        f"rendering level {item.level} flat"
                    )
                    self._warned = True
                parts.append(self.render_content(item.content) if item.content else "<br>")
                i += 1
                continue

            # Deeper run: everything at or below this item's level, plus the
            # continuation lines that belong to it
            nested_level = item.level
            nested: List[QuoteLine] = []
            while i < len(items) and (not items[i].is_quote or items[i].level >= nested_level):
                nested.append(items[i])
                i += 1

            inner = self.render_quote(nested, nested_level, depth + 1)
            parts.append("<br>" if inner in EMPTY_QUOTES else inner)

        return "<blockquote>" + "\n".join(parts) + "</blockquote>"


def render_blockquotes(text: str, context: dict, max_depth: int = 32, block_tags=frozenset()) -> str:
    """
    Render every quote block in ``text``.

    Args:
        text: Markdown being converted
        context: Conversion context, handed to the nested pipeline runs
        max_depth: Deepest blockquote nesting rendered as nested elements
        block_tags: Tag names that end a lazy continuation

    Returns:
        Text with quote blocks replaced by <blockquote> markup
    """
    lines = text.split("\n")
    out: List[str] = []
    i = 0

    while i < len(lines):
        if not _is_quote_line(lines[i]):
            out.append(lines[i])
            i += 1
            continue

        items: List[QuoteLine] = []
        while i < len(lines) and (
            _is_quote_line(lines[i]) or _is_continuation_line(lines[i], block_tags)
        ):
            items.append(parse_quote_line(lines[i]))
            i += 1

        renderer = QuoteRenderer(context, max_depth=max_depth)
        out.append(renderer.render_quote(items, level=1))

    return "\n".join(out)


def blockquotes_default(text: str, context: dict) -> str:
    """
    Default configuration for blockquotes.

    Register this in BLOCK_PROCESSORS.
    """
    config = context.get("config") or {}
    return render_blockquotes(
        text,
        context,
        max_depth=config.get("MAX_QUOTE_DEPTH", 32),
        block_tags=config.get("BLOCK_TAGS", frozenset()),
    )
