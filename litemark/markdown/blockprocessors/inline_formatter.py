# litemark/markdown/blockprocessors/inline_formatter.py
"""
Block processor that applies the inline pattern table.

Patterns run in table order, each as a global substitution over the whole
text. The order is part of the behaviour:
- Headings h6 down to h1, so "###### x" is not taken as a level-1 heading
- Horizontal rules before emphasis, so "***" alone is a rule
- Emphasis from the longest marker to the shortest, so "***x***" becomes
  bold-italic instead of bold plus a stray "*"
- Bare autolinks last

Emphasis markers must sit on a non-word boundary and must not be part of a
longer run of the same marker.

The targets of links and images (the "url" in "](url") are masked while the
table runs, since the media pass only renders them afterwards.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from ..placeholders import SENTINEL_CLOSE, SENTINEL_OPEN

PatternTable = List[Tuple[re.Pattern, str]]

LINK_TARGET_RE = re.compile(r"(?<=\]\()[^\s)]+")
TARGET_MASK_RE = re.compile(rf"{SENTINEL_OPEN}U(\d+){SENTINEL_CLOSE}")


def _emphasis(marker: str, open_tag: str, close_tag: str) -> Tuple[re.Pattern, str]:
    m = re.escape(marker)
    single = re.escape(marker[0])
    pattern = re.compile(rf"(^|\W){m}(?!{single})(.+?)(?<!{single}){m}(?=\W|$)")
    return pattern, rf"\1{open_tag}\2{close_tag}"


INLINE_PATTERNS: PatternTable = [
    (re.compile(r"^###### (.*)$", re.MULTILINE), r"<h6>\1</h6>"),
    (re.compile(r"^##### (.*)$", re.MULTILINE), r"<h5>\1</h5>"),
    (re.compile(r"^#### (.*)$", re.MULTILINE), r"<h4>\1</h4>"),
    (re.compile(r"^### (.*)$", re.MULTILINE), r"<h3>\1</h3>"),
    (re.compile(r"^## (.*)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^# (.*)$", re.MULTILINE), r"<h1>\1</h1>"),
    (re.compile(r"^(?:-{3,}|\*{3,}|_{3,})$", re.MULTILINE), "<hr>"),
    (re.compile(r"~~(.*?)~~"), r"<del>\1</del>"),
    _emphasis("***", "<strong><em>", "</em></strong>"),
    _emphasis("___", "<strong><em>", "</em></strong>"),
    _emphasis("**", "<strong>", "</strong>"),
    _emphasis("__", "<strong>", "</strong>"),
    _emphasis("*", "<em>", "</em>"),
    _emphasis("_", "<em>", "</em>"),
    (
        re.compile(r"(?:<|&lt;)((?:https?|ftp)://[^\s<>]+?)(?:>|&gt;)"),
        r'<a href="\1" target="_blank">\1</a>',
    ),
]


def apply_inline_patterns(text: str, context: dict, patterns: PatternTable = None) -> str:
    """
    Apply ``patterns`` (default INLINE_PATTERNS) in order.

    Args:
        text: Markdown being converted
        context: Conversion context (not used currently)
        patterns: Ordered (compiled pattern, replacement) pairs

    Returns:
        Text with headings, rules, emphasis and autolinks rendered
    """
    targets: List[str] = []

    def mask(match):
        targets.append(match.group(0))
        return f"{SENTINEL_OPEN}U{len(targets) - 1}{SENTINEL_CLOSE}"

    text = LINK_TARGET_RE.sub(mask, text)
    for pattern, replacement in patterns or INLINE_PATTERNS:
        text = pattern.sub(replacement, text)
    return TARGET_MASK_RE.sub(lambda match: targets[int(match.group(1))], text)


def inline_formatter_default(text: str, context: dict) -> str:
    """
    Default configuration for inline_formatter.

    Register this in BLOCK_PROCESSORS.
    """
    return apply_inline_patterns(text, context)
