# litemark/markdown/preprocessors/escape_extractor.py
"""
Preprocessor that pulls backslash-escaped punctuation out of the text.

Converts:
    \\*not emphasis\\*    → <escape 0>not emphasis<escape 1>

Each escaped character is stored in the placeholder store and comes back as
the bare character in the reassembler, after every structural pass has run.
A backslash before any character outside ESCAPABLE_CHARACTERS is left as is.
"""

import re

from ..placeholders import ESCAPE, get_store

ESCAPABLE_CHARACTERS = "\\`*_{}[]()#+-.!~>"

ESCAPE_RE = re.compile(r"\\([\\`*_{}\[\]()#+\-.!~>])")


def extract_escapes(text: str, context: dict) -> str:
    """
    Replace ``\\X`` sequences with escape placeholders.

    Args:
        text: Raw markdown
        context: Conversion context holding the placeholder store

    Returns:
        Markdown with escaped punctuation hidden behind sentinels
    """
    store = get_store(context)
    return ESCAPE_RE.sub(lambda match: store.add(ESCAPE, match.group(1)), text)


def escape_extractor_default(text: str, context: dict) -> str:
    """
    Default configuration for escape_extractor.

    Register this in PREPROCESSORS.
    """
    return extract_escapes(text, context)
