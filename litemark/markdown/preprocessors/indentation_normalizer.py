# litemark/markdown/preprocessors/indentation_normalizer.py
"""
Preprocessor that strips indentation carrying no meaning.

Tabs in a line's indentation count as 4 columns and trailing whitespace is
dropped. List items keep their indentation (it drives nesting), as do fence
lines and code-block placeholders. Every other line loses its leading
whitespace so indented prose is not mistaken for anything else by the block
passes.
"""

import re

from ..placeholders import CODE_BLOCK_PREFIX

TAB_WIDTH = 4
LEADING_WHITESPACE_RE = re.compile(r"^[ \t]*")
LIST_ITEM_RE = re.compile(r"^( *)(\d+\. |[-+*] )")


def _expand_indentation(line: str) -> str:
    indent = LEADING_WHITESPACE_RE.match(line).group(0)
    return indent.expandtabs(TAB_WIDTH) + line[len(indent):].rstrip()


def _keeps_indentation(line: str) -> bool:
    return bool(
        LIST_ITEM_RE.match(line)
        or line.startswith("```")
        or line.startswith(CODE_BLOCK_PREFIX)
    )


def normalize_indentation(text: str, context: dict) -> str:
    lines = (_expand_indentation(line) for line in text.split("\n"))
    return "\n".join(
        line if _keeps_indentation(line) else line.lstrip()
        for line in lines
    )


def indentation_normalizer_default(text: str, context: dict) -> str:
    """
    Default configuration for indentation_normalizer.

    Register this in PREPROCESSORS.
    """
    return normalize_indentation(text, context)
