# litemark/markdown/blockprocessors/paragraphs.py
"""
Block processor that wraps leftover text lines into paragraphs.

This processor:
- Groups consecutive plain lines into one <p>, joined with <br>
- Ends a paragraph at a blank line
- Emits lines that are already block-level (a code-block placeholder, or a
  line opening with a block tag such as <ul>, <h2> or <blockquote>) as they
  are, ending any open paragraph first

Lines opening with an inline tag (<strong>, <a>, <img>, ...) are plain text
here and stay inside the paragraph. Running the processor on its own output
wraps nothing twice.
"""

from typing import List

from ..placeholders import CODE_BLOCK_PREFIX
from ..utils import leading_tag_name


def is_block_level(line: str, block_tags) -> bool:
    if line.startswith(CODE_BLOCK_PREFIX):
        return True
    return leading_tag_name(line) in block_tags


def assemble_paragraphs(text: str, context: dict, block_tags=frozenset()) -> str:
    """
    Wrap plain text lines of ``text`` in paragraphs.

    Args:
        text: Text after every other block processor ran
        context: Conversion context (not used currently)
        block_tags: Tag names whose lines are emitted verbatim

    Returns:
        Lines of block-level HTML joined with newlines
    """
    result: List[str] = []
    paragraph: List[str] = []

    def flush():
        if paragraph:
            result.append("<p>" + "<br>".join(paragraph) + "</p>")
            paragraph.clear()

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped:
            flush()
            continue
        if is_block_level(stripped, block_tags):
            flush()
            result.append(stripped)
            continue
        paragraph.append(stripped)

    flush()
    return "\n".join(result)


def paragraphs_default(text: str, context: dict) -> str:
    """
    Default configuration for paragraphs.

    Register this in BLOCK_PROCESSORS.
    """
    config = context.get("config") or {}
    return assemble_paragraphs(text, context, block_tags=config.get("BLOCK_TAGS", frozenset()))
