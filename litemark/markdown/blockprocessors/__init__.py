# litemark/markdown/blockprocessors/__init__.py

from .blockquotes import blockquotes_default
from .checkbox_lists import checkbox_lists_default
from .inline_formatter import inline_formatter_default
from .media_links import media_links_default
from .nested_lists import nested_lists_default
from .paragraphs import paragraphs_default
from .tables import tables_default

BLOCK_PROCESSORS = [
    checkbox_lists_default,  # Before nested lists: checkbox lines are also bullet lines
    nested_lists_default,
    inline_formatter_default,  # Headings, rules, emphasis, autolinks
    media_links_default,  # Images before links
    blockquotes_default,  # Re-enters the pipeline for quoted content
    tables_default,
    paragraphs_default,  # Must be last: wraps whatever is still plain text
    # Order matters - they run sequentially
]


def apply_block_processors(text, context):
    """Apply all block processors in order"""
    for processor in BLOCK_PROCESSORS:
        text = processor(text, context)
    return text
