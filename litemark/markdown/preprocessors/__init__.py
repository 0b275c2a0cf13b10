# litemark/markdown/preprocessors/__init__.py

from .escape_extractor import escape_extractor_default
from .indentation_normalizer import indentation_normalizer_default
from .literal_tokenizer import literal_tokenizer_default
from .quote_marker_encoder import quote_marker_encoder_default

PREPROCESSORS = [
    escape_extractor_default,  # Must run first: escaped backticks are not code delimiters
    literal_tokenizer_default,  # Hide fenced blocks and code spans from every later pass
    quote_marker_encoder_default,  # Raw ">" markers become "&gt;" for the blockquote pass
    indentation_normalizer_default,
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
