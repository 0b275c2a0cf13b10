# litemark/markdown/preprocessors/quote_marker_encoder.py
"""
Preprocessor that entity-encodes leading blockquote markers.

The blockquote pass works on ``&gt;`` markers, which is what markdown read
from a document's inner HTML looks like. Plain markdown uses a raw ``>``, so
leading markers are encoded here to give the blockquote pass a single form:

    > > quoted    → &gt; &gt; quoted
    &gt; quoted   → &gt; quoted (unchanged)

Only the marker run at the start of a line is touched; a ``>`` anywhere else
is left for the HTML it may belong to.
"""

import re

LEADING_MARKERS_RE = re.compile(r"^([ \t]*)((?:(?:>|&gt;)[ \t]*)+)", re.MULTILINE)


def encode_quote_markers(text: str, context: dict) -> str:
    def replace(match):
        markers = match.group(2).replace("&gt;", ">").replace(">", "&gt;")
        return match.group(1) + markers

    return LEADING_MARKERS_RE.sub(replace, text)


def quote_marker_encoder_default(text: str, context: dict) -> str:
    """
    Default configuration for quote_marker_encoder.

    Register this in PREPROCESSORS.
    """
    return encode_quote_markers(text, context)
