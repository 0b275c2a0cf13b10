# litemark/markdown/renderer.py

from .blockprocessors import apply_block_processors
from .config import get_litemark_config
from .placeholders import CONTEXT_KEY, PlaceholderStore, strip_sentinel_delimiters
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors


def render_markdown(text, context=None):
    """
    Main rendering function: markdown in, trimmed HTML fragment out.

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data.
            A ``config`` entry overrides configuration for this call only.

    The caller's dict is copied, never mutated; placeholders, counters and
    configuration live only for the duration of the call.
    """
    context = dict(context or {})
    context["config"] = get_litemark_config(context.get("config"))
    context[CONTEXT_KEY] = PlaceholderStore()

    # User content must never be able to spell a placeholder sentinel
    text = strip_sentinel_delimiters((text or "").replace("\r\n", "\n"))

    # Pre-processing: hide escapes and code behind placeholders
    text = apply_preprocessors(text, context)

    # Block and inline passes over the protected text
    text = apply_block_processors(text, context)

    # Post-processing: restore protected content
    html = apply_postprocessors(text, context)

    return html.strip()


def render_nested(text, context):
    """
    Run the pre and block passes on a fragment of a larger conversion.

    Used by the blockquote processor for quoted content. The fragment shares
    the caller's placeholder store, and restoration is left to the top-level
    call so rendered code is never seen by the passes still to run outside.
    Quoted content arrives without its markers, so nesting depth is bounded by
    the blockquote processor (MAX_QUOTE_DEPTH), not here.
    """
    text = apply_preprocessors(text, context)
    text = apply_block_processors(text, context)
    return text.strip()


def markdown_to_html(markdown_source):
    """Convert a markdown string to an HTML fragment."""
    return render_markdown(markdown_source)
