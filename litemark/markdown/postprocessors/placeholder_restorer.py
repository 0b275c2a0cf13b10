# litemark/markdown/postprocessors/placeholder_restorer.py
"""
Postprocessor that puts protected content back into the rendered HTML.

Restores, in this order:
1. Code blocks (already rendered <pre><code> markup)
2. Inline code (body HTML-escaped here, wrapped in <code>)
3. Escaped punctuation (the bare character)

Escapes go last so an escaped character is only ever seen by the passes as a
placeholder, never as markdown syntax.
"""

from ..placeholders import CODE_BLOCK, ESCAPE, INLINE_CODE, get_store
from ..utils import escape_html


def restore_placeholders(html: str, context: dict) -> str:
    store = get_store(context)
    html = store.restore(CODE_BLOCK, html, lambda markup: markup)
    html = store.restore(INLINE_CODE, html, lambda code: f"<code>{escape_html(code)}</code>")
    html = store.restore(ESCAPE, html, lambda ch: ch)
    return html


def placeholder_restorer_default(html: str, context: dict) -> str:
    """
    Default configuration for placeholder_restorer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return restore_placeholders(html, context)
