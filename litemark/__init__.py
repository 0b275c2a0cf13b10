from .documents import discover_markdown_sources, render_markdown_tags
from .markdown.renderer import markdown_to_html, render_markdown

__all__ = (
    "discover_markdown_sources",
    "markdown_to_html",
    "render_markdown",
    "render_markdown_tags",
)
