from .renderer import markdown_to_html, render_markdown

__all__ = ["markdown_to_html", "render_markdown"]
