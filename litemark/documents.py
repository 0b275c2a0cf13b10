"""
Render markdown embedded in HTML documents.

Pages can carry markdown inside custom elements:

    <markdown class="intro">**Hello**</markdown>
    <md>...</md>
    <text type="text/markdown">...</text>

``render_markdown_tags`` finds those elements and replaces each one with a
container element (a ``div`` by default) carrying the same attributes and
holding the rendered HTML. Elements added to a document later need another
call; nothing watches the document.

The markdown is read as the element's inner HTML, so a ``>`` quote marker
arrives as ``&gt;``, which is what the blockquote pass expects.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from .markdown.config import get_litemark_config
from .markdown.renderer import markdown_to_html

logger = logging.getLogger(__name__)

HIDDEN_STYLE_ID = "litemark-hidden-style"


def hidden_style_rule(selectors: Optional[Iterable[str]] = None) -> str:
    """CSS rule hiding markdown source elements until they are rendered."""
    if selectors is None:
        selectors = get_litemark_config()["MARKDOWN_SELECTORS"]
    return ",\n    ".join(selectors) + " { display: none !important; }"


def inject_hidden_style(soup: BeautifulSoup, selectors: Optional[Iterable[str]] = None) -> Tag:
    """
    Add the hiding rule as a <style> element to the document head.

    Documents without a <head> get the element at the very start. Calling it
    again returns the element already injected.
    """
    existing = soup.find("style", id=HIDDEN_STYLE_ID)
    if existing is not None:
        return existing

    style = soup.new_tag("style", id=HIDDEN_STYLE_ID)
    style.string = hidden_style_rule(selectors)

    head = soup.find("head")
    if head is not None:
        head.append(style)
    else:
        soup.insert(0, style)
    return style


def discover_markdown_sources(
    root: BeautifulSoup | Tag, selectors: Optional[Iterable[str]] = None
) -> List[Tuple[Tag, str]]:
    """
    Find markdown source elements under ``root``.

    Returns (element, raw inner HTML) pairs, grouped by selector in selector
    order. An element matched by several selectors is listed once, and
    elements inside another source element are skipped: they are part of
    that element's markdown.
    """
    if selectors is None:
        selectors = get_litemark_config()["MARKDOWN_SELECTORS"]

    found: List[Tag] = []
    for selector in selectors:
        for element in root.select(selector):
            if any(element is seen for seen in found):
                continue
            found.append(element)

    sources = []
    for element in found:
        if any(parent is other for parent in element.parents for other in found):
            continue
        sources.append((element, element.decode_contents()))
    return sources


def render_markdown_tags(
    html: str,
    selectors: Optional[Iterable[str]] = None,
    container_tag: Optional[str] = None,
    hide_unrendered: bool = False,
) -> str:
    """
    Replace every markdown source element in ``html`` with rendered HTML.

    Args:
        html: HTML document or fragment
        selectors: CSS selectors of source elements (default from config)
        container_tag: Element replacing each source (default from config)
        hide_unrendered: Also inject the <style> rule hiding source elements

    Returns:
        The document with markdown rendered
    """
    config = get_litemark_config()
    container_tag = container_tag or config["CONTAINER_TAG"]

    soup = BeautifulSoup(html, "html.parser")
    if hide_unrendered:
        inject_hidden_style(soup, selectors)

    sources = discover_markdown_sources(soup, selectors)
    for element, raw in sources:
        container = soup.new_tag(container_tag)
        for name, value in element.attrs.items():
            container[name] = value

        rendered = BeautifulSoup(markdown_to_html(raw), "html.parser")
        container.extend(list(rendered.contents))
        element.replace_with(container)

    logger.info(f"Rendered {len(sources)} markdown element(s)")
    return str(soup)
