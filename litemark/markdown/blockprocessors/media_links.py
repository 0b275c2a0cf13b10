# litemark/markdown/blockprocessors/media_links.py
"""
Block processor that renders images and links.

Converts:
    ![Alt](/img.png "Title")   → <img alt="Alt" src="/img.png" title="Title" style="max-width: 100%;">
    [Text](https://x.org)      → <a href="https://x.org" target="_blank">Text</a>

Images run first: both forms end in "(url)" and the link pattern would
otherwise eat the bracketed part of an image.
"""

import re

IMAGE_RE = re.compile(r'!\[([^\]]*)\]\((\S+?)(?: +"([^"]+)")?\)')
LINK_RE = re.compile(r'\[([^\]]+)\]\((\S+?)(?: +"([^"]+)")?\)')


def render_images(text: str, context: dict, image_style: str = "max-width: 100%;") -> str:
    def replace(match):
        alt, src, title = match.groups()
        title_attr = f' title="{title}"' if title else ""
        return f'<img alt="{alt}" src="{src}"{title_attr} style="{image_style}">'

    return IMAGE_RE.sub(replace, text)


def render_links(text: str, context: dict, target: str = "_blank") -> str:
    def replace(match):
        label, href, title = match.groups()
        title_attr = f' title="{title}"' if title else ""
        return f'<a href="{href}"{title_attr} target="{target}">{label}</a>'

    return LINK_RE.sub(replace, text)


def media_links_default(text: str, context: dict) -> str:
    """
    Default configuration for media_links.

    Register this in BLOCK_PROCESSORS.
    """
    text = render_images(text, context, image_style="max-width: 100%;")
    return render_links(text, context, target="_blank")
