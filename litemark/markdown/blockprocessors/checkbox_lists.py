# litemark/markdown/blockprocessors/checkbox_lists.py
"""
Block processor that renders task lists.

Converts a run of consecutive checkbox lines:
    - [x] done
    - [ ] todo

into one list of disabled checkboxes with the bullets hidden:
    <ul><li style="list-style: none;"><input type="checkbox" checked disabled> done</li>...</ul>

Runs before the nested list processor so checkbox lines are never read as
plain bullets.
"""

import re

from ..utils import replace_blocks

CHECKBOX_BLOCK_RE = re.compile(r"(?:^ *[-+*] \[[ xX]\] .+(?:\n|$))+", re.MULTILINE)
CHECKBOX_ITEM_RE = re.compile(r"^ *[-+*] \[([ xX])\] (.*)$")


def _render_item(line: str, item_style: str) -> str:
    match = CHECKBOX_ITEM_RE.match(line)
    checked = match.group(1).lower() == "x"
    content = match.group(2)
    checked_attr = " checked" if checked else ""
    return f'<li style="{item_style}"><input type="checkbox"{checked_attr} disabled> {content}</li>'


def render_checkbox_lists(text: str, context: dict, item_style: str = "list-style: none;") -> str:
    """
    Render every checkbox run in ``text`` as an unordered list.

    Args:
        text: Markdown being converted
        context: Conversion context (not used currently)
        item_style: Inline style put on each <li> (default hides the bullet)

    Returns:
        Text with checkbox runs replaced by <ul> markup
    """

    def render(block):
        items = [_render_item(line, item_style) for line in block.strip("\n").split("\n")]
        return "<ul>" + "".join(items) + "</ul>"

    return replace_blocks(CHECKBOX_BLOCK_RE, text, render)


def checkbox_lists_default(text: str, context: dict) -> str:
    """
    Default configuration for checkbox_lists.

    Register this in BLOCK_PROCESSORS.
    """
    return render_checkbox_lists(text, context, item_style="list-style: none;")
