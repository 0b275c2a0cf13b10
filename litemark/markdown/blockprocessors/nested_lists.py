# litemark/markdown/blockprocessors/nested_lists.py
"""
Block processor that renders bulleted and numbered lists, with nesting.

This processor:
- Finds maximal runs of list lines ("- x", "* x", "+ x", "3. x")
- Nests by indentation width using a stack of open lists
- Keeps the literal number of ordered items (``5. x`` renders value="5")
- Closes every open list at the end of the run

Indentation rules, for a new item of width ``w``:
- Lists whose indent is strictly greater than ``w`` are closed
- If no list is open, or the innermost one is shallower than ``w``, a new
  nested list is opened inside the current item
- Otherwise the item is a sibling in the innermost list
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from ..utils import replace_blocks

LIST_BLOCK_RE = re.compile(r"(?:^ *(?:[-+*]|\d+\.) .+(?:\n|$))+", re.MULTILINE)
ORDERED_ITEM_RE = re.compile(r"^( *)(\d+)\. (.+)$")
UNORDERED_ITEM_RE = re.compile(r"^( *)([-+*]) (.+)$")

ORDERED = "ol"
UNORDERED = "ul"


@dataclass
class ListFrame:
    indent: int
    list_type: str


def _parse_item(line: str):
    match = ORDERED_ITEM_RE.match(line)
    if match:
        return len(match.group(1)), ORDERED, match.group(2), match.group(3)
    match = UNORDERED_ITEM_RE.match(line)
    if match:
        return len(match.group(1)), UNORDERED, match.group(2), match.group(3)
    return None


def render_list_block(block: str) -> str:
    """Render one run of list lines to nested <ul>/<ol> markup."""
    html: List[str] = []
    stack: List[ListFrame] = []

    for line in block.rstrip("\n").split("\n"):
        item = _parse_item(line)
        if item is None:
            continue
        indent, list_type, marker, content = item

        while stack and stack[-1].indent > indent:
            html.append(f"</li></{stack.pop().list_type}>")

        opening = f'<li value="{marker}">' if list_type == ORDERED else "<li>"

        if not stack or stack[-1].indent < indent:
            html.append(f"<{list_type}>{opening}")
            stack.append(ListFrame(indent=indent, list_type=list_type))
        else:
            html.append(f"</li>{opening}")

        html.append(content)

    while stack:
        html.append(f"</li></{stack.pop().list_type}>")

    return "".join(html)


def render_nested_lists(text: str, context: dict) -> str:
    return replace_blocks(LIST_BLOCK_RE, text, render_list_block)


def nested_lists_default(text: str, context: dict) -> str:
    """
    Default configuration for nested_lists.

    Register this in BLOCK_PROCESSORS.
    """
    return render_nested_lists(text, context)
