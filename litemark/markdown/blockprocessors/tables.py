# litemark/markdown/blockprocessors/tables.py
"""
Block processor that renders pipe tables.

Expected structure:
    | Name | Qty |
    |:-----|----:|
    | Tea  |   2 |

Output:
    <table><thead><tr><th style="text-align:left;">Name</th>...</tr></thead>
    <tbody><tr><td style="text-align:left;">Tea</td>...</tr></tbody></table>

Alignment per column comes from the separator row:
- ":---:" → center
- "---:"  → right
- ":---" or "---" → left

A run of pipe lines without a valid separator as its second line is left
untouched and ends up as paragraph text. Rows are not padded or truncated to
the column count.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List

from ..utils import replace_blocks

logger = logging.getLogger(__name__)

TABLE_BLOCK_RE = re.compile(r"(?:^\|.*\|(?:\n|$))+", re.MULTILINE)
SEPARATOR_ROW_RE = re.compile(r"^\|(?:[\s\-:]+\|)+$")

DEFAULT_ALIGNMENT = "left"


@dataclass
class TableSpec:
    alignments: List[str]
    header_row: str
    body_rows: List[str] = field(default_factory=list)


def _split_cells(row: str) -> List[str]:
    return [cell.strip() for cell in row.strip()[1:-1].split("|")]


def _cell_alignment(cell: str) -> str:
    if cell.startswith(":") and cell.endswith(":") and len(cell) > 1:
        return "center"
    if cell.startswith(":"):
        return "left"
    if cell.endswith(":"):
        return "right"
    return DEFAULT_ALIGNMENT


def parse_table(block: str) -> TableSpec | None:
    lines = block.strip().split("\n")
    if len(lines) < 2 or not SEPARATOR_ROW_RE.match(lines[1].strip()):
        return None
    return TableSpec(
        alignments=[_cell_alignment(cell) for cell in _split_cells(lines[1])],
        header_row=lines[0],
        body_rows=lines[2:],
    )


def _render_row(row: str, tag: str, alignments: List[str]) -> str:
    cells = []
    for i, cell in enumerate(_split_cells(row)):
        align = alignments[i] if i < len(alignments) else DEFAULT_ALIGNMENT
        cells.append(f'<{tag} style="text-align:{align};">{cell}</{tag}>')
    return "<tr>" + "".join(cells) + "</tr>"


def render_table(spec: TableSpec) -> str:
    thead = _render_row(spec.header_row, "th", spec.alignments)
    tbody = "".join(_render_row(row, "td", spec.alignments) for row in spec.body_rows)
    return f"<table><thead>{thead}</thead><tbody>{tbody}</tbody></table>"


def render_tables(text: str, context: dict) -> str:
    def render(block):
        spec = parse_table(block)
        if spec is None:
            logger.debug("Pipe block without a separator row, leaving it as text")
            return block.rstrip("\n")
        return render_table(spec)

    return replace_blocks(TABLE_BLOCK_RE, text, render)


def tables_default(text: str, context: dict) -> str:
    """
    Default configuration for tables.

    Register this in BLOCK_PROCESSORS.
    """
    return render_tables(text, context)
