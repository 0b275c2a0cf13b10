"""
Placeholder store shared by the passes of one conversion.

Protected content (escaped punctuation, fenced code, inline code) is swapped
for a sentinel while the block and inline passes rewrite the text, and put
back by the reassembler at the very end.

Sentinel format::

    \\ue000 <kind letter> <index> \\ue001

Both delimiters are private-use code points: they are not markdown trigger
characters and not word characters, so none of the regex passes can read a
sentinel as syntax or as part of a word.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List

SENTINEL_OPEN = "\ue000"
SENTINEL_CLOSE = "\ue001"

ESCAPE = "escape"
CODE_BLOCK = "code-block"
INLINE_CODE = "inline-code"

KIND_LETTERS: Dict[str, str] = {ESCAPE: "E", CODE_BLOCK: "C", INLINE_CODE: "I"}

CONTEXT_KEY = "placeholders"


def sentinel_pattern(kind: str) -> re.Pattern:
    return re.compile(f"{SENTINEL_OPEN}{KIND_LETTERS[kind]}(\\d+){SENTINEL_CLOSE}")


SENTINEL_PATTERNS: Dict[str, re.Pattern] = {kind: sentinel_pattern(kind) for kind in KIND_LETTERS}

CODE_BLOCK_PREFIX = f"{SENTINEL_OPEN}{KIND_LETTERS[CODE_BLOCK]}"


@dataclass
class Placeholder:
    kind: str
    index: int
    payload: str

    @property
    def sentinel(self) -> str:
        return f"{SENTINEL_OPEN}{KIND_LETTERS[self.kind]}{self.index}{SENTINEL_CLOSE}"


@dataclass
class PlaceholderStore:
    """Arena of placeholders, indexed per kind by a monotonic counter."""

    tokens: Dict[str, List[Placeholder]] = field(
        default_factory=lambda: {kind: [] for kind in KIND_LETTERS}
    )

    def add(self, kind: str, payload: str) -> str:
        bucket = self.tokens[kind]
        placeholder = Placeholder(kind=kind, index=len(bucket), payload=payload)
        bucket.append(placeholder)
        return placeholder.sentinel

    def get(self, kind: str, index: int) -> Placeholder | None:
        bucket = self.tokens[kind]
        if 0 <= index < len(bucket):
            return bucket[index]
        return None

    def count(self, kind: str) -> int:
        return len(self.tokens[kind])

    def restore(self, kind: str, text: str, render: Callable[[str], str]) -> str:
        """Replace every sentinel of ``kind`` in ``text`` with ``render(payload)``."""

        def replace(match):
            placeholder = self.get(kind, int(match.group(1)))
            if placeholder is None:
                return match.group(0)
            return render(placeholder.payload)

        return SENTINEL_PATTERNS[kind].sub(replace, text)

    def resolve_escapes_to_source(self, text: str) -> str:
        """Turn escape sentinels back into the backslash sequence that produced them."""
        return self.restore(ESCAPE, text, lambda ch: "\\" + ch)


def get_store(context: dict) -> PlaceholderStore:
    store = context.get(CONTEXT_KEY)
    if store is None:
        store = PlaceholderStore()
        context[CONTEXT_KEY] = store
    return store


def strip_sentinel_delimiters(text: str) -> str:
    return text.replace(SENTINEL_OPEN, "").replace(SENTINEL_CLOSE, "")
