# litemark/markdown/preprocessors/literal_tokenizer.py
"""
Preprocessor that protects code from every later pass.

A single forward scan over the text recognises, in priority order at each
position:
- Fenced code blocks (```lang ... ```)
- Double backtick spans (``...``)
- Single backtick spans (`...`)

Each one is swapped for a placeholder. Fenced blocks are rendered to their
final <pre><code> markup right away; spans keep their raw text and are
HTML-escaped by the reassembler. An unterminated fence or span runs to the end
of the input.
"""

from __future__ import annotations

from typing import List

from ..placeholders import CODE_BLOCK, INLINE_CODE, PlaceholderStore, get_store
from ..utils import escape_html

FENCE = "```"
DOUBLE_TICK = "``"
TICK = "`"


def _dedent_code(code: str) -> str:
    """Trim blank edge lines and strip the common leading-space indent."""
    lines = code.replace("\r", "").split("\n")

    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    indents = [len(line) - len(line.lstrip(" ")) for line in lines if line.strip()]
    min_indent = min(indents) if indents else 0

    return "\n".join(line[min_indent:] for line in lines)


def render_code_block(code: str, language: str, store: PlaceholderStore, default_language: str) -> str:
    code = store.resolve_escapes_to_source(code)
    cleaned = _dedent_code(code)
    language = language.strip() or default_language
    return f'<pre class="language-{escape_html(language)}"><code>{escape_html(cleaned)}</code></pre>'


def _read_fence(src: str, start: int, store: PlaceholderStore, default_language: str):
    """Consume a fenced block opening at ``start``; return (sentinel, next index)."""
    n = len(src)
    pos = start + len(FENCE)

    lang_chars: List[str] = []
    while pos < n and not src[pos].isspace():
        lang_chars.append(src[pos])
        pos += 1

    # At most one line terminator after the language tag
    if pos < n and src[pos] == "\r":
        pos += 1
    if pos < n and src[pos] == "\n":
        pos += 1

    end = src.find(FENCE, pos)
    if end == -1:
        code, resume = src[pos:], n
    else:
        code, resume = src[pos:end], end + len(FENCE)

    html = render_code_block(code, "".join(lang_chars), store, default_language)
    return store.add(CODE_BLOCK, html), resume


def _read_span(src: str, start: int, delimiter: str, store: PlaceholderStore):
    """Consume an inline code span opening at ``start``; return (sentinel, next index)."""
    body_start = start + len(delimiter)
    end = src.find(delimiter, body_start)
    if end == -1:
        code, resume = src[body_start:], len(src)
    else:
        code, resume = src[body_start:end], end + len(delimiter)

    return store.add(INLINE_CODE, store.resolve_escapes_to_source(code)), resume


def tokenize_literals(text: str, context: dict, default_language: str = "plaintext") -> str:
    """
    Replace fenced blocks and backtick spans with placeholders.

    Args:
        text: Markdown with escapes already extracted
        context: Conversion context holding the placeholder store
        default_language: Language class used when a fence has no tag

    Returns:
        Markdown where no code content remains visible
    """
    store = get_store(context)
    out: List[str] = []
    i = 0
    n = len(text)

    while i < n:
        if text.startswith(FENCE, i):
            sentinel, i = _read_fence(text, i, store, default_language)
            out.append(sentinel)
            continue

        if text.startswith(DOUBLE_TICK, i):
            sentinel, i = _read_span(text, i, DOUBLE_TICK, store)
            out.append(sentinel)
            continue

        if text[i] == TICK:
            sentinel, i = _read_span(text, i, TICK, store)
            out.append(sentinel)
            continue

        # Copy the run of plain text up to the next backtick in one step
        next_tick = text.find(TICK, i)
        if next_tick == -1:
            next_tick = n
        out.append(text[i:next_tick])
        i = next_tick

    return "".join(out)


def literal_tokenizer_default(text: str, context: dict) -> str:
    """
    Default configuration for literal_tokenizer.

    Register this in PREPROCESSORS.
    """
    config = context.get("config") or {}
    return tokenize_literals(
        text,
        context,
        default_language=config.get("DEFAULT_CODE_LANGUAGE", "plaintext"),
    )
