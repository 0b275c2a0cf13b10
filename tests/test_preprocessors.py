import pytest

from litemark.markdown.placeholders import CODE_BLOCK, ESCAPE, INLINE_CODE
from litemark.markdown.preprocessors.escape_extractor import ESCAPABLE_CHARACTERS, extract_escapes
from litemark.markdown.preprocessors.indentation_normalizer import normalize_indentation
from litemark.markdown.preprocessors.literal_tokenizer import tokenize_literals
from litemark.markdown.preprocessors.quote_marker_encoder import encode_quote_markers
from litemark.markdown.renderer import render_markdown


def test_escapes_become_placeholders(context):
    text = extract_escapes(r"\*a\*", context)
    store = context["placeholders"]
    assert "*" not in text
    assert store.count(ESCAPE) == 2
    assert store.get(ESCAPE, 0).payload == "*"


def test_unknown_escape_is_left_alone(context):
    assert extract_escapes(r"C:\path\q", context) == r"C:\path\q"
    assert context["placeholders"].count(ESCAPE) == 0


@pytest.mark.parametrize("ch", list(ESCAPABLE_CHARACTERS))
def test_escaped_character_renders_literally(ch):
    assert render_markdown(f"a \\{ch} b") == f"<p>a {ch} b</p>"


def test_escaped_emphasis_markers_are_not_formatting():
    assert render_markdown(r"\*not em\*") == "<p>*not em*</p>"
    assert render_markdown(r"\# not a heading") == "<p># not a heading</p>"


def test_escaped_backtick_is_not_code():
    assert render_markdown(r"\`not code\`") == "<p>`not code`</p>"


def test_fenced_block_with_language():
    html = render_markdown("```js\nconsole.log(1)\n```")
    assert html == '<pre class="language-js"><code>console.log(1)</code></pre>'


def test_fenced_block_defaults_to_plaintext():
    html = render_markdown("```\nplain\n```")
    assert html == '<pre class="language-plaintext"><code>plain</code></pre>'


def test_fenced_block_is_dedented_and_trimmed():
    html = render_markdown("```\n\n    a\n      b\n\n```")
    assert html == '<pre class="language-plaintext"><code>a\n  b</code></pre>'


def test_fenced_block_handles_crlf():
    html = render_markdown("```py\r\nx = 1\r\n```")
    assert html == '<pre class="language-py"><code>x = 1</code></pre>'


def test_unterminated_fence_runs_to_end():
    html = render_markdown("```py\nx = 1\ny = 2")
    assert html == '<pre class="language-py"><code>x = 1\ny = 2</code></pre>'


def test_fenced_content_is_escaped_and_untouched():
    html = render_markdown("```\n**not bold** <b> # x\n- item\n```")
    assert html == (
        '<pre class="language-plaintext"><code>'
        "**not bold** &lt;b&gt; # x\n- item"
        "</code></pre>"
    )


def test_escapes_inside_fence_keep_their_backslash():
    html = render_markdown("```\na \\* b\n```")
    assert html == '<pre class="language-plaintext"><code>a \\* b</code></pre>'


def test_inline_code_is_escaped_at_the_end():
    assert render_markdown("use `a < b` here") == "<p>use <code>a &lt; b</code> here</p>"


def test_inline_code_hides_markdown():
    assert render_markdown("`*x*` and `[a](b)`") == "<p><code>*x*</code> and <code>[a](b)</code></p>"


def test_double_backtick_span_can_hold_a_backtick():
    assert render_markdown("``a ` b``") == "<p><code>a ` b</code></p>"


def test_unterminated_span_runs_to_end():
    assert render_markdown("`abc") == "<p><code>abc</code></p>"


def test_tokenizer_records_each_kind(context):
    text = tokenize_literals("```\nblock\n``` and `span` and ``double``", context)
    store = context["placeholders"]
    assert "`" not in text
    assert store.count(CODE_BLOCK) == 1
    assert store.count(INLINE_CODE) == 2
    assert store.get(INLINE_CODE, 1).payload == "double"


def test_quote_markers_are_encoded():
    text = "> a\n>> b\n> > c\n&gt; d\nx > y"
    assert encode_quote_markers(text, {}) == "&gt; a\n&gt;&gt; b\n&gt; &gt; c\n&gt; d\nx > y"


def test_indentation_is_kept_only_where_it_matters():
    text = "   text\n  - item\n   1. one\n\tquote"
    assert normalize_indentation(text, {}) == "text\n  - item\n   1. one\nquote"


def test_tab_indentation_counts_four_columns():
    text = "- a\n\t- b\n \t- c\ntext \t"
    assert normalize_indentation(text, {}) == "- a\n    - b\n    - c\ntext"
