import pytest

from litemark.markdown.blockprocessors.inline_formatter import apply_inline_patterns
from litemark.markdown.renderer import render_markdown


def test_strong_and_em():
    assert render_markdown("**bold** _em_") == "<p><strong>bold</strong> <em>em</em></p>"


@pytest.mark.parametrize(
    "source, expected",
    [
        ("***x***", "<strong><em>x</em></strong>"),
        ("___x___", "<strong><em>x</em></strong>"),
        ("**x**", "<strong>x</strong>"),
        ("__x__", "<strong>x</strong>"),
        ("*x*", "<em>x</em>"),
        ("_x_", "<em>x</em>"),
        ("~~x~~", "<del>x</del>"),
    ],
)
def test_emphasis_markers(source, expected):
    assert apply_inline_patterns(source, {}) == expected


def test_markers_inside_words_are_text():
    assert render_markdown("snake_case_name") == "<p>snake_case_name</p>"


@pytest.mark.parametrize("level", range(1, 7))
def test_headings(level):
    assert render_markdown("#" * level + " Title") == f"<h{level}>Title</h{level}>"


def test_heading_needs_a_space():
    assert render_markdown("#hashtag") == "<p>#hashtag</p>"


@pytest.mark.parametrize("rule", ["---", "***", "_____"])
def test_horizontal_rules(rule):
    assert render_markdown(rule) == "<hr>"


def test_heading_then_paragraph():
    assert render_markdown("# T\ntext") == "<h1>T</h1>\n<p>text</p>"


def test_autolink():
    html = render_markdown("see <https://example.com/path>")
    assert html == '<p>see <a href="https://example.com/path" target="_blank">https://example.com/path</a></p>'


def test_entity_encoded_autolink():
    html = render_markdown("&lt;ftp://files.example.com&gt;")
    assert html == '<p><a href="ftp://files.example.com" target="_blank">ftp://files.example.com</a></p>'


def test_image():
    html = render_markdown("![alt](/a.png)")
    assert html == '<p><img alt="alt" src="/a.png" style="max-width: 100%;"></p>'


def test_image_with_title_is_not_a_link():
    html = render_markdown('![a](/a.png "T")')
    assert html == '<p><img alt="a" src="/a.png" title="T" style="max-width: 100%;"></p>'
    assert "<a " not in html


def test_link_with_title():
    html = render_markdown('[site](https://x.org "Home")')
    assert html == '<p><a href="https://x.org" title="Home" target="_blank">site</a></p>'


def test_link_url_underscores_are_not_emphasis():
    html = render_markdown("[x](http://a.org/my_page_name)")
    assert html == '<p><a href="http://a.org/my_page_name" target="_blank">x</a></p>'


def test_markers_inside_link_and_image_targets_are_literal():
    html = render_markdown("[a](http://x/_y_) ![b](/img/*z*.png)")
    assert html == (
        '<p><a href="http://x/_y_" target="_blank">a</a> '
        '<img alt="b" src="/img/*z*.png" style="max-width: 100%;"></p>'
    )


def test_link_label_still_gets_emphasis():
    html = render_markdown("[_a_](/x)")
    assert html == '<p><a href="/x" target="_blank"><em>a</em></a></p>'
