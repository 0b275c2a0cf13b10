from litemark.markdown.blockprocessors.nested_lists import render_list_block
from litemark.markdown.renderer import render_markdown

CHECKED = '<li style="list-style: none;"><input type="checkbox" checked disabled> '
UNCHECKED = '<li style="list-style: none;"><input type="checkbox" disabled> '


def test_checkbox_list():
    html = render_markdown("- [x] done\n- [ ] todo")
    assert html == f"<ul>{CHECKED}done</li>{UNCHECKED}todo</li></ul>"


def test_checkbox_state_is_case_insensitive():
    html = render_markdown("* [X] upper\n+ [x] lower")
    assert html == f"<ul>{CHECKED}upper</li>{CHECKED}lower</li></ul>"


def test_checkbox_list_keeps_following_line_separate():
    html = render_markdown("- [ ] task\nafter")
    assert html == f"<ul>{UNCHECKED}task</li></ul>\n<p>after</p>"


def test_flat_unordered_list():
    assert render_markdown("- a\n- b") == "<ul><li>a</li><li>b</li></ul>"


def test_nested_unordered_list():
    html = render_markdown("- a\n  - b\n- c")
    assert html == "<ul><li>a<ul><li>b</li></ul></li><li>c</li></ul>"


def test_ordered_items_keep_their_numbers():
    html = render_markdown("5. five\n6. six")
    assert html == '<ol><li value="5">five</li><li value="6">six</li></ol>'


def test_ordered_marker_is_kept_verbatim():
    assert render_markdown("007. bond") == '<ol><li value="007">bond</li></ol>'


def test_mixed_nesting():
    html = render_markdown("1. one\n   - sub\n2. two")
    assert html == '<ol><li value="1">one<ul><li>sub</li></ul></li><li value="2">two</li></ol>'


def test_nesting_depth_follows_indentation_steps():
    html = render_list_block("- a\n  - b\n    - c\n    - d\n")
    assert html == "<ul><li>a<ul><li>b<ul><li>c</li><li>d</li></ul></li></ul></li></ul>"
    assert html.count("<ul>") == 3


def test_dedent_closes_only_deeper_lists():
    html = render_list_block("- a\n    - b\n  - c")
    assert html == "<ul><li>a<ul><li>b</li></ul><ul><li>c</li></ul></li></ul>"


def test_list_items_get_inline_formatting():
    assert render_markdown("- **a**") == "<ul><li><strong>a</strong></li></ul>"


def test_list_is_closed_before_following_paragraph():
    html = render_markdown("- a\n- b\n\ntext")
    assert html == "<ul><li>a</li><li>b</li></ul>\n<p>text</p>"


def test_tab_indented_item_nests():
    assert render_markdown("- a\n\t- b") == "<ul><li>a<ul><li>b</li></ul></li></ul>"
