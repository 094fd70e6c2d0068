import pytest

from minibrowser.browser import Page
from minibrowser.common.errors import ParseError
from minibrowser.parser.cssom import Color, Display

HTML = """
<html>
<head>
    <title>Example Domain</title>
    <meta charset="utf-8" />
    <style type="text/css">
    body { background-color: #f0f0f2; }
    .hidden { display: none; }
    </style>
</head>
<body>
<div class="hidden"><p>gone</p></div>
<p>kept</p>
</body>
</html>
"""

def test_load_uses_embedded_style():
    page = Page()
    tree = page.load(HTML)
    assert len(page.rules.rules) == 2
    body = tree.children[1]
    assert body.value("background-color") == Color(0xf0, 0xf0, 0xf2)
    assert [child.node.tag for child in body.children] == ["p"]

def test_style_element_stays_in_render_tree():
    tree = Page().load(HTML)
    head = tree.children[0]
    assert [child.node.tag for child in head.children] == ["title", "style"]

def test_load_with_explicit_stylesheet():
    page = Page()
    tree = page.load(HTML, css="p { display: flex; }")
    body = tree.children[1]
    assert [child.get_display() for child in body.children] == \
        [Display("block"), Display("flex")]

def test_load_without_any_stylesheet():
    tree = Page().load("<div><p>x</p></div>")
    assert tree.styles == {}

def test_root_excluded():
    page = Page()
    assert page.load("<div>x</div>", css="div { display: none; }") is None
    assert page.nodes is not None
    assert page.render_tree is None

def test_structural_failure_produces_no_tree():
    page = Page()
    with pytest.raises(ParseError):
        page.load("<div><p>x</div>")
    assert page.render_tree is None

def test_malformed_rule_is_fatal_by_default():
    with pytest.raises(ParseError):
        Page().load("<div>x</div>", css="a:link { color: #000001; }")

def test_recover_css():
    page = Page(recover_css=True)
    tree = page.load("<div>x</div>", css="a:link { color: #000001; } div { color: #000002; }")
    assert tree.value("color") == Color(0, 0, 2)
