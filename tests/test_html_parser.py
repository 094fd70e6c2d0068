import pytest

from minibrowser.common.errors import StructuralParseError
from minibrowser.parser.html_parser import *
from minibrowser.utils.util import print_tree, tree_to_list

def test_parse_node():
    source = """
<div class = "name"   id =  "note"  >
    Hello
    <div id="space" />
    <p onClick="console.log(0)">World</p>
    <!-- TODO: Implement Here -->
</div>"""
    assert parse(source) == Element("div", {"id": "note", "class": "name"}, [
        Text("Hello"),
        Element("div", {"id": "space"}),
        Element("p", {"onClick": "console.log(0)"}, [Text("World")]),
        Comment("TODO: Implement Here"),
    ])

def test_parse_document_returns_every_root():
    nodes = parse_document("<p>a</p> text <!-- c -->")
    assert nodes == [Element("p", {}, [Text("a")]), Text("text"), Comment("c")]

def test_parse_returns_first_root():
    assert parse("<p>a</p><p>b</p>") == Element("p", {}, [Text("a")])

def test_style_element_holds_style_text():
    root = parse("<head><style>\n  p { color: #ff0000; }\n</style></head>")
    style = root.children[0]
    assert style.tag == "style"
    assert style.children == [StyleText("\n  p { color: #ff0000; }\n")]

def test_find_and_extract_style():
    root = parse("""
<html>
<head>
    <title>Example Domain</title>
    <meta charset="utf-8" />
    <style type="text/css">body { margin: 0; }</style>
</head>
<body><style>p { margin: 1px; }</style></body>
</html>""")
    assert find_style(root).attributes == {"type": "text/css"}
    assert extract_style(root) == "body { margin: 0; }"

def test_extract_style_without_style_element():
    root = parse("<div><p>x</p></div>")
    assert find_style(root) is None
    assert extract_style(root) == ""

def test_tree_to_list_is_document_order():
    root = parse("<div><p>a</p><span>b</span></div>")
    names = [getattr(node, "tag", None) for node in tree_to_list(root, [])]
    assert names == ["div", "p", None, "span", None]

def test_print_tree(capsys):
    print_tree(parse("<div><p>a</p><!-- c --></div>"))
    assert capsys.readouterr().out.splitlines() == [" <div>", "   <p>", "     'a'", "   <!--c-->"]

def test_element_accessors():
    element = Element("div", {"id": "book", "class": "table"})
    assert element.get_id() == "book"
    assert element.get_classes() == "table"
    assert Element("div").get_id() is None

def test_unknown_tags_keep_their_name():
    assert parse("<custom1></custom1>").tag == "custom1"

def test_end_tag_without_open_element():
    with pytest.raises(StructuralParseError) as info:
        parse("</div>")
    assert info.value.offset == 0
    assert "no open element" in info.value.found

def test_mismatched_end_tag():
    with pytest.raises(StructuralParseError) as info:
        parse("<div><p>x</div>")
    assert info.value.expected == "</p>"
    assert info.value.found == "</div>"

def test_input_ends_inside_element():
    with pytest.raises(StructuralParseError) as info:
        parse("<div><p>x</p>")
    assert info.value.found == "end of input"
    assert info.value.offset == len("<div><p>x</p>")

def test_empty_document():
    with pytest.raises(StructuralParseError):
        parse("   ")

def test_unclosed_style():
    with pytest.raises(StructuralParseError):
        parse("<style>p { margin: 0; }")
