from minibrowser.common.cursor import *
from minibrowser.parser.html_lexer import *
from minibrowser.utils.logger import get_logger
from minibrowser.utils.util import tree_to_list

logger = get_logger(__name__)

class Text:
    def __init__(self, text):
        self.text = text
        self.children = []

    def __eq__(self, other):
        return type(self) is type(other) and self.text == other.text

    def __repr__(self):
        return repr(self.text)

# raw content of a <style> element
class StyleText:
    def __init__(self, text):
        self.text = text
        self.children = []

    def __eq__(self, other):
        return type(self) is type(other) and self.text == other.text

    def __repr__(self):
        return "StyleText({!r})".format(self.text)

class Comment:
    def __init__(self, text):
        self.text = text
        self.children = []

    def __eq__(self, other):
        return type(self) is type(other) and self.text == other.text

    def __repr__(self):
        return "<!--{}-->".format(self.text)

class Element:
    def __init__(self, tag, attributes=None, children=None):
        self.tag = tag
        self.attributes = attributes if attributes is not None else {}
        self.children = children if children is not None else []

    def get_id(self):
        return self.attributes.get("id")

    def get_classes(self):
        return self.attributes.get("class")

    def __eq__(self, other):
        return isinstance(other, Element) and \
            (self.tag, self.attributes, self.children) == \
            (other.tag, other.attributes, other.children)

    def __repr__(self):
        return "<" + self.tag + ">"

# 只在解析过程中出现, 不会留在DOM树里
class EndTag:
    def __init__(self, tag, offset=None):
        self.tag = tag
        self.offset = offset

class DOMParser:
    def __init__(self, tokens, source=None):
        self.tokens = tokens
        self.source = source
        self.i = 0

    def parse(self):
        nodes = []
        while self.i < len(self.tokens):
            node = self.parse_node()
            if isinstance(node, EndTag):
                raise self.error("a node", "</{}> with no open element".format(node.tag),
                                 node.offset)
            nodes.append(node)
        if not nodes:
            raise self.error("a node", "end of input")
        return nodes

    def parse_node(self):
        if self.i >= len(self.tokens):
            raise self.error("a node", "end of input")
        token = self.tokens[self.i]
        self.i += 1
        if isinstance(token, StyleTextToken):
            return StyleText(token.text)
        elif isinstance(token, TextToken):
            return Text(token.text)
        elif isinstance(token, CommentToken):
            return Comment(token.text)
        elif isinstance(token, SelfClosingTagToken):
            return Element(token.tag, dict(token.attributes))
        elif isinstance(token, StartTagToken):
            element = Element(token.tag, dict(token.attributes))
            element.children = self.parse_children(token)
            return element
        else:
            return EndTag(token.tag, token.offset)

    def parse_children(self, start):
        children = []
        end = "</{}>".format(start.tag)
        while True:
            if self.i >= len(self.tokens):
                raise self.error(end, "end of input")
            node = self.parse_node()
            if isinstance(node, EndTag):
                if node.tag != start.tag:
                    raise self.error(end, "</{}>".format(node.tag), node.offset)
                return children
            children.append(node)

    def error(self, expected, found, offset=None):
        if offset is None:
            offset = len(self.source) if self.source is not None else None
        return error_at(self.source, offset, StructuralParseError, expected, found)

def parse_document(s):
    tokens = Lexer(s).tokens()
    nodes = DOMParser(tokens, s).parse()
    logger.debug("parsed %d top-level nodes", len(nodes))
    return nodes

def parse(s):
    return parse_document(s)[0]

def find_style(node):
    for candidate in tree_to_list(node, []):
        if isinstance(candidate, Element) and candidate.tag == "style" \
            and candidate.children \
            and isinstance(candidate.children[0], StyleText):
            return candidate
    return None

def extract_style(node):
    element = find_style(node)
    if element is None:
        return ""
    return element.children[0].text
