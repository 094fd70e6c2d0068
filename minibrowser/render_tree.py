from minibrowser.parser.cssom import *
from minibrowser.parser.html_parser import *
from minibrowser.setting.constant import *
from minibrowser.utils.logger import get_logger

logger = get_logger(__name__)

class RenderObject:
    def __init__(self, node, styles, children):
        self.node = node
        self.styles = styles
        self.children = children

    def value(self, property):
        return self.styles.get(property)

    def get_display(self):
        value = self.value("display")
        if value is None:
            return Display("block")
        if isinstance(value, Display):
            return value
        return Display("inline")

    def lookup_length(self, property):
        value = self.value(property)
        if isinstance(value, Length):
            return value
        return None

    def __repr__(self):
        return "RenderObject({!r}, {!r})".format(self.node, self.styles)

    def __str__(self):
        return pretty_print(self, 0)

def build(node, stylesheet):
    if not isinstance(node, Element):
        return RenderObject(node, {}, [])
    if node.tag in NON_VISUAL_TAGS:
        logger.debug("excluding non-visual <%s>", node.tag)
        return None
    styles = stylesheet.get_styles(node)
    if styles.get("display") == Display("none"):
        logger.debug("excluding <%s> with display: none", node.tag)
        return None
    children = []
    for child in node.children:
        render_object = build(child, stylesheet)
        if render_object is not None:
            children.append(render_object)
    return RenderObject(node, styles, children)

def format_styles(styles):
    pairs = ", ".join("{}: {!r}".format(p, v) for p, v in styles.items())
    return "{" + pairs + "}"

def pretty_print(render_object, indent_size):
    indent = " " * indent_size
    node = render_object.node
    if isinstance(node, Element):
        if render_object.styles:
            lines = ["{}<{} styles={}>".format(
                indent, node.tag, format_styles(render_object.styles))]
        else:
            lines = ["{}<{}>".format(indent, node.tag)]
    elif isinstance(node, Comment):
        lines = ["{}<!--{}-->".format(indent, node.text)]
    else:
        lines = [indent + node.text.strip()]
    for child in render_object.children:
        lines.append(pretty_print(child, indent_size + 2))
    if isinstance(node, Element):
        lines.append("{}</{}>".format(indent, node.tag))
    return "\n".join(lines)
