from minibrowser.parser.html_parser import Element

##########################
# Declaration values
##########################
class Color:
    def __init__(self, r, g, b, a=0):
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    def __eq__(self, other):
        return isinstance(other, Color) and \
            (self.r, self.g, self.b, self.a) == (other.r, other.g, other.b, other.a)

    def __repr__(self):
        out = "#{:02x}{:02x}{:02x}".format(self.r, self.g, self.b)
        if self.a:
            out += "{:02x}".format(self.a)
        return out

class Length:
    def __init__(self, value, unit):
        self.value = value
        self.unit = unit

    def __eq__(self, other):
        return type(self) is type(other) and \
            (self.value, self.unit) == (other.value, other.unit)

    def __repr__(self):
        unit = "%" if self.unit == "pct" else self.unit
        value = self.value
        if float(value).is_integer():
            value = int(value)
        return "{}{}".format(value, unit)

class Auto(Length):
    def __init__(self):
        super().__init__(None, None)

    def __repr__(self):
        return "auto"

AUTO = Auto()

class Display:
    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Display) and self.value == other.value

    def __repr__(self):
        return self.value

# any value without a dedicated grammar, kept as written
class Keyword:
    def __init__(self, text):
        self.text = text

    def __eq__(self, other):
        return isinstance(other, Keyword) and self.text == other.text

    def __repr__(self):
        return self.text

##########################
# Selectors
##########################
class TagSelector:
    def __init__(self, tag):
        self.tag = tag

    def matches(self, node):
        return isinstance(node, Element) and self.tag == node.tag

    def __eq__(self, other):
        return isinstance(other, TagSelector) and self.tag == other.tag

    def __repr__(self):
        return self.tag

class ClassSelector:
    def __init__(self, left, name):
        self.left = left
        self.name = name

    def matches(self, node):
        if not isinstance(node, Element):
            return False
        if self.left and not self.left.matches(node):
            return False
        return (node.get_classes() or "") == self.name

    def __eq__(self, other):
        return isinstance(other, ClassSelector) and \
            (self.left, self.name) == (other.left, other.name)

    def __repr__(self):
        left = repr(self.left) if self.left else ""
        return "{}.{}".format(left, self.name)

class IdSelector:
    def __init__(self, left, name):
        self.left = left
        self.name = name

    def matches(self, node):
        if not isinstance(node, Element):
            return False
        if self.left and not self.left.matches(node):
            return False
        return (node.get_id() or "") == self.name

    def __eq__(self, other):
        return isinstance(other, IdSelector) and \
            (self.left, self.name) == (other.left, other.name)

    def __repr__(self):
        left = repr(self.left) if self.left else ""
        return "{}#{}".format(left, self.name)

# Combinators only shape the parse tree; matching never looks at the
# parent or sibling of the element, so they match nothing.
class ChildSelector:
    def __init__(self, left, right):
        self.left = left
        self.right = right

    def matches(self, node):
        return False

    def __eq__(self, other):
        return isinstance(other, ChildSelector) and \
            (self.left, self.right) == (other.left, other.right)

    def __repr__(self):
        return "{!r} > {!r}".format(self.left, self.right)

class AdjacentSelector:
    def __init__(self, left, right):
        self.left = left
        self.right = right

    def matches(self, node):
        return False

    def __eq__(self, other):
        return isinstance(other, AdjacentSelector) and \
            (self.left, self.right) == (other.left, other.right)

    def __repr__(self):
        return "{!r} + {!r}".format(self.left, self.right)

##########################
# Rules
##########################
class Declaration:
    def __init__(self, property, value):
        self.property = property
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Declaration) and \
            (self.property, self.value) == (other.property, other.value)

    def __repr__(self):
        return "{}: {!r}".format(self.property, self.value)

class Rule:
    def __init__(self, selectors, declarations):
        self.selectors = selectors
        self.declarations = declarations

    def matches(self, node):
        for selector in self.selectors:
            if selector.matches(node):
                return True
        return False

    def __eq__(self, other):
        return isinstance(other, Rule) and \
            (self.selectors, self.declarations) == \
            (other.selectors, other.declarations)

    def __repr__(self):
        selectors = ", ".join(repr(selector) for selector in self.selectors)
        body = "".join("\t{!r};\n".format(d) for d in self.declarations)
        return "%s {\n%s}" % (selectors, body)

class StyleSheet:
    def __init__(self, rules=None):
        self.rules = rules if rules is not None else []

    def get_styles(self, node):
        styles = {}
        for rule in self.rules:
            if not rule.matches(node): continue
            for declaration in rule.declarations:
                styles[declaration.property] = declaration.value
        return styles

    def __eq__(self, other):
        return isinstance(other, StyleSheet) and self.rules == other.rules

    def __repr__(self):
        return "\n\n".join(repr(rule) for rule in self.rules)
