from minibrowser.common.cursor import *
from minibrowser.parser.cssom import *
from minibrowser.setting.config import Config
from minibrowser.setting.constant import *
from minibrowser.utils.logger import get_logger

logger = get_logger(__name__)

def is_hex_char(c):
    return c in "0123456789abcdefABCDEF"

def is_number_char(c):
    return c.isdigit() or c == "."

def is_unit_char(c):
    return is_identifier_char(c) or c == "%"

def expand_box(values):
    # top, right, bottom, left
    if len(values) == 1:
        return [values[0]] * 4
    elif len(values) == 2:
        return [values[0], values[1], values[0], values[1]]
    elif len(values) == 3:
        return [values[0], values[1], values[2], values[1]]
    else:
        return values[:4]

def is_box_side(property):
    for name in BOX_PROPERTIES:
        for side in BOX_SIDES:
            if property == name + "-" + side:
                return True
    return False

class CSSParser:
    def __init__(self, s, recover=None):
        self.cursor = Cursor(s)
        self.recover = Config.recover_css if recover is None else recover
        self.errors = []

    def parse(self):
        cursor = self.cursor
        rules = []
        cursor.whitespace()
        while not cursor.at_end():
            try:
                rules.append(self.rule())
            except ParseError as e:
                if not self.recover:
                    raise
                self.errors.append(e)
                logger.warning("skipping stylesheet rule: %s", e)
                why = self.ignore_until(["}"])
                if why == "}":
                    cursor.literal("}")
                else:
                    break
            cursor.whitespace()
        logger.debug("parsed %d stylesheet rules", len(rules))
        return StyleSheet(rules)

    def rule(self):
        cursor = self.cursor
        selectors = [self.selector()]
        while True:
            cursor.whitespace()
            if cursor.peek() == ",":
                cursor.advance()
                selectors.append(self.selector())
            elif cursor.peek() == "{":
                cursor.advance()
                break
            else:
                raise cursor.error(StructuralParseError, "',' or '{'")
        declarations = []
        while True:
            cursor.whitespace()
            if cursor.peek() == "}":
                cursor.advance()
                break
            elif cursor.at_end():
                raise cursor.error(StructuralParseError, "'}'")
            declarations.extend(self.declaration())
        return Rule(selectors, declarations)

    ##########################
    # Selectors
    ##########################
    def selector(self):
        cursor = self.cursor
        cursor.whitespace()
        out = None
        if cursor.peek() is not None and is_name_char(cursor.peek()):
            out = TagSelector(cursor.identifier())
        while True:
            cursor.whitespace()
            c = cursor.peek()
            if c == ".":
                cursor.advance()
                out = ClassSelector(out, self.word("a class name"))
            elif c == "#":
                cursor.advance()
                out = IdSelector(out, self.word("an id"))
            elif c in (">", "+"):
                if out is None:
                    raise cursor.error(StructuralParseError,
                                       "a selector before {!r}".format(c))
                return self.combinator(out)
            else:
                break
        if out is None:
            raise cursor.error(StructuralParseError, "a selector")
        return out

    def combinator(self, left):
        cursor = self.cursor
        c = cursor.advance()
        # the right side takes every combinator after it: a > b > c is a > (b > c)
        right = self.selector()
        if c == ">":
            return ChildSelector(left, right)
        return AdjacentSelector(left, right)

    ##########################
    # Declarations
    ##########################
    def declaration(self):
        cursor = self.cursor
        property = self.word("a property name")
        cursor.whitespace()
        cursor.literal(":")
        cursor.whitespace()
        if property in BOX_PROPERTIES:
            values = expand_box(self.box_values())
            declarations = [
                Declaration(property + "-" + side, value)
                for side, value in zip(BOX_SIDES, values)
            ]
        elif is_box_side(property):
            declarations = [Declaration(property, self.box_values()[0])]
        elif property in COLOR_PROPERTIES:
            declarations = [Declaration(property, self.color())]
        elif property == "display":
            declarations = [Declaration(property, self.display())]
        else:
            declarations = [Declaration(property, self.raw_value())]
        cursor.whitespace()
        cursor.literal(";")
        return declarations

    def box_values(self):
        cursor = self.cursor
        values = []
        while len(values) < 4:
            cursor.whitespace()
            c = cursor.peek()
            if c is None:
                break
            if is_number_char(c) or (c == "-" and self.number_follows()):
                values.append(self.length())
            elif is_identifier_char(c):
                cursor.identifier()
                values.append(AUTO)
            else:
                break
        if not values:
            raise cursor.error(LexError, "a length")
        return values

    def number_follows(self):
        cursor = self.cursor
        return cursor.i + 1 < len(cursor.s) and is_number_char(cursor.s[cursor.i + 1])

    def length(self):
        cursor = self.cursor
        value = self.number()
        if cursor.peek() is not None and is_unit_char(cursor.peek()):
            unit = cursor.chars(is_unit_char)
            return Length(value, UNITS.get(unit, DEFAULT_UNIT))
        # "10.5 px" is one length, "0 auto" is two values
        word, end = cursor.lookahead(is_unit_char)
        if word in UNITS:
            cursor.i = end
            return Length(value, UNITS[word])
        return Length(value, DEFAULT_UNIT)

    def number(self):
        cursor = self.cursor
        start = cursor.i
        text = ""
        if cursor.peek() == "-":
            text = cursor.advance()
        text += cursor.chars(is_number_char)
        try:
            return float(text)
        except ValueError:
            raise cursor.error(LexError, "a number", found=repr(text), offset=start)

    def color(self):
        cursor = self.cursor
        if cursor.peek() != "#":
            return self.raw_value()
        cursor.advance()
        r = self.hex_pair()
        g = self.hex_pair()
        b = self.hex_pair()
        a = 0
        c = cursor.peek()
        if c is not None and c.isascii() and c.isalnum():
            a = self.hex_pair()
        return Color(r, g, b, a)

    def hex_pair(self):
        text = self.cursor.chars(is_hex_char, limit=2)
        if not text:
            return 0
        return int(text, 16)

    def display(self):
        word = self.word("a display keyword")
        return Display(DISPLAY_KEYWORDS.get(word, DEFAULT_DISPLAY))

    def raw_value(self):
        text = " ".join(self.cursor.chars(lambda c: c not in ";}").split())
        if not text:
            raise self.cursor.error(LexError, "a value")
        return Keyword(text)

    ##########################
    # Lexing helpers
    ##########################
    def word(self, expected):
        word = self.cursor.identifier()
        if not word:
            raise self.cursor.error(LexError, expected)
        return word

    def ignore_until(self, chars):
        cursor = self.cursor
        while not cursor.at_end():
            if cursor.peek() in chars:
                return cursor.peek()
            cursor.advance()
        return None

def parse(s, recover=None):
    return CSSParser(s, recover).parse()
