from minibrowser.common.cursor import *
from minibrowser.setting.constant import *
from minibrowser.utils.logger import get_logger

logger = get_logger(__name__)

class Token:
    def __init__(self, offset=None):
        self.offset = offset

    def key(self):
        return ()

    def __eq__(self, other):
        return type(self) is type(other) and self.key() == other.key()

class TextToken(Token):
    def __init__(self, text, offset=None):
        super().__init__(offset)
        self.text = text

    def key(self):
        return (self.text,)

    def __repr__(self):
        return self.text

class StyleTextToken(TextToken):
    pass

class StartTagToken(Token):
    def __init__(self, tag, attributes, offset=None):
        super().__init__(offset)
        self.tag = tag
        self.attributes = attributes

    def key(self):
        return (self.tag, self.attributes)

    def element_to_string(self):
        out = self.tag
        for key, value in self.attributes.items():
            out += ' {}="{}"'.format(key, value)
        return out

    def __repr__(self):
        return "<{}>".format(self.element_to_string())

class SelfClosingTagToken(StartTagToken):
    def __repr__(self):
        return "<{} />".format(self.element_to_string())

class EndTagToken(Token):
    def __init__(self, tag, offset=None):
        super().__init__(offset)
        self.tag = tag

    def key(self):
        return (self.tag,)

    def __repr__(self):
        return "</{}>".format(self.tag)

class CommentToken(Token):
    def __init__(self, text, offset=None):
        super().__init__(offset)
        self.text = text

    def key(self):
        return (self.text,)

    def __repr__(self):
        return "<!-- {} -->".format(self.text)

def collapse_whitespace(text):
    return " ".join(text.split())

class Lexer:
    def __init__(self, s):
        self.cursor = Cursor(s)
        # 当前正在读取原始文本的标签(style/script)
        self.raw_tag = None

    def tokens(self):
        tokens = []
        while True:
            if not self.raw_tag:
                self.cursor.whitespace()
            if self.cursor.at_end():
                break
            token = self.next_token()
            if token is not None:
                tokens.append(token)
        logger.debug("lexed %d markup tokens", len(tokens))
        return tokens

    def next_token(self):
        cursor = self.cursor
        start = cursor.i
        if self.raw_tag:
            return self.raw_text(start)
        if cursor.peek() != "<":
            return self.text(start)
        cursor.advance()
        if cursor.peek() == "!":
            return self.comment(start)
        elif cursor.peek() == "/":
            return self.end_tag(start)
        else:
            return self.start_tag(start)

    def text(self, start):
        text = self.cursor.chars(lambda c: c != "<")
        return TextToken(collapse_whitespace(text), start)

    def raw_text(self, start):
        tag = self.raw_tag
        text = self.cursor.until("</" + tag)
        self.raw_tag = None
        if tag == "style":
            return StyleTextToken(text, start)
        text = collapse_whitespace(text)
        if not text:
            return None
        return TextToken(text, start)

    def comment(self, start):
        cursor = self.cursor
        cursor.literal("!--", LexError)
        text = cursor.until("-->", LexError)
        cursor.literal("-->")
        return CommentToken(text.strip(), start)

    def tag_name(self):
        return self.cursor.chars(is_name_char) or "div"

    def start_tag(self, start):
        cursor = self.cursor
        tag = self.tag_name()
        attributes = {}
        while True:
            cursor.whitespace()
            c = cursor.peek()
            if c == ">":
                cursor.advance()
                if tag in RAW_TEXT_TAGS:
                    self.raw_tag = tag
                return StartTagToken(tag, attributes, start)
            elif cursor.startswith("/>"):
                cursor.literal("/>")
                return SelfClosingTagToken(tag, attributes, start)
            elif c is None:
                raise cursor.error(StructuralParseError, "'>'")
            elif c.isascii() and c.isalpha():
                key, value = self.attribute()
                attributes[key] = value
            else:
                raise cursor.error(LexError, "an attribute name or '>'")

    def attribute(self):
        cursor = self.cursor
        key = cursor.identifier()
        cursor.whitespace()
        cursor.literal("=")
        cursor.whitespace()
        return key, self.string()

    def string(self):
        cursor = self.cursor
        cursor.literal('"', LexError)
        value = cursor.until('"', LexError)
        cursor.literal('"')
        return value

    def end_tag(self, start):
        cursor = self.cursor
        cursor.literal("/")
        tag = self.tag_name()
        cursor.whitespace()
        cursor.literal(">")
        return EndTagToken(tag, start)
