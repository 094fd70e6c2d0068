from minibrowser.common.errors import *

IDENTIFIER_EXTRA = "_-"

def is_identifier_char(c):
    return c.isascii() and (c.isalnum() or c in IDENTIFIER_EXTRA)

def is_name_char(c):
    return c.isascii() and c.isalnum()

class Cursor:
    def __init__(self, s):
        self.s = s
        self.i = 0

    def at_end(self):
        return self.i >= len(self.s)

    def peek(self):
        if self.at_end():
            return None
        return self.s[self.i]

    def advance(self):
        if self.at_end():
            raise self.error(StructuralParseError, "a character")
        c = self.s[self.i]
        self.i += 1
        return c

    def startswith(self, text):
        return self.s.startswith(text, self.i)

    def whitespace(self):
        while self.i < len(self.s) and self.s[self.i].isspace():
            self.i += 1

    def chars(self, accept, limit=None):
        start = self.i
        while self.i < len(self.s) and accept(self.s[self.i]):
            if limit is not None and self.i - start >= limit:
                break
            self.i += 1
        return self.s[start:self.i]

    def identifier(self):
        return self.chars(is_identifier_char)

    def literal(self, literal, error=StructuralParseError):
        if not self.startswith(literal):
            raise self.error(error, repr(literal))
        self.i += len(literal)

    def until(self, text, error=StructuralParseError):
        end = self.s.find(text, self.i)
        if end < 0:
            raise self.error(error, repr(text), found="end of input")
        out = self.s[self.i:end]
        self.i = end
        return out

    def position(self, offset=None):
        if offset is None:
            offset = self.i
        offset = min(offset, len(self.s))
        line = self.s.count("\n", 0, offset) + 1
        column = offset - (self.s.rfind("\n", 0, offset) + 1) + 1
        return line, column

    def describe(self):
        if self.at_end():
            return "end of input"
        return repr(self.s[self.i])

    def error(self, cls, expected, found=None, offset=None):
        if offset is None:
            offset = self.i
        if found is None:
            found = self.describe()
        line, column = self.position(offset)
        message = "expected {}, found {}".format(expected, found)
        return cls(message, offset=offset, line=line, column=column,
                   expected=expected, found=found)

    def lookahead(self, accept):
        j = self.i
        while j < len(self.s) and self.s[j].isspace():
            j += 1
        end = j
        while end < len(self.s) and accept(self.s[end]):
            end += 1
        return self.s[j:end], end

def error_at(source, offset, cls, expected, found):
    if source is None:
        message = "expected {}, found {}".format(expected, found)
        return cls(message, offset=offset, expected=expected, found=found)
    return Cursor(source).error(cls, expected, found=found, offset=offset)
