class ParseError(Exception):
    def __init__(self, message, offset=None, line=None, column=None,
                 expected=None, found=None):
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found
        if line is not None:
            message = "{} at line {}, column {}".format(message, line, column)
        super().__init__(message)

# no valid token can start at the current position
class LexError(ParseError):
    pass

# a required delimiter, tag or selector is absent
class StructuralParseError(ParseError):
    pass
