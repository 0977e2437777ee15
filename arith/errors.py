### ERRORS ###

# everything the front end can complain about
# each error carries the offset (and length) of the span it is about,
# the reporter uses them to underline the source

class ArithError(Exception):
    def __init__(self, message, offset = None, length = 1):
        self.message    = message           # str
        self.offset     = offset            # int | None
        self.length     = length            # int
        super().__init__(self.pprint())

    def pprint(self):
        if self.offset is None:
            return self.message
        return f"offset {self.offset}: {self.message}"

class LexicalError(ArithError):
    def __init__(self, char, offset):
        self.char       = char              # str
        super().__init__(f"unknown character {char!r}", offset)

class ParseError(ArithError):
    pass

class UnexpectedTokenError(ParseError):
    def __init__(self, token, message = None):
        self.token      = token             # Token
        super().__init__(message or f"unexpected token {token.kind}",
                         token.start, token.length)

class UnexpectedEndError(ParseError):
    def __init__(self, message = "unexpected end of input", offset = None):
        super().__init__(message, offset)

class MalformedGroupingError(ParseError):
    pass

class EmptyTreeError(ArithError):
    def __init__(self):
        super().__init__("tree was empty")

# not an ArithError: a ref that does not resolve is a bug, not bad input
class InvalidRefError(LookupError):
    pass
