import dataclasses as dc
import enum
import itertools as it
import re

import ply.lex

from .errors import LexicalError

### TOKENS ###

# a token is a span over the source, it never holds its own text
# consumers get the text back with token.text(source)

class Kind(enum.Enum):
    ADD     = 0
    SUB     = 1
    MUL     = 2
    DIV     = 3

    NUM     = 4
    IDENT   = 5

    LPAREN  = 6
    RPAREN  = 7

    def __str__(self):
        match self:
            case Kind.NUM | Kind.IDENT:
                return "[TOKEN]"
            case _:
                return f"[{self.name}]"

@dc.dataclass(frozen = True)
class Token:
    kind        : Kind
    start       : int
    length      : int

    @property
    def end(self):
        return self.start + self.length

    def text(self, source):
        return source[self.start:self.end]

    def __str__(self):
        return f"({self.kind}, {self.start} -> {self.length})"

### LEXER ###

class Lexer:
    """
    lazy token stream over one source string

    every call to next() scans one more token, the stream ends with the
    source and cannot be rewound: build a new Lexer to scan again.
    offsets are string indices, so token.text(source) is exact even for
    non-ascii input
    """
    tokens = tuple(kind.name for kind in Kind)

    t_ADD       = re.escape('+')
    t_SUB       = re.escape('-')
    t_MUL       = re.escape('*')
    t_DIV       = re.escape('/')

    t_LPAREN    = re.escape('(')
    t_RPAREN    = re.escape(')')

    t_ignore = ' '              # plain spaces only, tabs and newlines are errors

    def __init__(self, source):
        self.source   = source
        self.lexer    = ply.lex.lex(module = self)
        self.lexer.input(source)

    def t_NUM(self, t):
        r'\d+'
        return t

    def t_IDENT(self, t):
        r'[^\W\d_]+'
        # \w also takes numerics like ² or ½: keep the alphabetic prefix only
        value = ''.join(it.takewhile(str.isalpha, t.value))
        if not value:
            raise LexicalError(t.value[0], t.lexpos)
        t.value          = value
        t.lexer.lexpos   = t.lexpos + len(value)
        return t

    def t_error(self, t):
        raise LexicalError(t.value[0], t.lexpos)

    def __iter__(self):
        return self

    def __next__(self):
        tok = self.lexer.token()
        if tok is None:
            raise StopIteration
        return Token(Kind[tok.type], tok.lexpos, len(tok.value))

def tokenize(source):
    return list(Lexer(source))
