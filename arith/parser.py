import enum

from typing import Optional as Opt

from .ast      import AstPool, AstExpr, Literal, BinOp
from .errors   import (ArithError, MalformedGroupingError,
                       UnexpectedEndError, UnexpectedTokenError)
from .lexer    import Kind, Lexer, Token
from .reporter import Reporter

### PRECEDENCE ###

class Precedence(enum.IntEnum):
    LOWEST  = 0
    ADDSUB  = 1
    MULDIV  = 2

def get_precedence(token: Token) -> Opt[Precedence]:
    match token.kind:
        case Kind.ADD | Kind.SUB:
            return Precedence.ADDSUB
        case Kind.MUL | Kind.DIV:
            return Precedence.MULDIV
        case _:
            return None

def is_operator(token: Token) -> bool:
    return get_precedence(token) is not None

### TOKEN STREAM ###

class TokenStream:
    """
    one token of lookahead over any token iterator (a Lexer, a list...)
    """
    def __init__(self, tokens):
        self.tokens     = iter(tokens)
        self.lookahead  = None
        self.last       = None              # last consumed token

    def peek(self) -> Opt[Token]:
        if self.lookahead is None:
            self.lookahead = next(self.tokens, None)
        return self.lookahead

    def next(self) -> Opt[Token]:
        token, self.lookahead = self.peek(), None
        if token is not None:
            self.last = token
        return token

    def end_offset(self):
        return self.last.end if self.last else 0

    def expect(self, kind: Kind, opening: Token) -> Token:
        """
        consume the token closing the group opened by `opening`
        """
        token = self.peek()
        if token is None or token.kind != kind:
            raise MalformedGroupingError(f"unclosed {opening.kind}",
                                         opening.start, opening.length)
        return self.next()

### PRECEDENCE CLIMBING ###

# parse_expr() returns the expression without pushing it, its caller does:
# an operation pushes its two operands, parse() pushes each top-level root
#
# the operator loop folds operators of the same precedence left to right,
# the right operand is parsed with a floor one above the operator so only
# tighter operators end up in it
#
# every ( is closed by its own ), an RPAREN met in the operator loop is
# left for the group that owns it
#
# recursion depth grows with parenthesis nesting and with the number of
# precedence levels, chains of one precedence are folded iteratively

def parse_expr(tokens: TokenStream, pool: AstPool, min_precedence = Precedence.LOWEST) -> Opt[AstExpr]:
    token = tokens.next()

    if token is None:
        return None

    match token.kind:
        case Kind.LPAREN:
            if (inner := tokens.peek()) is not None and inner.kind == Kind.RPAREN:
                raise MalformedGroupingError("empty group", token.start, inner.end - token.start)
            lhs_expr = parse_expr(tokens, pool, Precedence.LOWEST)
            if lhs_expr is None:
                raise MalformedGroupingError(f"unclosed {token.kind}", token.start)
            tokens.expect(Kind.RPAREN, token)
        case Kind.NUM | Kind.IDENT:
            lhs_expr = Literal(token)
        case Kind.RPAREN:
            raise MalformedGroupingError(f"unmatched {token.kind}", token.start)
        case _:
            raise UnexpectedTokenError(token, f"expected operand, got {token.kind}")

    while (op := tokens.peek()) is not None:
        precedence = get_precedence(op)

        if precedence is None or precedence < min_precedence:
            break

        tokens.next()
        lhs_ref  = pool.push(lhs_expr)

        rhs_expr = parse_expr(tokens, pool, precedence + 1)
        if rhs_expr is None:
            raise UnexpectedEndError(f"missing right operand of {op.kind}", tokens.end_offset())
        rhs_ref  = pool.push(rhs_expr)

        lhs_expr = BinOp(lhs_ref, op, rhs_ref)

    return lhs_expr

def parse(tokens) -> AstPool:
    """
    parse every top-level expression of the token sequence into one pool

    pool.root() is the last expression parsed, pool.roots lists all of them
    """
    pool   = AstPool()
    stream = TokenStream(tokens)

    while (expr := parse_expr(stream, pool, Precedence.LOWEST)) is not None:
        pool.roots.append(pool.push(expr))

    return pool

### PARSER ###

class Parser:
    def __init__(self, reporter: Reporter):
        self.reporter   = reporter

    def parse(self, source: str) -> Opt[AstPool]:
        """
        source to pool, None (with the error logged) if it does not parse
        """
        try:
            return parse(Lexer(source))
        except ArithError as e:
            self.reporter.log(e)
            return None
