import dataclasses as dc
import itertools as it

from typing import Optional as Opt

from .errors import EmptyTreeError, InvalidRefError
from .lexer  import Token

### AST POOL ###

# nodes do not own their children, they hold AstRefs: indices into the
# AstPool that owns every node of a parse
# children are always pushed before their parent and entries are never
# rewritten, so a ref stored in a node always points backwards
#
# the pool holds every top-level expression of the source one after the
# other: the last entry is the root of the last expression, the roots of
# the earlier ones are listed in pool.roots (their subtrees stay in the
# pool, unreachable from the last root)

@dc.dataclass(frozen = True)
class AstRef:
    index       : int
    pool        : int               # identity of the owning pool

@dc.dataclass(frozen = True)
class Literal:
    token       : Token

@dc.dataclass(frozen = True)
class BinOp:
    left        : AstRef
    op          : Token
    right       : AstRef

AstExpr = Literal | BinOp

class AstPool:
    _ids = it.count()

    def __init__(self):
        self.ident  = next(AstPool._ids)
        self.nodes  = []
        self.roots  = []

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        return iter(self.nodes)

    def __getitem__(self, ref: AstRef):
        return self.get(ref)

    def push(self, expr: AstExpr) -> AstRef:
        self.nodes.append(expr)
        return AstRef(len(self.nodes) - 1, self.ident)

    def get(self, ref: AstRef) -> AstExpr:
        if ref.pool != self.ident:
            raise InvalidRefError(f"ref {ref.index} belongs to pool {ref.pool}, not {self.ident}")
        if not 0 <= ref.index < len(self.nodes):
            raise InvalidRefError(f"ref {ref.index} out of range for pool of {len(self.nodes)}")
        return self.nodes[ref.index]

    def root(self) -> AstRef:
        if not self.nodes:
            raise EmptyTreeError()
        return AstRef(len(self.nodes) - 1, self.ident)

    def pprint(self, source: str, ref: Opt[AstRef] = None) -> str:
        """
        prefix form of the tree under ref (the root by default):
        literals as their source text, operations as ( op left right )
        """
        return self.pprint_expr(self.get(ref or self.root()), source)

    def pprint_expr(self, expr: AstExpr, source: str) -> str:
        # explicit stack: a long chain of one operator nests as deep as it is long
        parts = []
        stack = [expr]

        while stack:
            match stack.pop():
                case str(text):
                    parts.append(text)
                case Literal(token):
                    parts.append(token.text(source))
                case BinOp(left, op, right):
                    stack += [")", self.get(right), self.get(left), op.text(source), "("]

        return " ".join(parts)
