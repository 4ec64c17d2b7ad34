from __future__ import annotations

from enum import Enum, auto
from itertools import zip_longest
from typing import Iterator, List

from exprtype.expr_ast.visitor.visitor import AstVisitor


class ResultType(Enum):
    """The type of an expression."""
    IntType = auto()
    BoolType = auto()

    def __str__(self):
        return self.name


class AST:
    """
    Base class of all nodes.

    Nodes are immutable: their fields are exposed as read-only properties, and two nodes are equal iff they have the
    same class and equal children.

    Every concrete node class has a fixed number of children, so a tree is determined by the classes of its nodes in
    pre-order. Equality, hashing and repr work on that sequence and never recurse.
    """
    __slots__ = ()

    def children(self) -> List[AST]:
        return []

    def preorder(self) -> Iterator[AST]:
        stack = [self]
        while stack:
            ast = stack.pop()
            yield ast
            stack.extend(reversed(ast.children()))

    def code(self) -> str:
        v = CodeVisitor()
        s = v.visit(self)
        return s

    def __eq__(self, other):
        if not isinstance(other, AST):
            return False
        return all(type(a) is type(b) for a, b in zip_longest(self.preorder(), other.preorder()))

    def __hash__(self):
        return hash(tuple(type(ast).__name__ for ast in self.preorder()))

    def __str__(self):
        return self.code()

    def __repr__(self):
        parts = []
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            parts.append(f'{type(item).__name__}(')
            stack.append(')')
            for i, c in enumerate(reversed(item.children())):
                if i > 0:
                    stack.append(', ')
                stack.append(c)
        return ''.join(parts)


class Expression(AST):
    __slots__ = ()


class LiteralExpr(Expression):
    __slots__ = ()
    value = None


class NumberLiteralExpr(LiteralExpr):
    __slots__ = ()
    value: int


class BooleanLiteralExpr(LiteralExpr):
    __slots__ = ()
    value: bool


class One(NumberLiteralExpr):
    __slots__ = ()
    value = 1


class Zero(NumberLiteralExpr):
    __slots__ = ()
    value = 0


class ETrue(BooleanLiteralExpr):
    __slots__ = ()
    value = True


class EFalse(BooleanLiteralExpr):
    __slots__ = ()
    value = False


class BinaryExpr(Expression):
    """Infix operation on two operands, each owned by this node."""
    __slots__ = ("_lhs", "_rhs")

    op: str = None

    def __init__(self, lhs: Expression, rhs: Expression):
        for operand in (lhs, rhs):
            if not isinstance(operand, Expression):
                raise TypeError(f'Operand of {type(self).__name__} must be an Expression, got {operand!r}')
        self._lhs = lhs
        self._rhs = rhs

    @property
    def lhs(self) -> Expression:
        return self._lhs

    @property
    def rhs(self) -> Expression:
        return self._rhs

    def children(self) -> List[AST]:
        return [self._lhs, self._rhs]


class ArithmeticExpr(BinaryExpr):
    __slots__ = ()


class Plus(ArithmeticExpr):
    __slots__ = ()
    op = '+'


class Mult(ArithmeticExpr):
    __slots__ = ()
    op = '*'


class LogicalExpr(BinaryExpr):
    __slots__ = ()


class Or(LogicalExpr):
    __slots__ = ()
    op = '||'


class And(LogicalExpr):
    __slots__ = ()
    op = '&&'


class AstException(Exception):
    """Generic exception for errors in an AST"""

    def __init__(self, msg, ast):
        super().__init__(get_ast_exception_msg(ast, msg))
        self.ast = ast


def get_ast_exception_msg(ast: AST, msg: str):
    return f"In expression '{render(ast)}': {msg}"


# CODE GENERATION

class CodeVisitor(AstVisitor):

    def visitNumberLiteralExpr(self, ast: NumberLiteralExpr):
        return str(ast.value)

    def visitBooleanLiteralExpr(self, ast: BooleanLiteralExpr):
        return str(ast.value).lower()

    def visitBinaryExpr(self, ast: BinaryExpr, lhs: str, rhs: str):
        return f'({lhs} {ast.op} {rhs})'


def render(ast: AST) -> str:
    return ast.code()
