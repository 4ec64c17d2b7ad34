from typing import NamedTuple

from exprtype.expr_ast.ast import AstException, BinaryExpr, ResultType


class TypeMismatch(NamedTuple):
    """Why typechecking failed: the operand at `operand` (1 or 2) of `expr` has type `actual` instead of `expected`."""
    expr: BinaryExpr
    operand: int
    expected: ResultType
    actual: ResultType

    @property
    def op(self) -> str:
        return self.expr.op

    @property
    def msg(self) -> str:
        return f'{self.op} expression expects {self.expected} for operand {self.operand} but got {self.actual}'

    def __str__(self):
        return str(TypeMismatchException(self))


class TypeException(AstException):
    """
    Generic exception for type errors in an expression
    """

    pass


class TypeMismatchException(TypeException):

    def __init__(self, mismatch: TypeMismatch):
        super().__init__(mismatch.msg, mismatch.expr)
        self.mismatch = mismatch
