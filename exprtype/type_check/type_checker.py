from typing import Optional

from exprtype import my_logging
from exprtype.expr_ast.ast import Expression, ResultType, BinaryExpr, One, Zero, ETrue, EFalse, Plus, Mult, Or, And
from exprtype.expr_ast.visitor.visitor import AstVisitor
from exprtype.type_check.type_exceptions import TypeMismatch, TypeMismatchException


def type_check(ast: Expression) -> ResultType:
    """
    Compute the type of ast.

    :raise TypeMismatchException: for the first ill-typed subexpression, children are checked left to right
                                  before the rule of their parent
    """
    v = TypeCheckVisitor()
    return v.visit(ast)


def typecheck(ast: Expression) -> 'TypeCheckResult':
    """Like type_check, but returns the outcome as a TypeCheckResult instead of raising."""
    my_logging.debug('Type checking %s', ast)
    try:
        return TypeCheckResult.ok(type_check(ast))
    except TypeMismatchException as e:
        my_logging.debug('Type error: %s', e)
        return TypeCheckResult.fail(e.mismatch)


class TypeCheckResult:
    """Either the type of an expression or the mismatch which made it ill-typed."""

    def __init__(self, result_type: Optional[ResultType], error: Optional[TypeMismatch]):
        assert (result_type is None) != (error is None)
        self._result_type = result_type
        self._error = error

    @staticmethod
    def ok(result_type: ResultType) -> 'TypeCheckResult':
        return TypeCheckResult(result_type, None)

    @staticmethod
    def fail(error: TypeMismatch) -> 'TypeCheckResult':
        return TypeCheckResult(None, error)

    @property
    def is_ok(self) -> bool:
        return self._error is None

    @property
    def result_type(self) -> Optional[ResultType]:
        return self._result_type

    @property
    def error(self) -> Optional[TypeMismatch]:
        return self._error

    def unwrap(self) -> ResultType:
        if self._error is not None:
            raise TypeMismatchException(self._error)
        return self._result_type

    def __eq__(self, other):
        return isinstance(other, TypeCheckResult) and (self._result_type, self._error) == (other._result_type, other._error)

    def __hash__(self):
        return hash((self._result_type, self._error))

    def __str__(self):
        return str(self._result_type) if self.is_ok else str(self._error)

    def __repr__(self):
        if self.is_ok:
            return f'TypeCheckResult.ok({self._result_type})'
        return f'TypeCheckResult.fail({self._error!r})'


class TypeCheckVisitor(AstVisitor):
    """
    Assigns a type to every node, one rule per concrete node type.

    The rule of a binary node receives the types of both operands, which have already been computed left to right.
    A mismatch raised in the left subtree aborts the walk before the right subtree is visited, so the first mismatch
    propagates unchanged.
    """

    def check_operands(self, ast: BinaryExpr, lhs_t: ResultType, rhs_t: ResultType, expected: ResultType) -> ResultType:
        for operand, actual in ((1, lhs_t), (2, rhs_t)):
            if actual != expected:
                raise TypeMismatchException(TypeMismatch(ast, operand, expected, actual))
        return expected

    def visitOne(self, _: One):
        return ResultType.IntType

    def visitZero(self, _: Zero):
        return ResultType.IntType

    def visitETrue(self, _: ETrue):
        return ResultType.BoolType

    def visitEFalse(self, _: EFalse):
        return ResultType.BoolType

    def visitPlus(self, ast: Plus, lhs_t: ResultType, rhs_t: ResultType):
        return self.check_operands(ast, lhs_t, rhs_t, ResultType.IntType)

    def visitMult(self, ast: Mult, lhs_t: ResultType, rhs_t: ResultType):
        return self.check_operands(ast, lhs_t, rhs_t, ResultType.IntType)

    def visitOr(self, ast: Or, lhs_t: ResultType, rhs_t: ResultType):
        return self.check_operands(ast, lhs_t, rhs_t, ResultType.BoolType)

    def visitAnd(self, ast: And, lhs_t: ResultType, rhs_t: ResultType):
        return self.check_operands(ast, lhs_t, rhs_t, ResultType.BoolType)
