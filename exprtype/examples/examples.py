from typing import List, Tuple, Optional, Dict

from exprtype.errors.exceptions import TypeCheckException
from exprtype.expr_ast.ast import Expression, ResultType, One, Zero, ETrue, EFalse, Plus, Mult, Or, And
from exprtype.type_check.type_checker import typecheck, TypeCheckResult


class Example:

    def __init__(self, name: str, expr: Expression, expected: Optional[ResultType]):
        """
        :param name: unique name of the example
        :param expr: the expression
        :param expected: type expr is expected to have, None if expr is expected to be ill-typed
        """
        self.name = name
        self.expr = expr
        self.expected = expected

    def code(self) -> str:
        return self.expr.code()

    def check(self) -> TypeCheckResult:
        return typecheck(self.expr)

    def matches(self, result: Optional[TypeCheckResult] = None) -> bool:
        if result is None:
            result = self.check()
        if self.expected is None:
            return not result.is_ok
        return result.result_type == self.expected

    def assert_expected(self, result: Optional[TypeCheckResult] = None) -> TypeCheckResult:
        """:raise TypeCheckException: if the type of the expression is not the expected one"""
        if result is None:
            result = self.check()
        if not self.matches(result):
            expected = "ill-typed" if self.expected is None else str(self.expected)
            raise TypeCheckException(f"Example {self.name}: expected {expected} but got {result}")
        return result

    def __repr__(self):
        return f'Example({self.name!r}, {self.expr!r}, {self.expected})'


# well-typed
true = Example('true', ETrue(), ResultType.BoolType)
false = Example('false', EFalse(), ResultType.BoolType)
one = Example('one', One(), ResultType.IntType)
zero = Example('zero', Zero(), ResultType.IntType)
or_true_false = Example('or_true_false', Or(ETrue(), EFalse()), ResultType.BoolType)
and_false_false = Example('and_false_false', And(EFalse(), EFalse()), ResultType.BoolType)
or_false_true = Example('or_false_true', Or(EFalse(), ETrue()), ResultType.BoolType)
plus_one_zero = Example('plus_one_zero', Plus(One(), Zero()), ResultType.IntType)
nested_arithmetic = Example('nested_arithmetic', Mult(Plus(One(), One()), Plus(Zero(), Mult(One(), Zero()))),
                            ResultType.IntType)
nested_logic = Example('nested_logic', And(Or(ETrue(), EFalse()), Or(EFalse(), And(ETrue(), ETrue()))),
                       ResultType.BoolType)

# ill-typed
and_of_int_operands = Example('and_of_int_operands', And(And(One(), Zero()), Mult(One(), One())), None)
plus_one_true = Example('plus_one_true', Plus(One(), ETrue()), None)
or_false_one = Example('or_false_one', Or(EFalse(), One()), None)
or_true_one = Example('or_true_one', Or(ETrue(), One()), None)
or_one_true = Example('or_one_true', Or(One(), ETrue()), None)
nested_plus_one_true = Example('nested_plus_one_true', Plus(Plus(One(), ETrue()), Zero()), None)
plus_one_mult_zero_true = Example('plus_one_mult_zero_true', Plus(One(), Mult(Zero(), ETrue())), None)
mult_of_bools = Example('mult_of_bools', Mult(ETrue(), EFalse()), None)


def _by_name(examples: List[Example]) -> List[Tuple[str, Example]]:
    return [(e.name, e) for e in examples]


all_examples: List[Tuple[str, Example]] = _by_name([
    true, false, one, zero, or_true_false, and_false_false, or_false_true, plus_one_zero, nested_arithmetic,
    nested_logic,
])

type_error_examples: List[Tuple[str, Example]] = _by_name([
    and_of_int_operands, plus_one_true, or_false_one, or_true_one, or_one_true, nested_plus_one_true,
    plus_one_mult_zero_true, mult_of_bools,
])

_examples_by_name: Dict[str, Example] = dict(all_examples + type_error_examples)


def get_example(name: str) -> Example:
    if name not in _examples_by_name:
        raise KeyError(f'Unknown example {name}')
    return _examples_by_name[name]


def catalogue() -> List[Example]:
    """All examples, well-typed ones first."""
    return [e for _, e in all_examples + type_error_examples]
