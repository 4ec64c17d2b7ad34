"""
This package contains modules which provide functionality related to type-checking expressions.

==========
Submodules
==========
* :py:mod:`.type_checker`: Type checker implementation
* :py:mod:`.type_exceptions`: Exceptions raised by the type checker
"""
from exprtype.type_check.type_checker import type_check, typecheck, TypeCheckResult
from exprtype.type_check.type_exceptions import TypeMismatch, TypeMismatchException, TypeException
