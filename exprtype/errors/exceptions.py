"""
This module contains the definitions of all exceptions which may be publicly raised by exprtype
"""


class ExprTypeError(Exception):
    """
    Error while checking an expression
    """
    pass


class TypeCheckException(ExprTypeError):
    """
    An expression did not have the type it was expected to have
    """
    pass


class ConfigurationError(ExprTypeError, ValueError):
    """
    Error while loading or applying configuration values
    """
    pass
