"""
The main exprtype package.

==========
Submodules
==========
* :py:mod:`.__main__`: Command line interface
* :py:mod:`.config`: Global configuration (both user-configuration as well as internal configuration)

===========
Subpackages
===========
* :py:mod:`.errors`: Defines exceptions which may be raised by public exprtype interfaces
* :py:mod:`.examples`: Catalogue of well-typed and ill-typed example expressions
* :py:mod:`.my_logging`: Logging facilities
* :py:mod:`.type_check`: Type checker
* :py:mod:`.utils`: Internal helper functionality
* :py:mod:`.expr_ast`: AST-related functionality
"""
