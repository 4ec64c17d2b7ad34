"""
This package contains the expression AST.

==========
Submodules
==========
* :py:mod:`.ast`: Expression node classes, result types and code generation

===========
Subpackages
===========
* :py:mod:`.visitor`: AST visitor base class
"""
