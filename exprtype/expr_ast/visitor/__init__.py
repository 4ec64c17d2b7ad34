"""
This package contains the basic AST visitor.

==========
Submodules
==========
* :py:mod:`.visitor`: AST visitor base class and helpers to find node types a visitor does not handle
"""
