"""
This package contains the exceptions which may be raised by public exprtype interfaces.

==========
Submodules
==========
* :py:mod:`.exceptions`: Exception hierarchy
"""
