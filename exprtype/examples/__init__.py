"""
This package contains example expressions.

==========
Submodules
==========
* :py:mod:`.examples`: Catalogue of well-typed and ill-typed expressions with their expected types
"""
