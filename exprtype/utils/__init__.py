"""
This package contains helper functionality.

==========
Submodules
==========
* :py:mod:`.helpers`: Miscellaneous operations (file reading)
* :py:mod:`.progress_printer`: Context managers for colored terminal output.
"""
