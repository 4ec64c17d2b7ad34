"""
This module defines the exprtype options which are configurable by the user via command line arguments.

The argument parser in :py:mod:`.__main__` uses the docstrings, type hints and _values for the help
 strings and the _values fields for autocompletion

WARNING: This module is imported before argcomplete.autocomplete is called. \
For performance reasons it should thus not have any import side-effects or perform any expensive operations during import.
"""
from typing import Any

from appdirs import AppDirs


def _check_is_one_of(val: str, legal_vals):
    if val not in legal_vals:
        raise ValueError(f'Invalid config value {val}, must be one of {legal_vals}')


def _type_check(val: Any, t):
    if not isinstance(val, t):
        raise ValueError(f'Value {val} has wrong type (expected {t})')


class UserConfig:
    def __init__(self):
        self._appdirs = AppDirs('exprtype', appauthor=False, version=None, roaming=True)

        # User configuration
        # Each attribute must have a type hint and a docstring for correct help strings in the commandline interface.
        # If 'Available Options: [...]' is specified, the options are used for autocomplete suggestions.

        self._output_format: str = 'text'
        self._output_format_values = ['text', 'json']

        self._color_output: bool = True

        self._log_dir: str = self._appdirs.user_log_dir
        self._verbosity: int = 1

    @property
    def output_format(self) -> str:
        """
        Format in which check results are printed.

        Available Options: [text, json]
        """
        return self._output_format

    @output_format.setter
    def output_format(self, val: str):
        _check_is_one_of(val, self._output_format_values)
        self._output_format = val

    @property
    def color_output(self) -> bool:
        """If true, success and failure messages are colored using terminal escape sequences."""
        return self._color_output

    @color_output.setter
    def color_output(self, val: bool):
        _type_check(val, bool)
        self._color_output = val

    @property
    def log_dir(self) -> str:
        """Path to default log directory."""
        return self._log_dir

    @log_dir.setter
    def log_dir(self, val: str):
        _type_check(val, str)
        import os
        if not os.path.exists(val):
            os.makedirs(val)
        self._log_dir = val

    @property
    def verbosity(self) -> int:
        """
        If 0, no output
        If 1, normal output
        If 2, verbose output

        Verbose output additionally prints the expected type of every checked example.
        """
        return self._verbosity

    @verbosity.setter
    def verbosity(self, val: int):
        _type_check(val, int)
        self._verbosity = val
