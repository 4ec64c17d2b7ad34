"""
This module defines the pinned package version, read from the VERSION file next to it
"""
import os

from semantic_version import Version


class Versions:
    # Read exprtype version from VERSION file
    with open(os.path.join(os.path.realpath(os.path.dirname(__file__)), 'VERSION')) as f:
        EXPRTYPE_VERSION = f.read().strip()

    @staticmethod
    def parsed_version() -> Version:
        try:
            return Version(Versions.EXPRTYPE_VERSION)
        except ValueError as e:
            raise ValueError(f'Invalid version string {Versions.EXPRTYPE_VERSION} in VERSION file\n{e}')
