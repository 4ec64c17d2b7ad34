import os

from setuptools import setup, find_packages


def _read_file(path: str) -> str:
    with open(path) as f:
        return f.read().strip()


# Versions
file_dir = os.path.dirname(os.path.realpath(__file__))
exprtype_version = _read_file(os.path.join(file_dir, 'exprtype', 'VERSION'))
packages = find_packages(include=['exprtype', 'exprtype.*'])


setup(
    # Metadata
    name='exprtype',
    version=exprtype_version,
    license='MIT',
    description='Static typechecker for a small expression language over integers and booleans. '
                'Expressions are typed structurally and the first type mismatch is reported unchanged.',

    # Dependencies
    python_requires='>=3.8,<4',
    install_requires=[
        'appdirs>=1.4,<2',
        'argcomplete>=1.12',
        'parameterized>=0.8',
        'semantic-version>=2.8.4,<3',
    ],
    extras_require={
        'test': ['pytest'],
    },

    # Contents
    packages=packages,
    package_data={'exprtype': ['VERSION']},
    include_package_data=True,
    entry_points={
        "console_scripts": [
            "exprtype=exprtype.__main__:main"
        ]
    },
)
