import contextlib
from enum import Enum

from exprtype.config import cfg


class TermColor(Enum):
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'


@contextlib.contextmanager
def colored_print(color: TermColor):
    if not cfg.color_output:
        yield
        return
    print(color.value, end='')
    try:
        yield
    finally:
        print(TermColor.ENDC.value, end='')


def success_print():
    return colored_print(TermColor.OKGREEN)


def fail_print():
    return colored_print(TermColor.FAIL)


def warn_print():
    return colored_print(TermColor.WARNING)
