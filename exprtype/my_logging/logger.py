"""
Log file setup for the command line interface.

Importing exprtype configures nothing: records go through the standard logging machinery and reach whatever handlers
the host application installed. ``exprtype check --log`` calls :py:func:`prepare_logger` to write them to files and
:py:func:`shutdown` to close those files again.
"""
import datetime
import json
import logging
import logging.config
import os

from exprtype.config import cfg
from exprtype.my_logging.log_context import full_log_context

# below DEBUG, only written to the data log
DATA = 5
logging.addLevelName(DATA, 'DATA')

# suffix, level, formatter, filters
_log_files = [
    ('info', 'INFO', 'standard', []),
    ('debug', 'DEBUG', 'standard', []),
    ('data', 'DATA', 'json', ['onlydata']),
]


def data(key, value):
    """Log (key, value) as one JSON line at level DATA, together with the active log contexts."""
    d = {'key': key, 'value': value, 'context': full_log_context}
    logging.log(DATA, json.dumps(d))


class OnlyData(logging.Filter):

    def filter(self, record):
        return record.levelno == DATA


def get_log_file(label='default', parent_dir=None, filename='log', include_timestamp=True) -> str:
    """
    Return the path prefix for a set of log files and create its directory.

    :param label: subdirectory of parent_dir, None to use parent_dir itself
    :param parent_dir: defaults to cfg.log_dir
    """
    log_dir = os.path.realpath(cfg.log_dir) if parent_dir is None else parent_dir
    if label is not None:
        log_dir = os.path.join(log_dir, label)
    os.makedirs(log_dir, exist_ok=True)

    if include_timestamp:
        filename += '_{:%Y-%m-%d_%H-%M-%S}'.format(datetime.datetime.now())
    return os.path.join(log_dir, filename)


def prepare_logger(log_file: str):
    """
    Replace the root logger's handlers by file handlers writing to ``<log_file>_info.log``, ``<log_file>_debug.log``
    and ``<log_file>_data.log``. Warnings and errors are also printed to stderr.
    """
    shutdown()

    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'WARNING',
            'formatter': 'standard',
        }
    }
    for suffix, level, formatter, filters in _log_files:
        handlers[f'file{suffix}'] = {
            'class': 'logging.FileHandler',
            'filename': f'{log_file}_{suffix}.log',
            'mode': 'w',
            'delay': True,
            'level': level,
            'formatter': formatter,
            'filters': filters,
        }

    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s]: %(message)s',
                'datefmt': '%Y-%m-%d_%H-%M-%S'
            },
            'json': {
                'format': '%(message)s'
            },
        },
        'filters': {
            'onlydata': {
                '()': OnlyData
            }
        },
        'handlers': handlers,
        'root': {
            'handlers': list(handlers),
            'level': DATA
        }
    })


def shutdown():
    """Remove and close all handlers of the root logger and restore its default level."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.WARNING)
