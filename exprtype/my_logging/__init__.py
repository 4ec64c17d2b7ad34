"""
Logging for exprtype.

Library code only emits records, at DEBUG and below. File output is enabled by the command line interface, see
:py:func:`.prepare_logger`.

==========
Submodules
==========
* :py:mod:`.log_context`: Context keys attached to :py:func:`.data` records
* :py:mod:`.logger`: DATA level, log file setup and teardown
"""

from logging import debug, info

from exprtype.my_logging.log_context import log_context
from exprtype.my_logging.logger import DATA, data, get_log_file, prepare_logger, shutdown
