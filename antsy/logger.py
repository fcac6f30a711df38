# logger.py

import sys
import logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_file: Optional[str] = None) -> None:
    """
    Send antsy debug logs somewhere visible.

    Args:
        log_file: Path to log file. Use "-" for stdout; stderr when omitted.
    """
    if log_file and log_file != '-':
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, filename=log_file)
    else:
        stream = sys.stdout if log_file == '-' else sys.stderr
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=stream)


class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            configure_logging(log_file)
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
