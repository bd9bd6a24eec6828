import logging
import sys
import os
from datetime import datetime
from typing import Optional, Union

from pathutil.core import config


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors each record by level."""

    cyan = "\x1b[36m"
    green = "\x1b[32m"
    yellow = "\x1b[33m"
    red = "\x1b[31m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: cyan,
        logging.INFO: green,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red,
    }

    def __init__(self):
        super().__init__(LOG_FORMAT, datefmt=LOG_DATEFMT)
        self._colored = {
            level: logging.Formatter(color + LOG_FORMAT + self.reset, datefmt=LOG_DATEFMT)
            for level, color in self.LEVEL_COLORS.items()
        }

    def format(self, record):
        formatter = self._colored.get(record.levelno)
        # Custom levels between the standard ones get the plain format
        if formatter is None:
            return super().format(record)
        return formatter.format(record)


def setup_logging(level: Union[int, str, None] = None, log_dir: Optional[str] = None):
    """
    Setup centralized logging for applications embedding pathutil.

    The library itself never calls this; its modules only create loggers.
    ``level`` defaults to PATHUTIL_LOG_LEVEL and ``log_dir`` to
    PATHUTIL_LOG_DIR. Without a log directory only the console handler is
    installed.
    """
    if level is None:
        level = config.LOG_LEVEL
    if log_dir is None:
        log_dir = config.LOG_DIR

    root_logger = logging.getLogger()

    # Clear existing handlers to prevent duplicate logs
    if root_logger.handlers:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ColoredFormatter())
    root_logger.addHandler(console_handler)

    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(
            os.path.join(log_dir, f"pathutil_{datetime.now().strftime('%Y%m%d')}.log")
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
        root_logger.addHandler(file_handler)

    pkg_logger = logging.getLogger("pathutil")
    pkg_logger.setLevel(level)
    pkg_logger.propagate = True

    root_logger.info("Logging initialized (console%s).", " + file" if log_dir else "")
