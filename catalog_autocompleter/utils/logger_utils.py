# logger_utils.py - logging setup and timing helpers

import logging
import os
import time
from typing import Optional

from rich.logging import RichHandler

# Directory where log files are stored
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocompleter.log")

_FILE_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"

logger = logging.getLogger("catalog_autocompleter")

_configured = False


def setup_logging(level: str = "INFO", path: Optional[str] = DEFAULT_LOG_PATH, console: bool = True) -> logging.Logger:
    """
    Configure the package logger once:
     - coloured console output through rich
     - plain timestamped lines appended to `path` (None = no file)
    Calling it again only updates the level.
    """
    global _configured
    logger.setLevel(level.upper())
    if _configured:
        return logger

    if console:
        logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    if path:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(_FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))
        logger.addHandler(fh)
    logger.propagate = False
    _configured = True
    return logger


class time_block:
    """
    Measure a block and log how long it took.
    To use:
        with time_block("rebuild"):
            do_some_work()
    `elapsed` holds the duration in seconds afterwards.
    """

    def __init__(self, label: str, log: Optional[logging.Logger] = None):
        self.label = label
        self.log = log or logger
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.elapsed = time.perf_counter() - self.start
        self.log.info("%s done in %.3fs", self.label, self.elapsed)
        return False
