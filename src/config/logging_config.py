# src/config/logging_config.py

"""Per-run timestamped logging configuration for gold_catalog.

Every process launch (API server, one-off query, health probe) writes a
dedicated log file inside ``logs/`` named after the launch timestamp, e.g.
``logs/run_20261019_153045.log``.  All ``gold_catalog.*`` loggers route
through it, and when the API is served the ``uvicorn`` access and error
loggers share the same file so a request and the quote refresh it caused
sit next to each other.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

_DETAILED_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s | %(threadName)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

_CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_SERVER_LOGGERS = ("uvicorn.error", "uvicorn.access")


def setup_logging(
    console_level: int = logging.WARNING,
    include_server: bool = False,
) -> Path:
    """Initialise the ``gold_catalog`` logger for the current run.

    Args:
        console_level: Threshold for the stderr handler.  The file
            handler always records DEBUG and above.
        include_server: Also attach the file handler to the uvicorn
            loggers (used by ``main.py serve``).

    Returns:
        The :class:`~pathlib.Path` to the log file created for this run.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    root_logger = logging.getLogger("gold_catalog")
    root_logger.setLevel(logging.DEBUG)

    # Repeated calls (tests, reloads) keep the first run's handlers
    if root_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_DETAILED_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(
        logging.Formatter(_CONSOLE_FORMAT, datefmt=_DATE_FORMAT)
    )

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    if include_server:
        for name in _SERVER_LOGGERS:
            logging.getLogger(name).addHandler(file_handler)

    root_logger.info("Logging initialised, log file: %s", log_file)

    return log_file
