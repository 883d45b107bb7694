import logging
import sys
from pathlib import Path

LOG_DIR = Path.home() / ".wp-vulncheck" / "logs"
LOG_FILE = LOG_DIR / "wp_vulncheck.log"

ROOT_LOGGER = "wp_vulncheck"


def setup_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    logger = logging.getLogger(name)
    if name != ROOT_LOGGER and name.startswith(ROOT_LOGGER + "."):
        # Children propagate to the package logger which owns the handlers
        setup_logger(ROOT_LOGGER)
        return logger
    if logger.hasHandlers():
        return logger

    logger.setLevel(logging.DEBUG)

    # Console Handler (stderr, stdout carries the report)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # File Handler
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE)
    except OSError:
        return logger
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    return logger


def enable_debug() -> None:
    """Lower console verbosity to DEBUG and log urllib3 connection traffic to stderr."""
    logger = setup_logger(ROOT_LOGGER)
    for handler in logger.handlers:
        if not isinstance(handler, logging.FileHandler):
            handler.setLevel(logging.DEBUG)

    urllib3_logger = logging.getLogger("urllib3")
    urllib3_logger.setLevel(logging.DEBUG)
    urllib3_logger.propagate = True
    if not urllib3_logger.handlers:
        urllib3_logger.addHandler(logging.StreamHandler(sys.stderr))
