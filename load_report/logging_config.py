r"""
Logging setup for the command-line interface.

Reports are written to stdout, so log records go to stderr.

    from load_report.logging_config import setup_logging

    setup_logging("DEBUG")
"""

import logging
import sys

__all__ = ["LOG_FORMAT", "setup_logging"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """Configure the root logger.

    Args:
        level: Log level name.
        log_file: Optional file that receives the same records.

    Returns:
        The configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)

    return logger
