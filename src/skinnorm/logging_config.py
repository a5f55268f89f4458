"""
Logging Configuration
Sets up the logger for the command line.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  file_level: int = logging.DEBUG) -> None:
    """
    Configures the logger for the 'skinnorm' namespace.

    Args:
        level: Console logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to append logs to. Runs of a batch accumulate in one file.
        file_level: Logging level of the file handler, independent of the console.
    """
    logger = logging.getLogger("skinnorm")
    logger.setLevel(min(level, file_level) if log_file else level)

    # Avoid duplicate handlers when called more than once
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(file_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
