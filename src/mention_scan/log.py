"""Logging configuration using loguru.

The package is disabled in loguru on import; applications that want its
debug output call :func:`setup_logger` or ``logger.enable("mention_scan")``.
"""

import sys

from loguru import logger

DEBUG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Send mention_scan logs to stderr; WARNING by default, INFO with *verbose*, DEBUG with *debug*."""
    logger.remove()
    logger.enable("mention_scan")
    level = "DEBUG" if debug else "INFO" if verbose else "WARNING"
    logger.add(sys.stderr, level=level, format=DEBUG_FORMAT if debug else "<level>{message}</level>")
