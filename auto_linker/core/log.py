#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
log.py - Logging setup for Auto Linker

Every module logs through logging.getLogger(__name__); this module wires the
package logger to the console and, optionally, to a rotating log file.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

PACKAGE_LOGGER = "auto_linker"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Calling this again adjusts the console level and adds a file handler for
    a log file not seen before.

    Args:
        verbose: Log DEBUG messages to the console instead of INFO
        log_file: Path of a log file to write DEBUG messages to

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    console_level = logging.DEBUG if verbose else logging.INFO
    fmt = logging.Formatter(LOG_FORMAT)

    file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    console_handlers = [h for h in logger.handlers if h not in file_handlers]

    for handler in console_handlers:
        handler.setLevel(console_level)
    if not console_handlers:
        ch = logging.StreamHandler(sys.stdout or sys.stderr)
        ch.setLevel(console_level)
        ch.setFormatter(fmt)
        logger.addHandler(ch)

    if log_file and os.path.abspath(log_file) not in {h.baseFilename for h in file_handlers}:
        fh = RotatingFileHandler(log_file, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
        logger.debug("Logging to %s", log_file)

    return logger
