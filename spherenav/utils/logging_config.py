"""Logging setup for the geodesy toolkit."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from spherenav.config import config


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(
    *, debug: Optional[bool] = None, log_file: Optional[str] = None
) -> None:
    """Configure Python logging.

    - Console output at INFO+ (or DEBUG+ when debug=True, defaulting to
      the DEBUG setting).
    - Rotating file output at DEBUG+ when a log file is given, either here
      or through LOG_FILE_PATH.
    - The library itself never calls this; applications opt in.
    """

    if debug is None:
        debug = config.DEBUG
    log_file = log_file or config.LOG_FILE_PATH

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(formatter)

    # Avoid duplicate handlers on repeated setup.
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=2_000_000, backupCount=5
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


logger = logging.getLogger(__name__)
