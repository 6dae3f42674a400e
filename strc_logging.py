"""
strcodec Logging
================

The library only ever logs through the "strcodec" logger and never adds
handlers on import. Host applications that want to see the DEBUG
messages the decoders emit when rejecting input call configure_logging().
"""

import logging
from pathlib import Path
from typing import Optional, Union

from strc_types import LOGGER_NAME

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(
    *,
    app_name: str = LOGGER_NAME,
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure a console handler and, if `log_file` is given, a file handler.
    Subsequent calls return the already-configured logger.
    """
    logger = logging.getLogger(app_name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        # the file gets everything; the console stays at `level`
        logger.setLevel(logging.DEBUG)

    return logger


__all__ = ["configure_logging", "LOG_FORMAT"]
