"""Logger setup shared by the library, the CLI and experiments."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(
    name: str,
    log_file: Optional[Union[str, Path]] = None,
    level: Union[int, str] = logging.INFO,
) -> logging.Logger:
    """
    Get a configured logger.

    Handlers are attached only once per logger name, so repeated calls return
    the same logger without duplicating output.

    Args:
        name: Logger name (nested under "strongpw")
        log_file: Optional file to also write log records to
        level: Logging level (int or name such as "INFO")

    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(name if name.startswith("strongpw") else f"strongpw.{name}")
    logger.setLevel(level)

    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if log_file is not None:
            log_file = Path(log_file)
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
