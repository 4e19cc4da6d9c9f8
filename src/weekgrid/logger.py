# SPDX-License-Identifier: MIT

"""Logger configuration for weekgrid."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logger(level: str = "WARNING", log_file: Optional[str] = None) -> None:
    """Configure loguru with a colored stderr sink and an optional file sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file. If None, only console logging.
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level=level,
            rotation="1 MB",
            retention="14 days",
        )

    logger.debug(f"Logger initialized with level={level}")
