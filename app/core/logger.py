"""Logger configuration (loguru)."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logger(level: str = "INFO", log_file: Optional[str] = None, rotation: str = "10 MB",
                 retention: str = "7 days", ) -> None:
    """Configure loguru with a console sink and an optional rotating file sink.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to a log file. If None, console only.
        rotation: Log rotation size (e.g. "10 MB", "1 day")
        retention: Log retention period (e.g. "7 days")
    """
    logger.remove()

    logger.add(sys.stderr,
               format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
                      "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
               level=level, colorize=True, )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_path, format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
                   level=level, rotation=rotation, retention=retention, compression="zip", backtrace=True,
                   diagnose=False, )

    logger.info(f"Logger initialized with level={level}")
