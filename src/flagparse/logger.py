"""Logging configuration for flagparse using loguru."""

import os
import sys
from loguru import logger
from typing import Optional


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    console_output: bool = True,
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
) -> None:
    """
    Configure loguru logger with console and optional file output.

    flagparse records are disabled at import time so that applications
    embedding the library stay quiet; calling this function enables them.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to the log file (if None, no file sink is added)
        console_output: Whether to output to stderr
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
    """
    # Remove default handler
    logger.remove()
    logger.enable("flagparse")

    # Console output with colors
    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_file is None:
        return

    log_file = os.path.abspath(log_file)

    # File output
    logger.add(
        log_file,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
        rotation=rotation,
        retention=retention,
        compression=compression,
        encoding="utf-8",
    )


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger


# Library default: stay silent until the application opts in
logger.disable("flagparse")
