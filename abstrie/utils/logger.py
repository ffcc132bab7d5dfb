"""
Logging utilities for abstrie.
"""
import sys
from pathlib import Path
from typing import Optional
from loguru import logger as loguru_logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logger(
    log_level: str = "INFO",
    log_file: Optional[str] = None,
    rotation: str = "100 MB",
    retention: str = "10 days"
):
    """
    Route abstrie's log records to stderr and, optionally, a rotating file.

    Replaces any sinks added before, including loguru's default DEBUG one.

    Args:
        log_level: Minimum level for both sinks
        log_file: Optional log file path; parent directories are created
        rotation: When the file sink rolls over
        retention: How long rolled files are kept

    Returns:
        Configured logger
    """
    loguru_logger.remove()
    loguru_logger.configure(extra={"name": "abstrie"})
    loguru_logger.add(sys.stderr, format=LOG_FORMAT, level=log_level, colorize=True)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        loguru_logger.add(
            log_file,
            format=LOG_FORMAT,
            level=log_level,
            rotation=rotation,
            retention=retention,
            compression="zip"
        )

    return loguru_logger


def setup_logger_from_config(config):
    """Setup logger from a LoggingConfig."""
    return setup_logger(
        log_level=config.level,
        log_file=config.log_file,
        rotation=config.rotation,
        retention=config.retention
    )


def get_logger(name: str = "abstrie"):
    """Logger bound to a component name, shown in the record's name column."""
    return loguru_logger.bind(name=name)


# Default logger instance
logger = setup_logger()
