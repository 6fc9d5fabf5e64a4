"""
Centralized logging for devopsfetch.

Log records go to a rotated file and, with --verbose, to stderr. Nothing is
ever logged to stdout, which carries the report itself.
"""
import sys
from typing import Optional

from loguru import logger

from devopsfetch.utils.log_config import LogConfig, load_log_config


def setup_logger(verbose: bool = False, config: Optional[LogConfig] = None) -> None:
    """
    Configure the logger.

    Rules:
    1. FILE: log to ~/.devopsfetch/logs/devopsfetch.log (rotated daily,
       7 compressed generations). Skipped if the directory is not writable.
    2. CONSOLE: DEBUG+ to stderr if verbose, console_level if enabled
       through DEVOPSFETCH_LOG_CONSOLE.

    Args:
        verbose: Enable console logging
        config: Optional LogConfig override (for testing)
    """
    logger.remove()

    if config is None:
        config = load_log_config()

    if config.file_enabled:
        try:
            config.log_path.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                config.log_path,
                rotation=config.rotation,
                retention=config.retention,
                level=config.file_level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
                compression=config.compression,
            )
        except OSError as e:
            print(f"Warning: file logging disabled ({e})", file=sys.stderr)

    if verbose or config.console_enabled:
        logger.add(
            sys.stderr,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
                "<level>{message}</level>"
            ),
            level="DEBUG" if verbose else config.console_level,
            colorize=True,
        )
