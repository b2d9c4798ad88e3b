# tpgm_core/utils/logging_config.py
import logging
import sys
from pathlib import Path
from typing import Optional, Union

from .config import SETTINGS

PACKAGE_LOGGER = "tpgm_core"

# Importing the library must not print anything
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a module logger below the package logger."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def setup_logging(log_file: Optional[str] = None, level: Optional[Union[int, str]] = None):
    """
    Configure logging for the tpgm_core package.
    Call this from the query compiler before unfolding predicates.

    Defaults come from SETTINGS (TPGM_LOG_FILE, TPGM_LOG_LEVEL). Without a
    log file only the console handler is installed.
    """
    if log_file is None:
        log_file = SETTINGS.log_file or None
    if level is None:
        level = SETTINGS.log_level
    if isinstance(level, str):
        level_name = level.strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level_name}")

    # Create formatter
    formatter = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    # Remove existing handlers (if any)
    package_logger.handlers.clear()
    package_logger.addHandler(console_handler)

    if log_file:
        # Create logs directory if it doesn't exist
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.info("=" * 60)
    package_logger.info("Logging configured successfully")
    if log_file:
        package_logger.info(f"Log file: {Path(log_file).absolute()}")
    package_logger.info("=" * 60)

    return package_logger
