# utils/logger.py
import logging
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler

from mindat_api.package_metadata import get_default_writable_directory
from mindat_api.exceptions import LogDirectoryError


def setup_logging(
    logger: Optional[logging.Logger] = None,
    log_directory: Optional[str | Path] = None,
    log_file: Optional[str] = "application.log",
    log_level: int = logging.DEBUG,
    max_bytes: int = 1048576,
    backup_count: int = 5,
    logging_filter: Optional[logging.Filter] = None,
):
    """
    Configure logging to write to both console and file with optional filtering.

    Sets up a logger that outputs to the terminal and, unless `log_file` is None, to a
    rotating log file that starts a new file when the size limit is reached.

    Args:
        logger: The logger instance to configure. If None, uses the root logger.
        log_directory: Where to save log files. If None, automatically finds a writable directory.
        log_file: Name of the log file (default: 'application.log'). None disables file logging.
        log_level: Minimum level to log (DEBUG logs everything, INFO skips debug messages).
        max_bytes: Maximum size of each log file before rotating (default: 1MB).
        backup_count: Number of old log files to keep (default: 5).
        logging_filter: Optional filter to modify log messages (e.g., hide API tokens).

    Example:
        >>> # Basic setup - logs to console and file
        >>> setup_logging()

        >>> # Custom location and less verbose
        >>> setup_logging(log_directory="/var/log/mindat", log_level=logging.INFO)

        >>> # With token masking
        >>> from mindat_api.security import MaskingFilter
        >>> setup_logging(logging_filter=MaskingFilter())

    Note:
        - Calling this function multiple times will reset the logger configuration
    """

    if not logger:
        logger = logging.getLogger()

    logger.setLevel(log_level)

    # Clear existing handlers (useful if setup_logging is called multiple times)
    logger.handlers = []

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(pathname)s")

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    log_file_path = None
    if log_file:
        try:
            current_log_directory = (
                Path(log_directory) if log_directory is not None else get_default_writable_directory("logs")
            )
            logger.info("Using the current directory for logging: %s", current_log_directory)
        except RuntimeError as e:
            logger.error("Failed to identify a directory for logging: %s", e)
            raise LogDirectoryError(f"Could not identify or create a log directory due to an error: {e}.")

        log_file_path = current_log_directory / log_file
        file_handler = RotatingFileHandler(str(log_file_path), maxBytes=max_bytes, backupCount=backup_count)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for handler in handlers:
        if logging_filter:
            handler.addFilter(logging_filter)
        logger.addHandler(handler)

    if log_file_path:
        logger.info("Logging setup complete (folder: %s)", log_file_path)
    else:
        logger.info("Logging setup complete (console_only)")
