import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from typing import Optional
from nj_population.config import LOGGING_CONFIG

def setup_logger(name: str, level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the application logger.

    Diagnostics always go to stderr so they never mix with the
    interactive output on stdout.

    Args:
        name (str): Logger name
        level (Optional[str]): Log level name, defaults to LOGGING_CONFIG
        log_file (Optional[str]): Path of an optional rotating log file

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)

    # Unknown level names fall back to the configured default
    requested = (level or LOGGING_CONFIG["LOG_LEVEL"]).upper()
    numeric_level = logging.getLevelName(requested)
    known_level = isinstance(numeric_level, int)
    if not known_level:
        numeric_level = logging.getLevelName(LOGGING_CONFIG["LOG_LEVEL"])
    logger.setLevel(numeric_level)

    # Drop handlers from an earlier setup in the same process
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    # Set log format
    formatter = logging.Formatter(LOGGING_CONFIG["LOG_FORMAT"])

    # Set console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if not known_level:
        logger.warning(f"Unknown log level {requested!r}, using {LOGGING_CONFIG['LOG_LEVEL']}")

    # Set file handler
    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir)

            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOGGING_CONFIG["MAX_BYTES"],
                backupCount=LOGGING_CONFIG["BACKUP_COUNT"]
            )
        except OSError as e:
            logger.warning(f"Cannot write log file {log_file}: {str(e)}")
        else:
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
