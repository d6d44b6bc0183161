"""
bindgen logging module - diagnostics to stderr, optional debug log on disk
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOGGER_NAME = "bindgen"

_logger_initialized = False
_logger = None

LOG_FORMAT = '[%(asctime)s] [%(levelname)-8s] [%(module)s:%(funcName)s:%(lineno)d] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _rotate_existing_log(log_path: Path):
    """Rename existing log file with timestamp"""
    if log_path.exists():
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        new_name = log_path.parent / f"{log_path.stem}_{timestamp}{log_path.suffix}"
        try:
            log_path.rename(new_name)
        except OSError:
            # If rename fails, just overwrite
            pass


def init_logging(log_path: Optional[Path] = None, verbose: bool = False):
    """
    (Re)configure the bindgen logger.

    Warnings and errors always go to stderr, which is the diagnostic stream the
    generator reports skipped classes on. With verbose=True stderr also gets
    debug output. If log_path is given, everything is additionally written to
    that file; an existing file is rotated out of the way first.
    """
    global _logger_initialized, _logger

    _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(logging.DEBUG)
    _logger.propagate = False

    # Clear any existing handlers
    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    _logger.addHandler(stream_handler)

    if log_path is not None:
        log_path = Path(log_path)
        _rotate_existing_log(log_path)
        file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        file_handler.setLevel(logging.DEBUG)
        _logger.addHandler(file_handler)

    _logger_initialized = True

    _logger.debug("=" * 60)
    _logger.debug("bindgen logger started")
    _logger.debug(f"Verbose: {verbose}")
    _logger.debug(f"Log File: {log_path}")
    _logger.debug("=" * 60)

    return _logger


def get_logger():
    """Get the bindgen logger instance"""
    if not _logger_initialized:
        init_logging()
    return _logger


# Convenience functions for logging
def debug(msg: str, *args, **kwargs):
    """Log debug message"""
    get_logger().debug(msg, *args, stacklevel=2, **kwargs)


def info(msg: str, *args, **kwargs):
    """Log info message"""
    get_logger().info(msg, *args, stacklevel=2, **kwargs)


def warning(msg: str, *args, **kwargs):
    """Log warning message"""
    get_logger().warning(msg, *args, stacklevel=2, **kwargs)


def error(msg: str, *args, **kwargs):
    """Log error message"""
    get_logger().error(msg, *args, stacklevel=2, **kwargs)

