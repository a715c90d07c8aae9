"""
Logging Setup for miniDSP gain sync.

Provides centralized logging configuration with:
- Rotating file handler (optional)
- Console handler
- Queue-based logging so the control loop never blocks on log I/O
"""

import logging
import os
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from typing import Optional

# Centralized logging format with thread, module, function, and line number
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(threadName)s %(module)s:%(funcName)s:%(lineno)d - %(message)s'


def setup_logging(
    log_level: str,
    log_file_name: Optional[str],
    script_dir: str,
    version: str = "",
    script_name: str = "miniDSP gain sync",
    max_bytes: int = 4*1024*1024,
    backup_count: int = 5,
) -> tuple:
    """
    Set up logging with rotating file handler and console output.

    Args:
        log_level: Logging level ("DEBUG", "INFO", or "NONE")
        log_file_name: Name of the log file, or None/"" for console only
        script_dir: Directory where log file should be created
        version: Version string to log at startup
        script_name: Name of the script for startup message
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup log files to keep

    Returns:
        Tuple of (logger, stop_logging_func)
    """
    log_queue = Queue()
    handlers = []

    # Console Handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if log_level in ["INFO", "DEBUG"] else logging.CRITICAL)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handlers.append(console_handler)

    # File Handler
    if log_file_name:
        log_file_path = os.path.join(script_dir, log_file_name)
        file_handler = RotatingFileHandler(log_file_path, maxBytes=max_bytes, backupCount=backup_count)
        file_handler.setLevel(logging.DEBUG if log_level != "NONE" else logging.CRITICAL)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    # Root Logger
    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear all handlers
    root_logger.setLevel(logging.DEBUG if log_level == "DEBUG" else logging.INFO)
    root_logger.addHandler(QueueHandler(log_queue))

    # Listener Thread
    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()

    logger = logging.getLogger(__name__)

    # Log startup message
    version_str = f" v{version}" if version else ""
    logger.info(f">----- Starting {script_name}{version_str}. Initializing...")

    stopped = False

    def stop_logging():
        nonlocal stopped
        if not stopped:
            stopped = True
            listener.stop()

    return logger, stop_logging
