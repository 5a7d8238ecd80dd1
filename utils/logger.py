"""Logging utilities for ngx."""

import os
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler

from config import LOG_CONFIG
from ui.components import console
from ui.styles import PRIMARY, SUCCESS, WARNING, ERROR, INFO


class Logger:
    """Simple logger with Rich formatting."""

    def __init__(self, name="ngx"):
        self.name = name
        self.show_timestamp = False

    def _format_message(self, level, message, color):
        """Format a log message with optional timestamp."""
        timestamp = ""
        if self.show_timestamp:
            timestamp = f"[dim]{datetime.now().strftime('%H:%M:%S')}[/dim] "

        return f"{timestamp}[{color}][{level}][/{color}] {message}"

    def info(self, message):
        """Log an info message."""
        console.print(self._format_message("INFO", message, INFO))

    def success(self, message):
        """Log a success message."""
        console.print(self._format_message("OK", message, SUCCESS))

    def warning(self, message):
        """Log a warning message."""
        console.print(self._format_message("WARN", message, WARNING))

    def error(self, message):
        """Log an error message."""
        console.print(self._format_message("ERR", message, ERROR))

    def step(self, message):
        """Log a step in a process."""
        console.print(f"[{PRIMARY}]→[/{PRIMARY}] {message}")


# Default logger instance
log = Logger()


def setup_file_logging(log_dir=None):
    """
    Attach a rotating file handler to the "ngx" logger.

    Core modules log through logging.getLogger("ngx.<area>"); this routes
    them to LOG_CONFIG's file. Returns the log file path, or None when the
    directory cannot be created (file logging is then skipped).
    """
    log_dir = log_dir or LOG_CONFIG["log_dir"]
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        return None

    log_file = os.path.join(log_dir, LOG_CONFIG["log_file"])

    logger = logging.getLogger("ngx")
    logger.setLevel(logging.INFO)
    logger.handlers = []

    max_bytes = LOG_CONFIG["max_log_size_mb"] * 1024 * 1024
    handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=LOG_CONFIG["backup_count"],
    )
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    logger.addHandler(handler)
    return log_file
