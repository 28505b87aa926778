# utils/logger.py
"""
Logging setup for the multicore framework.
This module provides the shared logging configuration, including:
- A structured formatter that tags records with the multiton key of their core
- Console and rotating file handlers driven by config.settings
"""
import logging
import sys
import os
from logging.handlers import RotatingFileHandler
from typing import Optional
from datetime import datetime, timezone
import json

from config.settings import settings


class CustomFormatter(logging.Formatter):
    """Custom formatter with colors and structured output"""

    # Color codes for console output
    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'      # Reset
    }

    def format(self, record):
        """Format log record with colors and structure"""
        record.timestamp = datetime.now(timezone.utc).isoformat()

        if hasattr(record, 'core'):
            # Logs emitted on behalf of one core
            base_format = "{timestamp} | {levelname:8} | {core:15} | {message}"
        else:
            # Framework-wide logs
            base_format = "{timestamp} | {levelname:8} | {name:15} | {message}"

        # Colors only for interactive console output
        if self._is_console_handler(record) and not settings.is_production():
            color = self.COLORS.get(record.levelname, '')
            reset = self.COLORS['RESET']
            base_format = f"{color}{base_format}{reset}"

        formatted = base_format.format(
            timestamp=record.timestamp,
            levelname=record.levelname,
            name=record.name,
            core=str(getattr(record, 'core', '')),
            message=record.getMessage()
        )

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted

    def _is_console_handler(self, record):
        """Check if this is being formatted for console output"""
        return getattr(record, '_console_output', False)


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: str = "INFO",
    include_console: bool = True
) -> logging.Logger:
    """
    Setup logger with file and console output.

    Args:
        name: Logger name (e.g., 'bus', 'system')
        log_file: Log file path (optional)
        level: Log level
        include_console: Add console handler
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper()))
    formatter = CustomFormatter()

    # File handler with rotation
    if log_file:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=settings.logging.max_file_size,
            backupCount=settings.logging.backup_count,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Console handler
    if include_console and settings.logging.console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)

        # Mark records for console-specific formatting
        def add_console_marker(record):
            record._console_output = True
            return True
        console_handler.addFilter(add_console_marker)

        logger.addHandler(console_handler)

    return logger


def _log_file(filename: str) -> Optional[str]:
    if not settings.logging.file_path:
        return None
    return os.path.join(settings.logging.file_path, filename)


# Pre-configured loggers
def get_system_logger() -> logging.Logger:
    """Get system logger for core lifecycle events"""
    return setup_logger(
        name="multicore.system",
        log_file=_log_file("system.log"),
        level=settings.get_log_level(),
        include_console=True
    )


def get_bus_logger() -> logging.Logger:
    """Get bus logger for notification delivery and registrations"""
    return setup_logger(
        name="multicore.bus",
        log_file=_log_file("bus.log"),
        level=settings.get_log_level(),
        include_console=True
    )


def get_command_logger() -> logging.Logger:
    """Get command logger for command dispatch"""
    return setup_logger(
        name="multicore.command",
        log_file=_log_file("command.log"),
        level=settings.get_log_level(),
        include_console=True
    )


# Utility functions for structured logging
def log_core_event(logger: logging.Logger, key: str, event: str, **kwargs):
    """Log a core lifecycle event with structured data"""
    extra = {'core': key}
    data = json.dumps(kwargs, default=str)
    logger.info(f"{event}: {data}", extra=extra)


def log_error_with_context(logger: logging.Logger, error: Exception, context: dict):
    """Log error with full context information"""
    context_data = json.dumps(context, default=str)
    logger.error(
        f"Error: {str(error)} | Context: {context_data}", exc_info=error)
