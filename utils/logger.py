# utils/logger.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Logging utility for formula parsing and printing with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula processing."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class FOLLogger:
    """Centralized logger for formula processing with structured output."""

    def __init__(self, name: str = "fol_printer", level: LogLevel = LogLevel.INFO):
        """Initialize the formula logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(FOLFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for formula events
    def formula_parsed(self, source: str, formula):
        """Log a successful parse together with its canonical rendering."""
        if self.is_debug():
            self.debug(f"Parsed '{source.strip()}' as {formula}")

    def formula_rendered(self, index: int, text: str):
        """Log the rendering of the index-th formula of a batch."""
        self.debug(f"Formula {index} rendered: {text}")

    def round_trip_result(self, text: str, preserved: bool):
        """Log whether re-parsing a rendering reproduced the original tree."""
        if preserved:
            self.debug(f"Round-trip preserved: {text}")
        else:
            self.error(f"Round-trip changed tree shape: {text}")


class FOLFormatter(logging.Formatter):
    """Custom formatter for clean formula logging output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[FOLLogger] = None


def get_logger(name: str = "fol_printer") -> FOLLogger:
    """Get or create the global formula logger instance.

    Args:
        name: Logger name (default: "fol_printer")

    Returns:
        FOLLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = FOLLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
