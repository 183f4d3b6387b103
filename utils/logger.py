# utils/logger.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Logging utility for the minimization engine with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the minimization engine."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class QuincyLogger:
    """Centralized logger for the engine with structured output."""

    def __init__(self, name: str = "quincy", level: LogLevel = LogLevel.INFO):
        """Initialize the engine logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(QuincyFormatter())

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

    # Specialized methods for minimization events
    def pipeline_start(self, formula_text: str, variables: Optional[str] = None):
        """Log the start of a minimization run."""
        self.info("=== Quincy Minimization ===")
        self.info(f"📋 Formula: {formula_text}")
        if variables:
            self.info(f"🔤 Variables: {variables}")

    def row_appended(self, number: int, cube: str, formed_by: str, cancelled_by: str):
        """Log a consensus row being appended to the table."""
        self.debug(
            f"      ➕ row {number} {cube} formed by {formed_by}, cancelled by {cancelled_by}"
        )

    def row_cancelled(self, number: int, cube: str, cancelled_by: int):
        """Log a row being subsumed by a newer consensus."""
        self.debug(f"      ✂️  row {number} {cube} cancelled by row {cancelled_by}")

    def cover_found(self, cover: str, size: int):
        """Log the final irredundant cover."""
        self.info(f"\n>>> COVER ({size} term{'s' if size != 1 else ''}): {cover} <<<")


class QuincyFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[QuincyLogger] = None


def get_logger(name: str = "quincy") -> QuincyLogger:
    """Get or create the global engine logger instance.

    Args:
        name: Logger name (default: "quincy")

    Returns:
        QuincyLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = QuincyLogger(name)
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
