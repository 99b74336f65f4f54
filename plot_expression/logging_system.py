"""
Logging System for Formula Plotting

Centralized logger with verbosity levels so that library code can report
parse failures and blank-plot fallbacks without cluttering the terminal
the plot is drawn on.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of verbosity levels"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Warnings and final results
    MODERATE = 2    # Key milestones
    DETAILED = 3    # Per-formula information
    VERBOSE = 4     # All information including debug details


LOG_LEVEL_NAMES = {level.name.lower(): level for level in LogLevel}


class PlotExpressionLogger:
    """
    Centralized logger with context-aware formatting
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 stream=None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('plot_expression')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # Console handler; stderr by default so stdout stays clean for plot data
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(stream or sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"plot_expression_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - critical errors and failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def milestone(self, message: str):
        if self._should_log(LogLevel.MODERATE):
            self.logger.info(f"MILESTONE: {message}")

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[PlotExpressionLogger] = None


def get_logger() -> PlotExpressionLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = PlotExpressionLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = PlotExpressionLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None,
                      stream=None) -> PlotExpressionLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = PlotExpressionLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path,
        stream=stream
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    get_logger().info(message, level)


def log_milestone(message: str):
    get_logger().milestone(message)


def log_warning(message: str):
    get_logger().warning(message)


def log_debug(message: str):
    get_logger().debug(message)
