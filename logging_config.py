"""
Logging configuration for begone.

Provides structured logging throughout the application with configurable
verbosity levels.

- Default mode shows WARNING+ only; event lines and the summary are printed
  by display.py, not logged
- Verbose mode (-v) shows DEBUG+ including per-directory walk decisions

Security:
    Log messages containing paths should use sanitize_for_log() from
    utils.system to prevent log injection attacks.
"""

import copy
import logging
import sys
from pathlib import Path
from typing import Optional


class VerboseFilter(logging.Filter):
    """
    Filter that shows verbose messages only when verbose mode is enabled.

    Messages at WARNING level and above always pass through.
    DEBUG and INFO messages only pass when verbose mode is enabled.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the filter.

        Args:
            verbose: If True, allow DEBUG and INFO messages through
        """
        super().__init__()
        self.verbose = verbose

    def filter(self, record: logging.LogRecord) -> bool:
        """
        Determine if record should be logged.

        Args:
            record: Log record to filter

        Returns:
            True if record should be logged
        """
        if record.levelno >= logging.WARNING:
            return True

        return self.verbose


class ColoredFormatter(logging.Formatter):
    """
    Formatter that adds color codes to log messages for terminal output.

    Color scheme:
        DEBUG: Cyan (informational)
        INFO: Green (success/progress)
        WARNING: Yellow (caution)
        ERROR: Red (error)
        CRITICAL: Magenta (severe)
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """
        Format log record with color codes.

        The record is copied so other handlers (the log file) still
        see the plain level name.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with color codes
        """
        colored = copy.copy(record)
        color = self.COLORS.get(record.levelname, '')
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def setup_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    use_colors: bool = True
) -> None:
    """
    Configure application-wide logging.

    Console output goes to stderr so stdout carries only event lines and
    exports. File output always uses plain text at DEBUG level.

    Logging Levels:
        DEBUG: Per-directory walk decisions (only shown with -v)
        INFO: Run progress and summary (only shown with -v)
        WARNING: Unreadable directories, failure counts (always shown)
        ERROR: Failed removals (always shown)

    Args:
        verbose: If True, enable DEBUG level logging on the console
        log_file: Optional file path to write logs to
        use_colors: If True, use colored output for console (--no-color disables)

    Examples:
        >>> setup_logging(verbose=True, log_file=Path("begone.log"))
    """
    level = logging.DEBUG if verbose else logging.WARNING

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.addFilter(VerboseFilter(verbose))

    console_formatter: logging.Formatter
    if use_colors:
        console_formatter = ColoredFormatter('%(levelname)s: %(message)s')
    else:
        console_formatter = logging.Formatter('%(levelname)s: %(message)s')

    console_handler.setFormatter(console_formatter)

    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)

        # File logs never contain ANSI escape sequences
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        file_handler.setFormatter(file_formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG,  # Root level is DEBUG, handlers filter
        handlers=handlers,
        force=True
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Call this at module level with __name__ and log with %-style arguments:

        logger = get_logger(__name__)
        logger.debug("Removed %s", sanitize_for_log(path))

    Args:
        name: Module name, typically __name__

    Returns:
        Logger instance for the module
    """
    return logging.getLogger(name)
