"""Console logging for the step runner.

Runner diagnostics get a timestamped, colored line. Text captured from the
step's command is logged through OUTPUT_LOGGER and printed exactly as the
command wrote it.
"""

import logging
import re
import sys
from datetime import datetime, timezone
from typing import TextIO

from step_runner.config import Settings

PACKAGE_LOGGER = "step_runner"
OUTPUT_LOGGER = "step_runner.output"

# ANSI color codes
COLORS = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "bright_black": "\033[90m",
    "bright_red": "\033[91m",
    "bright_green": "\033[92m",
    "bright_yellow": "\033[93m",
    "bright_blue": "\033[94m",
    "bright_magenta": "\033[95m",
    "bright_cyan": "\033[96m",
    "bg_red": "\033[41m",
}

# Log level colors
LEVEL_COLORS = {
    "DEBUG": COLORS["bright_black"],
    "INFO": COLORS["bright_green"],
    "WARNING": COLORS["bright_yellow"],
    "ERROR": COLORS["bright_red"],
    "CRITICAL": COLORS["bg_red"] + COLORS["white"] + COLORS["bold"],
}

# Component colors for logger names
COMPONENT_COLORS = {
    "step_runner.runner": COLORS["bright_cyan"],
    "step_runner.services": COLORS["bright_magenta"],
    "step_runner.config": COLORS["green"],
    "default": COLORS["white"],
}

STEP_NAME_PATTERN = re.compile(r"('[^']*')")
EXIT_CODE_PATTERN = re.compile(r"(exit code \d+)")


class ColorfulFormatter(logging.Formatter):
    """Colorful log formatter with UTC timestamps and component highlighting."""

    def __init__(self, use_colors: bool = True) -> None:
        """Initialize the formatter.

        Args:
            use_colors: Whether to use ANSI colors.
        """
        super().__init__()
        self.use_colors = use_colors

    def _colorize(self, text: str, color: str) -> str:
        """Apply color to text if colors are enabled."""
        if not self.use_colors:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def _get_component_color(self, name: str) -> str:
        """Get color for a logger name/component."""
        for prefix, color in COMPONENT_COLORS.items():
            if prefix != "default" and name.startswith(prefix):
                return color
        return COMPONENT_COLORS["default"]

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        """Format timestamp in UTC."""
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return f"{dt.strftime('%H:%M:%S')}.{int(record.msecs):03d}"

    def _format_level(self, record: logging.LogRecord) -> str:
        """Format log level with color and fixed width."""
        level = record.levelname
        color = LEVEL_COLORS.get(level, COLORS["white"])
        return self._colorize(f"{level:<8}", color)

    def _format_component(self, record: logging.LogRecord) -> str:
        """Format component/logger name with color."""
        name = record.name
        if name.startswith(f"{PACKAGE_LOGGER}."):
            name = name[len(PACKAGE_LOGGER) + 1 :]
        color = self._get_component_color(record.name)
        return self._colorize(f"{name:<20}", color)

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record, passing command output through untouched."""
        if record.name == OUTPUT_LOGGER:
            # The handler appends its own newline
            message = record.getMessage()
            return message[:-1] if message.endswith("\n") else message

        timestamp = self._colorize(self._format_timestamp(record), COLORS["dim"])
        level = self._format_level(record)
        component = self._format_component(record)
        sep = self._colorize("|", COLORS["dim"])
        message = self._highlight_message(record.getMessage())

        line = f"{timestamp} {sep} {level} {sep} {component} {sep} {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def _highlight_message(self, message: str) -> str:
        """Highlight step names and exit codes in log messages."""
        if not self.use_colors:
            return message

        message = STEP_NAME_PATTERN.sub(
            f"{COLORS['bright_blue']}\\1{COLORS['reset']}",
            message,
        )
        message = EXIT_CODE_PATTERN.sub(
            f"{COLORS['bright_yellow']}\\1{COLORS['reset']}",
            message,
        )
        return message


class MaxLevelFilter(logging.Filter):
    """Pass only records strictly below a level."""

    def __init__(self, level: int) -> None:
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def _stream_handler(stream: TextIO, use_colors: bool) -> logging.StreamHandler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorfulFormatter(use_colors=use_colors and stream.isatty()))
    return handler


def configure_logging(
    settings: Settings,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> logging.Logger:
    """Configure the step_runner logger tree.

    Records below WARNING go to stdout and the rest to stderr, matching the
    informational and error channels a CI log viewer shows. Handlers are only
    attached once.

    Args:
        settings: Runner settings (log level, colors)
        stdout: Informational stream (default: sys.stdout)
        stderr: Error stream (default: sys.stderr)

    Returns:
        The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    if not package_logger.handlers:
        info_handler = _stream_handler(stdout or sys.stdout, settings.log_colors)
        info_handler.addFilter(MaxLevelFilter(logging.WARNING))

        error_handler = _stream_handler(stderr or sys.stderr, settings.log_colors)
        error_handler.setLevel(logging.WARNING)

        package_logger.addHandler(info_handler)
        package_logger.addHandler(error_handler)
        package_logger.propagate = False

    # Command output is surfaced regardless of the diagnostic log level
    logging.getLogger(OUTPUT_LOGGER).setLevel(logging.INFO)

    return package_logger
