"""Utilities for the step runner."""

from step_runner.utils.console import ColorfulFormatter, configure_logging
from step_runner.utils.workflow import escape_data, format_command, report_failure

__all__ = [
    "ColorfulFormatter",
    "configure_logging",
    "escape_data",
    "format_command",
    "report_failure",
]
