"""GitHub Actions workflow commands.

The Actions runner scans a step's stdout for lines of the form
`::command::message` and acts on them. `::error::` marks the step failed in
the job summary and annotates the log.
"""

import sys
from typing import TextIO


def escape_data(value: str) -> str:
    """Escape a workflow command message.

    Args:
        value: Raw message text

    Returns:
        Text safe to place after the final `::` of a command
    """
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def format_command(command: str, message: str) -> str:
    """Render a workflow command line (without trailing newline)."""
    return f"::{command}::{escape_data(message)}"


def report_failure(message: str, stream: TextIO | None = None) -> None:
    """Report a step failure to the Actions runner.

    Args:
        message: Failure reason shown in the annotation
        stream: Output stream (default: sys.stdout)
    """
    out = stream or sys.stdout
    out.write(format_command("error", message) + "\n")
    out.flush()
