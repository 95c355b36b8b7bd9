"""Local shell command executors."""

import asyncio
import logging
from pathlib import Path

from step_runner.errors import ExecutionError, LaunchError
from step_runner.models import ExecutionResult

logger = logging.getLogger(__name__)

# Exit statuses POSIX shells use when they cannot run the command at all
SHELL_CANNOT_EXECUTE = 126
SHELL_COMMAND_NOT_FOUND = 127


def _decode(stream: bytes | None) -> str:
    """Decode captured process output, replacing undecodable bytes."""
    if stream is None:
        return ""
    return stream.decode("utf-8", errors="replace")


async def run_shell(
    command: str,
    cwd: str | Path | None = None,
    shell: str | None = None,
) -> ExecutionResult:
    """Execute a command line through the host shell and wait for it.

    The command is handed to the shell unparsed, so any shell syntax
    (pipes, redirections, `&&`) is available. No timeout is applied.
    The child inherits the runner's environment.

    Args:
        command: Shell command line
        cwd: Working directory (default: inherit)
        shell: Shell executable invoked as `<shell> -c <command>`
            (default: the host's default interpreter)

    Returns:
        ExecutionResult with stdout, stderr, and return code.

    Raises:
        LaunchError: If the process could not be spawned, including
            commands the OS rejects outright (e.g. an embedded NUL byte).
    """
    logger.debug("Spawning shell=%s cwd=%s", shell or "default", cwd or ".")
    try:
        if shell:
            process = await asyncio.create_subprocess_exec(
                shell,
                "-c",
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
            )
        else:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=cwd,
            )
    except (OSError, ValueError) as e:
        raise LaunchError(f"Failed to start command: {command}: {e}", command=command) from e

    stdout, stderr = await process.communicate()

    # communicate() waits for exit, so returncode is set
    returncode = process.returncode if process.returncode is not None else 0

    return ExecutionResult(
        output=_decode(stdout),
        error=_decode(stderr),
        returncode=returncode,
    )


def check_result(command: str, result: ExecutionResult) -> ExecutionResult:
    """Raise if a finished command did not exit cleanly.

    Statuses 126 and 127 are what POSIX shells return when they cannot
    execute or find the command, so they are reported as LaunchError. A
    command that itself calls `exit 126` or `exit 127` is labelled the
    same way; the step fails either way, only the error type differs.

    Args:
        command: The command line that produced the result
        result: Captured result

    Returns:
        The result unchanged when the return code is 0.

    Raises:
        LaunchError: If the shell could not find or execute the command.
        ExecutionError: If the command exited with any other non-zero status.
    """
    if result.succeeded:
        return result

    message = f"Command failed with exit code {result.returncode}: {command}"
    stderr = result.error.strip()
    if stderr:
        message = f"{message}\n{stderr}"

    if result.returncode in (SHELL_CANNOT_EXECUTE, SHELL_COMMAND_NOT_FOUND):
        raise LaunchError(message, command=command, returncode=result.returncode)

    raise ExecutionError(
        message,
        command=command,
        returncode=result.returncode,
        stderr=result.error,
    )


class ShellExecutor:
    """Runs commands through the host shell with fixed spawn options."""

    def __init__(
        self,
        cwd: str | Path | None = None,
        shell: str | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            cwd: Working directory for every command (default: inherit)
            shell: Shell executable (default: host default interpreter)
        """
        self.cwd = cwd
        self.shell = shell

    async def execute(self, command: str) -> ExecutionResult:
        """Run a command line and capture its output."""
        return await run_shell(command, cwd=self.cwd, shell=self.shell)
