"""Protocol interfaces for dependency inversion.

The runner depends on CommandExecutor rather than on the subprocess
machinery, so tests can swap in a fake and check that nothing was spawned.

Usage Example:

    from step_runner.protocols import CommandExecutor

    class RecordingExecutor:
        def __init__(self):
            self.commands = []

        async def execute(self, command):
            self.commands.append(command)
            return ExecutionResult(output="", error="", returncode=0)

    runner = StepRunner(executor=RecordingExecutor())
"""

from typing import Protocol, runtime_checkable

from step_runner.models import ExecutionResult


@runtime_checkable
class CommandExecutor(Protocol):
    """Protocol for running one shell command to completion.

    Example implementation:
        class MyExecutor:
            async def execute(self, command: str) -> ExecutionResult:
                # Spawn, wait, capture
                return ExecutionResult(output=out, error=err, returncode=rc)
    """

    async def execute(self, command: str) -> ExecutionResult:
        """Run a command and wait for it to exit.

        Args:
            command: Shell command line, unparsed

        Returns:
            Captured output and exit status. A non-zero status is returned,
            not raised.

        Raises:
            LaunchError: If the process could not be spawned
        """
        ...
