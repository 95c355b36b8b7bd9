"""Step failure taxonomy.

Every failure a step can hit is a StepError. The runner catches these at a
single boundary and turns them into a failed StepOutcome.
"""


class StepError(Exception):
    """Base class for step failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(StepError):
    """A required input was not supplied.

    Raised before any subprocess is launched.
    """

    def __init__(self, input_name: str) -> None:
        super().__init__(f"Input required and not supplied: {input_name}")
        self.input_name = input_name


class LaunchError(StepError):
    """The shell could not start the command."""

    def __init__(
        self,
        message: str,
        command: str,
        returncode: int | None = None,
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class ExecutionError(StepError):
    """The command ran but exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        command: str,
        returncode: int,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
