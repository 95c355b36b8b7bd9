"""Execution result data models."""

from dataclasses import dataclass


@dataclass
class ExecutionResult:
    """Captured output of a finished shell command."""

    output: str
    error: str
    returncode: int

    @property
    def succeeded(self) -> bool:
        """Check if the command exited with status 0."""
        return self.returncode == 0


@dataclass
class StepOutcome:
    """Final classification of a step run.

    Returned to the caller instead of flipping a process-wide failure flag.
    """

    step_name: str | None
    succeeded: bool
    message: str | None = None
    result: ExecutionResult | None = None

    @classmethod
    def success(cls, step_name: str, result: ExecutionResult) -> "StepOutcome":
        """Outcome for a step whose command exited with status 0."""
        return cls(step_name=step_name, succeeded=True, result=result)

    @classmethod
    def failure(
        cls,
        step_name: str | None,
        message: str,
        result: ExecutionResult | None = None,
    ) -> "StepOutcome":
        """Outcome for a step that failed to validate, launch, or exit cleanly."""
        return cls(step_name=step_name, succeeded=False, message=message, result=result)
