"""Data models for the step runner."""

from step_runner.models.result import ExecutionResult, StepOutcome
from step_runner.models.step import StepDescriptor

__all__ = [
    "ExecutionResult",
    "StepDescriptor",
    "StepOutcome",
]
