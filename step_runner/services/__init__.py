"""Services for the step runner."""

from step_runner.services.executors import ShellExecutor, check_result, run_shell

__all__ = [
    "ShellExecutor",
    "check_result",
    "run_shell",
]
