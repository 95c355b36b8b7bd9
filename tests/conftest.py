"""Shared fixtures for step runner tests."""

import logging
from collections.abc import Iterator

import pytest

from step_runner.models import ExecutionResult


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo configure_logging so caplog sees step_runner records."""
    yield
    package_logger = logging.getLogger("step_runner")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


class RecordingExecutor:
    """Executor double that records commands instead of spawning them."""

    def __init__(self, result: ExecutionResult | None = None) -> None:
        self.result = result or ExecutionResult(output="", error="", returncode=0)
        self.commands: list[str] = []

    async def execute(self, command: str) -> ExecutionResult:
        self.commands.append(command)
        return self.result


@pytest.fixture
def recording_executor() -> RecordingExecutor:
    """Create an executor double returning a clean exit."""
    return RecordingExecutor()
