"""The step runner: one named shell command, one attempt, one outcome."""

import logging
from pathlib import Path

from step_runner.errors import StepError
from step_runner.models import ExecutionResult, StepDescriptor, StepOutcome
from step_runner.protocols import CommandExecutor
from step_runner.services.executors import ShellExecutor, check_result
from step_runner.utils.console import OUTPUT_LOGGER

logger = logging.getLogger(__name__)
output_logger = logging.getLogger(OUTPUT_LOGGER)


class StepRunner:
    """Runs a step's command through the host shell and classifies the result.

    Commands are arbitrary shell syntax and are neither parsed nor sandboxed.
    There is exactly one attempt per call; the runner keeps no state between
    calls.

    Example:
        >>> runner = StepRunner()
        >>> outcome = await runner.run("build", "make all")
        >>> outcome.succeeded
        True
    """

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        working_dir: str | Path | None = None,
        shell: str | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            executor: Command executor (default: ShellExecutor)
            working_dir: Working directory for the default executor
            shell: Shell executable for the default executor
        """
        self.executor = executor or ShellExecutor(cwd=working_dir, shell=shell)

    async def run(self, name: str | None, command: str | None) -> StepOutcome:
        """Validate inputs and run the step.

        Args:
            name: Step label
            command: Shell command line

        Returns:
            StepOutcome; never raises a StepError
        """
        try:
            step = StepDescriptor.create(name, command)
        except StepError as e:
            return self._fail(name, e)
        return await self.run_step(step)

    async def run_step(self, step: StepDescriptor) -> StepOutcome:
        """Run an already validated step.

        Args:
            step: Step to run

        Returns:
            StepOutcome; never raises a StepError
        """
        logger.info("Running step '%s'", step.name)
        logger.info("Command: %s", step.command)

        result: ExecutionResult | None = None
        try:
            result = await self.executor.execute(step.command)
            self._surface_output(result)
            check_result(step.command, result)
        except StepError as e:
            return self._fail(step.name, e, result)

        logger.info("Step '%s' succeeded", step.name)
        return StepOutcome.success(step.name, result)

    @staticmethod
    def _surface_output(result: ExecutionResult) -> None:
        """Log captured stdout and stderr exactly as the command wrote them."""
        if result.output:
            output_logger.info(result.output)
        if result.error:
            output_logger.error(result.error)

    @staticmethod
    def _fail(
        name: str | None,
        error: StepError,
        result: ExecutionResult | None = None,
    ) -> StepOutcome:
        step_name = name.strip() if name and name.strip() else None
        logger.error(
            "Step '%s' failed: %s: %s",
            step_name or "<unnamed>",
            type(error).__name__,
            error.message,
        )
        return StepOutcome.failure(step_name, error.message, result)
