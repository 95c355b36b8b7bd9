"""Entry point: run the step described by the action inputs."""

import asyncio
import logging

from step_runner.config import Settings, read_step_inputs
from step_runner.models import StepOutcome
from step_runner.runner import StepRunner
from step_runner.utils.console import configure_logging
from step_runner.utils.workflow import report_failure

logger = logging.getLogger(__name__)


async def run_from_env(settings: Settings) -> StepOutcome:
    """Run the step named by INPUT_STEP_NAME and INPUT_COMMAND."""
    name, command = read_step_inputs()
    runner = StepRunner(working_dir=settings.working_dir, shell=settings.shell)
    return await runner.run(name, command)


def main() -> int:
    """Run one step and translate the outcome into the CI signal.

    Returns:
        Process exit status: 0 on success, 1 on failure
    """
    settings = Settings.from_env()
    configure_logging(settings)
    logger.debug(
        "Settings: log_level=%s, shell=%s, working_dir=%s",
        settings.log_level,
        settings.shell or "default",
        settings.working_dir or ".",
    )

    outcome = asyncio.run(run_from_env(settings))

    if outcome.succeeded:
        return 0

    report_failure(outcome.message or "Step failed")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
