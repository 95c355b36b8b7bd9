"""Tests for module structure.

These tests verify that the public names are importable from their
package-level locations.
"""


class TestModelsModule:
    """Tests for step_runner.models package."""

    def test_import_step_descriptor(self) -> None:
        """StepDescriptor can be imported from models."""
        from step_runner.models import StepDescriptor

        step = StepDescriptor(name="build", command="make")
        assert step.name == "build"

    def test_import_execution_result(self) -> None:
        """ExecutionResult can be imported from models."""
        from step_runner.models import ExecutionResult

        result = ExecutionResult(output="hello", error="", returncode=0)
        assert result.output == "hello"
        assert result.returncode == 0

    def test_import_step_outcome(self) -> None:
        """StepOutcome can be imported from models."""
        from step_runner.models import StepOutcome

        assert StepOutcome is not None


class TestServicesModule:
    """Tests for step_runner.services package."""

    def test_import_executors(self) -> None:
        """Executor helpers can be imported from services."""
        from step_runner.services import ShellExecutor, check_result, run_shell

        assert callable(run_shell)
        assert callable(check_result)
        assert ShellExecutor is not None


class TestConfigModule:
    """Tests for step_runner.config package."""

    def test_import_settings_and_inputs(self) -> None:
        """Settings and input helpers can be imported from config."""
        from step_runner.config import Settings, get_input, read_step_inputs

        assert Settings is not None
        assert callable(get_input)
        assert callable(read_step_inputs)


class TestUtilsModule:
    """Tests for step_runner.utils package."""

    def test_import_utils(self) -> None:
        """Console and workflow helpers can be imported from utils."""
        from step_runner.utils import (
            ColorfulFormatter,
            configure_logging,
            escape_data,
            format_command,
            report_failure,
        )

        assert ColorfulFormatter is not None
        assert callable(configure_logging)
        assert callable(escape_data)
        assert callable(format_command)
        assert callable(report_failure)

    def test_package_version(self) -> None:
        """The package exposes a version string."""
        import step_runner

        assert isinstance(step_runner.__version__, str)
