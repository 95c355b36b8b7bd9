"""Step descriptor data model."""

from dataclasses import dataclass

from step_runner.errors import ConfigurationError


@dataclass(frozen=True)
class StepDescriptor:
    """A named shell command to run as one CI step."""

    name: str
    command: str

    @classmethod
    def create(cls, name: str | None, command: str | None) -> "StepDescriptor":
        """Build a descriptor, rejecting missing fields.

        Args:
            name: Human-readable step label
            command: Shell command line, passed to the shell unparsed

        Returns:
            Validated StepDescriptor

        Raises:
            ConfigurationError: If name or command is absent or blank
        """
        if name is None or not name.strip():
            raise ConfigurationError("step_name")
        if command is None or not command.strip():
            raise ConfigurationError("command")
        return cls(name=name.strip(), command=command.strip())
