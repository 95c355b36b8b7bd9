"""Action input access.

GitHub Actions hands `with:` inputs to the action as INPUT_<NAME> environment
variables, the name upper-cased with spaces replaced by underscores.
"""

import os
from collections.abc import Mapping

STEP_NAME_INPUT = "step_name"
COMMAND_INPUT = "command"


def input_env_key(name: str) -> str:
    """Environment variable carrying the named input.

    Args:
        name: Input name as declared in action.yml

    Returns:
        Environment variable name, e.g. INPUT_STEP_NAME
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


def get_input(name: str, env: Mapping[str, str] | None = None) -> str:
    """Read an action input.

    Args:
        name: Input name as declared in action.yml
        env: Environment to read from (default: os.environ)

    Returns:
        Whitespace-trimmed input value, empty string if not supplied
    """
    source = os.environ if env is None else env
    return source.get(input_env_key(name), "").strip()


def read_step_inputs(env: Mapping[str, str] | None = None) -> tuple[str, str]:
    """Read the step name and command inputs without validating them.

    Missing inputs come back as empty strings so that validation happens in
    one place, when the runner builds the StepDescriptor.

    Returns:
        Tuple of (step_name, command)
    """
    return (
        get_input(STEP_NAME_INPUT, env=env),
        get_input(COMMAND_INPUT, env=env),
    )
