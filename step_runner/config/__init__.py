"""Configuration for the step runner.

- Settings: Environment variable configuration for the runner itself
- get_input / read_step_inputs: Action inputs supplied by the workflow
"""

from step_runner.config.inputs import get_input, input_env_key, read_step_inputs
from step_runner.config.settings import Settings

__all__ = ["Settings", "get_input", "input_env_key", "read_step_inputs"]
