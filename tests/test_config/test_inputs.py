"""Tests for action input access."""

import pytest

from step_runner.config import get_input, input_env_key, read_step_inputs


def test_input_env_key() -> None:
    """Input names map to INPUT_ variables the way Actions sets them."""
    assert input_env_key("step_name") == "INPUT_STEP_NAME"
    assert input_env_key("command") == "INPUT_COMMAND"
    assert input_env_key("my input") == "INPUT_MY_INPUT"


def test_get_input_reads_and_trims() -> None:
    """Values are returned without surrounding whitespace."""
    env = {"INPUT_COMMAND": "  echo done\n"}

    assert get_input("command", env=env) == "echo done"


def test_get_input_missing_returns_empty() -> None:
    """Optional inputs default to an empty string."""
    assert get_input("command", env={}) == ""


def test_get_input_blank_returns_empty() -> None:
    """Whitespace-only values read as not supplied."""
    assert get_input("command", env={"INPUT_COMMAND": "   "}) == ""


def test_get_input_defaults_to_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit mapping the process environment is used."""
    monkeypatch.setenv("INPUT_STEP_NAME", "lint")

    assert get_input("step_name") == "lint"


def test_read_step_inputs_does_not_validate() -> None:
    """read_step_inputs returns blanks for missing inputs instead of raising."""
    assert read_step_inputs(env={}) == ("", "")
    assert read_step_inputs(
        env={"INPUT_STEP_NAME": "build", "INPUT_COMMAND": "make"}
    ) == ("build", "make")
