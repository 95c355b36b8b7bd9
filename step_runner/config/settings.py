"""Runner settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Runner settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    # Execution
    shell: str | None = field(default=None)
    working_dir: Path | None = field(default=None)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        RUNNER_DEBUG=1 (set by GitHub Actions when debug logging is enabled)
        overrides STEP_RUNNER_LOG_LEVEL with DEBUG.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            log_level=cls._get_log_level(),
            log_colors=cls._get_bool("STEP_RUNNER_LOG_COLORS", True),
            shell=os.getenv("STEP_RUNNER_SHELL", "").strip() or None,
            working_dir=cls._get_optional_path("STEP_RUNNER_WORKING_DIR"),
        )

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        normalized = value.strip().lower()
        if normalized in ("1", "true", "yes", "on"):
            return True
        if normalized in ("0", "false", "no", "off"):
            return False

        logger.warning("Invalid bool for %s: %s, using default %s", key, value, default)
        return default

    @staticmethod
    def _get_optional_path(key: str) -> Path | None:
        """Get a path from environment, None if unset or blank."""
        value = os.getenv(key, "").strip()
        if not value:
            return None
        return Path(value).expanduser()

    @staticmethod
    def _get_log_level() -> str:
        """Get log level from environment with validation.

        Returns:
            Upper-cased level name, INFO if invalid
        """
        if os.getenv("RUNNER_DEBUG") == "1":
            return "DEBUG"

        level = os.getenv("STEP_RUNNER_LOG_LEVEL", "INFO").strip().upper()
        if level in LOG_LEVELS:
            return level

        logger.warning("Invalid log level %s, using default INFO", level)
        return "INFO"
