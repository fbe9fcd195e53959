"""
Configuration for the Clinical Note Compliance Checker

This module defines the configuration dataclass used to initialize the
checker. Configuration is:
    1. Loaded from environment variables (with .env support)
    2. Validated at startup to fail fast on misconfiguration
    3. Kept separate from the score thresholds (see core.thresholds)

Usage:
    from note_compliance.core.config import CheckerConfiguration

    # Load from environment
    config = CheckerConfiguration.from_environment()

    # Or configure programmatically
    config = CheckerConfiguration(simulated_delay_seconds=0.0)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from note_compliance.core.enums import NoteFormat
from note_compliance.core.exceptions import ConfigurationError


# =============================================================================
# STAGE 1: DEFAULT VALUES
# =============================================================================


class ConfigDefaults:
    """Default configuration values."""

    DEFAULT_SIMULATED_DELAY = 1.5  # seconds, imitates a remote analysis
    DEFAULT_LOG_LEVEL = "INFO"
    VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# STAGE 2: CONFIGURATION DATACLASS
# =============================================================================


@dataclass
class CheckerConfiguration:
    """
    Configuration for the compliance checker.

    What it does:
        Holds the few runtime knobs the checker has: the artificial
        latency, the note type assumed when the form has no note-type
        selector, and the log level used by the CLI.

    Example:
        >>> config = CheckerConfiguration.from_environment()
        >>> config.simulated_delay_seconds
        1.5
    """

    simulated_delay_seconds: float = ConfigDefaults.DEFAULT_SIMULATED_DELAY
    """Fixed pause before each analysis. No bearing on results."""

    default_note_type: Optional[NoteFormat] = None
    """Note type used when a request leaves it unset (single-format forms)."""

    log_level: str = ConfigDefaults.DEFAULT_LOG_LEVEL
    """loguru level name for the CLI sink."""

    def validate(self) -> None:
        """
        Validate configuration parameters.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.simulated_delay_seconds < 0:
            raise ConfigurationError(
                f"Simulated delay must be non-negative, got {self.simulated_delay_seconds}",
                context={
                    "setting": "SIMULATED_DELAY_SECONDS",
                    "value": self.simulated_delay_seconds,
                },
            )

        if self.default_note_type is not None and not isinstance(
            self.default_note_type, NoteFormat
        ):
            raise ConfigurationError(
                f"Default note type must be a NoteFormat, got {self.default_note_type!r}",
                context={"setting": "DEFAULT_NOTE_TYPE"},
            )

        if self.log_level.upper() not in ConfigDefaults.VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                context={"setting": "LOG_LEVEL", "valid": ConfigDefaults.VALID_LOG_LEVELS},
            )

    @classmethod
    def from_environment(
        cls, env_file: Optional[str] = None, validate_on_load: bool = True
    ) -> "CheckerConfiguration":
        """
        Load configuration from environment variables.

        STAGE 1: Load .env file (if specified or found in the working directory)
        STAGE 2: Read and convert environment variables
        STAGE 3: Validate configuration (optional)

        Raises:
            ConfigurationError: If a setting cannot be parsed or is invalid
        """
        # STAGE 1: Load .env file
        if env_file:
            load_dotenv(env_file)
        else:
            local_env = Path.cwd() / ".env"
            if local_env.exists():
                load_dotenv(local_env)

        # STAGE 2: Read environment variables
        raw_delay = os.getenv(
            "SIMULATED_DELAY_SECONDS", str(ConfigDefaults.DEFAULT_SIMULATED_DELAY)
        )
        try:
            delay = float(raw_delay)
        except ValueError:
            raise ConfigurationError(
                f"SIMULATED_DELAY_SECONDS is not a number: {raw_delay!r}",
                context={"setting": "SIMULATED_DELAY_SECONDS"},
            ) from None

        default_note_type = None
        raw_note_type = os.getenv("DEFAULT_NOTE_TYPE")
        if raw_note_type:
            try:
                default_note_type = NoteFormat.from_string(raw_note_type)
            except ValueError as e:
                raise ConfigurationError(
                    str(e), context={"setting": "DEFAULT_NOTE_TYPE", "value": raw_note_type}
                ) from e

        config = cls(
            simulated_delay_seconds=delay,
            default_note_type=default_note_type,
            log_level=os.getenv("LOG_LEVEL", ConfigDefaults.DEFAULT_LOG_LEVEL).upper(),
        )

        # STAGE 3: Validate
        if validate_on_load:
            config.validate()

        return config

    def to_dict(self) -> dict:
        """Convert configuration to dictionary (for logging/debugging)."""
        return {
            "simulated_delay_seconds": self.simulated_delay_seconds,
            "default_note_type": self.default_note_type.value if self.default_note_type else None,
            "log_level": self.log_level,
        }
