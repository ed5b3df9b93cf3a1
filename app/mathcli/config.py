"""
Configuration Module

Settings for one mathcli run.

Values come from, in increasing priority:
1. Defaults on the Config dataclass
2. Environment variables (and a .env file, if present)
3. Command-line flags, passed in as overrides
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv

from .operations import Operation

ENV_PREFIX = "MATHCLI_"
LOG_FORMATS = ("text", "json")


def default_env_path() -> Path:
    """Location of the optional .env file (MATHCLI_ENV_FILE or ./.env)."""
    return Path(os.getenv(f"{ENV_PREFIX}ENV_FILE", ".env"))


@dataclass(frozen=True)
class Config:
    """
    Run configuration.

    Immutable once built; the reducer reads it for the whole run.
    """

    # === Reducer Settings ===
    operation: Operation = Operation.ADD
    ignore: int = 0                          # Leading lines replaced by the identity
    silent: bool = False                     # Parse errors become the identity
    identity_starting_point: bool = False    # Seed the fold with the identity

    # === Logging Settings ===
    verbose: int = 0                         # Number of -v flags
    log_format: str = "text"                 # "text" or "json"
    log_file: Optional[str] = None

    @property
    def identity(self) -> float:
        """Identity value for the selected operation."""
        return self.operation.identity

    @classmethod
    def from_env(cls, env_file: Optional[Path] = None, **overrides: Any) -> "Config":
        """
        Load configuration from environment variables.

        Keyword overrides that are not None win over the environment.

        Args:
            env_file: .env file to load (default: MATHCLI_ENV_FILE or ./.env)
            **overrides: Field values, typically from command-line flags
        """
        load_dotenv(dotenv_path=env_file or default_env_path())

        def get_bool(key: str, default: bool) -> bool:
            """Helper to parse boolean env vars."""
            value = os.getenv(ENV_PREFIX + key, str(default)).lower()
            return value in ("true", "1", "yes")

        def get_int(key: str, default: int) -> int:
            """Helper to parse int env vars."""
            try:
                return int(os.getenv(ENV_PREFIX + key, default))
            except ValueError:
                return default

        values = {
            "ignore": get_int("IGNORE", 0),
            "silent": get_bool("SILENT", False),
            "identity_starting_point": get_bool("IDENTITY_STARTING_POINT", False),
            "verbose": get_int("VERBOSE", 0),
            "log_format": os.getenv(ENV_PREFIX + "LOG_FORMAT", "text").lower(),
            "log_file": os.getenv(ENV_PREFIX + "LOG_FILE") or None,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not isinstance(self.operation, Operation):
            valid = ", ".join(op.value for op in Operation)
            errors.append(f"operation must be one of: {valid}")

        if self.ignore < 0:
            errors.append(f"ignore must be non-negative, got {self.ignore}")

        if self.verbose < 0:
            errors.append(f"verbose must be non-negative, got {self.verbose}")

        if self.log_format not in LOG_FORMATS:
            errors.append(f"log_format must be one of: {', '.join(LOG_FORMATS)}")

        return errors

    def __post_init__(self):
        """Validate after initialization."""
        errors = self.validate()
        if errors:
            raise ValueError(f"Configuration errors: {errors}")


# === Convenience function ===

def load_config(operation: Operation, **overrides: Any) -> Config:
    """
    Load configuration for an operation.

    Usage:
        from mathcli.config import load_config
        config = load_config(Operation.MUL, silent=True)
    """
    return Config.from_env(operation=operation, **overrides)
