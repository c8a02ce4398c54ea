#!/usr/bin/env python3
"""
Configuration Management for Wallet

Handles environment-based configuration with sensible defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_LEDGER_FILE = "transactions.txt"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class Config:
    """
    Main configuration class for the wallet application.

    Loads configuration from environment variables with defaults suitable for
    running from a checkout.
    """

    environment: Environment

    # Core locations
    data_dir: Path
    ledger_file: str = DEFAULT_LEDGER_FILE

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @property
    def ledger_path(self) -> Path:
        """Full path of the ledger file."""
        return self.data_dir / self.ledger_file

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("WALLET_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_wallet"
            data_dir = Path(os.getenv("WALLET_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("WALLET_DATA_DIR", "./data")).expanduser().resolve()

        return cls(
            environment=env,
            data_dir=data_dir,
            ledger_file=os.getenv("WALLET_LEDGER_FILE", DEFAULT_LEDGER_FILE).strip(),
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        # A missing data_dir is created on first save
        if self.data_dir.exists() and not self.data_dir.is_dir():
            errors.append(f"data_dir is not a directory: {self.data_dir}")

        if not self.ledger_file:
            errors.append("WALLET_LEDGER_FILE must not be empty")
        elif Path(self.ledger_file).name != self.ledger_file:
            errors.append(f"WALLET_LEDGER_FILE must be a file name, not a path: {self.ledger_file}")

        if self.log_level not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)
        if self.debug:
            level = logging.DEBUG

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")
        logging.getLogger("wallet").setLevel(level)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        return {
            "environment": self.environment.value,
            "data_dir": str(self.data_dir),
            "ledger_file": self.ledger_file,
            "ledger_path": str(self.ledger_path),
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            _config = None
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


# Convenience functions
def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def get_ledger_path() -> Path:
    """Get the ledger file path."""
    return get_config().ledger_path


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
