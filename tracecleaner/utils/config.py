"""
Configuration management for Trace Cleaner.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import load_dotenv


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Logging
    log_level: str = "INFO"
    log_file: Path | None = None

    # Cleaning settings
    strict: bool = False  # raise when no event carries frame data

    # Paths
    output_dir: Path = field(default_factory=lambda: Path("./cleaned"))

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment variables."""
        load_dotenv()

        log_file = os.getenv("TRACECLEANER_LOG_FILE")
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=Path(log_file) if log_file else None,
            strict=_env_flag("TRACECLEANER_STRICT", "0"),
            output_dir=Path(os.getenv("TRACECLEANER_OUTPUT_DIR", "./cleaned")),
        )

    @property
    def debug(self) -> bool:
        return self.log_level.upper() == "DEBUG"

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
            "strict": self.strict,
            "output_dir": str(self.output_dir),
        }


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config
