"""
Application configuration.

Defaults come from ``COURTSIDE_*`` environment variables; command-line
flags are applied on top by the entry point. The UI receives the finished
object and never reads the environment itself.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from courtside.core.badges import DEFAULT_BADGE_LIMIT
from courtside.ui.constants import DEFAULT_CARD_WIDTH


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() in ("1", "true", "yes")


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except ValueError:
        return default


@dataclass
class AppConfig:
    """Settings for the client, the refresh cycle and the display."""

    # Data
    mock: bool = False
    timeout: float = field(default_factory=lambda: _env_float("COURTSIDE_TIMEOUT", 10.0))
    reload_seconds: float = field(default_factory=lambda: _env_float("COURTSIDE_RELOAD_SECONDS", 10.0))

    # Display
    no_decoration: bool = field(default_factory=lambda: _env_flag("COURTSIDE_NO_DECORATION"))
    badges: bool = field(default_factory=lambda: _env_flag("COURTSIDE_BADGES"))
    badge_limit: int = field(default_factory=lambda: _env_int("COURTSIDE_BADGE_LIMIT", DEFAULT_BADGE_LIMIT))
    card_width: int = field(default_factory=lambda: _env_int("COURTSIDE_CARD_WIDTH", DEFAULT_CARD_WIDTH))

    # Logging
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("COURTSIDE_LOG_FILE") or None)
    log_level: str = field(default_factory=lambda: os.getenv("COURTSIDE_LOG_LEVEL", "WARNING").upper())

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.reload_seconds <= 0:
            errors.append("reload interval must be positive")
        if self.timeout <= 0:
            errors.append("timeout must be positive")
        if self.badge_limit < 0:
            errors.append("badge limit must not be negative")
        if self.card_width < 3:
            errors.append("card width must be at least 3")
        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"unknown log level: {self.log_level}")
        return errors
