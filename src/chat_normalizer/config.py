"""Parser settings, resolved from environment variables and defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

_LOGGER = logging.getLogger(__name__)

LINE_MODES = ("window", "lines")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class Config:
    """Runtime configuration, resolved from env vars and defaults."""

    # How multi-line header rules (iMessage, Slack, Telegram, SMS) are matched:
    # "window" lets them look ahead over the following lines,
    # "lines" classifies every line in isolation so they never match.
    line_mode: str = field(
        default_factory=lambda: os.environ.get("CHATNORM_LINE_MODE", "window")
    )

    # Non-empty lines sampled by detect_format()
    detect_sample_lines: int = field(
        default_factory=lambda: _env_int("CHATNORM_DETECT_LINES", 5)
    )

    # Used by the CLI only; the library never configures logging handlers
    log_level: str = field(
        default_factory=lambda: os.environ.get("CHATNORM_LOG_LEVEL", "WARNING")
    )

    def __post_init__(self) -> None:
        self.line_mode = self.line_mode.strip().lower()
        if self.line_mode not in LINE_MODES:
            raise ValueError(
                f"Unknown line mode: {self.line_mode!r}. Use 'window' or 'lines'."
            )
        if self.detect_sample_lines < 1:
            raise ValueError(
                f"detect_sample_lines must be positive, got {self.detect_sample_lines}"
            )
        self.log_level = self.log_level.strip().upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {self.log_level!r}. Use one of {', '.join(LOG_LEVELS)}."
            )

    @property
    def windowed(self) -> bool:
        return self.line_mode == "window"


def load_config() -> Config:
    """Build a Config from the environment, falling back to defaults on invalid values."""
    try:
        return Config()
    except ValueError as e:
        _LOGGER.warning("Ignoring invalid environment settings: %s", e)
        return Config(line_mode="window", detect_sample_lines=5, log_level="WARNING")
