"""Configuration management for RSS Reader."""

import os
from dataclasses import dataclass

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class ReaderConfig:
    """Runtime settings for a single reader invocation."""

    log_level: str = "WARNING"
    strict_exit: bool = False
    timeout: float | None = None


class Config:
    """Main configuration manager."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.log_level = os.getenv("RSS_READER_LOG_LEVEL", "WARNING")
        self.strict_exit = (
            os.getenv("RSS_READER_STRICT_EXIT", "").strip().lower() in TRUTHY
        )
        self.timeout = self._parse_timeout(os.getenv("RSS_READER_TIMEOUT", ""))

    @staticmethod
    def _parse_timeout(value: str) -> float | None:
        value = value.strip()
        if not value:
            return None
        try:
            timeout = float(value)
        except ValueError as e:
            raise ValueError(f"Invalid RSS_READER_TIMEOUT value: {value!r}") from e
        if timeout <= 0:
            raise ValueError(f"RSS_READER_TIMEOUT must be positive: {value!r}")
        return timeout

    def get_reader_config(
        self, log_level: str | None = None, strict_exit: bool | None = None
    ) -> ReaderConfig:
        """Get reader configuration, letting command-line values win."""
        return ReaderConfig(
            log_level=log_level or self.log_level,
            strict_exit=self.strict_exit if strict_exit is None else strict_exit,
            timeout=self.timeout,
        )
