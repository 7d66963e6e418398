"""Configuration for the policy pipeline."""

import logging
import os
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """
    Settings used when building the default policy pipeline.

    Values can be provided directly or loaded from environment variables.

    Attributes:
        default_timeout_seconds: Timeout applied when a request has none
        min_timeout_seconds: Lowest accepted timeout
        max_timeout_seconds: Highest accepted timeout
        log_level: Logging level for the ``aicall`` logger
        log_format: Format string for log records

    Example:
        # Defaults: 120s timeout clamped to [1, 600]
        config = PipelineConfig()

        # Load from environment
        #   export AICALL_DEFAULT_TIMEOUT=60
        #   export AICALL_MAX_TIMEOUT=300
        config = PipelineConfig.from_env()
    """

    # Timeouts
    default_timeout_seconds: int = 120
    min_timeout_seconds: int = 1
    max_timeout_seconds: int = 600

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def __post_init__(self) -> None:
        if self.min_timeout_seconds > self.max_timeout_seconds:
            raise ValueError(
                f"min_timeout_seconds ({self.min_timeout_seconds}) exceeds "
                f"max_timeout_seconds ({self.max_timeout_seconds})"
            )

    @classmethod
    def from_env(cls, prefix: str = "AICALL_") -> "PipelineConfig":
        """
        Load configuration from environment variables.

        Reads ``<prefix>DEFAULT_TIMEOUT``, ``<prefix>MIN_TIMEOUT``,
        ``<prefix>MAX_TIMEOUT`` and ``<prefix>LOG_LEVEL``. Values that are
        not integers fall back to the defaults.

        Args:
            prefix: Prefix for environment variables

        Returns:
            PipelineConfig with values from the environment
        """

        def get_env(key: str, default: str | None = None) -> str | None:
            return os.environ.get(f"{prefix}{key}", default)

        def get_int(key: str, default: int) -> int:
            value = get_env(key)
            if value is None or not value.strip():
                return default
            try:
                return int(value)
            except ValueError:
                logger.warning(f"Ignoring {prefix}{key}={value!r}: not an integer, using {default}")
                return default

        return cls(
            default_timeout_seconds=get_int("DEFAULT_TIMEOUT", cls.default_timeout_seconds),
            min_timeout_seconds=get_int("MIN_TIMEOUT", cls.min_timeout_seconds),
            max_timeout_seconds=get_int("MAX_TIMEOUT", cls.max_timeout_seconds),
            log_level=get_env("LOG_LEVEL", cls.log_level),
        )

    def with_overrides(self, **kwargs: Any) -> "PipelineConfig":
        """
        Create a new config with overrides.

        Args:
            **kwargs: Values to override

        Returns:
            New PipelineConfig with overrides applied
        """
        return PipelineConfig(
            default_timeout_seconds=kwargs.get("default_timeout_seconds", self.default_timeout_seconds),
            min_timeout_seconds=kwargs.get("min_timeout_seconds", self.min_timeout_seconds),
            max_timeout_seconds=kwargs.get("max_timeout_seconds", self.max_timeout_seconds),
            log_level=kwargs.get("log_level", self.log_level),
            log_format=kwargs.get("log_format", self.log_format),
        )
