"""Logging setup for the policy pipeline."""

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import PipelineConfig

ROOT_LOGGER_NAME = "aicall"


def setup_logging(
    level: str = "INFO",
    format_string: str | None = None,
    logger_name: str = ROOT_LOGGER_NAME,
) -> logging.Logger:
    """
    Configure the ``aicall`` logger with a stdout handler.

    Calling this more than once changes the level but never adds a second
    handler.

    Example:
        setup_logging(level="DEBUG")
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger(logger_name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)

    return logger


def configure_logging(config: "PipelineConfig", logger_name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Configure the ``aicall`` logger from a PipelineConfig.

    Example:
        configure_logging(PipelineConfig.from_env())
    """
    return setup_logging(level=config.log_level, format_string=config.log_format, logger_name=logger_name)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``aicall`` namespace."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that tags every record with the call it belongs to.

    The context is merged into ``extra`` and rendered as a message prefix,
    so plain formatters show it too.

    Example:
        call_logger = LoggerAdapter(get_logger("pipeline"), {"provider": "openai", "model": "gpt-4o"})
        call_logger.info("Applying request policies")
        # [provider=openai model=gpt-4o] Applying request policies
    """

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.extra)
        kwargs["extra"] = extra

        tags = " ".join(f"{key}={value}" for key, value in self.extra.items() if value)
        if tags:
            msg = f"[{tags}] {msg}"
        return msg, kwargs
