"""
Infrastructure - Configuration and logging.
"""

from .config import PipelineConfig
from .logging import LoggerAdapter, configure_logging, get_logger, setup_logging

__all__ = [
    "PipelineConfig",
    "LoggerAdapter",
    "configure_logging",
    "get_logger",
    "setup_logging",
]
