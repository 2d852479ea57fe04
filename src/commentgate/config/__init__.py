"""Config module exports."""

from commentgate.config.loader import config_files, load_config
from commentgate.config.models import (
    CommentGateConfig,
    DetectionConfig,
    FiltersConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "config_files",
    "load_config",
    "CommentGateConfig",
    "DetectionConfig",
    "FiltersConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
