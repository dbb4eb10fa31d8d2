"""Configuration management for timeslicr."""

from timeslicr.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from timeslicr.core.config.models import (
    AppConfig,
    ConfigBase,
    ExportConfig,
    LoggingConfig,
    TimelineConfig,
)

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_app_config",
    "configure_logging",
    # Models
    "AppConfig",
    "ConfigBase",
    "ExportConfig",
    "LoggingConfig",
    "TimelineConfig",
]
