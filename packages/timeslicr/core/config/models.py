"""Configuration models for timeslicr."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class ConfigBase(BaseModel):
    """Base class for all timeslicr configurations.

    Provides common functionality for loading from files with defaults.
    Subclasses must implement default_path() to specify their default location.
    """

    model_config = ConfigDict(extra="ignore")  # Forward compatibility

    @classmethod
    def default_path(cls) -> Path:
        """Return the default config file path for this config type.

        Returns:
            Path to the default config file
        """
        raise NotImplementedError(f"{cls.__name__} must implement default_path()")

    @classmethod
    def load_or_default(cls, path: Path | str | None = None) -> Self:
        """Load config from path, falling back to defaults when the file is absent.

        Args:
            path: Path to config file, or None to use default

        Returns:
            Loaded config instance

        Raises:
            ValueError: If the file content is not valid JSON/YAML
            ValidationError: If config is invalid
        """
        from timeslicr.core.config.loader import load_config

        if path is None:
            path = cls.default_path()
        if not Path(path).exists():
            return cls()
        raw = load_config(path)
        return cls.model_validate(raw)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")


class TimelineConfig(BaseModel):
    """Initial timeline settings for a session.

    Example:
        >>> cfg = TimelineConfig(total_duration_s=90.0, parent_label="Chapter")
        >>> cfg.child_label
        'Segment'
    """

    model_config = ConfigDict(extra="forbid")

    total_duration_s: float = Field(
        default=60.0, ge=0.0, description="Total duration the sections divide (seconds)"
    )
    prevent_overlap: bool = Field(
        default=True, description="Clamp boundary edits against list neighbours"
    )
    parent_label: str = Field(default="Section", description="Label used to name new sections")
    child_label: str = Field(default="Segment", description="Label used to name new segments")
    section_default_width: float = Field(
        default=0.1, gt=0.0, le=1.0, description="Width of a newly added section"
    )
    segment_default_width: float = Field(
        default=0.2, gt=0.0, le=1.0, description="Width of a newly added segment"
    )
    seed_demo: bool = Field(
        default=False, description="Start the session with the demo timeline"
    )


class ExportConfig(BaseModel):
    """Summary export configuration."""

    copy_feedback_seconds: float = Field(
        default=2.0, ge=0.0, description="How long the 'copied' flag stays set after a copy"
    )


class AppConfig(ConfigBase):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    timeline: TimelineConfig = TimelineConfig()
    export: ExportConfig = ExportConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("config.json")
