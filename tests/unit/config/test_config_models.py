"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
import pytest

from timeslicr.core.config.models import (
    AppConfig,
    ConfigBase,
    ExportConfig,
    LoggingConfig,
    TimelineConfig,
)


class TestTimelineConfig:
    """Tests for timeline settings."""

    def test_defaults(self):
        """Defaults match a fresh editing session."""
        cfg = TimelineConfig()
        assert cfg.total_duration_s == 60.0
        assert cfg.prevent_overlap is True
        assert (cfg.parent_label, cfg.child_label) == ("Section", "Segment")
        assert cfg.section_default_width == 0.1
        assert cfg.segment_default_width == 0.2
        assert cfg.seed_demo is False

    def test_negative_duration_rejected(self):
        """Total duration cannot be negative."""
        with pytest.raises(ValidationError):
            TimelineConfig(total_duration_s=-5)

    @pytest.mark.parametrize("width", [0.0, -0.1, 1.5])
    def test_default_width_bounds(self, width):
        """Default widths must be in (0, 1]."""
        with pytest.raises(ValidationError):
            TimelineConfig(section_default_width=width)

    def test_unknown_key_rejected(self):
        """Typos in timeline settings are errors."""
        with pytest.raises(ValidationError):
            TimelineConfig(total_duration=60)  # type: ignore[call-arg]


class TestLoggingConfig:
    """Tests for logging settings."""

    def test_defaults(self):
        """Text logging at INFO to stdout by default."""
        cfg = LoggingConfig()
        assert cfg.level == "INFO"
        assert cfg.structured is False
        assert cfg.filename is None

    def test_invalid_level(self):
        """Unknown level names are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")


class TestAppConfig:
    """Tests for the top-level config."""

    def test_defaults(self):
        """Sub-configs default to their own defaults."""
        cfg = AppConfig()
        assert cfg.timeline == TimelineConfig()
        assert cfg.export == ExportConfig()
        assert cfg.export.copy_feedback_seconds == 2.0

    def test_unknown_top_level_keys_ignored(self):
        """Unknown top-level sections are ignored."""
        cfg = AppConfig.model_validate({"theme": "dark", "timeline": {"seed_demo": True}})
        assert cfg.timeline.seed_demo is True

    def test_default_path(self):
        """The default config file is config.json."""
        assert AppConfig.default_path() == Path("config.json")

    def test_base_requires_default_path(self):
        """ConfigBase subclasses must provide a default path."""
        with pytest.raises(NotImplementedError):
            ConfigBase.default_path()
