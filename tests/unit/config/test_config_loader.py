"""Tests for configuration loading."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError
import pytest

from timeslicr.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from timeslicr.core.config.models import AppConfig, LoggingConfig
from timeslicr.core.utils.logging import StructuredJSONFormatter


class TestDetectFormat:
    """Tests for format detection."""

    @pytest.mark.parametrize(
        ("name", "fmt"),
        [("config.json", "json"), ("config.yaml", "yaml"), ("config.YML", "yaml")],
    )
    def test_known_formats(self, name, fmt):
        """Extensions map to formats case-insensitively."""
        assert detect_format(name) == fmt

    def test_unknown_format(self):
        """Other extensions are rejected."""
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("config.toml")


class TestLoadConfig:
    """Tests for raw config loading."""

    def test_json(self, tmp_path):
        """JSON files load into dicts."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"timeline": {"total_duration_s": 90}}), encoding="utf-8")
        assert load_config(path) == {"timeline": {"total_duration_s": 90}}

    def test_yaml(self, tmp_path):
        """YAML files load into dicts."""
        path = tmp_path / "config.yaml"
        path.write_text("timeline:\n  parent_label: Chapter\n", encoding="utf-8")
        assert load_config(path) == {"timeline": {"parent_label": "Chapter"}}

    def test_empty_yaml(self, tmp_path):
        """Empty YAML is an empty mapping."""
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}

    def test_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="does not exist"):
            load_config(tmp_path / "config.json")

    def test_invalid_json(self, tmp_path):
        """Malformed JSON is wrapped in ValueError."""
        path = tmp_path / "config.json"
        path.write_text("{broken", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON") as exc_info:
            load_config(path)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_non_mapping_top_level(self, tmp_path):
        """Top-level lists are rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Expected a mapping"):
            load_config(path)


class TestLoadAppConfig:
    """Tests for validated app config loading."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """Without a file the defaults are returned."""
        assert load_app_config(tmp_path / "config.json") == AppConfig()

    def test_overrides(self, tmp_path):
        """Values from the file override defaults."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "logging:\n  level: DEBUG\n"
            "timeline:\n  total_duration_s: 120\n  prevent_overlap: false\n"
            "export:\n  copy_feedback_seconds: 3\n",
            encoding="utf-8",
        )
        config = load_app_config(path)

        assert config.logging.level == "DEBUG"
        assert config.timeline.total_duration_s == 120.0
        assert config.timeline.prevent_overlap is False
        assert config.timeline.child_label == "Segment"
        assert config.export.copy_feedback_seconds == 3.0

    def test_invalid_values(self, tmp_path):
        """Invalid values raise ValidationError."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"timeline": {"total_duration_s": -1}}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_app_config(path)

    def test_load_or_default(self, tmp_path):
        """ConfigBase.load_or_default matches load_app_config."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"timeline": {"seed_demo": True}}), encoding="utf-8")
        assert AppConfig.load_or_default(path) == load_app_config(path)
        assert AppConfig.load_or_default(tmp_path / "nope.json") == AppConfig()


class TestConfigureLogging:
    """Tests for logging setup from app config."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers = root.handlers[:]
        level = root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_defaults(self):
        """Default config installs text logging at INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_structured_from_config(self, tmp_path):
        """Logging options are taken from the config."""
        log_file = tmp_path / "timeslicr.jsonl"
        config = AppConfig(
            logging=LoggingConfig(level="WARNING", structured=True, filename=str(log_file))
        )
        configure_logging(config)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, StructuredJSONFormatter)
