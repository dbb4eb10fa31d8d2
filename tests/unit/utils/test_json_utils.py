"""Tests for JSON utility functions."""

from __future__ import annotations

import json

import pytest

from timeslicr.core.utils.json import read_json


def test_read_json(tmp_path):
    """A JSON file is parsed into a dict."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"timeline": {"total_duration_s": 90}}), encoding="utf-8")

    assert read_json(path) == {"timeline": {"total_duration_s": 90}}


def test_read_json_accepts_str_path(tmp_path):
    """String paths work like Path objects."""
    path = tmp_path / "config.json"
    path.write_text("{}", encoding="utf-8")

    assert read_json(str(path)) == {}


def test_read_json_missing_file(tmp_path):
    """A missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        read_json(tmp_path / "missing.json")


def test_read_json_invalid_content(tmp_path):
    """Malformed JSON raises JSONDecodeError."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        read_json(path)
