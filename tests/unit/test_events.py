"""Tests for input events and event scripts."""

from __future__ import annotations

import json

from pydantic import ValidationError
import pytest

from timeslicr.core.events import (
    AddSection,
    AddSegment,
    EventScript,
    MoveSection,
    SetLabel,
    SetTotalDuration,
    UpdateSegment,
    load_event_script,
    parse_event,
)
from timeslicr.core.timeline.edits import SetEndSeconds
from timeslicr.core.timeline.models import LabelKind, MoveDirection

SCRIPT_YAML = """\
events:
  - type: add_section
    name: Intro
    id: intro
  - type: add_segment
    section_id: intro
    name: Fade In
  - type: update_section
    section_id: intro
    edit: {type: set_end, value: 0.3}
  - type: set_total_duration
    seconds: "90"
"""


class TestParseEvent:
    """Tests for validating single events."""

    def test_add_section_defaults(self):
        """Add events default to a generated name and id."""
        event = parse_event({"type": "add_section"})
        assert event == AddSection()
        assert event.name is None

    def test_segment_event_carries_section(self):
        """Segment events carry the owning section id."""
        event = parse_event({"type": "add_segment", "section_id": "intro"})
        assert isinstance(event, AddSegment)
        assert event.section_id == "intro"

    def test_nested_edit(self):
        """Update events validate their nested edit command."""
        event = parse_event(
            {
                "type": "update_segment",
                "section_id": "intro",
                "segment_id": "fade",
                "edit": {"type": "set_end_seconds", "value": "3.5"},
            }
        )
        assert isinstance(event, UpdateSegment)
        assert event.edit == SetEndSeconds(value=3.5)

    def test_move_direction(self):
        """Move events parse their direction."""
        event = parse_event({"type": "move_section", "index": 1, "direction": "up"})
        assert event == MoveSection(index=1, direction=MoveDirection.UP)

    def test_total_duration_coerced(self):
        """Malformed durations become 0 rather than failing validation."""
        assert parse_event({"type": "set_total_duration", "seconds": "abc"}).seconds == 0.0
        assert SetTotalDuration(seconds="45").seconds == 45.0  # type: ignore[arg-type]

    def test_set_label(self):
        """Label events parse their kind."""
        event = parse_event({"type": "set_label", "kind": "parent", "text": "Chapter"})
        assert event == SetLabel(kind=LabelKind.PARENT, text="Chapter")

    def test_unknown_type(self):
        """Unknown event types fail validation."""
        with pytest.raises(ValidationError):
            parse_event({"type": "explode"})

    def test_missing_field(self):
        """Required fields are enforced."""
        with pytest.raises(ValidationError):
            parse_event({"type": "remove_section"})

    def test_extra_field(self):
        """Unexpected fields are rejected."""
        with pytest.raises(ValidationError):
            parse_event({"type": "toggle_collapse", "section_id": "a", "open": True})


class TestLoadEventScript:
    """Tests for loading event scripts from files."""

    def test_yaml_script(self, tmp_path):
        """YAML scripts load into typed events in order."""
        path = tmp_path / "events.yaml"
        path.write_text(SCRIPT_YAML, encoding="utf-8")

        script = load_event_script(path)

        assert [e.type for e in script.events] == [
            "add_section",
            "add_segment",
            "update_section",
            "set_total_duration",
        ]
        assert script.events[-1].seconds == 90.0

    def test_json_script(self, tmp_path):
        """JSON scripts are supported."""
        path = tmp_path / "events.json"
        path.write_text(json.dumps({"events": [{"type": "add_section"}]}), encoding="utf-8")

        assert load_event_script(path) == EventScript(events=[AddSection()])

    def test_empty_yaml(self, tmp_path):
        """An empty file is an empty script."""
        path = tmp_path / "events.yml"
        path.write_text("", encoding="utf-8")

        assert load_event_script(path).events == []

    def test_missing_file(self, tmp_path):
        """A missing script raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_event_script(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Unparseable YAML raises ValueError."""
        path = tmp_path / "events.yaml"
        path.write_text("events: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_event_script(path)

    def test_invalid_event(self, tmp_path):
        """A malformed event fails validation."""
        path = tmp_path / "events.json"
        path.write_text(json.dumps({"events": [{"type": "move_section"}]}), encoding="utf-8")

        with pytest.raises(ValidationError):
            load_event_script(path)
