"""Tests for timeline data models."""

from __future__ import annotations

from pydantic import ValidationError
import pytest

from timeslicr.core.timeline.models import (
    Interval,
    LabelKind,
    MoveDirection,
    Section,
    Segment,
    TimelineLabels,
)


class TestInterval:
    """Tests for the shared interval shape."""

    def test_valid_interval(self):
        """A range inside [0, 1] with start <= end is accepted."""
        item = Interval(id="a", name="Intro", start=0.0, end=0.25)
        assert item.start == 0.0
        assert item.end == 0.25
        assert item.width == pytest.approx(0.25)

    def test_zero_width_allowed(self):
        """start == end is a valid degenerate range."""
        item = Interval(id="a", start=1.0, end=1.0)
        assert item.width == 0.0

    def test_start_out_of_range(self):
        """start outside [0, 1] cannot be constructed."""
        with pytest.raises(ValidationError):
            Interval(id="a", start=-0.1, end=0.5)

    def test_end_out_of_range(self):
        """end outside [0, 1] cannot be constructed."""
        with pytest.raises(ValidationError):
            Interval(id="a", start=0.0, end=1.1)

    def test_end_before_start(self):
        """end < start is rejected."""
        with pytest.raises(ValidationError, match="must be >= start"):
            Interval(id="a", start=0.6, end=0.5)

    def test_empty_id_rejected(self):
        """Ids must be non-empty."""
        with pytest.raises(ValidationError):
            Interval(id="", start=0.0, end=0.5)

    def test_frozen(self):
        """Intervals cannot be mutated in place."""
        item = Interval(id="a", start=0.0, end=0.5)
        with pytest.raises(ValidationError):
            item.start = 0.1  # type: ignore[misc]

    def test_extra_fields_forbidden(self):
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Interval(id="a", start=0.0, end=0.5, color="red")  # type: ignore[call-arg]


class TestSection:
    """Tests for sections and their segments."""

    def test_defaults(self):
        """New sections are expanded and have no segments."""
        section = Section(id="s", name="Intro", start=0.0, end=0.25)
        assert section.collapsed is False
        assert section.segments == []

    def test_segment_index(self):
        """Segments are found by id; unknown ids give -1."""
        section = Section(
            id="s",
            start=0.0,
            end=0.5,
            segments=[
                Segment(id="x", start=0.0, end=0.2),
                Segment(id="y", start=0.2, end=1.0),
            ],
        )
        assert section.segment_index("y") == 1
        assert section.segment_index("missing") == -1

    def test_model_copy_keeps_identity(self):
        """Updating timing keeps id, name and segments."""
        section = Section(
            id="s", name="Intro", start=0.0, end=0.25, segments=[Segment(id="x", start=0, end=1)]
        )
        moved = section.model_copy(update={"start": 0.5, "end": 0.75})
        assert moved.id == "s"
        assert moved.name == "Intro"
        assert moved.segments == section.segments


class TestTimelineLabels:
    """Tests for configurable terminology."""

    def test_defaults(self):
        """Default labels are Section and Segment."""
        labels = TimelineLabels()
        assert labels.for_kind(LabelKind.PARENT) == "Section"
        assert labels.for_kind(LabelKind.CHILD) == "Segment"

    def test_for_kind_accepts_string_value(self):
        """The enum's string value selects the same label."""
        labels = TimelineLabels(parent="Chapter", child="Scene")
        assert labels.for_kind("child") == "Scene"  # type: ignore[arg-type]


def test_move_direction_values():
    """Directions parse from their string values."""
    assert MoveDirection("up") is MoveDirection.UP
    assert MoveDirection("down") is MoveDirection.DOWN
