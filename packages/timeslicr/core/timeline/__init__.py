"""Timeline domain: interval models, pure interval operations, and the store."""

from __future__ import annotations

from timeslicr.core.timeline.derived import (
    IntervalSeconds,
    format_seconds,
    section_duration_seconds,
    section_seconds,
    segment_seconds,
)
from timeslicr.core.timeline.edits import (
    EditCommand,
    Rename,
    SetEnd,
    SetEndSeconds,
    SetStart,
    SetStartSeconds,
    apply_edit,
    parse_edit,
)
from timeslicr.core.timeline.intervals import (
    MIN_REORDER_DURATION,
    MIN_WIDTH,
    constrain_boundary_edit,
    reorder_and_recalculate,
)
from timeslicr.core.timeline.models import (
    Boundary,
    Interval,
    LabelKind,
    MoveDirection,
    Section,
    Segment,
    TimelineLabels,
)
from timeslicr.core.timeline.store import TimelineSnapshot, TimelineStore, demo_sections

__all__ = [
    "MIN_REORDER_DURATION",
    "MIN_WIDTH",
    "Boundary",
    "EditCommand",
    "Interval",
    "IntervalSeconds",
    "LabelKind",
    "MoveDirection",
    "Rename",
    "Section",
    "Segment",
    "SetEnd",
    "SetEndSeconds",
    "SetStart",
    "SetStartSeconds",
    "TimelineLabels",
    "TimelineSnapshot",
    "TimelineStore",
    "apply_edit",
    "constrain_boundary_edit",
    "demo_sections",
    "format_seconds",
    "parse_edit",
    "reorder_and_recalculate",
    "section_duration_seconds",
    "section_seconds",
    "segment_seconds",
]
