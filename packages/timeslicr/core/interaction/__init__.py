"""Pointer interaction surfaces."""

from __future__ import annotations

from timeslicr.core.interaction.range_drag import (
    DragHandle,
    DragPhase,
    RangeDragController,
    TrackGeometry,
    bind_section_range,
    bind_segment_range,
)

__all__ = [
    "DragHandle",
    "DragPhase",
    "RangeDragController",
    "TrackGeometry",
    "bind_section_range",
    "bind_segment_range",
]
