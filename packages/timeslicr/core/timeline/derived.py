"""Seconds values derived from fractional ranges.

The store never holds seconds. Sections are scaled by the total duration,
segments by their section's duration; both are computed on demand for
display and export.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from timeslicr.core.timeline.models import Interval, Section, Segment


class IntervalSeconds(BaseModel):
    """Absolute timing of an interval within its parent span.

    Example:
        >>> t = IntervalSeconds(start_s=15.0, end_s=48.0)
        >>> t.duration_s
        33.0
    """

    model_config = ConfigDict(frozen=True)

    start_s: float
    end_s: float

    @property
    def duration_s(self) -> float:
        return max(0.0, self.end_s - self.start_s)


def span_seconds(interval: Interval, parent_span_s: float) -> float:
    """Length of an interval in seconds, never negative."""
    return max(0.0, (interval.end - interval.start) * parent_span_s)


def interval_seconds(interval: Interval, parent_span_s: float) -> IntervalSeconds:
    """Scale an interval's fractions by its parent's span."""
    return IntervalSeconds(
        start_s=interval.start * parent_span_s,
        end_s=interval.end * parent_span_s,
    )


def section_duration_seconds(section: Section, total_duration_s: float) -> float:
    """Seconds covered by a section: (end - start) * total duration."""
    return span_seconds(section, total_duration_s)


def section_seconds(section: Section, total_duration_s: float) -> IntervalSeconds:
    """Section timing relative to the start of the whole timeline."""
    return interval_seconds(section, total_duration_s)


def segment_seconds(segment: Segment, section_duration_s: float) -> IntervalSeconds:
    """Segment timing relative to the start of its section.

    Example:
        >>> seg = Segment(id="s", start=0.0, end=0.5)
        >>> segment_seconds(seg, 33.0).end_s
        16.5
    """
    return interval_seconds(segment, section_duration_s)


def format_seconds(seconds: float, decimals: int = 2) -> str:
    """Render a seconds value for display (rounded here, never stored)."""
    return f"{seconds:.{decimals}f}"
