"""Plain-text timeline summary.

Layout::

    TOTAL DURATION: 60s

    1. [Section] Intro
       Range: 0-0.25 (0.00s - 15.00s)
       Duration: 15.00s
         - [Segment] Fade In: 0-0.2 (0.00s - 3.00s)

Seconds are rounded to 2 decimals; segment seconds are scaled by the
section's rounded duration as printed. Fractions print as stored, with
integral values shown without a decimal point.
"""

from __future__ import annotations

from timeslicr.core.timeline.derived import format_seconds
from timeslicr.core.timeline.models import Section, TimelineLabels
from timeslicr.core.timeline.store import TimelineSnapshot, TimelineStore


def format_number(value: float) -> str:
    """Shortest text for a stored number.

    Example:
        >>> format_number(0.0), format_number(0.25), format_number(60.0)
        ('0', '0.25', '60')
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _section_block(index: int, section: Section, total_s: float, labels: TimelineLabels) -> str:
    start_s = format_seconds(section.start * total_s)
    end_s = format_seconds(section.end * total_s)
    duration_s = format_seconds(float(end_s) - float(start_s))

    lines = [
        f"{index}. [{labels.parent}] {section.name}",
        f"   Range: {format_number(section.start)}-{format_number(section.end)}"
        f" ({start_s}s - {end_s}s)",
        f"   Duration: {duration_s}s",
    ]

    section_s = float(duration_s)
    for segment in section.segments:
        seg_start_s = format_seconds(segment.start * section_s)
        seg_end_s = format_seconds(segment.end * section_s)
        lines.append(
            f"     - [{labels.child}] {segment.name}: "
            f"{format_number(segment.start)}-{format_number(segment.end)}"
            f" ({seg_start_s}s - {seg_end_s}s)"
        )

    return "\n".join(lines) + "\n\n"


def build_summary(timeline: TimelineStore | TimelineSnapshot) -> str:
    """Render the whole timeline as the copyable text summary.

    Args:
        timeline: Store or snapshot to render

    Returns:
        Summary text; every section block ends with a blank line
    """
    total_s = timeline.total_duration_s
    text = f"TOTAL DURATION: {format_number(total_s)}s\n\n"
    for i, section in enumerate(timeline.sections, start=1):
        text += _section_block(i, section, total_s, timeline.labels)
    return text
