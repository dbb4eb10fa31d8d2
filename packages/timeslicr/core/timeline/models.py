"""Timeline data models.

Two nesting levels share one interval shape:
- Section: top-level interval over normalized global time
- Segment: nested interval over normalized time of its owning section

All positions are fractions in [0, 1] of the enclosing span. Models are
frozen; the store replaces them with ``model_copy(update=...)``.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Boundary(str, Enum):
    """Which end of an interval an edit targets."""

    START = "start"
    END = "end"


class MoveDirection(str, Enum):
    """Direction of a one-step reorder in list order."""

    UP = "up"
    DOWN = "down"


class LabelKind(str, Enum):
    """Terminology slot used when naming new items."""

    PARENT = "parent"
    CHILD = "child"


class Interval(BaseModel):
    """A named fractional range within its parent's span.

    Attributes:
        id: Opaque identifier, unique within its list and never reassigned.
        name: Display name.
        start: Start position in [0, 1].
        end: End position in [start, 1].

    Example:
        >>> Interval(id="a", name="Intro", start=0.0, end=0.25).width
        0.25
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1, description="Opaque identifier")
    name: str = Field(default="", description="Display name")
    start: float = Field(..., ge=0.0, le=1.0, description="Start fraction [0,1]")
    end: float = Field(..., ge=0.0, le=1.0, description="End fraction [0,1]")

    @model_validator(mode="after")
    def _validate_ordered(self) -> Interval:
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")
        return self

    @property
    def width(self) -> float:
        """Fraction of the parent span covered by this interval."""
        return self.end - self.start


class Segment(Interval):
    """Nested interval; start/end are fractions of the owning section's span."""


class Section(Interval):
    """Top-level interval owning an ordered list of segments."""

    collapsed: bool = Field(default=False, description="Hide segments in the presentation")
    segments: list[Segment] = Field(default_factory=list, description="Ordered segments")

    def segment_index(self, segment_id: str) -> int:
        """Index of a segment by id, or -1 when absent."""
        for i, segment in enumerate(self.segments):
            if segment.id == segment_id:
                return i
        return -1


class TimelineLabels(BaseModel):
    """User-configurable terminology for the two nesting levels."""

    model_config = ConfigDict(frozen=True)

    parent: str = "Section"
    child: str = "Segment"

    def for_kind(self, kind: LabelKind) -> str:
        return self.parent if kind == LabelKind.PARENT else self.child
