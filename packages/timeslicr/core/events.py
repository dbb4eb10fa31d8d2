"""Input events for a timeline session.

Each event is a pydantic model tagged by ``type`` so a list of raw
mappings (e.g. an event script file) validates straight into typed events.
Section and segment variants are separate types; segment events carry the
owning ``section_id``.

Example script (YAML)::

    events:
      - type: add_section
        name: Intro
      - type: update_section
        section_id: intro
        edit: {type: set_end, value: 0.3}
      - type: set_total_duration
        seconds: 90
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from timeslicr.core.config.loader import load_config
from timeslicr.core.timeline.edits import EditCommand
from timeslicr.core.timeline.intervals import coerce_number
from timeslicr.core.timeline.models import LabelKind, MoveDirection


class _Event(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class AddSection(_Event):
    type: Literal["add_section"] = "add_section"
    name: str | None = None
    id: str | None = Field(default=None, description="Requested id (generated if absent)")


class RemoveSection(_Event):
    type: Literal["remove_section"] = "remove_section"
    section_id: str


class MoveSection(_Event):
    type: Literal["move_section"] = "move_section"
    index: int
    direction: MoveDirection


class UpdateSection(_Event):
    type: Literal["update_section"] = "update_section"
    section_id: str
    edit: EditCommand


class ToggleCollapse(_Event):
    type: Literal["toggle_collapse"] = "toggle_collapse"
    section_id: str


class AddSegment(_Event):
    type: Literal["add_segment"] = "add_segment"
    section_id: str
    name: str | None = None
    id: str | None = Field(default=None, description="Requested id (generated if absent)")


class RemoveSegment(_Event):
    type: Literal["remove_segment"] = "remove_segment"
    section_id: str
    segment_id: str


class MoveSegment(_Event):
    type: Literal["move_segment"] = "move_segment"
    section_id: str
    index: int
    direction: MoveDirection


class UpdateSegment(_Event):
    type: Literal["update_segment"] = "update_segment"
    section_id: str
    segment_id: str
    edit: EditCommand


class SetOverlapPrevention(_Event):
    type: Literal["set_overlap_prevention"] = "set_overlap_prevention"
    enabled: bool


class SetTotalDuration(_Event):
    """Total duration in seconds; malformed input becomes 0."""

    type: Literal["set_total_duration"] = "set_total_duration"
    seconds: float

    @field_validator("seconds", mode="before")
    @classmethod
    def _coerce_seconds(cls, v: Any) -> float:
        return coerce_number(v)


class SetLabel(_Event):
    type: Literal["set_label"] = "set_label"
    kind: LabelKind
    text: str


TimelineEvent = Annotated[
    AddSection
    | RemoveSection
    | MoveSection
    | UpdateSection
    | ToggleCollapse
    | AddSegment
    | RemoveSegment
    | MoveSegment
    | UpdateSegment
    | SetOverlapPrevention
    | SetTotalDuration
    | SetLabel,
    Field(discriminator="type"),
]

timeline_event_adapter: TypeAdapter[TimelineEvent] = TypeAdapter(TimelineEvent)


def parse_event(data: dict[str, Any]) -> TimelineEvent:
    """Validate one raw mapping into a typed event."""
    return timeline_event_adapter.validate_python(data)


class EventScript(BaseModel):
    """An ordered list of events to replay against a session."""

    model_config = ConfigDict(extra="forbid")

    events: list[TimelineEvent] = Field(default_factory=list)


def load_event_script(path: str | Path) -> EventScript:
    """Load an event script from a JSON or YAML file.

    Args:
        path: Path to the script (.json, .yaml, or .yml)

    Returns:
        Validated EventScript

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is unsupported or the content is not valid JSON/YAML
        ValidationError: If an event is malformed
    """
    return EventScript.model_validate(load_config(path))
