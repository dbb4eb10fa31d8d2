"""Edit commands for a single interval.

Each command names the field and the unit it targets, so no caller ever
branches on field-name strings:

- SetStart / SetEnd: fractional value of the enclosing span
- SetStartSeconds / SetEndSeconds: absolute seconds within the enclosing span
- Rename: new display name

``apply_edit`` resolves a command against an item in its list.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Annotated, Any, Literal, TypeVar, assert_never

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from timeslicr.core.timeline.intervals import (
    coerce_number,
    constrain_boundary_edit,
    neighbours,
    seconds_to_fraction,
)
from timeslicr.core.timeline.models import Boundary, Interval

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Interval)


class _NumericEdit(BaseModel):
    """Base for edits carrying a number; malformed input becomes 0."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    value: float

    @field_validator("value", mode="before")
    @classmethod
    def _coerce_value(cls, v: Any) -> float:
        return coerce_number(v)


class SetStart(_NumericEdit):
    """Set the start boundary to a fraction of the enclosing span."""

    type: Literal["set_start"] = "set_start"


class SetEnd(_NumericEdit):
    """Set the end boundary to a fraction of the enclosing span."""

    type: Literal["set_end"] = "set_end"


class SetStartSeconds(_NumericEdit):
    """Set the start boundary in seconds within the enclosing span."""

    type: Literal["set_start_seconds"] = "set_start_seconds"


class SetEndSeconds(_NumericEdit):
    """Set the end boundary in seconds within the enclosing span."""

    type: Literal["set_end_seconds"] = "set_end_seconds"


class Rename(BaseModel):
    """Replace the display name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["rename"] = "rename"
    name: str


EditCommand = Annotated[
    SetStart | SetEnd | SetStartSeconds | SetEndSeconds | Rename,
    Field(discriminator="type"),
]

edit_command_adapter: TypeAdapter[EditCommand] = TypeAdapter(EditCommand)


def parse_edit(data: dict[str, Any]) -> EditCommand:
    """Validate a raw mapping (e.g. from an event script) into an edit command.

    Example:
        >>> parse_edit({"type": "set_end_seconds", "value": "12.5"})
        SetEndSeconds(value=12.5, type='set_end_seconds')
    """
    return edit_command_adapter.validate_python(data)


def apply_edit(
    items: Sequence[T],
    index: int,
    command: EditCommand,
    *,
    span_s: float,
    prevent_overlap: bool,
) -> T:
    """Apply an edit command to items[index] and return the updated item.

    Boundary edits go through ``constrain_boundary_edit``; only the edited
    boundary changes. Seconds values are converted with the enclosing span
    as it is at the time of the edit.

    Args:
        items: The list the item belongs to, in order
        index: Position of the item being edited
        command: Edit to apply
        span_s: Length of the enclosing span in seconds
        prevent_overlap: Clamp against list neighbours

    Returns:
        Updated copy of the item (the same object for a no-op rename)
    """
    item = items[index]

    match command:
        case Rename(name=name):
            if name == item.name:
                return item
            return item.model_copy(update={"name": name})
        case SetStart(value=value):
            return _apply_boundary(items, index, Boundary.START, value, prevent_overlap)
        case SetEnd(value=value):
            return _apply_boundary(items, index, Boundary.END, value, prevent_overlap)
        case SetStartSeconds(value=seconds):
            fraction = seconds_to_fraction(seconds, span_s)
            return _apply_boundary(items, index, Boundary.START, fraction, prevent_overlap)
        case SetEndSeconds(value=seconds):
            fraction = seconds_to_fraction(seconds, span_s)
            return _apply_boundary(items, index, Boundary.END, fraction, prevent_overlap)
        case _:
            assert_never(command)


def _apply_boundary(
    items: Sequence[T],
    index: int,
    boundary: Boundary,
    value: float,
    prevent_overlap: bool,
) -> T:
    item = items[index]
    previous, following = neighbours(items, index)

    if boundary == Boundary.START:
        start, end = constrain_boundary_edit(
            value,
            item.end,
            boundary=boundary,
            previous=previous,
            following=following,
            prevent_overlap=prevent_overlap,
        )
        if start == item.start:
            return item
        logger.debug("%s start %.4f -> %.4f (requested %r)", item.id, item.start, start, value)
        return item.model_copy(update={"start": start})

    start, end = constrain_boundary_edit(
        item.start,
        value,
        boundary=boundary,
        previous=previous,
        following=following,
        prevent_overlap=prevent_overlap,
    )
    if end == item.end:
        return item
    logger.debug("%s end %.4f -> %.4f (requested %r)", item.id, item.end, end, value)
    return item.model_copy(update={"end": end})
