"""Headless dual-handle range drag.

A drag is a small state machine::

    IDLE --begin(handle)--> DRAGGING(handle) --end()--> IDLE
                                 |
                                 +--move(x)--> SetStart / SetEnd

The controller turns pointer x positions into edit commands. It reads the
current range through a callback and keeps no timing state of its own, so
every move is an independent commit through the normal edit path.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
import logging

from timeslicr.core.timeline.edits import SetEnd, SetStart
from timeslicr.core.timeline.intervals import MIN_WIDTH
from timeslicr.core.timeline.store import TimelineStore
from timeslicr.core.utils.math import clamp, inverse_lerp

logger = logging.getLogger(__name__)

# Drag positions are rounded to this many decimals
DRAG_DECIMALS = 3

RangeReader = Callable[[], tuple[float, float]]
DragCommand = SetStart | SetEnd
CommandSink = Callable[[DragCommand], object]


class DragHandle(str, Enum):
    """Handle being dragged."""

    START = "start"
    END = "end"


class DragPhase(str, Enum):
    """Controller phase."""

    IDLE = "idle"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class TrackGeometry:
    """Horizontal placement of the track in pointer coordinates."""

    left: float = 0.0
    width: float = 0.0

    def fraction_at(self, x: float) -> float:
        """Position of x along the track as a fraction in [0, 1].

        Example:
            >>> TrackGeometry(left=100, width=400).fraction_at(200)
            0.25
        """
        if self.width <= 0:
            return 0.0
        fraction = inverse_lerp(self.left, self.left + self.width, x)
        return round(clamp(fraction, 0.0, 1.0), DRAG_DECIMALS)


class RangeDragController:
    """Converts pointer drags on a [start, end] track into edit commands."""

    def __init__(
        self,
        track: TrackGeometry,
        read_range: RangeReader,
        emit: CommandSink,
    ) -> None:
        """Initialize the controller.

        Args:
            track: Track geometry used to map pointer x to a fraction
            read_range: Returns the current (start, end) of the dragged range
            emit: Receives each command produced by a move
        """
        self._track = track
        self._read_range = read_range
        self._emit = emit
        self._handle: DragHandle | None = None
        self._pointer_id: int | None = None

    @property
    def phase(self) -> DragPhase:
        return DragPhase.IDLE if self._handle is None else DragPhase.DRAGGING

    @property
    def handle(self) -> DragHandle | None:
        return self._handle

    @property
    def pointer_id(self) -> int | None:
        return self._pointer_id

    @property
    def track(self) -> TrackGeometry:
        return self._track

    def resize(self, track: TrackGeometry) -> None:
        """Replace the track geometry (e.g. after a layout change)."""
        self._track = track

    def begin(self, handle: DragHandle, pointer_id: int | None = None) -> None:
        """Capture a handle and pointer. Beginning again re-captures."""
        handle = DragHandle(handle)
        if self._handle is not None:
            logger.debug("Drag re-captured: %s -> %s", self._handle.value, handle.value)
        self._handle = handle
        self._pointer_id = pointer_id

    def move(self, pointer_x: float, pointer_id: int | None = None) -> DragCommand | None:
        """Emit the edit for a pointer move.

        Moves while idle, or from a pointer other than the captured one, are
        ignored.

        Returns:
            The emitted command, or None when the move was ignored
        """
        if self._handle is None:
            return None
        if self._pointer_id is not None and pointer_id != self._pointer_id:
            return None

        fraction = self._track.fraction_at(pointer_x)
        start, end = self._read_range()

        command: DragCommand
        if self._handle == DragHandle.START:
            command = SetStart(value=min(fraction, end - MIN_WIDTH))
        else:
            command = SetEnd(value=max(fraction, start + MIN_WIDTH))

        self._emit(command)
        return command

    def end(self, pointer_id: int | None = None) -> None:
        """Release capture and go back to idle."""
        if self._handle is None:
            return
        if pointer_id is not None and self._pointer_id not in (None, pointer_id):
            return
        self._handle = None
        self._pointer_id = None


def bind_section_range(
    store: TimelineStore, section_id: str, track: TrackGeometry
) -> RangeDragController:
    """Controller whose moves update a section in the store."""

    def read_range() -> tuple[float, float]:
        section = store.get_section(section_id)
        return (section.start, section.end) if section else (0.0, 0.0)

    return RangeDragController(
        track,
        read_range,
        lambda command: store.update_section(section_id, command),
    )


def bind_segment_range(
    store: TimelineStore, section_id: str, segment_id: str, track: TrackGeometry
) -> RangeDragController:
    """Controller whose moves update a segment in the store."""

    def read_range() -> tuple[float, float]:
        segment = store.get_segment(section_id, segment_id)
        return (segment.start, segment.end) if segment else (0.0, 0.0)

    return RangeDragController(
        track,
        read_range,
        lambda command: store.update_segment(section_id, segment_id, command),
    )
