"""Section/segment store.

``TimelineStore`` owns the whole timeline of one session: the ordered
sections, each section's ordered segments, and the settings the interval
model needs (total duration, overlap policy, labels). The same list
operations run once across sections and once per section across its
segments; segment operations never touch section timing.

Every state-changing operation increments ``version``. Operations that turn
out to be no-ops (unknown id, move past a list boundary, an edit that
resolves to the current value) leave the version alone.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
import math
from typing import Any, TypeVar
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

from timeslicr.core.config.models import TimelineConfig
from timeslicr.core.timeline.derived import section_duration_seconds
from timeslicr.core.timeline.edits import EditCommand, apply_edit
from timeslicr.core.timeline.intervals import (
    can_move,
    coerce_number,
    next_default_range,
    reorder_and_recalculate,
)
from timeslicr.core.timeline.models import (
    Interval,
    LabelKind,
    MoveDirection,
    Section,
    Segment,
    TimelineLabels,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Interval)

IdFactory = Callable[[], str]


def _uuid_id() -> str:
    return uuid4().hex


class TimelineSnapshot(BaseModel):
    """Read-only view of the store handed to presentation and export."""

    model_config = ConfigDict(frozen=True)

    version: int
    total_duration_s: float
    prevent_overlap: bool
    labels: TimelineLabels
    sections: list[Section]


def demo_sections() -> list[Section]:
    """Starter timeline: an intro and a main content section."""
    return [
        Section(
            id="intro",
            name="Intro",
            start=0.0,
            end=0.25,
            segments=[
                Segment(id="intro-fade-in", name="Fade In", start=0.0, end=0.2),
                Segment(id="intro-title", name="Title", start=0.2, end=1.0),
            ],
        ),
        Section(
            id="main-content",
            name="Main Content",
            start=0.25,
            end=0.8,
            segments=[
                Segment(id="main-content-part-a", name="Part A", start=0.0, end=0.5),
            ],
        ),
    ]


class TimelineStore:
    """Owned, versioned store of sections and their segments.

    Example:
        >>> store = TimelineStore(total_duration_s=60)
        >>> section = store.add_section()
        >>> (section.name, section.start, section.end)
        ('Section 1', 0.0, 0.1)
    """

    def __init__(
        self,
        *,
        total_duration_s: float = 60.0,
        prevent_overlap: bool = True,
        labels: TimelineLabels | None = None,
        section_default_width: float = 0.1,
        segment_default_width: float = 0.2,
        sections: Sequence[Section] | None = None,
        id_factory: IdFactory | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            total_duration_s: Total duration the sections divide
            prevent_overlap: Clamp boundary edits against list neighbours
            labels: Terminology for naming new items
            section_default_width: Width of a newly added section
            segment_default_width: Width of a newly added segment
            sections: Initial sections, in order
            id_factory: Callable producing new opaque ids (uuid4 hex by default)
        """
        self._total_duration_s = _coerce_duration(total_duration_s)
        self._prevent_overlap = bool(prevent_overlap)
        self._labels = labels or TimelineLabels()
        self._section_default_width = section_default_width
        self._segment_default_width = segment_default_width
        self._sections: list[Section] = list(sections or [])
        self._new_id = id_factory or _uuid_id
        self._version = 0

    @classmethod
    def from_config(
        cls, config: TimelineConfig, *, id_factory: IdFactory | None = None
    ) -> TimelineStore:
        """Create a store from timeline config, seeding the demo when enabled."""
        store = cls(
            total_duration_s=config.total_duration_s,
            prevent_overlap=config.prevent_overlap,
            labels=TimelineLabels(parent=config.parent_label, child=config.child_label),
            section_default_width=config.section_default_width,
            segment_default_width=config.segment_default_width,
            id_factory=id_factory,
        )
        if config.seed_demo:
            store.seed_demo()
        return store

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def version(self) -> int:
        return self._version

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    @property
    def total_duration_s(self) -> float:
        return self._total_duration_s

    @property
    def prevent_overlap(self) -> bool:
        return self._prevent_overlap

    @property
    def labels(self) -> TimelineLabels:
        return self._labels

    def snapshot(self) -> TimelineSnapshot:
        """Current state as an immutable model."""
        return TimelineSnapshot(
            version=self._version,
            total_duration_s=self._total_duration_s,
            prevent_overlap=self._prevent_overlap,
            labels=self._labels,
            sections=list(self._sections),
        )

    def seed_demo(self) -> None:
        """Replace the timeline with the demo sections."""
        self._sections = demo_sections()
        self._commit("seed demo timeline")

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------

    def set_total_duration(self, seconds: Any) -> float:
        """Set the total duration; malformed, negative or infinite input becomes 0.

        Returns:
            The stored duration
        """
        duration = _coerce_duration(seconds)
        if duration != self._total_duration_s:
            self._total_duration_s = duration
            self._commit(f"total duration -> {duration}s")
        return duration

    def set_overlap_prevention(self, enabled: bool) -> None:
        enabled = bool(enabled)
        if enabled != self._prevent_overlap:
            self._prevent_overlap = enabled
            self._commit(f"overlap prevention -> {enabled}")

    def set_label(self, kind: LabelKind, text: str) -> None:
        """Rename the terminology used for new sections (PARENT) or segments (CHILD)."""
        field = "parent" if LabelKind(kind) == LabelKind.PARENT else "child"
        if getattr(self._labels, field) != text:
            self._labels = self._labels.model_copy(update={field: text})
            self._commit(f"{field} label -> {text!r}")

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def section_index(self, section_id: str) -> int:
        """Index of a section by id, or -1 when absent."""
        return _index_of(self._sections, section_id)

    def get_section(self, section_id: str) -> Section | None:
        index = self.section_index(section_id)
        return self._sections[index] if index >= 0 else None

    def get_segment(self, section_id: str, segment_id: str) -> Segment | None:
        section = self.get_section(section_id)
        if section is None:
            return None
        index = section.segment_index(segment_id)
        return section.segments[index] if index >= 0 else None

    def section_duration_s(self, section_id: str) -> float:
        """Seconds spanned by a section (0.0 for an unknown id)."""
        section = self.get_section(section_id)
        if section is None:
            return 0.0
        return section_duration_seconds(section, self._total_duration_s)

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def add_section(self, *, name: str | None = None, item_id: str | None = None) -> Section:
        """Append a section right after the last one.

        Args:
            name: Display name (defaults to "<parent label> <n>")
            item_id: Requested id; replaced by a fresh one if empty or taken

        Returns:
            The new section
        """
        section = _new_item(
            Section,
            self._sections,
            width=self._section_default_width,
            label=self._labels.parent,
            name=name,
            item_id=self._unique_id(self._sections, item_id),
        )
        self._sections.append(section)
        self._commit(f"add section {section.id} [{section.start}, {section.end}]")
        return section

    def remove_section(self, section_id: str) -> bool:
        """Remove a section by id; neighbours keep their ranges."""
        index = self.section_index(section_id)
        if index < 0:
            logger.debug("remove_section: unknown section %s", section_id)
            return False
        del self._sections[index]
        self._commit(f"remove section {section_id}")
        return True

    def move_section(self, index: int, direction: MoveDirection) -> bool:
        """Swap a section with its neighbour and re-lay-out all sections.

        Returns:
            True if the list changed, False for a move past a list boundary
        """
        if not can_move(len(self._sections), index, MoveDirection(direction)):
            return False
        self._sections = reorder_and_recalculate(self._sections, index, direction)
        self._commit(f"move section {index} {MoveDirection(direction).value}")
        return True

    def move_section_up(self, index: int) -> bool:
        return self.move_section(index, MoveDirection.UP)

    def move_section_down(self, index: int) -> bool:
        return self.move_section(index, MoveDirection.DOWN)

    def update_section(self, section_id: str, command: EditCommand) -> Section | None:
        """Apply an edit command to a section.

        Seconds edits are relative to the total duration.

        Returns:
            The section after the edit, or None for an unknown id
        """
        index = self.section_index(section_id)
        if index < 0:
            logger.debug("update_section: unknown section %s", section_id)
            return None
        updated = apply_edit(
            self._sections,
            index,
            command,
            span_s=self._total_duration_s,
            prevent_overlap=self._prevent_overlap,
        )
        self._replace_section(index, updated, f"update section {section_id} ({command.type})")
        return updated

    def toggle_collapse(self, section_id: str) -> Section | None:
        """Flip a section's collapsed flag; timing is untouched."""
        index = self.section_index(section_id)
        if index < 0:
            logger.debug("toggle_collapse: unknown section %s", section_id)
            return None
        section = self._sections[index]
        updated = section.model_copy(update={"collapsed": not section.collapsed})
        self._replace_section(index, updated, f"toggle collapse {section_id}")
        return updated

    # ------------------------------------------------------------------
    # Segments
    # ------------------------------------------------------------------

    def add_segment(
        self,
        section_id: str,
        *,
        name: str | None = None,
        item_id: str | None = None,
    ) -> Segment | None:
        """Append a segment to a section, right after its last segment.

        Returns:
            The new segment, or None for an unknown section
        """
        index = self.section_index(section_id)
        if index < 0:
            logger.debug("add_segment: unknown section %s", section_id)
            return None
        section = self._sections[index]
        segment = _new_item(
            Segment,
            section.segments,
            width=self._segment_default_width,
            label=self._labels.child,
            name=name,
            item_id=self._unique_id(section.segments, item_id),
        )
        updated = section.model_copy(update={"segments": [*section.segments, segment]})
        self._replace_section(
            index,
            updated,
            f"add segment {segment.id} to {section_id} [{segment.start}, {segment.end}]",
        )
        return segment

    def remove_segment(self, section_id: str, segment_id: str) -> bool:
        """Remove a segment by id; its neighbours keep their ranges."""
        index = self.section_index(section_id)
        if index < 0:
            logger.debug("remove_segment: unknown section %s", section_id)
            return False
        section = self._sections[index]
        if section.segment_index(segment_id) < 0:
            logger.debug("remove_segment: unknown segment %s in %s", segment_id, section_id)
            return False
        segments = [s for s in section.segments if s.id != segment_id]
        self._replace_section(
            index,
            section.model_copy(update={"segments": segments}),
            f"remove segment {segment_id} from {section_id}",
        )
        return True

    def move_segment(self, section_id: str, index: int, direction: MoveDirection) -> bool:
        """Swap a segment with its neighbour and re-lay-out the section's segments."""
        section_pos = self.section_index(section_id)
        if section_pos < 0:
            logger.debug("move_segment: unknown section %s", section_id)
            return False
        section = self._sections[section_pos]
        if not can_move(len(section.segments), index, MoveDirection(direction)):
            return False
        segments = reorder_and_recalculate(section.segments, index, direction)
        self._replace_section(
            section_pos,
            section.model_copy(update={"segments": segments}),
            f"move segment {index} {MoveDirection(direction).value} in {section_id}",
        )
        return True

    def move_segment_up(self, section_id: str, index: int) -> bool:
        return self.move_segment(section_id, index, MoveDirection.UP)

    def move_segment_down(self, section_id: str, index: int) -> bool:
        return self.move_segment(section_id, index, MoveDirection.DOWN)

    def update_segment(
        self, section_id: str, segment_id: str, command: EditCommand
    ) -> Segment | None:
        """Apply an edit command to a segment.

        Seconds edits are relative to the section's current duration in
        seconds; the section itself is never modified.

        Returns:
            The segment after the edit, or None for an unknown id
        """
        section_pos = self.section_index(section_id)
        if section_pos < 0:
            logger.debug("update_segment: unknown section %s", section_id)
            return None
        section = self._sections[section_pos]
        index = section.segment_index(segment_id)
        if index < 0:
            logger.debug("update_segment: unknown segment %s in %s", segment_id, section_id)
            return None

        updated = apply_edit(
            section.segments,
            index,
            command,
            span_s=section_duration_seconds(section, self._total_duration_s),
            prevent_overlap=self._prevent_overlap,
        )
        if updated is not section.segments[index]:
            segments = list(section.segments)
            segments[index] = updated
            self._replace_section(
                section_pos,
                section.model_copy(update={"segments": segments}),
                f"update segment {segment_id} in {section_id} ({command.type})",
            )
        return updated

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _replace_section(self, index: int, section: Section, reason: str) -> None:
        if section is self._sections[index]:
            return
        self._sections[index] = section
        self._commit(reason)

    def _commit(self, reason: str) -> None:
        self._version += 1
        logger.debug("v%d: %s", self._version, reason)

    def _unique_id(self, items: Sequence[Interval], requested: str | None) -> str:
        taken = {item.id for item in items}
        if requested and requested not in taken:
            return requested
        if requested:
            logger.warning("id %r already in use; generating a new one", requested)
        new_id = self._new_id()
        while new_id in taken:
            new_id = self._new_id()
        return new_id


def _index_of(items: Sequence[Interval], item_id: str) -> int:
    for i, item in enumerate(items):
        if item.id == item_id:
            return i
    return -1


def _new_item(
    cls: type[T],
    items: Sequence[Interval],
    *,
    width: float,
    label: str,
    name: str | None,
    item_id: str,
) -> T:
    start, end = next_default_range(items, width)
    return cls(
        id=item_id,
        name=name if name is not None else f"{label} {len(items) + 1}",
        start=start,
        end=end,
    )


def _coerce_duration(value: Any) -> float:
    duration = coerce_number(value)
    if not math.isfinite(duration) or duration < 0:
        return 0.0
    return duration
