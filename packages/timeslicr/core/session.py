"""Timeline session coordinator.

A session ties one application config to one timeline store and is the
single entry point for input events:

Example:
    session = TimelineSession(app_config="config.yaml")
    session.apply(AddSection(name="Intro"))
    print(session.summary())
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from pathlib import Path
from typing import Any, assert_never
from uuid import uuid4

from timeslicr.core.config.models import AppConfig
from timeslicr.core.events import (
    AddSection,
    AddSegment,
    MoveSection,
    MoveSegment,
    RemoveSection,
    RemoveSegment,
    SetLabel,
    SetOverlapPrevention,
    SetTotalDuration,
    TimelineEvent,
    ToggleCollapse,
    UpdateSection,
    UpdateSegment,
)
from timeslicr.core.export.clipboard import ClipboardWriter, SummaryExporter
from timeslicr.core.export.summary import build_summary
from timeslicr.core.timeline.store import TimelineStore
from timeslicr.core.utils.logging import get_logger

logger = logging.getLogger(__name__)


class TimelineSession:
    """Owns the config, the store, and the exporter of one editing session.

    Supports the same initialization patterns for config as the loaders:

    1. Defaults (config.json if present):
        session = TimelineSession()

    2. From a path:
        session = TimelineSession(app_config="config.yaml")

    3. From a loaded config:
        session = TimelineSession(app_config=AppConfig(...))
    """

    def __init__(
        self,
        *,
        app_config: AppConfig | Path | str | None = None,
        store: TimelineStore | None = None,
        session_id: str | None = None,
    ):
        """Initialize session.

        Args:
            app_config: AppConfig instance, path, or None (uses default path)
            store: Existing store to edit (built from config if None)
            session_id: Identifier used in log messages

        Raises:
            TypeError: If app_config is of the wrong type
            ValidationError: If the config is invalid
        """
        self.app_config: AppConfig = self._resolve_config(app_config)
        self.session_id = session_id or uuid4().hex[:8]
        self.log = get_logger(__name__, session_id=self.session_id)
        if store is None:
            store = TimelineStore.from_config(self.app_config.timeline)
        self.store = store
        self.exporter = SummaryExporter(
            feedback_seconds=self.app_config.export.copy_feedback_seconds
        )

        logger.debug(
            "Session %s initialized: %d sections, total=%ss",
            self.session_id,
            len(self.store.sections),
            self.store.total_duration_s,
        )

    @staticmethod
    def _resolve_config(value: Any) -> AppConfig:
        if value is None:
            return AppConfig.load_or_default()
        elif isinstance(value, (Path, str)):
            return AppConfig.load_or_default(Path(value))
        elif isinstance(value, AppConfig):
            return value
        else:
            raise TypeError(f"Expected AppConfig, Path, str, or None; got {type(value).__name__}")

    def apply(self, event: TimelineEvent) -> bool:
        """Apply one input event to the store.

        Args:
            event: Typed input event

        Returns:
            True if the store changed
        """
        before = self.store.version
        store = self.store

        match event:
            case AddSection(name=name, id=item_id):
                store.add_section(name=name, item_id=item_id)
            case RemoveSection(section_id=section_id):
                store.remove_section(section_id)
            case MoveSection(index=index, direction=direction):
                store.move_section(index, direction)
            case UpdateSection(section_id=section_id, edit=edit):
                store.update_section(section_id, edit)
            case ToggleCollapse(section_id=section_id):
                store.toggle_collapse(section_id)
            case AddSegment(section_id=section_id, name=name, id=item_id):
                store.add_segment(section_id, name=name, item_id=item_id)
            case RemoveSegment(section_id=section_id, segment_id=segment_id):
                store.remove_segment(section_id, segment_id)
            case MoveSegment(section_id=section_id, index=index, direction=direction):
                store.move_segment(section_id, index, direction)
            case UpdateSegment(section_id=section_id, segment_id=segment_id, edit=edit):
                store.update_segment(section_id, segment_id, edit)
            case SetOverlapPrevention(enabled=enabled):
                store.set_overlap_prevention(enabled)
            case SetTotalDuration(seconds=seconds):
                store.set_total_duration(seconds)
            case SetLabel(kind=kind, text=text):
                store.set_label(kind, text)
            case _:
                assert_never(event)

        changed = self.store.version != before
        if not changed:
            self.log.debug("Session %s: %s had no effect", self.session_id, event.type)
        return changed

    def replay(self, events: Iterable[TimelineEvent]) -> int:
        """Apply events in order.

        Returns:
            Number of events that changed the store
        """
        changed = sum(1 for event in events if self.apply(event))
        self.log.info(
            "Session %s: replayed events, %d changed the timeline (version %d)",
            self.session_id,
            changed,
            self.store.version,
        )
        return changed

    def summary(self) -> str:
        """Text summary of the current timeline."""
        return build_summary(self.store)

    def copy_summary(self, writer: ClipboardWriter) -> bool:
        """Copy the summary through a writer; failures are logged, not raised."""
        return self.exporter.copy(self.store, writer)
