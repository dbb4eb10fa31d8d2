"""Copying the summary somewhere, with transient feedback state."""

from __future__ import annotations

from collections.abc import Callable
import logging
from pathlib import Path
import sys
import time
from typing import Protocol, TextIO

from timeslicr.core.export.summary import build_summary
from timeslicr.core.timeline.store import TimelineSnapshot, TimelineStore

logger = logging.getLogger(__name__)


class ClipboardWriter(Protocol):
    """Destination for the summary text."""

    def write(self, text: str) -> None: ...


class FileWriter:
    """Writes the summary to a file, replacing its contents."""

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding=self.encoding)


class StreamWriter:
    """Writes the summary to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


class SummaryExporter:
    """Copies summaries through a writer and tracks the outcome.

    ``copied`` reads true for ``feedback_seconds`` after a successful copy.
    A failed copy is logged and leaves ``copy_failed`` set until the next
    attempt; it never propagates.

    Example:
        >>> exporter = SummaryExporter(feedback_seconds=2.0)
        >>> exporter.copied
        False
    """

    def __init__(
        self,
        feedback_seconds: float = 2.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.feedback_seconds = feedback_seconds
        self._clock = clock
        self._copied_at: float | None = None
        self._last_error: Exception | None = None

    @property
    def copied(self) -> bool:
        if self._copied_at is None:
            return False
        return self._clock() - self._copied_at < self.feedback_seconds

    @property
    def copy_failed(self) -> bool:
        return self._last_error is not None

    @property
    def last_error(self) -> Exception | None:
        return self._last_error

    def copy(self, timeline: TimelineStore | TimelineSnapshot, writer: ClipboardWriter) -> bool:
        """Build the summary and hand it to the writer.

        Args:
            timeline: Store or snapshot to summarize
            writer: Destination for the text

        Returns:
            True if the writer accepted the text
        """
        text = build_summary(timeline)
        try:
            writer.write(text)
        except Exception as e:
            logger.error("Failed to copy summary: %s", e, exc_info=True)
            self._copied_at = None
            self._last_error = e
            return False

        self._copied_at = self._clock()
        self._last_error = None
        logger.debug("Copied summary (%d chars)", len(text))
        return True
