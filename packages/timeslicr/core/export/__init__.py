"""Summary export."""

from __future__ import annotations

from timeslicr.core.export.clipboard import (
    ClipboardWriter,
    FileWriter,
    StreamWriter,
    SummaryExporter,
)
from timeslicr.core.export.summary import build_summary, format_number

__all__ = [
    "ClipboardWriter",
    "FileWriter",
    "StreamWriter",
    "SummaryExporter",
    "build_summary",
    "format_number",
]
