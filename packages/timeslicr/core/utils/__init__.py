"""Shared utilities for timeslicr."""

from timeslicr.core.utils.json import read_json
from timeslicr.core.utils.math import clamp, inverse_lerp

__all__ = [
    "clamp",
    "inverse_lerp",
    "read_json",
]
