"""Interval model: pure functions over ordered lists of fractional ranges.

Every function here is side-effect free and works on any list of
``Interval`` models (sections or segments alike). The store applies them
once across sections and once per section across its segments.

Two algorithms live here:
- ``constrain_boundary_edit``: clamps a single boundary edit into [0, 1] and,
  with overlap prevention, against the immediate list neighbours.
- ``reorder_and_recalculate``: swaps adjacent items and re-lays-out the whole
  list so durations follow items and gaps stay with slots.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
import math
from typing import Any, TypeVar

from timeslicr.core.timeline.models import Boundary, Interval, MoveDirection
from timeslicr.core.utils.math import clamp

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Interval)

# Stored fractions are rounded to this many decimals
FRACTION_DECIMALS = 4

# Minimum width kept by a boundary edit that would invert its interval
MIN_WIDTH = 0.01

# Minimum duration assigned to an item while reordering
MIN_REORDER_DURATION = 0.001


def round_fraction(value: float) -> float:
    """Round a stored fraction to FRACTION_DECIMALS places."""
    return round(value, FRACTION_DECIMALS)


def clamp_unit(value: float) -> float:
    """Clamp a value into [0, 1]."""
    return clamp(float(value), 0.0, 1.0)


def coerce_number(value: Any) -> float:
    """Parse user input as a float, treating anything malformed as 0.

    Args:
        value: Number, numeric string, or anything else

    Returns:
        Parsed float; 0.0 for non-numeric text, None, or NaN

    Example:
        >>> coerce_number("0.25")
        0.25
        >>> coerce_number("abc")
        0.0
    """
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def seconds_to_fraction(seconds: float, span_s: float) -> float:
    """Convert an absolute seconds value into a fraction of span_s.

    Args:
        seconds: Position in seconds relative to the span's start
        span_s: Length of the enclosing span in seconds

    Returns:
        seconds / span_s, or 0.0 when the span is empty
    """
    if span_s <= 0:
        return 0.0
    return seconds / span_s


def neighbours(items: Sequence[T], index: int) -> tuple[T | None, T | None]:
    """Return (predecessor, successor) of items[index] in list order."""
    previous = items[index - 1] if index > 0 else None
    following = items[index + 1] if index < len(items) - 1 else None
    return previous, following


def constrain_boundary_edit(
    start: float,
    end: float,
    *,
    boundary: Boundary,
    previous: Interval | None = None,
    following: Interval | None = None,
    prevent_overlap: bool = True,
) -> tuple[float, float]:
    """Correct a candidate (start, end) pair after one boundary was edited.

    Steps:
    1. Clamp both values into [0, 1].
    2. With overlap prevention, pull start up to the predecessor's end and
       end down to the successor's start.
    3. If the edited boundary crossed its partner, fall back to a minimum
       width of MIN_WIDTH. With overlap prevention the neighbour bound wins
       when the free slot is narrower than MIN_WIDTH.

    Only the edited boundary is meant to be persisted; the other value of the
    returned pair is the caller's input, clamped.

    Args:
        start: Candidate start fraction
        end: Candidate end fraction
        boundary: Which boundary the edit targets
        previous: Predecessor in list order (None for the first item)
        following: Successor in list order (None for the last item)
        prevent_overlap: Apply neighbour constraints

    Returns:
        Corrected (start, end), rounded to FRACTION_DECIMALS, with start <= end
    """
    start = clamp_unit(start)
    end = clamp_unit(end)

    lower = previous.end if prevent_overlap and previous is not None else 0.0
    upper = following.start if prevent_overlap and following is not None else 1.0

    if boundary == Boundary.START:
        start = max(start, lower)
        if start >= end:
            start = max(0.0, end - MIN_WIDTH)
            start = max(start, lower)
        start = min(start, end)
    else:
        end = min(end, upper)
        if end <= start:
            end = min(1.0, start + MIN_WIDTH)
            end = min(end, upper)
        end = max(end, start)

    return round_fraction(start), round_fraction(end)


def next_default_range(items: Sequence[Interval], width: float) -> tuple[float, float]:
    """Range for a new item appended after the last one.

    Args:
        items: Current list in order
        width: Desired width of the new item

    Returns:
        (start, end) starting at the last item's end (0 for an empty list),
        clamped to [0, 1]
    """
    start = clamp_unit(items[-1].end) if items else 0.0
    end = clamp_unit(start + width)
    return round_fraction(start), round_fraction(end)


def can_move(length: int, index: int, direction: MoveDirection) -> bool:
    """Whether a one-step move stays inside the list."""
    if not 0 <= index < length:
        return False
    if direction == MoveDirection.UP:
        return index > 0
    return index < length - 1


def compute_slot_gaps(items: Sequence[Interval]) -> list[float]:
    """Gap preceding each slot: start minus the previous slot's end, floored at 0."""
    gaps: list[float] = []
    for i, item in enumerate(items):
        prev_end = 0.0 if i == 0 else items[i - 1].end
        gaps.append(max(0.0, item.start - prev_end))
    return gaps


def reorder_and_recalculate(
    items: Sequence[T], index: int, direction: MoveDirection
) -> list[T]:
    """Swap items[index] with its neighbour and re-lay-out the whole list.

    The layout keeps two things from the original timeline:
    - each item keeps its own duration (end - start, at least
      MIN_REORDER_DURATION), so duration travels with identity;
    - the gap that preceded each slot in the original order precedes the same
      slot in the new order, so gaps stay with positions.

    Swapping only the two items' timings in place is a different operation:
    it gives a different result whenever the gaps before the two
    slots differ, and every item after the swap point moves as well.

    Args:
        items: Ordered list of intervals
        index: Index of the item to move
        direction: UP swaps with the predecessor, DOWN with the successor

    Returns:
        New list with only start/end replaced; a copy of the input when the
        move would leave the list

    Example:
        >>> a = Interval(id="a", start=0.0, end=0.25)
        >>> b = Interval(id="b", start=0.25, end=0.8)
        >>> [(i.id, i.start, i.end) for i in reorder_and_recalculate([a, b], 1, MoveDirection.UP)]
        [('b', 0.0, 0.55), ('a', 0.55, 0.8)]
    """
    direction = MoveDirection(direction)
    if not can_move(len(items), index, direction):
        logger.debug("Move %s at index %d is outside the list; no-op", direction.value, index)
        return list(items)

    other = index - 1 if direction == MoveDirection.UP else index + 1
    swapped = list(items)
    swapped[index], swapped[other] = swapped[other], swapped[index]

    gaps = compute_slot_gaps(items)

    result: list[T] = []
    pos = 0.0
    for slot, item in enumerate(swapped):
        duration = max(MIN_REORDER_DURATION, item.end - item.start)
        new_start = round_fraction(pos + gaps[slot])
        new_end = round_fraction(new_start + duration)

        # Keep the [0, 1] invariant when the relaid timeline overflows
        new_start = clamp_unit(new_start)
        new_end = clamp(new_end, new_start, 1.0)

        result.append(item.model_copy(update={"start": new_start, "end": new_end}))
        pos = new_end

    return result
