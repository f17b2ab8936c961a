"""Adaptive grid layout for cardinality-sensitive slides.

GRID_CAPACITIES defines, per layout kind:
- max_items: hard cap; renderers show an overflow notice beyond it
- min_slots: placeholder slots rendered when no items are supplied

Breakpoints:
- gallery:  0 -> 2x2 placeholders, 1-3 -> 1xn, 4 -> 2x2, 5-6 -> 2x3,
            7-9 -> 3x3, 10+ -> 3x4
- team:     0-1 -> 1x1, 2 -> 1x2, 3 -> 1x3, 4 -> 2x2, 5-6 -> 2x3
- agenda:   up to 4 -> one column, more -> two columns
- feature:  up to 3 -> one row, 4 -> 2x2, 5-6 -> 2x3
- pricing:  one row
- timeline: one row
"""

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

GRID_CAPACITIES: dict[str, dict[str, int]] = {
    "gallery": {"max_items": 12, "min_slots": 4},
    "team": {"max_items": 6, "min_slots": 0},
    "agenda": {"max_items": 8, "min_slots": 0},
    "feature": {"max_items": 6, "min_slots": 0},
    "pricing": {"max_items": 3, "min_slots": 0},
    "timeline": {"max_items": 6, "min_slots": 0},
}


@dataclass(frozen=True)
class GridDecision:
    """Rows, columns and item cap chosen for a layout."""
    rows: int
    columns: int
    max_items: int

    @property
    def slots(self) -> int:
        return self.rows * self.columns


def _gallery(count: int) -> tuple[int, int]:
    if count == 0 or count == 4:
        return 2, 2
    if count <= 3:
        return 1, count
    if count <= 6:
        return 2, 3
    if count <= 9:
        return 3, 3
    return 3, 4


def _team(count: int) -> tuple[int, int]:
    if count <= 3:
        return 1, max(count, 1)
    if count == 4:
        return 2, 2
    return 2, 3


def _agenda(count: int) -> tuple[int, int]:
    if count <= 4:
        return max(count, 1), 1
    return math.ceil(count / 2), 2


def _feature(count: int) -> tuple[int, int]:
    if count <= 3:
        return 1, max(count, 1)
    if count == 4:
        return 2, 2
    return 2, 3


def _single_row(count: int) -> tuple[int, int]:
    return 1, max(count, 1)


_BREAKPOINTS = {
    "gallery": _gallery,
    "team": _team,
    "agenda": _agenda,
    "feature": _feature,
    "pricing": _single_row,
    "timeline": _single_row,
}


def decide(item_count: int, kind: str) -> GridDecision:
    """Choose rows and columns for a layout from its item count.

    Counts above the layout's cap are laid out as if exactly at the cap.
    Always returns a decision, including for zero items.

    Args:
        item_count: Number of items supplied; negative counts act as 0.
        kind: Layout kind, a key of GRID_CAPACITIES.

    Returns:
        GridDecision for the (capped) count.

    Raises:
        ValueError: If kind is unknown.
    """
    if kind not in GRID_CAPACITIES:
        raise ValueError(
            f"Unknown grid kind '{kind}'. Available kinds: {', '.join(sorted(GRID_CAPACITIES))}"
        )
    max_items = GRID_CAPACITIES[kind]["max_items"]
    count = min(max(int(item_count), 0), max_items)
    rows, columns = _BREAKPOINTS[kind](count)
    return GridDecision(rows=rows, columns=columns, max_items=max_items)


def visible(items: Sequence[T], decision: GridDecision) -> list[T]:
    """Items that fit the decision's cap, in order."""
    return list(items[:decision.max_items])


def placeholder_slots(item_count: int, kind: str) -> int:
    """Number of empty placeholder slots to render for a layout."""
    if item_count > 0:
        return 0
    return GRID_CAPACITIES[kind]["min_slots"]
