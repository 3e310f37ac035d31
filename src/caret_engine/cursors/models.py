"""Value types describing cursors and navigation vocabulary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, get_args

Direction = Literal["up", "down", "left", "right"]
MoveUnit = Literal["character", "word", "line", "page", "document"]

DIRECTIONS: tuple[str, ...] = get_args(Direction)
MOVE_UNITS: tuple[str, ...] = get_args(MoveUnit)

PRIMARY_ID = "primary"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Zero-based ``(line, column)`` pair ordered lexicographically."""

    line: int = 0
    column: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.line, self.column)


@dataclass(frozen=True, slots=True)
class Cursor:
    """Single insertion point with an optional selection anchor.

    ``desired_column`` remembers the last horizontal intent so vertical
    moves across short lines can snap back to it.
    """

    id: str
    position: Position
    selection_anchor: Optional[Position] = None
    desired_column: int = 0

    @property
    def has_selection(self) -> bool:
        return (
            self.selection_anchor is not None
            and self.selection_anchor != self.position
        )


def validate_move(direction: str, unit: str) -> None:
    if direction not in DIRECTIONS:
        raise ValueError(f"Unknown direction '{direction}'")
    if unit not in MOVE_UNITS:
        raise ValueError(f"Unknown move unit '{unit}'")


__all__ = [
    "Cursor",
    "Direction",
    "DIRECTIONS",
    "MoveUnit",
    "MOVE_UNITS",
    "Position",
    "PRIMARY_ID",
    "validate_move",
]
