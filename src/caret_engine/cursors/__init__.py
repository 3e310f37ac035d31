"""Multi-cursor state and navigation."""

from .manager import DEFAULT_PAGE_SIZE, CursorManager
from .models import (
    DIRECTIONS,
    MOVE_UNITS,
    PRIMARY_ID,
    Cursor,
    Direction,
    MoveUnit,
    Position,
)

__all__ = [
    "CursorManager",
    "Cursor",
    "Position",
    "Direction",
    "MoveUnit",
    "DIRECTIONS",
    "MOVE_UNITS",
    "PRIMARY_ID",
    "DEFAULT_PAGE_SIZE",
]
