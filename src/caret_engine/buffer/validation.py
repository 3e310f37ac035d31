"""Coordinate clamping helpers shared by the managers and the session."""

from __future__ import annotations

from typing import Tuple

from .sync import LineSource


def clamp_nonnegative(line: int, column: int) -> Tuple[int, int]:
    return max(0, line), max(0, column)


def clamp_to_source(line: int, column: int, source: LineSource) -> Tuple[int, int]:
    """Pull ``(line, column)`` inside the buffer's current bounds."""

    max_line = max(0, source.line_count - 1)
    line = max(0, min(line, max_line))
    if source.line_count == 0:
        return line, 0
    column = max(0, min(column, source.line_length(line)))
    return line, column
