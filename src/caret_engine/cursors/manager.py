"""Multi-cursor collection and navigation."""

from __future__ import annotations

import itertools
from dataclasses import replace
from typing import List, Optional

from caret_engine.buffer.sync import LineLengthFn
from caret_engine.buffer.validation import clamp_nonnegative
from caret_engine.runtime import telemetry

from .models import PRIMARY_ID, Cursor, Position, validate_move

DEFAULT_PAGE_SIZE = 30


class CursorManager:
    """Owns the active cursors and applies navigation commands to them.

    The collection is never empty and element 0 is always the ``"primary"``
    cursor. Cursors are immutable values; every move swaps in a new value.
    """

    def __init__(
        self, page_size: int = DEFAULT_PAGE_SIZE, *, logger_name: str | None = None
    ) -> None:
        self._page_size = max(1, page_size)
        self._logger_name = logger_name
        self._ids = itertools.count(1)
        self._cursors: List[Cursor] = [_make_cursor(PRIMARY_ID, 0, 0)]

    @property
    def page_size(self) -> int:
        return self._page_size

    @page_size.setter
    def page_size(self, value: int) -> None:
        self._page_size = max(1, value)

    def get_primary(self) -> Cursor:
        return self._cursors[0]

    def get_all(self) -> tuple[Cursor, ...]:
        return tuple(self._cursors)

    def __len__(self) -> int:
        return len(self._cursors)

    def set_position(self, line: int, column: int) -> None:
        """Collapse to a single primary cursor at ``(line, column)``."""

        line, column = clamp_nonnegative(line, column)
        self._cursors = [_make_cursor(PRIMARY_ID, line, column)]

    def set_selection(
        self, anchor_line: int, anchor_column: int, line: int, column: int
    ) -> None:
        """Collapse to a single primary cursor anchored at another position.

        Used when a host reports a selection it made itself (mouse drag,
        widget-native shortcuts). An anchor equal to the position is dropped.
        """

        anchor = Position(*clamp_nonnegative(anchor_line, anchor_column))
        self.set_position(line, column)
        if anchor != self._cursors[0].position:
            self._cursors[0] = replace(self._cursors[0], selection_anchor=anchor)

    def add_cursor(self, line: int, column: int) -> Cursor:
        """Add a cursor, or return the one already sitting at that position."""

        line, column = clamp_nonnegative(line, column)
        target = Position(line, column)
        existing = self._find_at(target)
        if existing is not None:
            return existing

        cursor = _make_cursor(f"cursor-{next(self._ids)}", line, column)
        self._cursors.append(cursor)
        return cursor

    def remove_cursor(self, cursor_id: str) -> bool:
        if cursor_id == PRIMARY_ID:
            return False
        for index, cursor in enumerate(self._cursors):
            if cursor.id == cursor_id:
                del self._cursors[index]
                return True
        telemetry.record_event(
            "cursors.remove_missing",
            level="debug",
            data={"cursor_id": cursor_id},
            logger_name=self._logger_name,
        )
        return False

    def clear_secondary(self) -> None:
        self._cursors = [self._cursors[0]]

    def move_all(
        self,
        direction: str,
        unit: str,
        line_count: int,
        line_length: LineLengthFn,
        select: bool = False,
    ) -> None:
        """Apply one navigation step to every cursor, then merge collisions."""

        validate_move(direction, unit)
        with telemetry.span(
            "cursors::move_all",
            logger_name=self._logger_name,
            component="cursors",
            metadata={
                "direction": direction,
                "unit": unit,
                "select": select,
                "cursors": len(self._cursors),
            },
        ) as handle:
            self._cursors = [
                self._move_cursor(
                    cursor, direction, unit, line_count, line_length, select
                )
                for cursor in self._cursors
            ]
            merged = self._merge_duplicates()
            if merged:
                handle.add_metadata("merged", merged)

    def select_all(self, line_count: int, line_length: LineLengthFn) -> None:
        with telemetry.span(
            "cursors::select_all",
            logger_name=self._logger_name,
            component="cursors",
            metadata={"line_count": line_count},
        ):
            last_line = max(0, line_count - 1)
            self._cursors[0] = replace(
                self._cursors[0],
                selection_anchor=Position(0, 0),
                position=Position(last_line, line_length(last_line)),
            )
            self.clear_secondary()

    def _find_at(self, position: Position) -> Optional[Cursor]:
        for cursor in self._cursors:
            if cursor.position == position:
                return cursor
        return None

    def _move_cursor(
        self,
        cursor: Cursor,
        direction: str,
        unit: str,
        line_count: int,
        line_length: LineLengthFn,
        select: bool,
    ) -> Cursor:
        if select:
            anchor = cursor.selection_anchor or cursor.position
        else:
            anchor = None

        if direction == "up":
            position = self._move_up(cursor, unit, line_length)
        elif direction == "down":
            position = self._move_down(cursor, unit, line_count, line_length)
        elif direction == "left":
            position = _move_left(cursor.position, unit, line_length)
        else:
            position = _move_right(cursor.position, unit, line_count, line_length)

        desired = cursor.desired_column
        if direction in ("left", "right"):
            desired = position.column

        return replace(
            cursor,
            position=position,
            selection_anchor=anchor,
            desired_column=desired,
        )

    def _move_up(
        self, cursor: Cursor, unit: str, line_length: LineLengthFn
    ) -> Position:
        line = cursor.position.line
        if unit == "document":
            return Position(0, 0)
        if unit == "page":
            target = max(0, line - self._page_size)
        elif line > 0:
            # character, word and line units all step a single line vertically
            target = line - 1
        else:
            return cursor.position
        return Position(target, min(cursor.desired_column, line_length(target)))

    def _move_down(
        self,
        cursor: Cursor,
        unit: str,
        line_count: int,
        line_length: LineLengthFn,
    ) -> Position:
        line = cursor.position.line
        max_line = max(0, line_count - 1)
        if unit == "document":
            return Position(max_line, line_length(max_line))
        if unit == "page":
            target = min(max_line, line + self._page_size)
        elif line < max_line:
            target = line + 1
        else:
            return cursor.position
        return Position(target, min(cursor.desired_column, line_length(target)))

    def _merge_duplicates(self) -> int:
        seen: set[Position] = set()
        kept: List[Cursor] = []
        for cursor in self._cursors:
            if cursor.position in seen:
                continue
            seen.add(cursor.position)
            kept.append(cursor)

        dropped = len(self._cursors) - len(kept)
        if dropped:
            telemetry.record_event(
                "cursors.merged",
                level="debug",
                data={"dropped": dropped, "remaining": len(kept)},
                logger_name=self._logger_name,
            )
        self._cursors = kept
        return dropped


def _make_cursor(cursor_id: str, line: int, column: int) -> Cursor:
    return Cursor(
        id=cursor_id,
        position=Position(line, column),
        selection_anchor=None,
        desired_column=column,
    )


def _move_left(position: Position, unit: str, line_length: LineLengthFn) -> Position:
    if unit == "line":
        return Position(position.line, 0)
    if position.column > 0:
        return Position(position.line, position.column - 1)
    if position.line > 0:
        previous = position.line - 1
        return Position(previous, line_length(previous))
    return position


def _move_right(
    position: Position, unit: str, line_count: int, line_length: LineLengthFn
) -> Position:
    if unit == "line":
        return Position(position.line, line_length(position.line))
    if position.column < line_length(position.line):
        return Position(position.line, position.column + 1)
    if position.line < line_count - 1:
        return Position(position.line + 1, 0)
    return position


__all__ = ["CursorManager", "DEFAULT_PAGE_SIZE"]
