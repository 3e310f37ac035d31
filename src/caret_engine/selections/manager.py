"""Ordered selection-range list with editor selection helpers."""

from __future__ import annotations

from typing import List, Optional

from caret_engine.buffer.sync import GetLineFn, LineLengthFn
from caret_engine.runtime import telemetry

from . import ranges
from .models import NormalizedRange, SelectionRange, WordBoundary


class SelectionManager:
    """Holds zero or more selection ranges independent of cursor identity.

    Only ``add_selection`` runs the merge pass; ``set_selection`` and the
    word/line helpers replace the list outright.
    """

    normalize = staticmethod(ranges.normalize)
    is_empty = staticmethod(ranges.is_empty)
    ranges_overlap = staticmethod(ranges.ranges_overlap)
    find_word_boundary = staticmethod(ranges.find_word_boundary)

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._selections: List[SelectionRange] = []
        self._logger_name = logger_name

    def get_selections(self) -> tuple[SelectionRange, ...]:
        return tuple(self._selections)

    def get_primary(self) -> Optional[SelectionRange]:
        return self._selections[0] if self._selections else None

    def set_selection(
        self,
        anchor_line: int,
        anchor_column: int,
        active_line: int,
        active_column: int,
    ) -> None:
        self._selections = [
            SelectionRange(anchor_line, anchor_column, active_line, active_column)
        ]

    def add_selection(
        self,
        anchor_line: int,
        anchor_column: int,
        active_line: int,
        active_column: int,
    ) -> None:
        self._selections.append(
            SelectionRange(anchor_line, anchor_column, active_line, active_column)
        )
        self._merge_overlapping()

    def clear_selections(self) -> None:
        self._selections = []

    def has_selection(self) -> bool:
        return bool(self._selections)

    def select_word(self, line: int, column: int, line_text: str) -> WordBoundary:
        boundary = ranges.find_word_boundary(column, line_text)
        self.set_selection(line, boundary.start, line, boundary.end)
        return boundary

    def select_line(self, line: int, line_length: int) -> None:
        self.set_selection(line, 0, line, line_length)

    def expand_to_full_lines(self, line_length: LineLengthFn) -> None:
        if not self._selections:
            return
        norm = ranges.normalize(self._selections[0])
        self._selections[0] = SelectionRange(
            norm.start_line, 0, norm.end_line, line_length(norm.end_line)
        )

    def shrink_selection(self) -> None:
        """Pull both ends of the primary selection in by one column.

        A single-line selection two columns wide or less collapses to an
        empty selection at its midpoint instead.
        """

        if not self._selections:
            return
        norm = ranges.normalize(self._selections[0])

        if (
            norm.start_line == norm.end_line
            and norm.end_column - norm.start_column <= 2
        ):
            mid = (norm.start_column + norm.end_column) // 2
            self._selections[0] = SelectionRange(
                norm.start_line, mid, norm.end_line, mid
            )
            return

        self._selections[0] = SelectionRange(
            norm.start_line,
            norm.start_column + 1,
            norm.end_line,
            max(norm.start_column + 1, norm.end_column - 1),
        )

    def get_selected_text(
        self, selection: SelectionRange, get_line: GetLineFn
    ) -> str:
        return selected_text(ranges.normalize(selection), get_line)

    def _merge_overlapping(self) -> None:
        if len(self._selections) <= 1:
            return
        with telemetry.span(
            "selections::merge",
            logger_name=self._logger_name,
            component="selections",
            metadata={"selections": len(self._selections)},
        ) as handle:
            self._selections = ranges.merge_overlapping(self._selections)
            handle.add_metadata("remaining", len(self._selections))


def selected_text(norm: NormalizedRange, get_line: GetLineFn) -> str:
    # negative columns clamp to 0 instead of counting from the line end
    start_column = max(0, norm.start_column)
    end_column = max(0, norm.end_column)
    if norm.start_line == norm.end_line:
        return get_line(norm.start_line)[start_column:end_column]

    parts = [get_line(norm.start_line)[start_column:]]
    for index in range(norm.start_line + 1, norm.end_line):
        parts.append(get_line(index))
    parts.append(get_line(norm.end_line)[:end_column])
    return "\n".join(parts)


__all__ = ["SelectionManager", "selected_text"]
