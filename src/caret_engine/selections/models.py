"""Selection range value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Anchor (where the gesture began) plus active (moving) end."""

    anchor_line: int
    anchor_column: int
    active_line: int
    active_column: int

    @property
    def anchor(self) -> tuple[int, int]:
        return (self.anchor_line, self.anchor_column)

    @property
    def active(self) -> tuple[int, int]:
        return (self.active_line, self.active_column)

    @classmethod
    def between(
        cls, anchor: tuple[int, int], active: tuple[int, int]
    ) -> "SelectionRange":
        return cls(anchor[0], anchor[1], active[0], active[1])


@dataclass(frozen=True, slots=True)
class NormalizedRange:
    """Range with ``start <= end`` under ``(line, column)`` ordering."""

    start_line: int
    start_column: int
    end_line: int
    end_column: int

    @property
    def start(self) -> tuple[int, int]:
        return (self.start_line, self.start_column)

    @property
    def end(self) -> tuple[int, int]:
        return (self.end_line, self.end_column)

    def as_selection(self) -> SelectionRange:
        """Forward-oriented range: anchor at start, active at end."""

        return SelectionRange(
            self.start_line, self.start_column, self.end_line, self.end_column
        )


@dataclass(frozen=True, slots=True)
class WordBoundary:
    start: int
    end: int
    word: str


__all__ = ["SelectionRange", "NormalizedRange", "WordBoundary"]
