"""List-of-lines text storage that satisfies the ``LineSource`` protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class LineBuffer:
    """Host-side text buffer the cursor engine reads line metrics from.

    The engine never writes to it. Hosts that already own a document can
    implement ``LineSource`` directly instead of copying text into here.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        lines = text.splitlines()
        if not lines:
            lines = [""]
        elif text.endswith("\n"):
            lines.append("")
        return cls(_lines=list(lines), version=0)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineBuffer":
        return cls(_lines=list(lines) or [""], version=0)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace(self, lines: Iterable[str]) -> "LineBuffer":
        """Return a new buffer with the provided lines and bumped version."""

        return LineBuffer(_lines=list(lines) or [""], version=self.version + 1)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def line_length(self, index: int) -> int:
        return len(self._lines[index])
