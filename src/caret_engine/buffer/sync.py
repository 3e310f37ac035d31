"""Boundary protocol between the engine and the host text buffer."""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

LineLengthFn = Callable[[int], int]
GetLineFn = Callable[[int], str]


@runtime_checkable
class LineSource(Protocol):
    """Read-only line metrics a host buffer exposes to the engine.

    ``line_length`` and ``get_line`` must be defined for every index in
    ``[0, line_count - 1]`` and must not mutate the buffer.
    """

    @property
    def line_count(self) -> int:
        ...

    def line_length(self, index: int) -> int:
        ...

    def get_line(self, index: int) -> str:
        ...
