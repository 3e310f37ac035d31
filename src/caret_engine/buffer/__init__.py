"""Host buffer boundary: line-source protocol, a list-backed buffer, clamping."""

from .document import LineBuffer
from .sync import GetLineFn, LineLengthFn, LineSource
from .validation import clamp_nonnegative, clamp_to_source

__all__ = [
    "LineBuffer",
    "LineSource",
    "LineLengthFn",
    "GetLineFn",
    "clamp_nonnegative",
    "clamp_to_source",
]
