"""Selection ranges, range algebra and the selection manager."""

from .manager import SelectionManager, selected_text
from .models import NormalizedRange, SelectionRange, WordBoundary
from .ranges import (
    find_word_boundary,
    is_empty,
    is_word_char,
    merge_overlapping,
    normalize,
    ranges_overlap,
)

__all__ = [
    "SelectionManager",
    "SelectionRange",
    "NormalizedRange",
    "WordBoundary",
    "find_word_boundary",
    "is_empty",
    "is_word_char",
    "merge_overlapping",
    "normalize",
    "ranges_overlap",
    "selected_text",
]
