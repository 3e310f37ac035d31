"""Pure range algebra: normalization, overlap, merging and word boundaries."""

from __future__ import annotations

from typing import Iterable, List

from .models import NormalizedRange, SelectionRange, WordBoundary


def is_word_char(char: str) -> bool:
    """Return ``True`` for ``_`` and any Unicode letter or digit.

    ``str.isalnum`` covers the Unicode letter (L*) and number (N*)
    categories, so ``"é"``, ``"ß"`` and ``"٣"`` are word characters while
    whitespace, punctuation and symbols are not.
    """

    return char == "_" or char.isalnum()


def normalize(selection: SelectionRange) -> NormalizedRange:
    if selection.anchor <= selection.active:
        return NormalizedRange(
            selection.anchor_line,
            selection.anchor_column,
            selection.active_line,
            selection.active_column,
        )
    return NormalizedRange(
        selection.active_line,
        selection.active_column,
        selection.anchor_line,
        selection.anchor_column,
    )


def is_empty(selection: SelectionRange) -> bool:
    return selection.anchor == selection.active


def ranges_overlap(a: NormalizedRange, b: NormalizedRange) -> bool:
    """Half-open overlap test: ranges that only touch do not overlap."""

    if a.end_line < b.start_line or b.end_line < a.start_line:
        return False
    if a.end_line == b.start_line and a.end_column <= b.start_column:
        return False
    if b.end_line == a.start_line and b.end_column <= a.start_column:
        return False
    return True


def merge_overlapping(selections: Iterable[SelectionRange]) -> List[SelectionRange]:
    """Sort by start and fold overlapping neighbours into forward ranges.

    Ranges that do not take part in a merge keep their orientation.
    """

    pairs = [(normalize(selection), selection) for selection in selections]
    if len(pairs) <= 1:
        return [selection for _, selection in pairs]

    pairs.sort(key=lambda pair: pair[0].start)

    running, first = pairs[0]
    merged: List[SelectionRange] = [first]
    for norm, original in pairs[1:]:
        if ranges_overlap(running, norm):
            end = max(running.end, norm.end)
            running = NormalizedRange(
                running.start_line, running.start_column, end[0], end[1]
            )
            merged[-1] = running.as_selection()
        else:
            merged.append(original)
            running = norm
    return merged


def find_word_boundary(column: int, line_text: str) -> WordBoundary:
    if not line_text:
        return WordBoundary(start=0, end=0, word="")

    col = max(0, min(column, len(line_text) - 1))
    if not is_word_char(line_text[col]):
        return WordBoundary(start=col, end=col + 1, word=line_text[col])

    start = col
    while start > 0 and is_word_char(line_text[start - 1]):
        start -= 1

    end = col
    while end < len(line_text) and is_word_char(line_text[end]):
        end += 1

    return WordBoundary(start=start, end=end, word=line_text[start:end])


__all__ = [
    "find_word_boundary",
    "is_empty",
    "is_word_char",
    "merge_overlapping",
    "normalize",
    "ranges_overlap",
]
