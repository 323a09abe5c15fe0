"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .state import SelectionRange, TextBuffer


def clamp_offset(buffer: TextBuffer, offset: int) -> int:
    return max(0, min(offset, buffer.length))


def clamp_selection(buffer: TextBuffer, start: int, end: int) -> SelectionRange:
    """Pull host-supplied offsets back inside ``buffer`` and order them."""

    first = clamp_offset(buffer, start)
    second = clamp_offset(buffer, end)
    if first > second:
        first, second = second, first
    return SelectionRange(first, second)


def ensure_selection(buffer: TextBuffer, selection: SelectionRange) -> SelectionRange:
    if buffer.fits(selection):
        return selection
    return clamp_selection(buffer, selection.start, selection.end)
