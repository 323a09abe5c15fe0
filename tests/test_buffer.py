from __future__ import annotations

from typing import List

import pytest

from draftkit.buffer import (
    DeferredQueue,
    EditResult,
    SelectionError,
    SelectionRange,
    SurfaceSync,
    TextBuffer,
    clamp_selection,
    current_line,
    line_start,
    location_to_offset,
    offset_to_location,
)


class RecordingSurface:
    def __init__(self, text: str = "", selection: tuple[int, int] = (0, 0)) -> None:
        self.text = text
        self.selection = selection
        self.ops: List[str] = []

    def read_text(self) -> str:
        return self.text

    def read_selection(self) -> tuple[int, int]:
        return self.selection

    def replace_text(self, text: str) -> None:
        self.ops.append("replace")
        self.text = text
        self.selection = (len(text), len(text))

    def set_selection(self, start: int, end: int) -> None:
        self.ops.append("select")
        self.selection = (start, end)


def test_selection_range_rejects_invalid_offsets() -> None:
    with pytest.raises(SelectionError):
        SelectionRange(-1, 2)
    with pytest.raises(SelectionError):
        SelectionRange(5, 2)


def test_buffer_replace_range_returns_new_value() -> None:
    buffer = TextBuffer("hello")

    updated = buffer.replace_range(1, 3, "EE")

    assert updated.text == "hEElo"
    assert buffer.text == "hello"


def test_clamp_selection_pulls_offsets_inside_buffer() -> None:
    buffer = TextBuffer("abc")

    assert clamp_selection(buffer, -4, 99) == SelectionRange(0, 3)
    assert clamp_selection(buffer, 3, 1) == SelectionRange(1, 3)


def test_line_start_and_current_line() -> None:
    text = "first\nsecond line"

    assert line_start(text, 0) == 0
    assert line_start(text, 3) == 0
    assert line_start(text, 6) == 6
    assert current_line(text, 12) == "second"


def test_offset_location_conversion() -> None:
    text = "ab\ncde\n"

    assert offset_to_location(text, 0) == (0, 0)
    assert offset_to_location(text, 2) == (0, 2)
    assert offset_to_location(text, 3) == (1, 0)
    assert offset_to_location(text, 7) == (2, 0)
    assert location_to_offset(text, (1, 2)) == 5
    assert location_to_offset(text, (1, 99)) == 6


def test_surface_sync_defers_selection_until_queue_runs() -> None:
    surface = RecordingSurface("x")
    queue = DeferredQueue()
    result = EditResult(
        buffer=TextBuffer("x  y"), selection=SelectionRange.collapsed(3), kind="indent"
    )

    SurfaceSync(surface, queue.call_soon).apply(result)

    assert surface.text == "x  y"
    assert surface.selection == (4, 4)
    assert len(queue) == 1

    assert queue.run_pending() == 1
    assert surface.selection == (3, 3)
    assert surface.ops == ["replace", "select"]
