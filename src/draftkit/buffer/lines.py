"""Line lookups and offset/location conversion over flat text."""

from __future__ import annotations

from typing import Tuple

Location = Tuple[int, int]  # (row, column)


def line_start(text: str, offset: int) -> int:
    """Index just after the last line break before ``offset``."""

    if offset <= 0:
        return 0
    return text.rfind("\n", 0, offset) + 1


def current_line(text: str, offset: int) -> str:
    """Text from the start of the line holding ``offset`` up to ``offset``."""

    return text[line_start(text, offset) : offset]


def location_to_offset(text: str, location: Location) -> int:
    row, col = location
    lines = text.split("\n")
    row = max(0, min(row, len(lines) - 1))
    offset = 0
    for index in range(row):
        offset += len(lines[index]) + 1  # newline
    return offset + max(0, min(col, len(lines[row])))


def offset_to_location(text: str, offset: int) -> Location:
    lines = text.split("\n")
    running = 0
    for row, line in enumerate(lines):
        if offset <= running + len(line):
            return (row, max(0, offset - running))
        running += len(line) + 1
    return (len(lines) - 1, len(lines[-1]))


__all__ = [
    "Location",
    "current_line",
    "line_start",
    "location_to_offset",
    "offset_to_location",
]
