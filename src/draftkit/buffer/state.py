"""Immutable buffer values and the results produced by editing actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EditKind = Literal["indent", "list_continue", "list_exit", "block", "inline", "cue"]


class SelectionError(ValueError):
    """Raised when a selection range is constructed with invalid offsets."""


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Zero-based ``[start, end)`` offsets into a buffer."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise SelectionError(f"negative offset in ({self.start}, {self.end})")
        if self.start > self.end:
            raise SelectionError(f"start {self.start} is after end {self.end}")

    @classmethod
    def collapsed(cls, offset: int) -> "SelectionRange":
        return cls(offset, offset)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True, slots=True)
class TextBuffer:
    """A snapshot of editable text. Mutations return new buffers."""

    text: str = ""

    @property
    def length(self) -> int:
        return len(self.text)

    def slice(self, start: int, end: int) -> str:
        return self.text[start:end]

    def replace_range(self, start: int, end: int, text: str) -> "TextBuffer":
        return TextBuffer(self.text[:start] + text + self.text[end:])

    def fits(self, selection: SelectionRange) -> bool:
        return selection.end <= self.length


@dataclass(frozen=True, slots=True)
class EditResult:
    """New buffer plus the selection to restore once the host shows it."""

    buffer: TextBuffer
    selection: SelectionRange
    kind: EditKind

    @property
    def cursor(self) -> int:
        return self.selection.end


__all__ = [
    "EditKind",
    "EditResult",
    "SelectionError",
    "SelectionRange",
    "TextBuffer",
]
