"""Context object handed to every editing action."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from draftkit.buffer import EditResult, SelectionRange, TextBuffer
from draftkit.config import EditorSettings


@dataclass(frozen=True, slots=True)
class EditContext:
    """Buffer, selection and settings for one key event or toolbar action."""

    buffer: TextBuffer
    selection: SelectionRange
    settings: EditorSettings = field(default_factory=EditorSettings)

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def selected_text(self) -> str:
        return self.buffer.slice(self.selection.start, self.selection.end)


ActionOutcome = Optional[EditResult]

__all__ = ["ActionOutcome", "EditContext"]
