"""Adapter boundary types for pushing edits into host widgets.

Hosts reset their own selection when their value is replaced from outside,
so an edit is committed in two phases: the text is replaced immediately and
the selection is applied by a continuation the host runs once the new value
is visible.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional, Protocol

from .state import EditResult, SelectionRange, TextBuffer
from .validation import clamp_selection

Continuation = Callable[[], None]
Scheduler = Callable[[Continuation], None]


class TextSurface(Protocol):
    """What an input widget must offer to host the editing assistant."""

    def read_text(self) -> str:
        ...

    def read_selection(self) -> tuple[int, int]:
        ...

    def replace_text(self, text: str) -> None:
        ...

    def set_selection(self, start: int, end: int) -> None:
        ...


@dataclass(slots=True)
class SurfaceSnapshot:
    buffer: TextBuffer
    selection: SelectionRange


def snapshot_surface(surface: Optional[TextSurface]) -> Optional[SurfaceSnapshot]:
    """Read a surface into immutable values; ``None`` when no surface is bound."""

    if surface is None:
        return None
    buffer = TextBuffer(surface.read_text())
    start, end = surface.read_selection()
    return SurfaceSnapshot(buffer=buffer, selection=clamp_selection(buffer, start, end))


class DeferredQueue:
    """FIFO of continuations drained by the host after it commits a value."""

    def __init__(self) -> None:
        self._pending: Deque[Continuation] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def call_soon(self, callback: Continuation) -> None:
        self._pending.append(callback)

    def run_pending(self) -> int:
        """Run the continuations queued so far; returns how many ran."""

        count = len(self._pending)
        for _ in range(count):
            self._pending.popleft()()
        return count


class SurfaceSync:
    """Applies :class:`EditResult` values to a surface in two phases."""

    def __init__(self, surface: TextSurface, schedule: Scheduler) -> None:
        self.surface = surface
        self._schedule = schedule

    def apply(self, result: EditResult) -> None:
        self.surface.replace_text(result.buffer.text)
        selection = result.selection
        self._schedule(
            lambda: self.surface.set_selection(selection.start, selection.end)
        )


__all__ = [
    "Continuation",
    "DeferredQueue",
    "Scheduler",
    "SurfaceSnapshot",
    "SurfaceSync",
    "TextSurface",
    "snapshot_surface",
]
