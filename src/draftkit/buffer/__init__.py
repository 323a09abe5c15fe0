"""Buffer values, line helpers, and host synchronisation."""

from .lines import current_line, line_start, location_to_offset, offset_to_location
from .state import EditKind, EditResult, SelectionError, SelectionRange, TextBuffer
from .sync import (
    DeferredQueue,
    SurfaceSnapshot,
    SurfaceSync,
    TextSurface,
    snapshot_surface,
)
from .validation import clamp_offset, clamp_selection, ensure_selection

__all__ = [
    "EditKind",
    "EditResult",
    "SelectionError",
    "SelectionRange",
    "TextBuffer",
    "DeferredQueue",
    "SurfaceSnapshot",
    "SurfaceSync",
    "TextSurface",
    "snapshot_surface",
    "clamp_offset",
    "clamp_selection",
    "ensure_selection",
    "current_line",
    "line_start",
    "location_to_offset",
    "offset_to_location",
]
