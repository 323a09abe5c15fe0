"""Editing verbs behind the smart editor's keys and toolbar.

Each action takes an :class:`EditContext` and returns either an
:class:`EditResult` or ``None`` when the host should keep its default
behaviour.
"""

from __future__ import annotations

from draftkit.buffer import EditKind, EditResult, SelectionRange, TextBuffer
from draftkit.buffer.lines import line_start

from .base import ActionOutcome, EditContext
from .lists import match_list_prefix
from .syntax import is_block_prefix


def _result(buffer: TextBuffer, cursor: int, kind: EditKind) -> EditResult:
    return EditResult(buffer=buffer, selection=SelectionRange.collapsed(cursor), kind=kind)


def _replace_selection(context: EditContext, text: str) -> TextBuffer:
    selection = context.selection
    return context.buffer.replace_range(selection.start, selection.end, text)


def indent(context: EditContext) -> ActionOutcome:
    unit = context.settings.indent_unit
    buffer = _replace_selection(context, unit)
    return _result(buffer, context.selection.start + len(unit), "indent")


def line_break(context: EditContext) -> ActionOutcome:
    """Continue or leave a list; ``None`` when the line carries no marker."""

    if not context.settings.continue_lists:
        return None

    start = context.selection.start
    head = line_start(context.text, start)
    line = context.text[head:start]
    matched = match_list_prefix(line)
    if matched is None:
        return None

    if matched.is_bare(line):
        buffer = context.buffer.replace_range(head, start, "")
        return _result(buffer, head, "list_exit")

    # Numbered markers are repeated as typed, never incremented.
    inserted = "\n" + matched.continuation
    buffer = _replace_selection(context, inserted)
    return _result(buffer, start + len(inserted), "list_continue")


def insert_syntax(context: EditContext, prefix: str, suffix: str = "") -> EditResult:
    selection = context.selection
    if is_block_prefix(prefix):
        head = line_start(context.text, selection.start)
        buffer = context.buffer.replace_range(head, head, prefix)
        return _result(buffer, selection.start + len(prefix), "block")

    wrapped = prefix + context.selected_text + suffix
    buffer = _replace_selection(context, wrapped)
    if selection.is_empty:
        return _result(buffer, selection.start + len(prefix), "inline")
    return _result(buffer, selection.start + len(wrapped), "inline")


def insert_character_cue(context: EditContext, name: str) -> EditResult:
    """Drop a ``NAME: `` speaker cue in place of the selection."""

    cue = f"{name.strip().upper()}: "
    buffer = _replace_selection(context, cue)
    return _result(buffer, context.selection.start + len(cue), "cue")


__all__ = [
    "indent",
    "insert_character_cue",
    "insert_syntax",
    "line_break",
]
