"""Built-in bindings for the smart editor's intercepted keys."""

from __future__ import annotations

from typing import Iterable

from draftkit.actions import editing

from .models import ActionRef, Binding
from .registry import KeymapRegistry

NO_MODIFIERS: tuple[str, ...] = ("!shift", "!ctrl", "!alt", "!meta")

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="edit.indent",
        handler=editing.indent,
        description="Insert one indent unit",
    ),
    ActionRef(
        id="edit.line_break",
        handler=editing.line_break,
        description="Continue or exit the current list",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="tab.indent",
        key="tab",
        action_id="edit.indent",
        description="Indent instead of moving focus",
        when=NO_MODIFIERS,
    ),
    Binding(
        id="enter.line_break",
        key="enter",
        action_id="edit.line_break",
        description="List continuation",
        when=("!shift",),
    ),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Iterable[str] = (),
) -> None:
    """Register the built-in actions and bindings."""

    excluded = set(exclude_bindings)
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)
    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "NO_MODIFIERS", "load_default_keymaps"]
