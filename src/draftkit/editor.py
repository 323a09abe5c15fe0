"""Smart editing assistant: keystroke interception and toolbar insertions."""

from __future__ import annotations

from typing import Iterable, Optional

from draftkit.actions import EditContext, editing, get_token
from draftkit.buffer import EditResult, SelectionRange, TextBuffer, ensure_selection
from draftkit.config import EditorSettings, load_editor_settings
from draftkit.keymaps import KeymapRegistry, KeymapResolver, KeyStroke, load_default_keymaps
from draftkit.runtime import telemetry


class SmartEditor:
    """Stateless between events; every call works on the values it is given."""

    def __init__(
        self,
        *,
        settings: EditorSettings | None = None,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.settings = settings or load_editor_settings()
        self.logger = telemetry.get_logger("draftkit.editor")
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="draftkit.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="draftkit.keymaps"
        )

    def handle_key(
        self,
        buffer: Optional[TextBuffer],
        selection: Optional[SelectionRange],
        key: str,
        modifiers: Iterable[str] = (),
    ) -> Optional[EditResult]:
        """Return the edit for an intercepted key, or ``None`` to let it through."""

        if buffer is None:
            return None
        stroke = KeyStroke(key, tuple(modifiers))
        resolution = self.keymap_resolver.resolve(stroke)
        if resolution.match is None:
            return None

        context = self._context(buffer, selection)
        action = resolution.match.action
        with telemetry.span(
            f"editor::{action.id}",
            component="editor",
            metadata={"key": stroke.token, "binding_id": resolution.match.binding.id},
        ) as handle:
            outcome = action(context)
            handle.add_metadata("handled", outcome is not None)

        if not isinstance(outcome, EditResult):
            return None
        telemetry.record_event(
            "editor.key",
            level="debug",
            data={"key": stroke.token, "kind": outcome.kind, "cursor": outcome.cursor},
        )
        return outcome

    def insert_syntax(
        self,
        buffer: TextBuffer,
        selection: Optional[SelectionRange],
        prefix: str,
        suffix: str = "",
    ) -> EditResult:
        context = self._context(buffer, selection)
        with telemetry.span(
            "editor::insert_syntax", component="editor", metadata={"prefix": prefix}
        ):
            return editing.insert_syntax(context, prefix, suffix)

    def apply_token(
        self, buffer: TextBuffer, selection: Optional[SelectionRange], name: str
    ) -> EditResult:
        token = get_token(name)
        return self.insert_syntax(buffer, selection, token.prefix, token.suffix)

    def insert_character_cue(
        self, buffer: TextBuffer, selection: Optional[SelectionRange], name: str
    ) -> EditResult:
        context = self._context(buffer, selection)
        with telemetry.span(
            "editor::insert_character_cue", component="editor", metadata={"name": name}
        ):
            return editing.insert_character_cue(context, name)

    def _context(
        self, buffer: TextBuffer, selection: Optional[SelectionRange]
    ) -> EditContext:
        if selection is None:
            selection = SelectionRange.collapsed(buffer.length)
        return EditContext(
            buffer=buffer,
            selection=ensure_selection(buffer, selection),
            settings=self.settings,
        )


__all__ = ["SmartEditor"]
