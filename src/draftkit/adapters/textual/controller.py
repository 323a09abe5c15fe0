"""Host-agnostic controller wiring a text surface to the SmartEditor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from draftkit.buffer import EditResult, SurfaceSync, TextSurface, snapshot_surface
from draftkit.buffer.sync import Scheduler
from draftkit.editor import SmartEditor
from draftkit.keymaps import KeyStroke


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorHooks:
    """Callbacks the adapter uses to reach the host UI."""

    surface: Callable[[], Optional[TextSurface]]
    schedule: Scheduler
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class SmartEditorAdapter:
    """Turns host key tokens and toolbar clicks into committed edits."""

    def __init__(self, editor: SmartEditor, hooks: EditorHooks) -> None:
        self.editor = editor
        self.hooks = hooks

    def handle_key(self, token: str) -> bool:
        """Return ``True`` when the host must suppress its default handling."""

        surface = self.hooks.surface()
        snapshot = snapshot_surface(surface)
        if surface is None or snapshot is None:
            self._log("key -> host not ready", token=token)
            return False

        stroke = KeyStroke.parse(token)
        self._log("key ->", key=stroke.key, mods=stroke.modifiers)
        result = self.editor.handle_key(
            snapshot.buffer, snapshot.selection, stroke.key, stroke.modifiers
        )
        if result is None:
            self._log("result <- passthrough")
            return False
        self._commit(surface, result)
        return True

    def apply_token(self, name: str) -> bool:
        surface = self.hooks.surface()
        snapshot = snapshot_surface(surface)
        if surface is None or snapshot is None:
            return False
        result = self.editor.apply_token(snapshot.buffer, snapshot.selection, name)
        self._commit(surface, result)
        return True

    def insert_character_cue(self, name: str) -> bool:
        surface = self.hooks.surface()
        snapshot = snapshot_surface(surface)
        if surface is None or snapshot is None:
            return False
        result = self.editor.insert_character_cue(
            snapshot.buffer, snapshot.selection, name
        )
        self._commit(surface, result)
        return True

    def _commit(self, surface: TextSurface, result: EditResult) -> None:
        SurfaceSync(surface, self.hooks.schedule).apply(result)
        self.hooks.update_status(result.kind)
        self._log(
            "result <-",
            kind=result.kind,
            cursor=result.cursor,
            length=result.buffer.length,
        )

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(f"{key}={value!r}" for key, value in fields.items())
        self.hooks.log(" ".join(parts))


__all__ = ["EditorHooks", "SmartEditorAdapter"]
