"""Executable Textual app hosting the smart editor and a screenplay preview."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Static, TextArea
    from textual.widgets.text_area import Selection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use draftkit.adapters.textual.app"
    ) from exc

from draftkit.buffer.lines import location_to_offset, offset_to_location
from draftkit.config import EditorSettings, env_int, load_editor_settings
from draftkit.editor import SmartEditor
from draftkit.runtime import telemetry
from draftkit.screenplay import (
    estimate_duration,
    format_duration,
    format_screenplay,
    parse_chat_bubbles,
    render_chat,
)

from .controller import EditorHooks, SmartEditorAdapter


class TextAreaSurface:
    """Offset-based view over Textual's row/column ``TextArea``."""

    def __init__(self, area: TextArea) -> None:
        self.area = area

    def read_text(self) -> str:
        return self.area.text

    def read_selection(self) -> tuple[int, int]:
        text = self.area.text
        selection = self.area.selection
        first = location_to_offset(text, selection.start)
        second = location_to_offset(text, selection.end)
        return (min(first, second), max(first, second))

    def replace_text(self, text: str) -> None:
        self.area.text = text

    def set_selection(self, start: int, end: int) -> None:
        text = self.area.text
        self.area.selection = Selection(
            offset_to_location(text, start), offset_to_location(text, end)
        )


class SmartTextArea(TextArea):
    """``TextArea`` that offers each key to the adapter before handling it."""

    adapter: Optional[SmartEditorAdapter] = None

    def _on_key(self, event: events.Key) -> None:
        if self.adapter is not None and self.adapter.handle_key(event.key):
            event.prevent_default()
            event.stop()


class DraftkitApp(App[None]):
    CSS = """
    #workspace {
        height: 1fr;
    }

    #editor {
        width: 1fr;
    }

    #preview {
        width: 1fr;
        border: round $accent;
        padding: 0 1;
        overflow: auto;
    }

    #status-line {
        height: 1;
        background: $surface-darken-1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        ("f2", "token('bold')", "Bold"),
        ("f3", "token('italic')", "Italic"),
        ("f4", "token('heading1')", "Heading"),
        ("f5", "token('bullet')", "Bullet"),
        ("f6", "token('checkbox')", "Task"),
        ("f7", "preview", "Preview"),
        ("f8", "chat_preview", "Chat"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, *, settings: EditorSettings | None = None, initial_text: str = ""
    ) -> None:
        super().__init__()
        self.editor = SmartEditor(settings=settings)
        self._initial_text = initial_text
        self._area: SmartTextArea | None = None
        self._preview: Static | None = None
        self._status: Static | None = None
        self.adapter: SmartEditorAdapter | None = None
        self.logger = telemetry.get_logger("draftkit.app")

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Horizontal(id="workspace"):
            self._area = SmartTextArea(
                self._initial_text, id="editor", tab_behavior="indent"
            )
            yield self._area
            self._preview = Static("", id="preview", markup=False)
            yield self._preview
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        hooks = EditorHooks(
            surface=self._surface,
            schedule=self.call_after_refresh,
            update_status=self._update_status,
            log=self.logger.debug,
        )
        self.adapter = SmartEditorAdapter(self.editor, hooks)
        if self._area is not None:
            self._area.adapter = self.adapter
            self._area.focus()

    def _surface(self) -> TextAreaSurface | None:
        if self._area is None or not self._area.is_mounted:
            return None
        return TextAreaSurface(self._area)

    def action_token(self, name: str) -> None:
        if self.adapter is not None:
            self.adapter.apply_token(name)

    def action_preview(self) -> None:
        if self._area is None or self._preview is None:
            return
        text = self._area.text
        self._preview.update(format_screenplay(text.splitlines()))
        self._update_status(f"~{format_duration(estimate_duration(text))}")

    def action_chat_preview(self) -> None:
        if self._area is None or self._preview is None:
            return
        bubbles = parse_chat_bubbles(self._area.text)
        self._preview.update(render_chat(bubbles) or "No dialogue yet. Type NAME: line.")
        self._update_status(f"{len(bubbles)} bubbles")

    def _update_status(self, status: str) -> None:
        if self._status is not None:
            self._status.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the draftkit editor demo.")
    parser.add_argument("path", nargs="?", type=Path, help="Text file to open")
    parser.add_argument(
        "--indent-width",
        type=int,
        default=env_int("INDENT_WIDTH", 2),
        help="Spaces inserted by Tab (default: 2)",
    )
    parser.add_argument(
        "--no-list-continuation",
        action="store_true",
        help="Let Enter behave normally inside lists",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = replace(
        load_editor_settings(),
        indent_width=args.indent_width,
        continue_lists=not args.no_list_continuation,
    )
    initial = args.path.read_text(encoding="utf-8") if args.path else ""
    DraftkitApp(settings=settings, initial_text=initial).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
