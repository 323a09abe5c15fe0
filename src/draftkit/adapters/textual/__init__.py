"""Textual host binding for the smart editor."""

from .controller import EditorHooks, SmartEditorAdapter

__all__ = ["EditorHooks", "SmartEditorAdapter"]
