"""Editing verbs and the marker/token tables they rely on."""

from .base import ActionOutcome, EditContext
from .editing import indent, insert_character_cue, insert_syntax, line_break
from .lists import ListPrefix, match_list_prefix
from .syntax import BLOCK_PREFIXES, TOOLBAR_TOKENS, SyntaxToken, get_token, is_block_prefix

__all__ = [
    "ActionOutcome",
    "EditContext",
    "indent",
    "insert_character_cue",
    "insert_syntax",
    "line_break",
    "ListPrefix",
    "match_list_prefix",
    "BLOCK_PREFIXES",
    "TOOLBAR_TOKENS",
    "SyntaxToken",
    "get_token",
    "is_block_prefix",
]
