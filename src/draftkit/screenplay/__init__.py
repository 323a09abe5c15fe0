"""Screenplay parsing, colour coding, markup rendering and chat previews."""

from .chat import (
    NARRATOR,
    ChatBubble,
    bubble_side,
    parse_chat_bubbles,
    render_chat,
    script_lines,
)
from .colors import PALETTE, character_color, character_hash, color_index
from .formatter import format_screenplay, parse_screenplay, render_block, render_blocks
from .paragraphs import Paragraph, segment_document, split_html_paragraphs, strip_tags
from .rules import (
    RULES,
    ActionBlock,
    Block,
    Classification,
    ClassificationRule,
    DialogueBlock,
    HeadingBlock,
    classify,
)
from .styles import SCREENPLAY_STYLES
from .timing import estimate_duration, format_duration

__all__ = [
    "NARRATOR",
    "ChatBubble",
    "bubble_side",
    "parse_chat_bubbles",
    "render_chat",
    "script_lines",
    "PALETTE",
    "character_color",
    "character_hash",
    "color_index",
    "format_screenplay",
    "parse_screenplay",
    "render_block",
    "render_blocks",
    "Paragraph",
    "segment_document",
    "split_html_paragraphs",
    "strip_tags",
    "RULES",
    "ActionBlock",
    "Block",
    "Classification",
    "ClassificationRule",
    "DialogueBlock",
    "HeadingBlock",
    "classify",
    "SCREENPLAY_STYLES",
    "estimate_duration",
    "format_duration",
]
