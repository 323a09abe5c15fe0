"""Toolbar syntax tokens and the block/inline split."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

BLOCK_PREFIXES: frozenset[str] = frozenset({"# ", "## ", "- ", "> ", "- [ ] "})


@dataclass(frozen=True, slots=True)
class SyntaxToken:
    prefix: str
    suffix: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not self.prefix:
            raise ValueError("SyntaxToken prefix cannot be empty")

    @property
    def is_block(self) -> bool:
        return is_block_prefix(self.prefix)


def is_block_prefix(prefix: str) -> bool:
    return prefix in BLOCK_PREFIXES


TOOLBAR_TOKENS: Mapping[str, SyntaxToken] = MappingProxyType(
    {
        "heading1": SyntaxToken("# ", description="Heading 1"),
        "heading2": SyntaxToken("## ", description="Heading 2"),
        "bullet": SyntaxToken("- ", description="Bulleted list"),
        "quote": SyntaxToken("> ", description="Blockquote"),
        "checkbox": SyntaxToken("- [ ] ", description="Task item"),
        "bold": SyntaxToken("**", "**", description="Bold"),
        "italic": SyntaxToken("*", "*", description="Italic"),
        "strike": SyntaxToken("~~", "~~", description="Strikethrough"),
        "code": SyntaxToken("`", "`", description="Inline code"),
    }
)


def get_token(name: str) -> SyntaxToken:
    try:
        return TOOLBAR_TOKENS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown syntax token '{name}'") from exc


__all__ = [
    "BLOCK_PREFIXES",
    "SyntaxToken",
    "TOOLBAR_TOKENS",
    "get_token",
    "is_block_prefix",
]
