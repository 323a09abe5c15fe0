"""Turn authored paragraphs into screenplay markup."""

from __future__ import annotations

from html import escape
from typing import Iterable, Sequence, Union

from draftkit.runtime import telemetry

from .colors import character_color
from .paragraphs import segment_document
from .rules import ActionBlock, Block, DialogueBlock, HeadingBlock, classify

Document = Union[str, Sequence[str]]


def parse_screenplay(document: Document) -> list[Block]:
    """Classify every non-empty paragraph; dialogue is numbered from 1."""

    blocks: list[Block] = []
    line_number = 0
    for paragraph in segment_document(document):
        outcome = classify(paragraph)
        if outcome.kind == "dialogue":
            line_number += 1
            blocks.append(
                DialogueBlock(
                    line_number=line_number,
                    character=outcome.character,
                    speech=outcome.speech,
                    color=character_color(outcome.character),
                )
            )
        elif outcome.kind == "heading":
            blocks.append(HeadingBlock(text=paragraph.text.upper()))
        else:
            blocks.append(ActionBlock(markup=paragraph.markup))
    return blocks


def render_block(block: Block) -> str:
    if isinstance(block, DialogueBlock):
        color = block.color
        return (
            '<div class="dialogue-block">\n'
            f'    <div class="line-number">{block.line_number}</div>\n'
            f'    <div class="character" style="color: {color}; '
            f'border-bottom: 1pt solid {color}44;">{escape(block.character)}</div>\n'
            f'    <div class="speech">{escape(block.speech)}</div>\n'
            "</div>"
        )
    if isinstance(block, HeadingBlock):
        return f'<div class="slugline">{escape(block.text)}</div>'
    return f'<div class="action">{block.markup}</div>'


def render_blocks(blocks: Iterable[Block]) -> str:
    return "\n".join(render_block(block) for block in blocks)


def _raw(document: Document) -> str:
    if isinstance(document, str):
        return document
    return "".join(document)


def format_screenplay(document: Document) -> str:
    """Render ``document`` as screenplay markup.

    When nothing in the document is a dialogue line or a scene heading the
    input is handed back untouched, so plain prose is never lost or emptied.
    """

    with telemetry.span("screenplay::format", component="screenplay") as handle:
        blocks = parse_screenplay(document)
        dialogue = sum(1 for block in blocks if block.kind == "dialogue")
        headings = sum(1 for block in blocks if block.kind == "heading")
        handle.add_metadata("blocks", len(blocks))
        handle.add_metadata("dialogue", dialogue)

        if not dialogue and not headings:
            telemetry.record_event(
                "screenplay.fallback", level="debug", data={"blocks": len(blocks)}
            )
            return _raw(document)
        return render_blocks(blocks)


__all__ = [
    "Document",
    "format_screenplay",
    "parse_screenplay",
    "render_block",
    "render_blocks",
]
