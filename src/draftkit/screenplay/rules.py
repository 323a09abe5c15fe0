"""Ordered classification rules for screenplay paragraphs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Literal, Optional, Union

from .paragraphs import Paragraph

BlockKind = Literal["dialogue", "heading", "action"]

_COLON_CUE = re.compile(r"^([^:]+?)\s*:\s*(.*)", re.DOTALL)
_PERIOD_CUE = re.compile(r"^([^.]+?)\s*\.\s+(.*)", re.DOTALL)


@dataclass(frozen=True, slots=True)
class DialogueBlock:
    line_number: int
    character: str
    speech: str
    color: str
    kind: BlockKind = "dialogue"


@dataclass(frozen=True, slots=True)
class HeadingBlock:
    text: str
    kind: BlockKind = "heading"


@dataclass(frozen=True, slots=True)
class ActionBlock:
    markup: str
    kind: BlockKind = "action"


Block = Union[DialogueBlock, HeadingBlock, ActionBlock]


@dataclass(frozen=True, slots=True)
class Classification:
    """Outcome of the first rule that accepted a paragraph."""

    kind: BlockKind
    paragraph: Paragraph
    character: str = ""
    speech: str = ""


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    kind: BlockKind
    matcher: Callable[[Paragraph], Optional[Classification]]

    def match(self, paragraph: Paragraph) -> Optional[Classification]:
        return self.matcher(paragraph)


def is_scene_heading(text: str) -> bool:
    return text.startswith("[") and text.endswith("]")


def _match_dialogue(paragraph: Paragraph) -> Optional[Classification]:
    text = paragraph.text
    # "[INT. OFFICE]" would otherwise read as a period cue.
    if is_scene_heading(text):
        return None
    match = _COLON_CUE.match(text) or _PERIOD_CUE.match(text)
    if match is None:
        return None
    return Classification(
        kind="dialogue",
        paragraph=paragraph,
        character=match.group(1).strip().upper(),
        speech=match.group(2).strip(),
    )


def _match_heading(paragraph: Paragraph) -> Optional[Classification]:
    if not is_scene_heading(paragraph.text):
        return None
    return Classification(kind="heading", paragraph=paragraph)


def _match_action(paragraph: Paragraph) -> Optional[Classification]:
    return Classification(kind="action", paragraph=paragraph)


RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("dialogue", _match_dialogue),
    ClassificationRule("heading", _match_heading),
    ClassificationRule("action", _match_action),
)


def classify(
    paragraph: Paragraph, rules: tuple[ClassificationRule, ...] = RULES
) -> Classification:
    for rule in rules:
        outcome = rule.match(paragraph)
        if outcome is not None:
            return outcome
    return Classification(kind="action", paragraph=paragraph)


__all__ = [
    "ActionBlock",
    "Block",
    "BlockKind",
    "Classification",
    "ClassificationRule",
    "DialogueBlock",
    "HeadingBlock",
    "RULES",
    "classify",
    "is_scene_heading",
]
