"""Chat-bubble view of a script: one bubble per speaker turn."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, Sequence

from draftkit.runtime import telemetry

from .paragraphs import strip_tags

NARRATOR = "NARRATOR"

BubbleSide = Literal["left", "right", "center"]

_PARAGRAPH_END = re.compile(r"</p\s*>", re.IGNORECASE)
_SPEAKER_CUE = re.compile(r"^(.+?):\s*(.*)")


@dataclass(frozen=True, slots=True)
class ChatBubble:
    speaker: str
    text: str

    @property
    def is_narrator(self) -> bool:
        return self.speaker == NARRATOR


def script_lines(content: str) -> list[str]:
    """Visible, trimmed, non-empty lines; ``</p>`` and ``<br>`` end a line."""

    flattened = strip_tags(_PARAGRAPH_END.sub("\n", content))
    lines = (line.replace("\xa0", " ").strip() for line in flattened.split("\n"))
    return [line for line in lines if line]


def parse_chat_bubbles(content: str) -> list[ChatBubble]:
    """Group ``content`` into speaker turns.

    A ``Name: text`` line opens a new turn and any line without a cue is
    appended to the open turn. Lines seen before the first speaker become
    ``NARRATOR`` bubbles of their own. A turn whose text ends up empty is
    dropped.
    """

    bubbles: list[ChatBubble] = []
    speaker = ""
    parts: list[str] = []

    def close_turn() -> None:
        text = "\n".join(parts).strip()
        if speaker and text:
            bubbles.append(ChatBubble(speaker=speaker, text=text))

    with telemetry.span("screenplay::chat", component="screenplay") as handle:
        for line in script_lines(content):
            match = _SPEAKER_CUE.match(line)
            if match is not None:
                close_turn()
                speaker = match.group(1).strip()
                parts = [match.group(2)]
            elif speaker:
                parts.append(line)
            else:
                bubbles.append(ChatBubble(speaker=NARRATOR, text=line))
        close_turn()
        handle.add_metadata("bubbles", len(bubbles))
    return bubbles


def bubble_side(bubble: ChatBubble, characters: Sequence[str]) -> BubbleSide:
    """Alternate sides by cast order; unknown speakers sit on the left."""

    if bubble.is_narrator:
        return "center"
    cast = [name.strip() for name in characters]
    try:
        position = cast.index(bubble.speaker.strip())
    except ValueError:
        return "left"
    return "right" if position % 2 else "left"


def render_chat(bubbles: Sequence[ChatBubble]) -> str:
    """Plain-text transcript of ``bubbles`` for terminal previews."""

    rendered: list[str] = []
    for bubble in bubbles:
        if bubble.is_narrator:
            rendered.append(f"({bubble.text})")
        else:
            rendered.append(f"{bubble.speaker}\n  " + bubble.text.replace("\n", "\n  "))
    return "\n\n".join(rendered)


__all__ = [
    "NARRATOR",
    "BubbleSide",
    "ChatBubble",
    "bubble_side",
    "parse_chat_bubbles",
    "render_chat",
    "script_lines",
]
