"""Split authored content into trimmed paragraph units."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from html.parser import HTMLParser
from typing import Iterable, Sequence

_PARAGRAPH_TAG = re.compile(r"<p[\s>]", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class Paragraph:
    """One authored block: plain ``text`` plus its original inline ``markup``."""

    text: str
    markup: str

    @classmethod
    def from_markup(cls, fragment: str) -> "Paragraph":
        return cls(text=strip_tags(fragment).strip(), markup=fragment.strip())

    @property
    def is_empty(self) -> bool:
        return not self.text


class _FragmentReader(HTMLParser):
    """Collects visible text and raw markup, optionally per ``<p>`` element."""

    def __init__(self, *, split_paragraphs: bool) -> None:
        super().__init__(convert_charrefs=False)
        self._split = split_paragraphs
        self._open = False
        self._text: list[str] = []
        self._markup: list[str] = []
        self.paragraphs: list[Paragraph] = []

    @property
    def _capturing(self) -> bool:
        return not self._split or self._open

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if self._split and tag == "p":
            # A <p> cannot nest; an open one is closed implicitly.
            if self._open:
                self.paragraphs.append(self._flush())
            self._text, self._markup = [], []
            self._open = True
            return
        if not self._capturing:
            return
        self._markup.append(self.get_starttag_text() or f"<{tag}>")
        if tag == "br":
            self._text.append("\n")

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if not self._capturing:
            return
        self._markup.append(self.get_starttag_text() or f"<{tag} />")
        if tag == "br":
            self._text.append("\n")

    def handle_endtag(self, tag: str) -> None:
        if self._split and tag == "p":
            if self._open:
                self._open = False
                self.paragraphs.append(self._flush())
            return
        if self._capturing:
            self._markup.append(f"</{tag}>")

    def handle_data(self, data: str) -> None:
        if self._capturing:
            self._markup.append(data)
            self._text.append(data)

    def handle_entityref(self, name: str) -> None:
        self._reference(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self._reference(f"&#{name};")

    def _reference(self, raw: str) -> None:
        if self._capturing:
            self._markup.append(raw)
            self._text.append(html.unescape(raw))

    def _flush(self) -> Paragraph:
        return Paragraph(
            text="".join(self._text).strip(), markup="".join(self._markup).strip()
        )

    def finish(self) -> Paragraph:
        self.close()
        if self._split and self._open:
            self.paragraphs.append(self._flush())
            self._open = False
        return self._flush()


def strip_tags(fragment: str) -> str:
    if "<" not in fragment and "&" not in fragment:
        return fragment
    reader = _FragmentReader(split_paragraphs=False)
    reader.feed(fragment)
    return reader.finish().text


def split_html_paragraphs(content: str) -> list[Paragraph]:
    """Return one :class:`Paragraph` per ``<p>`` element, in document order."""

    reader = _FragmentReader(split_paragraphs=True)
    reader.feed(content)
    reader.finish()
    return reader.paragraphs


def segment_document(document: str | Sequence[str]) -> list[Paragraph]:
    """Paragraph units for ``document`` with empty ones dropped.

    A sequence is taken as already segmented. A string holding ``<p>``
    elements is split on them; any other string is split on line breaks.
    """

    if isinstance(document, str):
        if _PARAGRAPH_TAG.search(document):
            units: Iterable[Paragraph] = split_html_paragraphs(document)
        else:
            units = (Paragraph.from_markup(line) for line in document.splitlines())
    else:
        units = (Paragraph.from_markup(item) for item in document)
    return [unit for unit in units if not unit.is_empty]


__all__ = ["Paragraph", "segment_document", "split_html_paragraphs", "strip_tags"]
