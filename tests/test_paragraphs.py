from __future__ import annotations

from draftkit.screenplay import Paragraph, segment_document, split_html_paragraphs, strip_tags


def test_strip_tags_keeps_text_and_line_breaks() -> None:
    assert strip_tags("a<br>b") == "a\nb"
    assert strip_tags("<em>Tom</em> &amp; Jerry") == "Tom & Jerry"
    assert strip_tags("no markup") == "no markup"


def test_paragraph_from_markup_trims_both_views() -> None:
    paragraph = Paragraph.from_markup("  <b>Hi</b> there  ")

    assert paragraph.text == "Hi there"
    assert paragraph.markup == "<b>Hi</b> there"


def test_split_html_paragraphs_ignores_text_outside_paragraphs() -> None:
    paragraphs = split_html_paragraphs(
        "<h1>Title</h1><p class='x'>One</p>stray<p>Two<br/>lines</p>"
    )

    assert [p.text for p in paragraphs] == ["One", "Two\nlines"]
    assert paragraphs[1].markup == "Two<br/>lines"


def test_segment_document_drops_empty_units() -> None:
    units = segment_document(["", "  a  ", "\t", "b"])

    assert [unit.text for unit in units] == ["a", "b"]


def test_split_html_paragraphs_without_end_tags() -> None:
    paragraphs = split_html_paragraphs("<p>One<p class='b'><em>Two</em></p><p>Three")

    assert [p.text for p in paragraphs] == ["One", "Two", "Three"]
    assert paragraphs[1].markup == "<em>Two</em>"
