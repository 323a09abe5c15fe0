from __future__ import annotations

from draftkit.screenplay import (
    PALETTE,
    ActionBlock,
    DialogueBlock,
    HeadingBlock,
    SCREENPLAY_STYLES,
    character_color,
    estimate_duration,
    format_duration,
    format_screenplay,
    parse_screenplay,
)


def test_scene_dialogue_action_round_trip() -> None:
    blocks = parse_screenplay(["[INT. OFFICE]", "JOHN: Hello there.", "He waves."])

    assert [block.kind for block in blocks] == ["heading", "dialogue", "action"]
    heading, dialogue, action = blocks
    assert isinstance(heading, HeadingBlock)
    assert heading.text == "[INT. OFFICE]"
    assert dialogue == DialogueBlock(
        line_number=1, character="JOHN", speech="Hello there.", color=PALETTE[0]
    )
    assert isinstance(action, ActionBlock)
    assert action.markup == "He waves."


def test_formatted_markup_keeps_paragraph_order() -> None:
    markup = format_screenplay(["[int. office]", "JOHN: Hello there.", "He waves."])

    assert markup.count('class="dialogue-block"') == 1
    assert markup.index('class="slugline">[INT. OFFICE]') < markup.index(
        '<div class="line-number">1</div>'
    )
    assert markup.index("Hello there.") < markup.index('<div class="action">He waves.</div>')
    assert f"color: {PALETTE[0]};" in markup


def test_dialogue_numbering_skips_other_blocks() -> None:
    blocks = parse_screenplay(
        ["[EXT. PARK]", "Birds sing", "ANN: Morning", "", "   ", "bob : Hi ann", "[CUT]"]
    )

    dialogue = [block for block in blocks if isinstance(block, DialogueBlock)]
    assert [(d.line_number, d.character, d.speech) for d in dialogue] == [
        (1, "ANN", "Morning"),
        (2, "BOB", "Hi ann"),
    ]
    assert len(blocks) == 5


def test_period_space_separator_marks_dialogue() -> None:
    (block,) = parse_screenplay(["Mary. I'm here."])

    assert isinstance(block, DialogueBlock)
    assert block.character == "MARY"
    assert block.speech == "I'm here."
    assert block.color == character_color("MARY")


def test_trailing_period_is_action() -> None:
    (block,) = parse_screenplay(["She leaves.", "[X]"])[:1]

    assert isinstance(block, ActionBlock)


def test_colon_inside_heading_stays_heading() -> None:
    blocks = parse_screenplay(["[FLASHBACK: 1999]", "NOTE: [aside]"])

    assert isinstance(blocks[0], HeadingBlock)
    assert isinstance(blocks[1], DialogueBlock)
    assert blocks[1].speech == "[aside]"


def test_same_character_same_color_across_documents() -> None:
    first = parse_screenplay(["JOHN: one", "MARY: two", "john: three"])
    second = parse_screenplay(["JOHN: again"])

    colors = {block.color for block in first + second if block.character == "JOHN"}  # type: ignore[union-attr]
    assert colors == {character_color("JOHN")}


def test_colliding_characters_render_same_color() -> None:
    markup = format_screenplay(["A: first", "H: second"])

    assert markup.count(f"color: {PALETTE[2]};") == 2


def test_text_is_escaped_but_action_markup_is_preserved() -> None:
    markup = format_screenplay(
        ["JOHN: <b>Hi</b> & bye", "He <em>runs</em> away"]
    )

    assert '<div class="speech">Hi &amp; bye</div>' in markup
    assert '<div class="action">He <em>runs</em> away</div>' in markup


def test_all_prose_document_falls_back_to_input() -> None:
    paragraphs = ["He walks in", "She sits down"]

    assert format_screenplay(paragraphs) == "He walks inShe sits down"
    assert format_screenplay("just some prose") == "just some prose"


def test_empty_paragraphs_only_returns_input() -> None:
    assert format_screenplay(["", "   "]) == "   "
    assert parse_screenplay(["", "   "]) == []


def test_html_document_is_split_on_paragraphs() -> None:
    content = (
        "<p>[int. house]</p>"
        "<p><strong>ANNA:</strong> Hello &amp; welcome</p>"
        "<p> </p>"
        "<p>She <b>laughs</b></p>"
    )

    blocks = parse_screenplay(content)

    assert [block.kind for block in blocks] == ["heading", "dialogue", "action"]
    assert blocks[1] == DialogueBlock(
        line_number=1,
        character="ANNA",
        speech="Hello & welcome",
        color=character_color("ANNA"),
    )
    assert blocks[2] == ActionBlock(markup="She <b>laughs</b>")


def test_plain_string_document_is_split_on_lines() -> None:
    blocks = parse_screenplay("[INT. CAR]\n\nTOM: Drive.\nRain falls")

    assert [block.kind for block in blocks] == ["heading", "dialogue", "action"]


def test_stylesheet_covers_rendered_classes() -> None:
    for css_class in ("slugline", "action", "dialogue-block", "line-number", "character", "speech"):
        assert f".{css_class}" in SCREENPLAY_STYLES


def test_duration_estimate() -> None:
    assert estimate_duration("") == 0
    assert estimate_duration("x" * 13) == 2
    assert format_duration(estimate_duration("x" * 12 * 75)) == "1m 15s"


def test_unclosed_paragraphs_are_closed_by_the_next_one() -> None:
    blocks = parse_screenplay("<p>JOHN: hi<p>MARY: hello<p>He waves.")

    assert [block.kind for block in blocks] == ["dialogue", "dialogue", "action"]
    john, mary, action = blocks
    assert (john.line_number, john.character, john.speech) == (1, "JOHN", "hi")  # type: ignore[union-attr]
    assert (mary.line_number, mary.character, mary.speech) == (2, "MARY", "hello")  # type: ignore[union-attr]
    assert action == ActionBlock(markup="He waves.")
