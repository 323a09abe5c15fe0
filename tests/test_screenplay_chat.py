from __future__ import annotations

from draftkit.screenplay import (
    NARRATOR,
    ChatBubble,
    bubble_side,
    parse_chat_bubbles,
    render_chat,
    script_lines,
)


def test_script_lines_break_on_paragraphs_and_br() -> None:
    content = "<p>JOHN: hi<br>there</p><p>&nbsp;</p><p><b>MARY</b>: yo</p>"

    assert script_lines(content) == ["JOHN: hi", "there", "MARY: yo"]


def test_each_cue_opens_a_new_bubble() -> None:
    bubbles = parse_chat_bubbles("JOHN: Hello\nMARY : Hi John\nJOHN: Bye")

    assert bubbles == [
        ChatBubble("JOHN", "Hello"),
        ChatBubble("MARY", "Hi John"),
        ChatBubble("JOHN", "Bye"),
    ]


def test_lines_without_cue_continue_current_speaker() -> None:
    bubbles = parse_chat_bubbles("<p>ANN: First line</p><p>second line</p><p>third</p>")

    assert bubbles == [ChatBubble("ANN", "First line\nsecond line\nthird")]


def test_lines_before_first_speaker_are_narration() -> None:
    bubbles = parse_chat_bubbles("Night falls.\nRain.\nTOM: Who's there?")

    assert [bubble.speaker for bubble in bubbles] == [NARRATOR, NARRATOR, "TOM"]
    assert bubbles[0].is_narrator
    assert bubbles[1].text == "Rain."
    assert not bubbles[2].is_narrator


def test_speaker_with_empty_text_is_dropped() -> None:
    bubbles = parse_chat_bubbles("JOHN:\nMARY: Hello\nBOB:   ")

    assert bubbles == [ChatBubble("MARY", "Hello")]


def test_empty_cue_picks_up_following_lines() -> None:
    bubbles = parse_chat_bubbles("JOHN:\nwell then")

    assert bubbles == [ChatBubble("JOHN", "well then")]


def test_no_content_gives_no_bubbles() -> None:
    assert parse_chat_bubbles("") == []
    assert parse_chat_bubbles("<p></p><br/>") == []


def test_bubble_side_alternates_by_cast_order() -> None:
    cast = ["JOHN", " MARY ", "BOB"]

    assert bubble_side(ChatBubble("JOHN", "x"), cast) == "left"
    assert bubble_side(ChatBubble("MARY", "x"), cast) == "right"
    assert bubble_side(ChatBubble("BOB", "x"), cast) == "left"
    assert bubble_side(ChatBubble("STRANGER", "x"), cast) == "left"
    assert bubble_side(ChatBubble(NARRATOR, "x"), cast) == "center"


def test_render_chat_transcript() -> None:
    rendered = render_chat(parse_chat_bubbles("Dusk.\nANN: one\ntwo"))

    assert rendered == "(Dusk.)\n\nANN\n  one\n  two"
