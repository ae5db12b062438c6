import pytest

from decision_engine import DecisionType, Sentiment, ScreeningInput, StyleTag, evaluate
from presenter import ICONS, STYLES, icon_for, style_for, notes_to_show, result_card_html


def test_every_type_has_its_own_icon():
    assert set(ICONS) == set(DecisionType)
    assert len(set(ICONS.values())) == len(DecisionType)
    assert icon_for(DecisionType.BUY) == "✅"


def test_every_style_tag_has_a_treatment():
    assert set(STYLES) == set(StyleTag)
    assert style_for(StyleTag.BUY).border != style_for(StyleTag.NOT_BUY).border


@pytest.mark.parametrize("notes", [None, "", "   ", "\n\t"])
def test_blank_notes_are_hidden(notes):
    assert notes_to_show(notes) is None


def test_notes_shown_as_typed():
    assert notes_to_show("  good dividend\n") == "  good dividend\n"


def test_card_contains_title_reason_and_icon():
    result = evaluate(ScreeningInput(pe_ratio="8", rsi_ratio="20", company_code="lolc"))
    card = result_card_html(result)
    assert "(LOLC)" in card
    assert icon_for(DecisionType.BUY) in card
    assert STYLES[StyleTag.BUY].background in card
    assert "result-buy" in card
    assert "Notes" not in card


def test_card_escapes_notes():
    result = evaluate(ScreeningInput(pe_ratio="15", rsi_ratio="40", sentiment=Sentiment.NEGATIVE))
    card = result_card_html(result, "<script>alert(1)</script>")
    assert "<script>" not in card
    assert "&lt;script&gt;" in card
    assert "Notes" in card
