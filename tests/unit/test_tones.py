"""Unit tests for the tone-mark table."""

from __future__ import annotations

import unicodedata

import pytest

from hanzi_pinyin.phonetics.tones import (
    CANONICAL_FINALS,
    TONE_PRECEDENCE,
    decompose_fragment,
    diacritic_for,
    mark_letter,
    parse_marks,
    split_tone,
)


@pytest.mark.parametrize("final", CANONICAL_FINALS)
@pytest.mark.parametrize("tone", [0, 1, 2, 3, 4])
def test_table_round_trips_every_canonical_final(final: str, tone: int) -> None:
    assert decompose_fragment(diacritic_for(final, tone)) == (final, tone)


@pytest.mark.parametrize(
    ("final", "tone", "marked"),
    [
        ("a", 1, "ā"),
        ("o", 2, "ó"),
        ("v", 4, "ǜ"),
        ("ai", 3, "ǎi"),
        ("ao", 1, "āo"),
        ("ou", 2, "óu"),
        ("ie", 2, "ié"),
        ("ui", 1, "uī"),
        ("iu", 3, "ǐu"),
        ("er", 4, "èr"),
        ("ing", 1, "īng"),
        ("ong", 3, "ǒng"),
        ("van", 2, "üán"),
        ("ve", 4, "üè"),
        ("iou", 3, "iǒu"),
        ("uan", 4, "uàn"),
    ],
)
def test_diacritic_for_follows_vowel_precedence(final: str, tone: int, marked: str) -> None:
    """The first vowel in a > o > e > i > u > v order carries the mark."""

    assert TONE_PRECEDENCE == ("a", "o", "e", "i", "u", "v")
    assert diacritic_for(final, tone) == marked


def test_diacritic_for_unlisted_final_uses_same_rule() -> None:
    assert diacritic_for("iai", 2) == "iái"


def test_decompose_fragment_accepts_decomposed_input() -> None:
    assert decompose_fragment(unicodedata.normalize("NFD", "ǜ")) == ("v", 4)
    assert decompose_fragment(unicodedata.normalize("NFD", "üán")) == ("van", 2)


@pytest.mark.parametrize(
    ("reading", "expected"),
    [
        ("zhōng", ("zhong", 1)),
        ("lüè", ("lve", 4)),
        ("ń", ("n", 2)),
        ("ḿ", ("m", 2)),
        ("m̀", ("m", 4)),
        ("ya", ("ya", 0)),
        ("ế", ("ê", 2)),
        ("ê̄", ("ê", 1)),
    ],
)
def test_split_tone(reading: str, expected: tuple[str, int]) -> None:
    assert split_tone(reading) == expected


def test_parse_marks_keeps_one_unit_per_letter() -> None:
    assert parse_marks("yuán") == [("y", 0), ("u", 0), ("a", 2), ("n", 0)]
    assert parse_marks("m̀") == [("m", 4)]


def test_mark_letter_displays_v_as_umlaut() -> None:
    assert mark_letter("v", 0) == "ü"
    assert mark_letter("v", 3) == "ǚ"
    assert mark_letter("m", 4) == "m̀"
    assert mark_letter("n", 2) == "ń"
