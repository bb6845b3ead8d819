"""Unit tests for splitting readings into initial, final and tone."""

from __future__ import annotations

import pytest

from hanzi_pinyin.models import Syllable
from hanzi_pinyin.phonetics.syllable import INITIALS, correct_final, decompose, split_initial


@pytest.mark.parametrize(
    ("reading", "initial", "final", "tone"),
    [
        ("zhōng", "zh", "ong", 1),
        ("guó", "g", "uo", 2),
        ("rén", "r", "en", 2),
        ("shuāng", "sh", "uang", 1),
        ("zǐ", "z", "i", 3),
        ("ní", "n", "i", 2),
        ("lüè", "l", "ve", 4),
        ("ér", "", "er", 2),
        ("a", "", "a", 0),
    ],
)
def test_decompose_regular_readings(reading: str, initial: str, final: str, tone: int) -> None:
    assert decompose(reading) == Syllable(initial, final, tone)


@pytest.mark.parametrize(
    ("reading", "final", "tone"),
    [
        ("yú", "v", 2),
        ("yǔ", "v", 3),
        ("yuán", "van", 2),
        ("yuè", "ve", 4),
        ("yún", "vn", 2),
        ("yī", "i", 1),
        ("yīn", "in", 1),
        ("yíng", "ing", 2),
        ("ya", "ia", 0),
        ("yǒu", "iou", 3),
        ("wú", "u", 2),
        ("wàn", "uan", 4),
        ("wǒ", "uo", 3),
        ("wēng", "ueng", 1),
    ],
)
def test_y_and_w_are_absorbed_into_the_final(reading: str, final: str, tone: int) -> None:
    """y/w are spelling devices, never initials."""

    assert decompose(reading) == Syllable("", final, tone)


@pytest.mark.parametrize(
    ("reading", "initial", "final"),
    [
        ("jù", "j", "v"),
        ("qǔ", "q", "v"),
        ("xú", "x", "v"),
        ("xué", "x", "ve"),
        ("juān", "j", "van"),
        ("qún", "q", "vn"),
    ],
)
def test_u_after_palatal_initials_is_v(reading: str, initial: str, final: str) -> None:
    syllable = decompose(reading)

    assert (syllable.initial, syllable.final) == (initial, final)


@pytest.mark.parametrize(
    ("reading", "final", "tone"),
    [("ń", "n", 2), ("ǹ", "n", 4), ("ḿ", "m", 2), ("m̀", "m", 4), ("hm", "hm", 0), ("ňg", "ng", 3)],
)
def test_bare_nasal_syllables_have_no_initial(reading: str, final: str, tone: int) -> None:
    assert decompose(reading) == Syllable("", final, tone)


def test_split_initial_prefers_two_letter_initials() -> None:
    assert INITIALS[:3] == ("zh", "ch", "sh")
    assert split_initial("zhang") == ("zh", "ang")
    assert split_initial("zang") == ("z", "ang")
    assert split_initial("ang") == ("", "ang")


def test_correct_final_leaves_other_initials_alone() -> None:
    assert correct_final("l", "u") == "u"
    assert correct_final("n", "ve") == "ve"
