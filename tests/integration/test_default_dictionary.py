"""Integration tests against the dictionary built from bundled pypinyin data."""

from __future__ import annotations

from hanzi_pinyin import Args, Style, default_dictionary, lazy_pinyin, pinyin, slug
from hanzi_pinyin.phonetics.render import render
from hanzi_pinyin.phonetics.syllable import decompose


def test_default_dictionary_is_built_once() -> None:
    assert default_dictionary() is default_dictionary()
    assert len(default_dictionary()) > 20000


def test_zhongguoren_end_to_end() -> None:
    assert pinyin("中国人") == [["zhōng"], ["guó"], ["rén"]]
    assert lazy_pinyin("中国人", Args(style=Style.NORMAL)) == ["zhong", "guo", "ren"]
    assert lazy_pinyin("中国人abc", Args(style=Style.NORMAL)) == ["zhong", "guo", "ren"]
    assert slug("中国人", Args(style=Style.NORMAL)) == "zhong-guo-ren"


def test_non_hanzi_text_yields_empty_matrix() -> None:
    assert pinyin("abc，,!? 123") == []


def test_heteronym_matches_dictionary_readings() -> None:
    readings = default_dictionary().lookup("中")

    assert readings is not None and len(readings) >= 2
    assert pinyin("中", Args(heteronym=True)) == [list(readings)]
    assert pinyin("中", Args()) == [[readings[0]]]


def test_palatal_finals_with_bundled_data() -> None:
    assert pinyin("具", Args(style=Style.FINALS)) == [["v"]]
    assert pinyin("具", Args(style=Style.FINALS_TONE)) == [["ǜ"]]
    assert pinyin("具", Args(style=Style.FINALS_TONE2)) == [["v4"]]
    assert pinyin("具", Args(style=Style.FINALS_TONE3)) == [["v4"]]


def test_every_bundled_reading_renders_without_zero_digit() -> None:
    """Neutral-tone readings never gain a ``0`` suffix."""

    for readings in default_dictionary().entries.values():
        for reading in readings:
            syllable = decompose(reading)
            assert syllable.initial not in {"y", "w"}
            assert not render(syllable, reading, Style.TONE3).endswith("0")
            assert not render(syllable, reading, Style.FINALS_TONE3).endswith("0")
