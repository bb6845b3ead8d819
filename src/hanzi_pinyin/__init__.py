"""Hanzi to Pinyin conversion package."""

from .convert import lazy_pinyin, pinyin, slug
from .dictionary.repository import PinyinDictionary, default_dictionary
from .models import Args, Style, Syllable, no_fallback
from .phonetics.render import render
from .phonetics.syllable import decompose

__all__ = [
    "Args",
    "PinyinDictionary",
    "Style",
    "Syllable",
    "decompose",
    "default_dictionary",
    "lazy_pinyin",
    "no_fallback",
    "pinyin",
    "render",
    "slug",
]
