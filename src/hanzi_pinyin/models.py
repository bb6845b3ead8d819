"""Data models shared by the decomposition, rendering and resolution layers.

This module defines the immutable value types passed between layers so each
layer has a narrow, testable interface: the output ``Style`` selector, the
per-call ``Args`` configuration and the decomposed ``Syllable``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Sequence


class Style(Enum):
    """Closed set of output renderings for one reading."""

    NORMAL = "normal"
    TONE = "tone"
    TONE2 = "tone2"
    TONE3 = "tone3"
    INITIALS = "initials"
    FIRST_LETTER = "first_letter"
    FINALS = "finals"
    FINALS_TONE = "finals_tone"
    FINALS_TONE2 = "finals_tone2"
    FINALS_TONE3 = "finals_tone3"


@dataclass(frozen=True)
class Syllable:
    """One reading split into initial, linguistic final and tone number.

    ``initial`` is empty for syllables without a consonant onset (``y``/``w``
    spellings and bare nasals). ``final`` is written with ``v`` for ``ü`` and
    ``tone`` is ``0`` for the neutral tone.
    """

    initial: str
    final: str
    tone: int


def no_fallback(char: str, args: Args) -> list[str]:
    """Default fallback: characters missing from the dictionary are dropped."""

    return []


Fallback = Callable[[str, "Args"], Sequence[str]]


@dataclass(frozen=True)
class Args:
    """Per-call conversion options.

    Attributes:
        style: Output rendering for every resolved reading.
        heteronym: Emit every dictionary reading instead of the primary one.
        separator: Joiner used by :func:`hanzi_pinyin.convert.slug`.
        fallback: Called with ``(char, args)`` for characters the dictionary
            does not cover; an empty result drops the character.
    """

    style: Style = Style.TONE
    heteronym: bool = False
    separator: str = "-"
    fallback: Fallback = no_fallback
