"""Tone-mark table: marked letters, finals and their tone-numbered forms.

Everything here is static data built at import time. ``diacritic_for`` and
``decompose_fragment`` are direct lookups into the prebuilt final table; the
precedence rule that decides which vowel carries the mark is only applied when
the table is built (and for finals the table does not list).
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType

TONE_MARKS = MappingProxyType(
    {
        "ā": ("a", 1),
        "á": ("a", 2),
        "ǎ": ("a", 3),
        "à": ("a", 4),
        "ō": ("o", 1),
        "ó": ("o", 2),
        "ǒ": ("o", 3),
        "ò": ("o", 4),
        "ē": ("e", 1),
        "é": ("e", 2),
        "ě": ("e", 3),
        "è": ("e", 4),
        "ī": ("i", 1),
        "í": ("i", 2),
        "ǐ": ("i", 3),
        "ì": ("i", 4),
        "ū": ("u", 1),
        "ú": ("u", 2),
        "ǔ": ("u", 3),
        "ù": ("u", 4),
        "ǖ": ("v", 1),
        "ǘ": ("v", 2),
        "ǚ": ("v", 3),
        "ǜ": ("v", 4),
        "ń": ("n", 2),
        "ň": ("n", 3),
        "ǹ": ("n", 4),
        "ḿ": ("m", 2),
    }
)

# Readings such as "m̀" or "ê̄" have no precomposed form.
COMBINING_TONES = MappingProxyType({"\u0304": 1, "\u0301": 2, "\u030c": 3, "\u0300": 4})

MARKED_LETTERS = MappingProxyType({value: key for key, value in TONE_MARKS.items()})

TONE_PRECEDENCE = ("a", "o", "e", "i", "u", "v")

CANONICAL_FINALS = (
    "a",
    "o",
    "e",
    "i",
    "u",
    "v",
    "ai",
    "ei",
    "ui",
    "ao",
    "ou",
    "iu",
    "ie",
    "ue",
    "er",
    "an",
    "en",
    "in",
    "un",
    "ang",
    "eng",
    "ing",
    "ong",
)

# Finals that only appear after y/w/j/q/x spellings are rewritten.
SYLLABLE_FINALS = (
    "ia",
    "iao",
    "ian",
    "iang",
    "iong",
    "iou",
    "io",
    "ua",
    "uo",
    "uai",
    "uan",
    "uang",
    "uei",
    "uen",
    "ueng",
    "van",
    "ve",
    "vn",
)

TONES = (0, 1, 2, 3, 4)


def mark_letter(base: str, tone: int) -> str:
    """Return ``base`` carrying ``tone``, displaying ``v`` as ``ü``.

    Args:
        base: One ASCII letter (``v`` stands for ``ü``) or ``ê``.
        tone: Tone number, ``0`` for no mark.

    Returns:
        The precomposed letter when one exists, otherwise the NFC form of the
        letter followed by the combining tone mark.
    """

    if tone and (base, tone) in MARKED_LETTERS:
        return MARKED_LETTERS[(base, tone)]
    display = "ü" if base == "v" else base
    if not tone:
        return display
    combining = next(mark for mark, value in COMBINING_TONES.items() if value == tone)
    return unicodedata.normalize("NFC", display + combining)


def _mark_position(final: str) -> int:
    for vowel in TONE_PRECEDENCE:
        idx = final.find(vowel)
        if idx >= 0:
            return idx
    return 0


def _place_mark(final: str, tone: int) -> str:
    if not final:
        return final
    position = _mark_position(final)
    return "".join(
        mark_letter(letter, tone if idx == position else 0) for idx, letter in enumerate(final)
    )


FINAL_TONE_TABLE = MappingProxyType(
    {
        (final, tone): _place_mark(final, tone)
        for final in CANONICAL_FINALS + SYLLABLE_FINALS
        for tone in TONES
    }
)

FRAGMENT_TABLE = MappingProxyType({marked: key for key, marked in FINAL_TONE_TABLE.items()})


def parse_marks(text: str) -> list[tuple[str, int]]:
    """Split marked text into ``(base_letter, tone)`` units, one per letter.

    ``ü`` becomes ``v``; unmarked letters carry tone ``0``. Combining tone
    marks attach to the letter before them.

    Args:
        text: A reading or a marked final.

    Returns:
        Ordered letter units.
    """

    units: list[tuple[str, int]] = []
    for ch in unicodedata.normalize("NFC", text):
        if ch in TONE_MARKS:
            units.append(TONE_MARKS[ch])
        elif ch in COMBINING_TONES and units:
            units[-1] = (units[-1][0], COMBINING_TONES[ch])
        else:
            units.append(_split_letter(ch))
    return units


def _split_letter(ch: str) -> tuple[str, int]:
    # Covers ü and precomposed letters outside TONE_MARKS such as "ế".
    decomposed = unicodedata.normalize("NFD", ch)
    tone = next((COMBINING_TONES[c] for c in decomposed if c in COMBINING_TONES), 0)
    base = unicodedata.normalize(
        "NFC", "".join(c for c in decomposed if c not in COMBINING_TONES)
    )
    return ("v" if base == "ü" else base), tone


def split_tone(reading: str) -> tuple[str, int]:
    """Strip tone marks from a reading.

    Args:
        reading: Toned-diacritic reading such as ``lüè``.

    Returns:
        Tuple of ``(toneless_spelling, tone)`` where ``ü`` is spelled ``v``,
        for example ``("lve", 4)``.
    """

    units = parse_marks(reading)
    tone = next((unit_tone for _, unit_tone in units if unit_tone), 0)
    return "".join(base for base, _ in units), tone


def diacritic_for(final: str, tone: int) -> str:
    """Return the tone-marked spelling of a final, e.g. ``("van", 2) -> "üán"``."""

    marked = FINAL_TONE_TABLE.get((final, tone))
    if marked is None:
        marked = _place_mark(final, tone)
    return marked


def decompose_fragment(fragment: str) -> tuple[str, int]:
    """Inverse of :func:`diacritic_for`: ``"üán" -> ("van", 2)``."""

    known = FRAGMENT_TABLE.get(unicodedata.normalize("NFC", fragment))
    if known is not None:
        return known
    return split_tone(fragment)
