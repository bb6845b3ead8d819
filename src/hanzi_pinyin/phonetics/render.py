"""Render a decomposed reading in one output style."""

from __future__ import annotations

from hanzi_pinyin.models import Style, Syllable
from hanzi_pinyin.phonetics.tones import diacritic_for, mark_letter, parse_marks, split_tone


def _with_tone_digit(marked: str) -> str:
    """Replace the marked letter with its base letter followed by the tone digit."""

    parts: list[str] = []
    for base, tone in parse_marks(marked):
        parts.append(f"{base}{tone}" if tone else base)
    return "".join(parts)


def _with_trailing_digit(toneless: str, tone: int) -> str:
    return f"{toneless}{tone}" if tone else toneless


def marked_final(syllable: Syllable, reading: str) -> str:
    """Return the final of ``reading`` with its tone mark, ``ü`` displayed.

    The reading's own mark position is kept when its letters after the
    initial already spell the final; otherwise (``yuán``, ``jù``, ``wàn``) the
    spelling was rewritten and the final is marked from the tone table.

    Args:
        syllable: Decomposition of ``reading``.
        reading: The raw dictionary reading.

    Returns:
        Marked final such as ``iǔ``, ``üè``, ``ǜ`` or ``ń``.
    """

    units = parse_marks(reading)[len(syllable.initial) :]
    if "".join(base for base, _ in units) == syllable.final:
        return "".join(mark_letter(base, tone) for base, tone in units)
    return diacritic_for(syllable.final, syllable.tone)


def render(syllable: Syllable, reading: str, style: Style) -> str:
    """Render one reading.

    Args:
        syllable: Decomposition of ``reading``.
        reading: The raw dictionary reading.
        style: Requested output style.

    Returns:
        The rendered string; tone digits are never emitted for tone ``0``.

    Raises:
        ValueError: If ``style`` is not a ``Style`` member.
    """

    if style is Style.TONE:
        return reading
    if style is Style.NORMAL:
        return split_tone(reading)[0]
    if style is Style.TONE2:
        return _with_tone_digit(reading)
    if style is Style.TONE3:
        return _with_trailing_digit(split_tone(reading)[0], syllable.tone)
    if style is Style.INITIALS:
        return syllable.initial
    if style is Style.FIRST_LETTER:
        return split_tone(reading)[0][:1]
    if style is Style.FINALS:
        return syllable.final
    if style is Style.FINALS_TONE:
        return marked_final(syllable, reading)
    if style is Style.FINALS_TONE2:
        return _with_tone_digit(marked_final(syllable, reading))
    if style is Style.FINALS_TONE3:
        return _with_trailing_digit(syllable.final, syllable.tone)
    raise ValueError(f"Unsupported style: {style!r}")
