"""Split one dictionary reading into initial, final and tone."""

from __future__ import annotations

from functools import lru_cache

from hanzi_pinyin.models import Syllable
from hanzi_pinyin.phonetics.tones import split_tone

# Two-letter initials come first so "zh" wins over "z".
INITIALS = (
    "zh",
    "ch",
    "sh",
    "b",
    "p",
    "m",
    "f",
    "d",
    "t",
    "n",
    "l",
    "g",
    "k",
    "h",
    "j",
    "q",
    "x",
    "r",
    "z",
    "c",
    "s",
)

NASAL_SYLLABLES = frozenset({"m", "n", "ng", "hm", "hng"})
PALATAL_INITIALS = frozenset({"j", "q", "x"})


def split_initial(spelling: str) -> tuple[str, str]:
    """Split a toneless spelling into ``(initial, rest)``.

    Bare nasal syllables such as ``n`` (from ``ń``) or ``hm`` have no initial:
    the whole spelling is their final.

    Args:
        spelling: Toneless spelling with ``v`` for ``ü``.

    Returns:
        The longest matching initial (or ``""``) and the remaining letters.
    """

    if spelling in NASAL_SYLLABLES:
        return "", spelling
    for initial in INITIALS:
        if spelling.startswith(initial) and len(spelling) > len(initial):
            return initial, spelling[len(initial) :]
    return "", spelling


def correct_final(initial: str, rest: str) -> str:
    """Rewrite orthographic y/w/ü spellings into the linguistic final.

    Standard spelling replaces syllable-initial ``i``/``u``/``ü`` with ``y``/``w``
    and drops the umlaut after ``j``/``q``/``x``; this undoes that:

    - ``yu`` -> ``v`` (``yuan`` -> ``van``, ``yue`` -> ``ve``)
    - ``yi`` -> ``i`` and ``y`` + other vowel -> ``i`` (``ya`` -> ``ia``)
    - ``wu`` -> ``u`` and ``w`` + other vowel -> ``u`` (``wan`` -> ``uan``)
    - ``j``/``q``/``x`` + ``u`` -> ``v`` (``ju`` -> ``v``, ``xue`` -> ``ve``)

    Args:
        initial: Initial returned by :func:`split_initial`.
        rest: Letters following the initial.

    Returns:
        The corrected final.
    """

    if not initial:
        if rest.startswith("yu"):
            return "v" + rest[2:]
        if rest.startswith("yi"):
            return rest[1:]
        if rest.startswith("y"):
            return "i" + rest[1:]
        if rest.startswith("wu"):
            return rest[1:]
        if rest.startswith("w"):
            return "u" + rest[1:]
        return rest
    if initial in PALATAL_INITIALS and rest.startswith("u"):
        return "v" + rest[1:]
    return rest


@lru_cache(maxsize=4096)
def decompose(reading: str) -> Syllable:
    """Decompose a toned reading.

    Args:
        reading: Dictionary reading such as ``zhōng``, ``yuán`` or ``ń``.

    Returns:
        ``Syllable`` with the linguistic final, e.g. ``yuán`` gives
        ``Syllable("", "van", 2)`` and ``jù`` gives ``Syllable("j", "v", 4)``.
    """

    spelling, tone = split_tone(reading)
    initial, rest = split_initial(spelling)
    return Syllable(initial=initial, final=correct_final(initial, rest), tone=tone)
