"""Character-by-character conversion of Hanzi text into Pinyin.

Every character is resolved on its own: dictionary readings are decomposed and
rendered in the requested style, and characters the dictionary does not cover
are handed to ``Args.fallback``. No word segmentation is performed.
"""

from __future__ import annotations

from dataclasses import replace

from hanzi_pinyin.dictionary.repository import PinyinDictionary, default_dictionary
from hanzi_pinyin.models import Args
from hanzi_pinyin.phonetics.render import render
from hanzi_pinyin.phonetics.syllable import decompose


def pinyin(
    text: str,
    args: Args | None = None,
    dictionary: PinyinDictionary | None = None,
) -> list[list[str]]:
    """Return the candidate list for every surviving character of ``text``.

    Args:
        text: Input text, processed one codepoint at a time.
        args: Conversion options; defaults to ``Args()``.
        dictionary: Reading source; defaults to :func:`default_dictionary`.

    Returns:
        One inner list per character, in input order. Dictionary characters
        yield their primary reading (or all readings when ``args.heteronym``);
        other characters yield the fallback's result, or nothing at all when
        that result is empty.
    """

    args = args if args is not None else Args()
    dictionary = dictionary if dictionary is not None else default_dictionary()

    result: list[list[str]] = []
    for char in text:
        readings = dictionary.lookup(char)
        if readings:
            selected = readings if args.heteronym else readings[:1]
            result.append([render(decompose(reading), reading, args.style) for reading in selected])
            continue

        candidates = args.fallback(char, args)
        if candidates:
            result.append(list(candidates))
    return result


def lazy_pinyin(
    text: str,
    args: Args | None = None,
    dictionary: PinyinDictionary | None = None,
) -> list[str]:
    """Return the first candidate of every surviving character.

    ``args.heteronym`` is ignored.
    """

    args = replace(args if args is not None else Args(), heteronym=False)
    return [candidates[0] for candidates in pinyin(text, args, dictionary)]


def slug(
    text: str,
    args: Args | None = None,
    dictionary: PinyinDictionary | None = None,
) -> str:
    """Join :func:`lazy_pinyin` output with ``args.separator``."""

    args = args if args is not None else Args()
    return args.separator.join(lazy_pinyin(text, args, dictionary))
