"""Read-only single-character reading dictionary."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Sequence, Union

from pypinyin import constants as pypinyin_constants

from hanzi_pinyin.dictionary.parser import parse_pinyin_lines, split_readings
from hanzi_pinyin.validation import validate_entries

logger = logging.getLogger(__name__)

OverrideKey = Union[str, int]
OverrideValue = Union[str, Sequence[str]]


def _codepoint(key: OverrideKey) -> int:
    if isinstance(key, int):
        return key
    if len(key) != 1:
        raise ValueError(f"Dictionary keys must be single characters, got '{key}'")
    return ord(key)


def _readings(value: OverrideValue) -> tuple[str, ...]:
    if isinstance(value, str):
        return split_readings(value)
    return split_readings(",".join(value))


@dataclass(frozen=True)
class PinyinDictionary:
    """Immutable codepoint -> readings mapping.

    Readings keep the source order, so index ``0`` is the primary reading.
    Instances never change after construction; derived dictionaries are built
    with :meth:`with_overrides`.
    """

    entries: Mapping[int, tuple[str, ...]] = field(repr=False)

    @classmethod
    def from_mapping(cls, mapping: Mapping[OverrideKey, OverrideValue]) -> PinyinDictionary:
        """Build a validated dictionary from ``{char_or_codepoint: readings}``.

        Args:
            mapping: Readings as a sequence or a comma-separated string.

        Returns:
            New dictionary holding exactly ``mapping``.

        Raises:
            ValueError: If a key is not one character or a reading is malformed.
        """

        entries = {_codepoint(key): _readings(value) for key, value in mapping.items()}
        validate_entries(entries)
        return cls(MappingProxyType(entries))

    @classmethod
    def from_file(cls, path: Path) -> PinyinDictionary:
        """Load a pinyin-data formatted file (``U+4E2D: zhōng,zhòng``).

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            ValueError: If an entry holds a malformed reading.
        """

        if not path.exists():
            raise FileNotFoundError(f"Pinyin dictionary file not found: {path}")

        with path.open("r", encoding="utf-8") as handle:
            parsed = parse_pinyin_lines(handle)

        entries = {entry.codepoint: entry.readings for entry in parsed}
        validate_entries(entries)
        logger.debug("Loaded %d dictionary entries from %s", len(entries), path)
        return cls(MappingProxyType(entries))

    @classmethod
    def from_pypinyin(cls) -> PinyinDictionary:
        """Build the dictionary from the data table bundled with ``pypinyin``."""

        entries: dict[int, tuple[str, ...]] = {}
        for codepoint, value in pypinyin_constants.PINYIN_DICT.items():
            readings = split_readings(str(value))
            if readings:
                entries[codepoint] = readings
        logger.debug("Built default dictionary with %d entries", len(entries))
        return cls(MappingProxyType(entries))

    def with_overrides(self, overrides: Mapping[OverrideKey, OverrideValue]) -> PinyinDictionary:
        """Return a new dictionary with ``overrides`` replacing existing entries.

        Args:
            overrides: Same shape as :meth:`from_mapping`.

        Returns:
            New dictionary; ``self`` is unchanged.
        """

        layer = PinyinDictionary.from_mapping(overrides)
        merged = dict(self.entries)
        merged.update(layer.entries)
        logger.debug("Applied %d dictionary overrides", len(layer.entries))
        return PinyinDictionary(MappingProxyType(merged))

    def lookup(self, char: str) -> tuple[str, ...] | None:
        """Return readings for ``char``, or ``None`` when it is not covered."""

        return self.entries.get(ord(char)) if len(char) == 1 else None

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and self.lookup(char) is not None

    def __len__(self) -> int:
        return len(self.entries)


@cache
def default_dictionary() -> PinyinDictionary:
    """Return the process-wide dictionary, built on first use."""

    return PinyinDictionary.from_pypinyin()
