"""Parsing utilities for pinyin-data style single-character dictionaries."""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)

PINYIN_LINE_RE = re.compile(r"^U\+([0-9A-Fa-f]{4,6})\s*:\s*([^#]*?)\s*(?:#.*)?$")


@dataclass(frozen=True)
class PinyinEntry:
    """One dictionary record: a codepoint and its readings in source order."""

    codepoint: int
    readings: tuple[str, ...]

    @property
    def char(self) -> str:
        """Return the character the record describes."""

        return chr(self.codepoint)


def split_readings(payload: str) -> tuple[str, ...]:
    """Split a comma-separated reading list, keeping source order.

    Args:
        payload: Raw value such as ``zhōng,zhòng``.

    Returns:
        NFC-normalized readings with blanks removed.
    """

    readings = (unicodedata.normalize("NFC", item.strip()) for item in payload.split(","))
    return tuple(item for item in readings if item)


def parse_pinyin_lines(lines: Iterable[str]) -> list[PinyinEntry]:
    """Parse ``U+4E2D: zhōng,zhòng  # 中`` lines into entries.

    Comments, blank lines and malformed lines are skipped. A codepoint listed
    twice keeps the last record.

    Args:
        lines: Iterator of raw dictionary lines.

    Returns:
        Parsed entries in file order.
    """

    entries: dict[int, PinyinEntry] = {}
    skipped = 0
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        match = PINYIN_LINE_RE.match(stripped)
        if not match:
            skipped += 1
            continue
        readings = split_readings(match.group(2))
        if not readings:
            skipped += 1
            continue
        codepoint = int(match.group(1), 16)
        entries[codepoint] = PinyinEntry(codepoint=codepoint, readings=readings)

    if skipped:
        logger.debug("Skipped %d malformed dictionary lines", skipped)
    return list(entries.values())
