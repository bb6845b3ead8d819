"""Validation helpers for dictionary entries supplied from outside the package."""

from __future__ import annotations

import re
from typing import Mapping, Sequence

from hanzi_pinyin.phonetics.tones import parse_marks

READING_LETTERS_RE = re.compile(r"^[a-zvê]+$")


def reading_errors(reading: str) -> list[str]:
    """List the problems with one reading.

    A valid reading is lowercase Pinyin (``ü`` and ``ê`` allowed) carrying at
    most one tone mark.

    Args:
        reading: Candidate reading.

    Returns:
        Human-readable problems; empty when the reading is valid.
    """

    if not reading:
        return ["empty reading"]

    errors: list[str] = []
    units = parse_marks(reading)
    if sum(1 for _, tone in units if tone) > 1:
        errors.append(f"more than one tone mark in '{reading}'")
    letters = "".join(base for base, _ in units)
    if not READING_LETTERS_RE.fullmatch(letters):
        errors.append(f"invalid letters in '{reading}'")
    return errors


def validate_entries(entries: Mapping[int, Sequence[str]]) -> None:
    """Validate codepoint -> readings entries before they enter a dictionary.

    Args:
        entries: Mapping of codepoint to ordered readings.

    Raises:
        ValueError: If any entry has no readings or a malformed reading.
    """

    errors: list[str] = []
    for codepoint, readings in entries.items():
        label = f"U+{codepoint:04X} ({chr(codepoint)})"
        if not readings:
            errors.append(f"{label}: no readings")
            continue
        for reading in readings:
            errors.extend(f"{label}: {problem}" for problem in reading_errors(reading))

    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:25])
        rest = len(errors) - min(25, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(
            f"Dictionary validation failed with {len(errors)} errors:\n{preview}{more}"
        )
