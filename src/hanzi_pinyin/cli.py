"""CLI entrypoint for converting Hanzi text to Pinyin."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from hanzi_pinyin.convert import pinyin, slug
from hanzi_pinyin.dictionary.repository import PinyinDictionary, default_dictionary
from hanzi_pinyin.models import Args, Style, no_fallback

STYLE_NAMES = {style.value: style for style in Style}


def keep_unknown(char: str, args: Args) -> list[str]:
    """Fallback that passes characters missing from the dictionary through."""

    return [char]


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the conversion command.
    """

    parser = argparse.ArgumentParser(description="Convert Hanzi text to Pinyin.")
    parser.add_argument("text", nargs="?", default=None, help="Text to convert (default: stdin).")
    parser.add_argument(
        "-s",
        "--style",
        choices=sorted(STYLE_NAMES),
        default=Style.TONE.value,
        help="Output style (default: tone).",
    )
    parser.add_argument(
        "-e",
        "--heteronym",
        action="store_true",
        help="Print every reading of multi-reading characters, joined by '/'.",
    )
    parser.add_argument(
        "--separator",
        default=" ",
        help="Separator placed between characters (default: a space).",
    )
    parser.add_argument(
        "--slug",
        action="store_true",
        help="Print first readings only, joined by the separator.",
    )
    parser.add_argument(
        "--keep-unknown",
        action="store_true",
        help="Pass characters missing from the dictionary through instead of dropping them.",
    )
    parser.add_argument(
        "--dict",
        type=Path,
        default=None,
        help="pinyin-data formatted file whose entries override the bundled dictionary.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _load_dictionary(path: Path | None) -> PinyinDictionary:
    """Return the bundled dictionary, overlaid with ``path`` when given."""

    dictionary = default_dictionary()
    if path is None:
        return dictionary
    if not path.exists():
        raise SystemExit(f"Dictionary file not found: {path}")
    return dictionary.with_overrides(PinyinDictionary.from_file(path).entries)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI workflow from arguments through printed output.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    text = args.text if args.text is not None else sys.stdin.read()
    dictionary = _load_dictionary(args.dict)
    options = Args(
        style=STYLE_NAMES[args.style],
        heteronym=args.heteronym,
        separator=args.separator,
        fallback=keep_unknown if args.keep_unknown else no_fallback,
    )

    if args.slug:
        print(slug(text.strip(), options, dictionary))
        return 0

    matrix = pinyin(text.strip(), options, dictionary)
    print(options.separator.join("/".join(candidates) for candidates in matrix))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
