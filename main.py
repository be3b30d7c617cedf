#!/usr/bin/env python3
"""
Numeral Text: Command Line
==========================

Spell numbers out as words, ordinals, currency phrases or Roman numerals.

Usage:
    python main.py 42                          # Forty Two
    python main.py 1234 -l es                  # Mil Doscientos y Treinta y Cuatro
    python main.py 21 --ordinal                # Twenty First
    python main.py 12.50 --currency USD        # Twelve Dollars and Fifty Cents
    python main.py 1994 --roman                # MCMXCIV
    python main.py                             # interactive prompt (Ctrl+C to exit)

The default language comes from NUMERAL_TEXT_LANGUAGE (or .env), else English.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from numeral_text import ConversionOptions, NumberConversionError, convert
from numeral_text.config import load_settings

logger = logging.getLogger(__name__)


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_GREEN = "\033[92m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 40


# ─── Argument Parsing ───────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert numbers to words, ordinals, currency phrases or Roman numerals.",
    )
    parser.add_argument(
        "numbers",
        metavar="NUMBER",
        nargs="*",
        help="numbers to convert; omit to start the interactive prompt",
    )
    parser.add_argument("-l", "--language", help="language code or name (en, es, ar, ...)")
    parser.add_argument("-o", "--ordinal", action="store_true", help="render ordinal form")
    parser.add_argument("-c", "--currency", metavar="CODE", help="render as currency (USD, EUR, ...)")
    parser.add_argument("-r", "--roman", action="store_true", help="render a Roman numeral (1-3999)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


# ─── Output Helpers ─────────────────────────────────────────────────


def _print_error(error: NumberConversionError) -> None:
    print(f"{_RED}Error [{error.code}]:{_RESET} {error}", file=sys.stderr)


def convert_and_print(text: str, options: ConversionOptions) -> bool:
    """Convert one line of user input and print the result or the error.

    Returns:
        True if the conversion succeeded.
    """
    try:
        result = convert(text, options)
    except NumberConversionError as exc:
        logger.debug("Conversion of %r failed: %s", text, exc.details)
        _print_error(exc)
        return False
    print(f"{_GREEN}Result:{_RESET} {_BOLD}{result}{_RESET}")
    return True


# ─── Interactive Prompt ─────────────────────────────────────────────


def run_interactive(options: ConversionOptions) -> int:
    """Prompt for numbers until Ctrl+C or end of input."""
    print(f"{_BOLD}{_CYAN}Number to Text Converter{_RESET}")
    print("─" * _WIDTH)
    print(f"{_DIM}Language: {options.language.value}  Mode: {options.mode.value}{_RESET}")
    print("Enter a number to convert to text (press Ctrl+C to exit):")

    while True:
        try:
            line = input("> ")
        except (KeyboardInterrupt, EOFError):
            print()
            return 0

        if not line.strip():
            continue
        convert_and_print(line, options)
        print("\nEnter another number (press Ctrl+C to exit):")


# ─── Main ────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, convert the given numbers or start the prompt.

    Returns:
        0 on success, 1 if any number failed to convert, 2 on bad options.
    """
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_settings()
        options = ConversionOptions(
            language=args.language or settings.default_language,
            ordinal=args.ordinal,
            currency=args.currency,
            roman=args.roman,
        )
    except NumberConversionError as exc:
        _print_error(exc)
        return 2
    logger.debug("Using options %s (mode=%s)", options, options.mode.value)

    if not args.numbers:
        return run_interactive(options)

    results = [convert_and_print(number, options) for number in args.numbers]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
