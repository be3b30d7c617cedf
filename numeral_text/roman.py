"""Roman numeral conversion (1-3999). Independent of language."""

from __future__ import annotations

from .exceptions import InvalidRomanNumeral

ROMAN_MIN = 1
ROMAN_MAX = 3999

# Descending, including the subtractive pairs
ROMAN_NUMERALS: tuple[tuple[int, str], ...] = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def to_roman(value: int) -> str:
    """Convert 1-3999 to a Roman numeral by greedy subtraction.

    Raises:
        InvalidRomanNumeral: If value is outside 1-3999.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRomanNumeral(value)
    if not ROMAN_MIN <= value <= ROMAN_MAX:
        raise InvalidRomanNumeral(value)

    result = []
    for amount, symbol in ROMAN_NUMERALS:
        while value >= amount:
            result.append(symbol)
            value -= amount
    return "".join(result)


def from_roman(numeral: str) -> int:
    """Parse a canonical Roman numeral (case-insensitive) back to an integer.

    Walks the same descending table, consuming the longest matching symbol
    at each step. Non-canonical spellings such as "IIII" or "IC" are
    rejected by re-encoding the result.

    Raises:
        InvalidRomanNumeral: If the text is not a canonical numeral.
    """
    text = numeral.strip().upper()
    if not text:
        raise InvalidRomanNumeral(numeral)

    value = 0
    position = 0
    for amount, symbol in ROMAN_NUMERALS:
        while text.startswith(symbol, position):
            value += amount
            position += len(symbol)

    if position != len(text) or not ROMAN_MIN <= value <= ROMAN_MAX:
        raise InvalidRomanNumeral(numeral)
    if to_roman(value) != text:
        raise InvalidRomanNumeral(numeral)
    return value
