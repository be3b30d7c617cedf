"""
Conversion facade: the single public entry point.

    convert(1234, ConversionOptions(language="es"))
    → "Mil Doscientos y Treinta y Cuatro"

Responsibilities:
  - Coerce and validate the input value (int, Decimal or numeric string).
  - Pick the rendering path: roman → currency → ordinal → plain words.
  - Strip the sign, render the magnitude, prepend the negative word.
  - Produce the whole string or raise; nothing partial is ever returned.

Everything here is a pure function of (value, options).
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from .currency import currency_words, split_amount
from .exceptions import InvalidInput, ValueTooLarge
from .models import ConversionOptions, Language, RenderMode
from .renderer import assemble, cardinal_words, ordinal_words
from .roman import to_roman
from .rules import RULE_TABLES
from .segmentation import MAX_MAGNITUDE

Number = Union[int, Decimal]


# ─── Input Coercion ─────────────────────────────────────────────────


def parse_value(text: str) -> Number:
    """Parse user text into an int, or a Decimal when it has a fraction.

    Accepts thousands separators ("1,234" or "1_234") and surrounding
    whitespace.

    Raises:
        InvalidInput: If the text is empty or not a finite number.
    """
    cleaned = text.strip().replace(",", "").replace("_", "")
    if not cleaned:
        raise InvalidInput("Empty input cannot be converted", text)

    try:
        return int(cleaned)
    except ValueError:
        pass

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidInput(f"Not a valid number: {text!r}", text) from None
    if not value.is_finite():
        raise InvalidInput(f"Not a finite number: {text!r}", text)
    return value


def _as_integer(value: object) -> int:
    if isinstance(value, bool):
        raise InvalidInput("Booleans are not numbers", value)
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        # Before int(): "1e999999999" would expand into a billion digits
        if value.is_finite() and abs(value) > MAX_MAGNITUDE:
            raise ValueTooLarge(value)
        if not value.is_finite() or value != value.to_integral_value():
            raise InvalidInput(
                f"Fractional value {value} is only supported in currency mode", value
            )
        return int(value)
    raise InvalidInput(f"Unsupported value type: {type(value).__name__}", value)


def _as_amount(value: object) -> Decimal:
    if isinstance(value, bool):
        raise InvalidInput("Booleans are not amounts", value)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidInput(f"Amount must be finite, got {value}", value)
        return value
    raise InvalidInput(f"Unsupported amount type: {type(value).__name__}", value)


# ─── Public API ─────────────────────────────────────────────────────


def convert(value: Number | str, options: ConversionOptions | None = None) -> str:
    """Convert a number to text according to the options.

    Args:
        value: int, Decimal (fractions only in currency mode) or numeric str.
        options: Defaults to plain English words.

    Returns:
        The rendered text, e.g. "Negative Forty Two", "XLII",
        "Twelve Dollars and Fifty Cents".

    Raises:
        ValueTooLarge: |value| exceeds MAX_MAGNITUDE.
        InvalidRomanNumeral: Roman mode outside 1-3999.
        InvalidInput: Wrong type, unparsable text, misplaced fraction.
    """
    if options is None:
        options = ConversionOptions()
    if isinstance(value, str):
        value = parse_value(value)

    table = RULE_TABLES[options.language]
    mode = options.mode

    if mode is RenderMode.ROMAN:
        return to_roman(_as_integer(value))

    if mode is RenderMode.CURRENCY:
        assert options.currency is not None
        amount = _as_amount(value)
        if abs(amount) > MAX_MAGNITUDE:
            raise ValueTooLarge(value)
        major, minor = split_amount(abs(amount), options.currency)
        negative = amount < 0 and bool(major or minor)
        words = currency_words(major, minor, options.currency, table)
    else:
        number = _as_integer(value)
        magnitude = abs(number)
        if magnitude > MAX_MAGNITUDE:
            raise ValueTooLarge(number)
        negative = number < 0
        render = ordinal_words if mode is RenderMode.ORDINAL else cardinal_words
        words = render(magnitude, table)

    if negative:
        words = [table.negative, *words]
    return assemble(words, table)


def number_to_words(value: Number | str, language: Language | str = Language.ENGLISH) -> str:
    """Shorthand for plain cardinal words: number_to_words(42) → "Forty Two"."""
    return convert(value, ConversionOptions(language=language))
