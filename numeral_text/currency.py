"""
Currency phrases: an amount spelled out with major and minor unit names.

    en  USD 1234.05  →  One Thousand Two Hundred and Thirty Four Dollars and Five Cents
    es  USD 1.00     →  Un Dólar con Cero Centavos
    ar  SAR 2.05     →  ريالان و خمس هللات

Amounts are Decimal (or int), never float. They are rounded half-up to the
currency's minor-unit precision before splitting.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .exceptions import InvalidInput, ValueTooLarge
from .models import CurrencyKind
from .renderer import cardinal_words
from .rules import RuleTable, pick_form
from .segmentation import MAX_MAGNITUDE


def split_amount(amount: Decimal | int, kind: CurrencyKind) -> tuple[int, int]:
    """Round a nonnegative amount to minor units and split it.

    Returns:
        (major, minor), e.g. (12, 50) for USD 12.495.

    Raises:
        InvalidInput: For negative or non-finite amounts.
        ValueTooLarge: If the major part exceeds MAX_MAGNITUDE.
    """
    value = Decimal(amount)
    if not value.is_finite():
        raise InvalidInput(f"Amount must be finite, got {amount}", amount)
    if value < 0:
        raise InvalidInput("Amount must be nonnegative", amount)
    if value > MAX_MAGNITUDE:
        raise ValueTooLarge(amount)

    factor = 10**kind.minor_digits
    try:
        minor_total = int((value * factor).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except InvalidOperation as exc:
        raise InvalidInput(f"Cannot round amount {amount}", amount) from exc
    return divmod(minor_total, factor)


def _unit_phrase(
    count: int, forms, feminine: bool, table: RuleTable
) -> list[str]:
    category = table.plural_rule(count)
    noun = pick_form(forms, category)
    if count and category in table.currency_elides:
        return [noun]
    number = cardinal_words(count, table, feminine=feminine, before_noun=True)
    return [noun, *number] if table.currency_unit_first else [*number, noun]


def currency_words(
    major: int, minor: int, kind: CurrencyKind, table: RuleTable
) -> list[str]:
    """Render (major, minor) units as word tokens in the table's language.

    Raises:
        InvalidInput: If the table has no names for this currency.
    """
    names = table.currencies.get(kind)
    if names is None:
        raise InvalidInput(
            f"No {table.language.value} names for currency {kind.value}", kind.value
        )

    words = _unit_phrase(major, names.major, names.major_feminine, table)
    if minor or not table.elide_zero_minor:
        words.append(table.currency_conjunction)
        words.extend(_unit_phrase(minor, names.minor, names.minor_feminine, table))
    return words
