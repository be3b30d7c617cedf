"""
Exception hierarchy for number conversion.

Each exception type maps to one category of conversion failure and carries
the offending value (or language code) so callers can format a message.
None of them derive from ValueError: pydantic only wraps ValueError and
AssertionError, so these propagate unchanged out of model validators.
"""

from __future__ import annotations

from typing import Any


class NumberConversionError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class ValueTooLarge(NumberConversionError):
    """The magnitude is beyond the supported range or the scale-name table."""

    def __init__(self, value: int | Any):
        self.value = value
        super().__init__(
            "VALUE_TOO_LARGE",
            f"Value {value} is outside the supported range",
            {"value": str(value)},
        )


class UnsupportedLanguage(NumberConversionError):
    """The language code matches no known alias."""

    def __init__(self, code: str):
        self.language_code = code
        super().__init__(
            "UNSUPPORTED_LANGUAGE",
            f"Unsupported language: {code!r}",
            {"language": code},
        )


class InvalidRomanNumeral(NumberConversionError):
    """Roman conversion requested for a value outside 1-3999, or a malformed numeral."""

    def __init__(self, value: int | str):
        self.value = value
        super().__init__(
            "INVALID_ROMAN_NUMERAL",
            f"Cannot represent {value!r} as a Roman numeral (supported range is 1-3999)",
            {"value": str(value)},
        )


class InvalidInput(NumberConversionError):
    """Malformed input reached the converter (non-numeric, fractional, wrong type)."""

    def __init__(self, message: str, value: Any = None):
        self.value = value
        super().__init__("INVALID_INPUT", message, {"value": repr(value)})
