"""
Numeral Text: spell out integers as words, ordinals, currency and Roman numerals.

Architecture: Segmentation → Group rendering (per-language rule tables) → Assembly
Languages:    English, Spanish, Arabic
"""

from .converter import convert, number_to_words, parse_value
from .exceptions import (
    InvalidInput,
    InvalidRomanNumeral,
    NumberConversionError,
    UnsupportedLanguage,
    ValueTooLarge,
)
from .models import ConversionOptions, CurrencyKind, Language, RenderMode

__version__ = "1.0.0"

__all__ = [
    "ConversionOptions",
    "CurrencyKind",
    "InvalidInput",
    "InvalidRomanNumeral",
    "Language",
    "NumberConversionError",
    "RenderMode",
    "UnsupportedLanguage",
    "ValueTooLarge",
    "convert",
    "number_to_words",
    "parse_value",
]
