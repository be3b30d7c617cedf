"""
Pydantic models and enums for conversion requests.

Options are validated at the boundary: a free-form language code either
resolves to a supported Language or fails loudly with UnsupportedLanguage,
never silently falling back to English.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator

from .exceptions import InvalidInput, UnsupportedLanguage


# ─── Language ───────────────────────────────────────────────────────


class Language(str, Enum):
    """Supported output languages."""

    ENGLISH = "en"
    SPANISH = "es"
    ARABIC = "ar"

    @property
    def aliases(self) -> tuple[str, ...]:
        return _LANGUAGE_ALIASES[self]

    @classmethod
    def resolve(cls, code: str | Language) -> Language:
        """Resolve a free-form language code, e.g. "EN", "eng", "English", "es-MX".

        Resolution order:
          1. exact alias match (case-insensitive)
          2. primary subtag of a locale tag ("en-US" → "en")
          3. unambiguous prefix of an alias, at least two characters ("span")

        Raises:
            UnsupportedLanguage: If nothing (or more than one language) matches.
        """
        if isinstance(code, Language):
            return code
        if not isinstance(code, str):
            raise UnsupportedLanguage(repr(code))

        needle = code.strip().casefold()
        if not needle:
            raise UnsupportedLanguage(code)

        for language, aliases in _LANGUAGE_ALIASES.items():
            if needle in aliases:
                return language

        primary = needle.replace("_", "-").split("-", 1)[0]
        if primary != needle:
            for language, aliases in _LANGUAGE_ALIASES.items():
                if primary in aliases:
                    return language

        if len(needle) >= 2:
            matches = {
                language
                for language, aliases in _LANGUAGE_ALIASES.items()
                if any(alias.startswith(needle) for alias in aliases)
            }
            if len(matches) == 1:
                return matches.pop()

        raise UnsupportedLanguage(code)


_LANGUAGE_ALIASES: dict[Language, tuple[str, ...]] = {
    Language.ENGLISH: ("en", "eng", "english", "inglés", "ingles"),
    Language.SPANISH: ("es", "spa", "spanish", "español", "espanol", "castellano"),
    Language.ARABIC: ("ar", "ara", "arabic", "العربية", "عربي"),
}


# ─── Currency ───────────────────────────────────────────────────────


class CurrencyKind(str, Enum):
    """Currencies with word-level unit names in every rule table."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    SAR = "SAR"
    AED = "AED"
    EGP = "EGP"
    KWD = "KWD"

    @property
    def minor_digits(self) -> int:
        """Number of decimal places carried by the minor unit."""
        return 3 if self is CurrencyKind.KWD else 2

    @classmethod
    def resolve(cls, code: str | CurrencyKind) -> CurrencyKind:
        if isinstance(code, CurrencyKind):
            return code
        try:
            return cls(str(code).strip().upper())
        except ValueError:
            raise InvalidInput(f"Unsupported currency: {code!r}", code) from None


# ─── Rendering Mode ─────────────────────────────────────────────────


class RenderMode(str, Enum):
    """Which rendering path a conversion takes."""

    ROMAN = "roman"
    CURRENCY = "currency"
    ORDINAL = "ordinal"
    WORDS = "words"


# ─── Conversion Options ─────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Immutable conversion settings.

    The flags are independent, but only one rendering path runs. When several
    are set, precedence is: roman → currency → ordinal → plain words.
    """

    model_config = {"frozen": True}

    language: Language = Language.ENGLISH
    ordinal: bool = False
    currency: Optional[CurrencyKind] = None
    roman: bool = False

    @field_validator("language", mode="before")
    @classmethod
    def _resolve_language(cls, value: object) -> Language:
        return Language.resolve(value)  # type: ignore[arg-type]

    @field_validator("currency", mode="before")
    @classmethod
    def _resolve_currency(cls, value: object) -> CurrencyKind | None:
        if value is None or value == "":
            return None
        return CurrencyKind.resolve(value)  # type: ignore[arg-type]

    @property
    def mode(self) -> RenderMode:
        if self.roman:
            return RenderMode.ROMAN
        if self.currency is not None:
            return RenderMode.CURRENCY
        if self.ordinal:
            return RenderMode.ORDINAL
        return RenderMode.WORDS


# ─── Scale Group ────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScaleGroup:
    """A three-digit chunk of a magnitude and its power of 1000."""

    value: int  # 0-999
    scale: int  # 0 = units, 1 = thousand, 2 = million, ...
