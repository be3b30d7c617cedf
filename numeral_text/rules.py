"""
Per-language rule tables: the lexicon and grammar consulted by the renderer.

The renderer never branches on language identity. Everything that differs
between languages (word lists, conjunctions, irregular hundreds, scale names
and their plural forms, gender agreement, ordinal formation, currency unit
names) lives here as data. Adding a language means adding a table.

Tables are built once at import time and are read-only afterwards: every
mapping is a MappingProxyType and the dataclass is frozen.

Lexicon entries are lowercase; capitalization happens at assembly time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from .models import CurrencyKind, Language


def _frozen(data: Mapping) -> Mapping:
    return MappingProxyType(dict(data))


def _empty() -> Mapping:
    return MappingProxyType({})


# ─── Plural Rules ───────────────────────────────────────────────────
# A plural rule maps a count to a category name. Forms keyed by category
# fall back to "other".


def plural_one_other(n: int) -> str:
    return "one" if n == 1 else "other"


def plural_arabic(n: int) -> str:
    """Arabic counting: singular, dual, 3-10 plural, then singular again."""
    if n == 1:
        return "one"
    if n == 2:
        return "two"
    if 3 <= n % 100 <= 10:
        return "few"
    return "other"


def pick_form(forms: Mapping[str, str], category: str) -> str:
    return forms.get(category, forms["other"])


# ─── Table Structures ───────────────────────────────────────────────


class OrdinalScope(str, Enum):
    """Which words of a cardinal take ordinal form."""

    LAST = "last"  # English: "one hundred and twenty first"
    ALL = "all"  # Spanish: "centésimo vigésimo primero"


@dataclass(frozen=True)
class CurrencyNames:
    """Major/minor unit names, keyed by plural category."""

    major: Mapping[str, str]
    minor: Mapping[str, str]
    major_feminine: bool = False
    minor_feminine: bool = False


@dataclass(frozen=True)
class RuleTable:
    """Immutable lexicon and grammar data for one language."""

    language: Language
    zero: str
    negative: str
    units: tuple[str, ...]  # index 1-9
    teens: tuple[str, ...]  # 10-19, index 0-9
    tens: tuple[str, ...]  # index 2-9
    hundreds: tuple[str, ...]  # index 1-9
    scales: tuple[Mapping[str, str], ...]  # index = scale power; 0 unused
    plural_rule: Callable[[int], str] = plural_one_other

    # Irregular forms
    exact_hundreds: Mapping[int, str] = field(default_factory=_empty)
    compounds: Mapping[int, str] = field(default_factory=_empty)
    apocope: Mapping[str, str] = field(default_factory=_empty)
    feminine: Mapping[str, str] = field(default_factory=_empty)
    units_before_tens: bool = False

    # Conjunctions ("" = none)
    hundred_conjunction: str = ""
    tens_conjunction: str = ""
    group_conjunction: str = ""
    final_group_conjunction: str = ""

    # Scale groups whose plural category drops the number word
    scale_elides: frozenset[str] = frozenset()
    # Scales spoken as "<n> mil" of the next lower scale when that group is
    # present: 1_500_000_000 is "mil quinientos millones"
    compound_scales: Mapping[int, str] = field(default_factory=_empty)
    # Scales whose word leaves the gender to the noun that follows ("mil")
    gender_neutral_scales: frozenset[int] = frozenset()

    # Ordinals
    ordinal_scope: OrdinalScope = OrdinalScope.LAST
    ordinal_exact: Mapping[int, str] = field(default_factory=_empty)
    ordinal_words: Mapping[str, str] = field(default_factory=_empty)
    ordinal_keep: frozenset[str] = frozenset()
    ordinal_suffixes: tuple[tuple[str, str], ...] = ()
    ordinal_prefix: str = ""

    # Currency
    currencies: Mapping[CurrencyKind, CurrencyNames] = field(default_factory=_empty)
    currency_conjunction: str = ""
    currency_elides: frozenset[str] = frozenset()
    currency_unit_first: bool = False
    elide_zero_minor: bool = True

    def __post_init__(self) -> None:
        if len(self.units) != 10 or len(self.tens) != 10 or len(self.hundreds) != 10:
            raise ValueError(f"{self.language.value}: units/tens/hundreds need 10 slots")
        if len(self.teens) != 10:
            raise ValueError(f"{self.language.value}: teens need 10 entries (10-19)")
        if any("other" not in forms for forms in self.scales[1:]):
            raise ValueError(f"{self.language.value}: every scale needs an 'other' form")
        if any(not 1 < scale <= self.max_scale for scale in self.compound_scales):
            raise ValueError(f"{self.language.value}: compound scales need a lower scale")

    @property
    def max_scale(self) -> int:
        return len(self.scales) - 1

    @property
    def conjunctions(self) -> frozenset[str]:
        """Tokens that keep their lowercase form at assembly time."""
        tokens = (
            self.hundred_conjunction,
            self.tens_conjunction,
            self.group_conjunction,
            self.final_group_conjunction,
            self.currency_conjunction,
        )
        return frozenset(word for token in tokens for word in token.split())


def _scales(*rows: Mapping[str, str]) -> tuple[Mapping[str, str], ...]:
    return (_empty(), *(_frozen(row) for row in rows))


def _currency(major: dict, minor: dict, **gender: bool) -> CurrencyNames:
    return CurrencyNames(major=_frozen(major), minor=_frozen(minor), **gender)


# ─── English ────────────────────────────────────────────────────────

_EN_UNITS = ("", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")

_EN_CENTS = {"one": "cent", "other": "cents"}
_EN_FILS = {"other": "fils"}

ENGLISH = RuleTable(
    language=Language.ENGLISH,
    zero="zero",
    negative="negative",
    units=_EN_UNITS,
    teens=(
        "ten", "eleven", "twelve", "thirteen", "fourteen",
        "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
    ),
    tens=("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"),
    hundreds=("", *(f"{unit} hundred" for unit in _EN_UNITS[1:])),
    scales=_scales(
        {"other": "thousand"},
        {"other": "million"},
        {"other": "billion"},
        {"other": "trillion"},
        {"other": "quadrillion"},
        {"other": "quintillion"},
    ),
    hundred_conjunction="and",
    final_group_conjunction="and",
    ordinal_scope=OrdinalScope.LAST,
    ordinal_words=_frozen({
        "one": "first",
        "two": "second",
        "three": "third",
        "five": "fifth",
        "eight": "eighth",
        "nine": "ninth",
        "twelve": "twelfth",
    }),
    ordinal_suffixes=(("y", "ieth"), ("", "th")),
    currencies=_frozen({
        CurrencyKind.USD: _currency({"one": "dollar", "other": "dollars"}, _EN_CENTS),
        CurrencyKind.EUR: _currency({"one": "euro", "other": "euros"}, _EN_CENTS),
        CurrencyKind.GBP: _currency(
            {"one": "pound", "other": "pounds"}, {"one": "penny", "other": "pence"}
        ),
        CurrencyKind.SAR: _currency(
            {"one": "riyal", "other": "riyals"}, {"one": "halala", "other": "halalas"}
        ),
        CurrencyKind.AED: _currency({"one": "dirham", "other": "dirhams"}, _EN_FILS),
        CurrencyKind.EGP: _currency(
            {"one": "pound", "other": "pounds"}, {"one": "piastre", "other": "piastres"}
        ),
        CurrencyKind.KWD: _currency({"one": "dinar", "other": "dinars"}, _EN_FILS),
    }),
    currency_conjunction="and",
    elide_zero_minor=True,
)


# ─── Spanish ────────────────────────────────────────────────────────

_ES_HUNDREDS = (
    "", "ciento", "doscientos", "trescientos", "cuatrocientos",
    "quinientos", "seiscientos", "setecientos", "ochocientos", "novecientos",
)

_ES_FILS = {"other": "fils"}

SPANISH = RuleTable(
    language=Language.SPANISH,
    zero="cero",
    negative="menos",
    units=("", "uno", "dos", "tres", "cuatro", "cinco", "seis", "siete", "ocho", "nueve"),
    teens=(
        "diez", "once", "doce", "trece", "catorce",
        "quince", "dieciséis", "diecisiete", "dieciocho", "diecinueve",
    ),
    tens=(
        "", "", "veinte", "treinta", "cuarenta",
        "cincuenta", "sesenta", "setenta", "ochenta", "noventa",
    ),
    hundreds=_ES_HUNDREDS,
    exact_hundreds=_frozen({1: "cien"}),
    compounds=_frozen({
        21: "veintiuno",
        22: "veintidós",
        23: "veintitrés",
        24: "veinticuatro",
        25: "veinticinco",
        26: "veintiséis",
        27: "veintisiete",
        28: "veintiocho",
        29: "veintinueve",
    }),
    # Long scale: a billón is a million millions
    scales=_scales(
        {"one": "mil", "other": "mil"},
        {"one": "un millón", "other": "millones"},
        {"one": "mil millones", "other": "mil millones"},
        {"one": "un billón", "other": "billones"},
        {"one": "mil billones", "other": "mil billones"},
        {"one": "un trillón", "other": "trillones"},
    ),
    scale_elides=frozenset({"one"}),
    compound_scales=_frozen({3: "mil", 5: "mil"}),
    gender_neutral_scales=frozenset({1}),
    apocope=_frozen({"uno": "un", "veintiuno": "veintiún"}),
    feminine=_frozen({
        "uno": "una",
        "un": "una",
        "veintiuno": "veintiuna",
        "veintiún": "veintiuna",
        **{word: word[:-2] + "as" for word in _ES_HUNDREDS[2:]},
    }),
    hundred_conjunction="y",
    tens_conjunction="y",
    ordinal_scope=OrdinalScope.ALL,
    ordinal_words=_frozen({
        "y": "",
        "un": "",
        "uno": "primero",
        "dos": "segundo",
        "tres": "tercero",
        "cuatro": "cuarto",
        "cinco": "quinto",
        "seis": "sexto",
        "siete": "séptimo",
        "ocho": "octavo",
        "nueve": "noveno",
        "diez": "décimo",
        "once": "undécimo",
        "doce": "duodécimo",
        "trece": "decimotercero",
        "catorce": "decimocuarto",
        "quince": "decimoquinto",
        "dieciséis": "decimosexto",
        "diecisiete": "decimoséptimo",
        "dieciocho": "decimoctavo",
        "diecinueve": "decimonoveno",
        "veinte": "vigésimo",
        "veintiuno": "vigésimo primero",
        "veintiún": "vigésimo primer",
        "veintidós": "vigésimo segundo",
        "veintitrés": "vigésimo tercero",
        "veinticuatro": "vigésimo cuarto",
        "veinticinco": "vigésimo quinto",
        "veintiséis": "vigésimo sexto",
        "veintisiete": "vigésimo séptimo",
        "veintiocho": "vigésimo octavo",
        "veintinueve": "vigésimo noveno",
        "treinta": "trigésimo",
        "cuarenta": "cuadragésimo",
        "cincuenta": "quincuagésimo",
        "sesenta": "sexagésimo",
        "setenta": "septuagésimo",
        "ochenta": "octogésimo",
        "noventa": "nonagésimo",
        "cien": "centésimo",
        "ciento": "centésimo",
        "doscientos": "ducentésimo",
        "trescientos": "tricentésimo",
        "cuatrocientos": "cuadringentésimo",
        "quinientos": "quingentésimo",
        "seiscientos": "sexcentésimo",
        "setecientos": "septingentésimo",
        "ochocientos": "octingentésimo",
        "novecientos": "noningentésimo",
        "mil": "milésimo",
        "millón": "millonésimo",
        "millones": "millonésimo",
        "billón": "billonésimo",
        "billones": "billonésimo",
        "trillón": "trillonésimo",
        "trillones": "trillonésimo",
    }),
    currencies=_frozen({
        CurrencyKind.USD: _currency(
            {"one": "dólar", "other": "dólares"}, {"one": "centavo", "other": "centavos"}
        ),
        CurrencyKind.EUR: _currency(
            {"one": "euro", "other": "euros"}, {"one": "céntimo", "other": "céntimos"}
        ),
        CurrencyKind.GBP: _currency(
            {"one": "libra", "other": "libras"},
            {"one": "penique", "other": "peniques"},
            major_feminine=True,
        ),
        CurrencyKind.SAR: _currency(
            {"one": "riyal", "other": "riyales"},
            {"one": "halala", "other": "halalas"},
            minor_feminine=True,
        ),
        CurrencyKind.AED: _currency({"one": "dírham", "other": "dírhams"}, _ES_FILS),
        CurrencyKind.EGP: _currency(
            {"one": "libra egipcia", "other": "libras egipcias"},
            {"one": "piastra", "other": "piastras"},
            major_feminine=True,
            minor_feminine=True,
        ),
        CurrencyKind.KWD: _currency({"one": "dinar", "other": "dinares"}, _ES_FILS),
    }),
    currency_conjunction="con",
    elide_zero_minor=False,
)


# ─── Arabic ─────────────────────────────────────────────────────────
# Masculine counting forms; feminine nouns switch through `feminine`.
# Units precede tens ("أربعة و ثلاثون") and every join uses "و".

_AR_UNITS = ("", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة", "ستة", "سبعة", "ثمانية", "تسعة")
_AR_UNITS_FEMININE = ("", "واحدة", "اثنتان", "ثلاث", "أربع", "خمس", "ست", "سبع", "ثماني", "تسع")

_AR_TEENS = (
    "عشرة", "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر",
    "خمسة عشر", "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
)
_AR_TEENS_FEMININE = (
    "عشر", "إحدى عشرة", "اثنتا عشرة", "ثلاث عشرة", "أربع عشرة",
    "خمس عشرة", "ست عشرة", "سبع عشرة", "ثماني عشرة", "تسع عشرة",
)


def _ar_forms(one: str, two: str, few: str) -> dict[str, str]:
    return {"one": one, "two": two, "few": few, "other": one}


_AR_FILS = _ar_forms("فلس", "فلسان", "فلوس")

ARABIC = RuleTable(
    language=Language.ARABIC,
    zero="صفر",
    negative="سالب",
    units=_AR_UNITS,
    teens=_AR_TEENS,
    tens=("", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون"),
    hundreds=(
        "", "مائة", "مائتان", "ثلاثمائة", "أربعمائة",
        "خمسمائة", "ستمائة", "سبعمائة", "ثمانمائة", "تسعمائة",
    ),
    scales=_scales(
        _ar_forms("ألف", "ألفان", "آلاف"),
        _ar_forms("مليون", "مليونان", "ملايين"),
        _ar_forms("مليار", "ملياران", "مليارات"),
        _ar_forms("تريليون", "تريليونان", "تريليونات"),
        _ar_forms("كوادريليون", "كوادريليونان", "كوادريليونات"),
        _ar_forms("كوينتليون", "كوينتليونان", "كوينتليونات"),
    ),
    plural_rule=plural_arabic,
    scale_elides=frozenset({"one", "two"}),
    units_before_tens=True,
    apocope=_frozen({"مائتان": "مائتا"}),
    feminine=_frozen({
        **dict(zip(_AR_UNITS[1:], _AR_UNITS_FEMININE[1:])),
        **dict(zip(_AR_TEENS, _AR_TEENS_FEMININE)),
    }),
    hundred_conjunction="و",
    tens_conjunction="و",
    group_conjunction="و",
    ordinal_scope=OrdinalScope.ALL,
    ordinal_exact=_frozen({1: "الأول"}),
    ordinal_words=_frozen({
        "واحد": "الحادي",
        "أحد": "الحادي",
        "اثنان": "الثاني",
        "اثنا": "الثاني",
        "ثلاثة": "الثالث",
        "أربعة": "الرابع",
        "خمسة": "الخامس",
        "ستة": "السادس",
        "سبعة": "السابع",
        "ثمانية": "الثامن",
        "تسعة": "التاسع",
        "عشرة": "العاشر",
    }),
    ordinal_keep=frozenset({"عشر", "و"}),
    ordinal_prefix="ال",
    currencies=_frozen({
        CurrencyKind.USD: _currency(
            _ar_forms("دولار", "دولاران", "دولارات"), _ar_forms("سنت", "سنتان", "سنتات")
        ),
        CurrencyKind.EUR: _currency(
            _ar_forms("يورو", "يوروان", "يورو"), _ar_forms("سنت", "سنتان", "سنتات")
        ),
        CurrencyKind.GBP: _currency(
            _ar_forms("جنيه إسترليني", "جنيهان إسترلينيان", "جنيهات إسترلينية"),
            _ar_forms("بنس", "بنسان", "بنسات"),
        ),
        CurrencyKind.SAR: _currency(
            _ar_forms("ريال", "ريالان", "ريالات"),
            _ar_forms("هللة", "هللتان", "هللات"),
            minor_feminine=True,
        ),
        CurrencyKind.AED: _currency(_ar_forms("درهم", "درهمان", "دراهم"), _AR_FILS),
        CurrencyKind.EGP: _currency(
            _ar_forms("جنيه", "جنيهان", "جنيهات"), _ar_forms("قرش", "قرشان", "قروش")
        ),
        CurrencyKind.KWD: _currency(_ar_forms("دينار", "ديناران", "دنانير"), _AR_FILS),
    }),
    currency_conjunction="و",
    currency_elides=frozenset({"one", "two"}),
    elide_zero_minor=True,
)


# ─── Registry ───────────────────────────────────────────────────────

RULE_TABLES: Mapping[Language, RuleTable] = _frozen({
    Language.ENGLISH: ENGLISH,
    Language.SPANISH: SPANISH,
    Language.ARABIC: ARABIC,
})


def get_rule_table(language: Language | str) -> RuleTable:
    """Return the shared table for a Language or any resolvable language code."""
    return RULE_TABLES[Language.resolve(language)]
