"""
Test suite for the numeral-to-text engine.

Covers every layer in isolation (segmentation, group rendering, rule tables,
Roman numerals, currency) and the conversion facade end to end.

Run: pytest tests/ -v
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, replace
from decimal import Decimal

import pytest
from pydantic import ValidationError

from numeral_text import (
    ConversionOptions,
    CurrencyKind,
    InvalidInput,
    InvalidRomanNumeral,
    Language,
    RenderMode,
    UnsupportedLanguage,
    ValueTooLarge,
    convert,
    number_to_words,
    parse_value,
)
from numeral_text.currency import currency_words, split_amount
from numeral_text.models import ScaleGroup
from numeral_text.renderer import cardinal_words, render_group
from numeral_text.roman import from_roman, to_roman
from numeral_text.rules import ARABIC, ENGLISH, RULE_TABLES, SPANISH, get_rule_table
from numeral_text.segmentation import MAX_MAGNITUDE, segment


def _opts(**kwargs) -> ConversionOptions:
    return ConversionOptions(**kwargs)


EN = _opts(language="en")
ES = _opts(language="es")
AR = _opts(language="ar")

SAMPLES = [1, 7, 13, 20, 42, 99, 100, 101, 999, 1000, 1005, 1234, 21_000, 200_000, 1_234_567, 10**12 + 3]


# ═══════════════════════════════════════════════════════════════════════
# SCALE SEGMENTATION
# ═══════════════════════════════════════════════════════════════════════


class TestSegmentation:
    def test_zero_is_single_units_group(self):
        assert segment(0) == [ScaleGroup(0, 0)]

    def test_most_significant_first(self):
        assert segment(1_002_003) == [ScaleGroup(1, 2), ScaleGroup(2, 1), ScaleGroup(3, 0)]

    def test_zero_groups_are_skipped(self):
        assert segment(1_000_000) == [ScaleGroup(1, 2)]
        assert segment(5_000_007) == [ScaleGroup(5, 2), ScaleGroup(7, 0)]

    def test_maximum_magnitude_segments(self):
        groups = segment(MAX_MAGNITUDE)
        assert groups[0] == ScaleGroup(4, 6)
        assert groups[-1] == ScaleGroup(903, 0)

    def test_beyond_maximum_raises(self):
        with pytest.raises(ValueTooLarge):
            segment(MAX_MAGNITUDE + 1)

    def test_negative_magnitude_raises(self):
        with pytest.raises(InvalidInput):
            segment(-1)

    def test_max_magnitude_is_half_of_int64(self):
        assert MAX_MAGNITUDE == 4_611_686_018_427_387_903


# ═══════════════════════════════════════════════════════════════════════
# GROUP RENDERER
# ═══════════════════════════════════════════════════════════════════════


class TestGroupRenderer:
    def test_zero_group_renders_nothing(self):
        assert render_group(0, ENGLISH) == []

    def test_english_hundreds_with_conjunction(self):
        assert render_group(234, ENGLISH) == ["two hundred", "and", "thirty", "four"]

    def test_english_teen_is_not_composed(self):
        assert render_group(115, ENGLISH) == ["one hundred", "and", "fifteen"]

    def test_arabic_units_before_tens(self):
        assert render_group(234, ARABIC) == ["مائتان", "و", "أربعة", "و", "ثلاثون"]

    def test_spanish_exact_hundred_is_irregular(self):
        assert render_group(100, SPANISH) == ["cien"]
        assert render_group(115, SPANISH) == ["ciento", "y", "quince"]

    def test_spanish_twenties_are_fused(self):
        assert render_group(24, SPANISH) == ["veinticuatro"]
        assert render_group(34, SPANISH) == ["treinta", "y", "cuatro"]

    def test_arabic_feminine_agreement(self):
        assert render_group(5, ARABIC, feminine=True) == ["خمس"]
        assert render_group(13, ARABIC, feminine=True) == ["ثلاث عشرة"]

    def test_spanish_feminine_hundreds(self):
        assert render_group(201, SPANISH, feminine=True) == ["doscientas", "y", "una"]

    @pytest.mark.parametrize("value", [-1, 1000])
    def test_out_of_range_group_raises(self, value):
        with pytest.raises(InvalidInput):
            render_group(value, ENGLISH)


# ═══════════════════════════════════════════════════════════════════════
# RULE TABLES
# ═══════════════════════════════════════════════════════════════════════


class TestRuleTables:
    def test_one_table_per_language(self):
        assert set(RULE_TABLES) == set(Language)
        for language, table in RULE_TABLES.items():
            assert table.language is language

    def test_tables_are_frozen(self):
        with pytest.raises(FrozenInstanceError):
            ENGLISH.zero = "nil"  # type: ignore[misc]

    def test_table_mappings_are_read_only(self):
        with pytest.raises(TypeError):
            ENGLISH.ordinal_words["one"] = "uno"  # type: ignore[index]

    def test_every_table_names_every_currency(self):
        for table in RULE_TABLES.values():
            assert set(table.currencies) == set(CurrencyKind)

    def test_every_table_covers_the_supported_range(self):
        top_scale = segment(MAX_MAGNITUDE)[0].scale
        for table in RULE_TABLES.values():
            assert table.max_scale >= top_scale

    def test_scale_beyond_table_coverage_raises(self):
        short = replace(ENGLISH, scales=ENGLISH.scales[:3])  # up to million
        assert cardinal_words(999_999_999, short)
        with pytest.raises(ValueTooLarge):
            cardinal_words(1_000_000_000, short)

    def test_malformed_table_is_rejected(self):
        with pytest.raises(ValueError, match="teens"):
            replace(ENGLISH, teens=ENGLISH.teens[:9])

    def test_compound_scale_needs_a_lower_scale(self):
        with pytest.raises(ValueError, match="compound"):
            replace(SPANISH, compound_scales={1: "mil"})

    def test_get_rule_table_resolves_aliases(self):
        assert get_rule_table("Spanish") is SPANISH
        assert get_rule_table(Language.ARABIC) is ARABIC


# ═══════════════════════════════════════════════════════════════════════
# LANGUAGE RESOLUTION
# ═══════════════════════════════════════════════════════════════════════


class TestLanguageResolution:
    @pytest.mark.parametrize(
        "code", ["en", "EN", "eng", "English", "ENGLISH", " english ", "en-US", "en_GB", "engl"]
    )
    def test_english_aliases(self, code):
        assert Language.resolve(code) is Language.ENGLISH

    @pytest.mark.parametrize("code", ["es", "spa", "Spanish", "español", "es-MX", "span", "cast"])
    def test_spanish_aliases(self, code):
        assert Language.resolve(code) is Language.SPANISH

    @pytest.mark.parametrize("code", ["ar", "ara", "Arabic", "arab", "العربية", "ar-EG"])
    def test_arabic_aliases(self, code):
        assert Language.resolve(code) is Language.ARABIC

    @pytest.mark.parametrize("code", ["klingon", "fr", "e", "", "   ", "zz-ZZ"])
    def test_unknown_codes_raise(self, code):
        with pytest.raises(UnsupportedLanguage) as exc_info:
            Language.resolve(code)
        assert exc_info.value.code == "UNSUPPORTED_LANGUAGE"
        assert exc_info.value.details["language"] == code

    def test_aliases_produce_identical_output(self):
        outputs = {convert(1234, _opts(language=code)) for code in ("en", "eng", "ENGLISH")}
        assert outputs == {"One Thousand Two Hundred and Thirty Four"}

    def test_options_reject_unknown_language(self):
        with pytest.raises(UnsupportedLanguage):
            ConversionOptions(language="klingon")


# ═══════════════════════════════════════════════════════════════════════
# CONVERSION OPTIONS & MODE PRECEDENCE
# ═══════════════════════════════════════════════════════════════════════


class TestConversionOptions:
    def test_defaults(self):
        options = ConversionOptions()
        assert options.language is Language.ENGLISH
        assert options.currency is None
        assert options.mode is RenderMode.WORDS

    def test_options_are_immutable(self):
        options = ConversionOptions()
        with pytest.raises(ValidationError):
            options.roman = True  # type: ignore[misc]

    def test_currency_code_is_case_insensitive(self):
        assert ConversionOptions(currency="usd").currency is CurrencyKind.USD

    def test_unknown_currency_raises(self):
        with pytest.raises(InvalidInput, match="currency"):
            ConversionOptions(currency="XYZ")

    def test_roman_beats_everything(self):
        options = _opts(roman=True, currency="USD", ordinal=True)
        assert options.mode is RenderMode.ROMAN
        assert convert(42, options) == "XLII"

    def test_currency_beats_ordinal(self):
        options = _opts(currency="USD", ordinal=True)
        assert options.mode is RenderMode.CURRENCY
        assert convert(2, options) == "Two Dollars"

    def test_ordinal_beats_plain_words(self):
        options = _opts(ordinal=True)
        assert options.mode is RenderMode.ORDINAL
        assert convert(2, options) == "Second"


# ═══════════════════════════════════════════════════════════════════════
# ENGLISH
# ═══════════════════════════════════════════════════════════════════════


class TestEnglish:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "Zero"),
            (1, "One"),
            (9, "Nine"),
            (10, "Ten"),
            (15, "Fifteen"),
            (20, "Twenty"),
            (42, "Forty Two"),
            (99, "Ninety Nine"),
            (100, "One Hundred"),
            (101, "One Hundred and One"),
            (110, "One Hundred and Ten"),
            (999, "Nine Hundred and Ninety Nine"),
            (1000, "One Thousand"),
            (1005, "One Thousand and Five"),
            (1234, "One Thousand Two Hundred and Thirty Four"),
            (1_000_000, "One Million"),
            (2_000_000_100, "Two Billion One Hundred"),
            (1_000_000_001, "One Billion and One"),
            (
                1_234_567,
                "One Million Two Hundred and Thirty Four Thousand "
                "Five Hundred and Sixty Seven",
            ),
        ],
    )
    def test_cardinals(self, value, expected):
        assert convert(value, EN) == expected

    def test_largest_supported_value(self):
        assert convert(MAX_MAGNITUDE, EN) == (
            "Four Quintillion Six Hundred and Eleven Quadrillion "
            "Six Hundred and Eighty Six Trillion Eighteen Billion "
            "Four Hundred and Twenty Seven Million Three Hundred and Eighty Seven Thousand "
            "Nine Hundred and Three"
        )

    def test_negative(self):
        assert convert(-5, EN) == "Negative Five"
        assert convert(-1234, EN) == "Negative One Thousand Two Hundred and Thirty Four"

    def test_default_options_are_english_words(self):
        assert convert(42) == "Forty Two"
        assert number_to_words(42) == "Forty Two"


# ═══════════════════════════════════════════════════════════════════════
# SPANISH
# ═══════════════════════════════════════════════════════════════════════


class TestSpanish:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "Cero"),
            (1, "Uno"),
            (16, "Dieciséis"),
            (21, "Veintiuno"),
            (34, "Treinta y Cuatro"),
            (100, "Cien"),
            (101, "Ciento y Uno"),
            (500, "Quinientos"),
            (1000, "Mil"),
            (2000, "Dos Mil"),
            (21_000, "Veintiún Mil"),
            (1234, "Mil Doscientos y Treinta y Cuatro"),
            (1_000_000, "Un Millón"),
            (2_000_000, "Dos Millones"),
            (1_000_000_000, "Mil Millones"),
        ],
    )
    def test_cardinals(self, value, expected):
        assert convert(value, ES) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1_500_000_000, "Mil Quinientos Millones"),
            (2_300_000_000, "Dos Mil Trescientos Millones"),
            (1_001_000_000, "Mil Un Millones"),
            (21_000_000_000, "Veintiún Mil Millones"),
            (10**15 + 5 * 10**12, "Mil Cinco Billones"),
            (2_000_000_007, "Dos Mil Millones Siete"),
        ],
    )
    def test_thousand_millions_share_the_lower_scale_noun(self, value, expected):
        assert convert(value, ES) == expected

    def test_negative(self):
        assert convert(-5, ES) == "Menos Cinco"


# ═══════════════════════════════════════════════════════════════════════
# ARABIC
# ═══════════════════════════════════════════════════════════════════════


class TestArabic:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "صفر"),
            (1, "واحد"),
            (11, "أحد عشر"),
            (21, "واحد و عشرون"),
            (200, "مائتان"),
            (1000, "ألف"),
            (2000, "ألفان"),
            (3000, "ثلاثة آلاف"),
            (11_000, "أحد عشر ألف"),
            (200_000, "مائتا ألف"),
            (1005, "ألف و خمسة"),
            (1234, "ألف و مائتان و أربعة و ثلاثون"),
            (1_000_000, "مليون"),
        ],
    )
    def test_cardinals(self, value, expected):
        assert convert(value, AR) == expected

    def test_negative(self):
        assert convert(-5, AR) == "سالب خمسة"


# ═══════════════════════════════════════════════════════════════════════
# ORDINALS
# ═══════════════════════════════════════════════════════════════════════


class TestOrdinals:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, "Zeroth"),
            (1, "First"),
            (2, "Second"),
            (3, "Third"),
            (4, "Fourth"),
            (8, "Eighth"),
            (12, "Twelfth"),
            (20, "Twentieth"),
            (21, "Twenty First"),
            (42, "Forty Second"),
            (100, "One Hundredth"),
            (1234, "One Thousand Two Hundred and Thirty Fourth"),
            (1_000_000, "One Millionth"),
        ],
    )
    def test_english(self, value, expected):
        assert convert(value, _opts(ordinal=True)) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "Primero"),
            (3, "Tercero"),
            (10, "Décimo"),
            (21, "Vigésimo Primero"),
            (34, "Trigésimo Cuarto"),
            (100, "Centésimo"),
            (1234, "Milésimo Ducentésimo Trigésimo Cuarto"),
            (1_000_000, "Millonésimo"),
        ],
    )
    def test_spanish(self, value, expected):
        assert convert(value, _opts(language="es", ordinal=True)) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "الأول"),
            (2, "الثاني"),
            (10, "العاشر"),
            (11, "الحادي عشر"),
            (12, "الثاني عشر"),
            (21, "الحادي و العشرون"),
            (100, "المائة"),
        ],
    )
    def test_arabic(self, value, expected):
        assert convert(value, _opts(language="ar", ordinal=True)) == expected

    def test_negative_ordinal_keeps_sign_word(self):
        assert convert(-3, _opts(ordinal=True)) == "Negative Third"


# ═══════════════════════════════════════════════════════════════════════
# ROMAN NUMERALS
# ═══════════════════════════════════════════════════════════════════════


class TestRoman:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (1, "I"),
            (4, "IV"),
            (9, "IX"),
            (14, "XIV"),
            (40, "XL"),
            (42, "XLII"),
            (90, "XC"),
            (400, "CD"),
            (1994, "MCMXCIV"),
            (3999, "MMMCMXCIX"),
        ],
    )
    def test_known_values(self, value, expected):
        assert to_roman(value) == expected

    def test_round_trip_full_domain(self):
        for value in range(1, 4000):
            assert from_roman(to_roman(value)) == value

    @pytest.mark.parametrize("value", [0, -1, 4000, 10**9])
    def test_out_of_range_raises(self, value):
        with pytest.raises(InvalidRomanNumeral) as exc_info:
            convert(value, _opts(roman=True))
        assert exc_info.value.code == "INVALID_ROMAN_NUMERAL"

    def test_language_does_not_matter(self):
        assert convert(42, _opts(language="ar", roman=True)) == "XLII"

    def test_parse_is_case_insensitive(self):
        assert from_roman("xlii") == 42

    @pytest.mark.parametrize("numeral", ["IIII", "IC", "MMMM", "ABC", ""])
    def test_non_canonical_numerals_rejected(self, numeral):
        with pytest.raises(InvalidRomanNumeral):
            from_roman(numeral)


# ═══════════════════════════════════════════════════════════════════════
# CURRENCY
# ═══════════════════════════════════════════════════════════════════════


class TestCurrency:
    def test_split_rounds_half_up(self):
        assert split_amount(Decimal("12.495"), CurrencyKind.USD) == (12, 50)
        assert split_amount(7, CurrencyKind.USD) == (7, 0)

    def test_split_uses_three_digits_for_kwd(self):
        assert split_amount(Decimal("1.5"), CurrencyKind.KWD) == (1, 500)

    def test_split_rejects_negative(self):
        with pytest.raises(InvalidInput):
            split_amount(Decimal("-1"), CurrencyKind.USD)

    @pytest.mark.parametrize(
        "amount, currency, expected",
        [
            (Decimal("12.50"), "USD", "Twelve Dollars and Fifty Cents"),
            (1, "USD", "One Dollar"),
            (Decimal("1.01"), "USD", "One Dollar and One Cent"),
            (Decimal("0.99"), "USD", "Zero Dollars and Ninety Nine Cents"),
            (Decimal("2.01"), "GBP", "Two Pounds and One Penny"),
            (Decimal("1.5"), "KWD", "One Dinar and Five Hundred Fils"),
            (
                Decimal("1234.05"),
                "EUR",
                "One Thousand Two Hundred and Thirty Four Euros and Five Cents",
            ),
        ],
    )
    def test_english(self, amount, currency, expected):
        assert convert(amount, _opts(currency=currency)) == expected

    @pytest.mark.parametrize(
        "amount, currency, expected",
        [
            (1, "USD", "Un Dólar con Cero Centavos"),
            (Decimal("21.21"), "USD", "Veintiún Dólares con Veintiún Centavos"),
            (1, "GBP", "Una Libra con Cero Peniques"),
            (201, "GBP", "Doscientas y Una Libras con Cero Peniques"),
            (200_000, "GBP", "Doscientas Mil Libras con Cero Peniques"),
            (21_000, "GBP", "Veintiuna Mil Libras con Cero Peniques"),
        ],
    )
    def test_spanish(self, amount, currency, expected):
        assert convert(amount, _opts(language="es", currency=currency)) == expected

    @pytest.mark.parametrize(
        "amount, currency, expected",
        [
            (1, "USD", "دولار"),
            (2, "USD", "دولاران"),
            (5, "USD", "خمسة دولارات"),
            (100, "USD", "مائة دولار"),
            (200, "USD", "مائتا دولار"),
            (Decimal("3.00"), "USD", "ثلاثة دولارات"),
            (Decimal("2.05"), "SAR", "ريالان و خمس هللات"),
        ],
    )
    def test_arabic(self, amount, currency, expected):
        assert convert(amount, _opts(language="ar", currency=currency)) == expected

    def test_negative_amount(self):
        assert convert(Decimal("-5"), _opts(currency="USD")) == "Negative Five Dollars"

    def test_amount_rounding_to_zero_has_no_sign(self):
        assert convert(Decimal("-0.001"), _opts(currency="USD")) == "Zero Dollars"

    def test_numeric_string_amount(self):
        assert convert("12.50", _opts(currency="USD")) == "Twelve Dollars and Fifty Cents"

    def test_unit_name_first_when_table_says_so(self):
        table = replace(ENGLISH, currency_unit_first=True)
        assert currency_words(12, 0, CurrencyKind.USD, table) == ["dollars", "twelve"]

    def test_missing_currency_names_raise(self):
        table = replace(ENGLISH, currencies={})
        with pytest.raises(InvalidInput, match="USD"):
            currency_words(1, 0, CurrencyKind.USD, table)

    def test_amount_too_large(self):
        with pytest.raises(ValueTooLarge):
            convert(Decimal(MAX_MAGNITUDE) + 1, _opts(currency="USD"))


# ═══════════════════════════════════════════════════════════════════════
# FACADE: RANGE, INPUT, PROPERTIES
# ═══════════════════════════════════════════════════════════════════════


class TestFacade:
    @pytest.mark.parametrize("options", [EN, ES, AR])
    def test_range_boundaries(self, options):
        assert convert(MAX_MAGNITUDE, options)
        assert convert(-MAX_MAGNITUDE, options)
        for value in (MAX_MAGNITUDE + 1, -MAX_MAGNITUDE - 1, 2**63):
            with pytest.raises(ValueTooLarge) as exc_info:
                convert(value, options)
            assert exc_info.value.value == value

    @pytest.mark.parametrize("options", [EN, ES, AR])
    def test_zero_is_never_empty(self, options):
        assert convert(0, options)

    @pytest.mark.parametrize("language", list(Language))
    def test_negation_property(self, language):
        options = _opts(language=language)
        negative = RULE_TABLES[language].negative.capitalize()
        for value in SAMPLES:
            assert convert(-value, options) == f"{negative} {convert(value, options)}"

    @pytest.mark.parametrize("language", list(Language))
    def test_deterministic(self, language):
        options = _opts(language=language)
        for value in SAMPLES:
            assert convert(value, options) == convert(value, options)

    def test_integral_decimal_is_accepted(self):
        assert convert(Decimal("42"), EN) == "Forty Two"

    def test_fraction_outside_currency_mode_raises(self):
        with pytest.raises(InvalidInput, match="currency mode"):
            convert(Decimal("1.5"), EN)

    @pytest.mark.parametrize("value", [1.5, True, None, [1]])
    def test_unsupported_types_raise(self, value):
        with pytest.raises(InvalidInput):
            convert(value, EN)  # type: ignore[arg-type]

    def test_string_input_is_parsed(self):
        assert convert(" 1,234 ", EN) == "One Thousand Two Hundred and Thirty Four"
        assert convert("-5", EN) == "Negative Five"

    @pytest.mark.parametrize("text", ["", "  ", "abc", "12abc", "nan", "inf"])
    def test_unparsable_text_raises(self, text):
        with pytest.raises(InvalidInput) as exc_info:
            parse_value(text)
        assert exc_info.value.code == "INVALID_INPUT"

    def test_parse_value_types(self):
        assert parse_value("42") == 42
        assert isinstance(parse_value("42"), int)
        assert parse_value("12.50") == Decimal("12.50")

    @pytest.mark.parametrize("text", ["1e999999999", "-1e999999999", "9.3e18"])
    def test_huge_exponent_raises_value_too_large(self, text):
        with pytest.raises(ValueTooLarge):
            convert(text, EN)
