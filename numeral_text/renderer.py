"""
Rendering engine: groups to words, words to a cardinal or ordinal phrase.

One algorithm serves every language; all variation comes from the RuleTable.

Flow:
    magnitude ─► segment() ─► render_group() per group ─► scale names
              ─► conjunctions between groups ─► assemble() (casing)

Words travel as lists of lowercase tokens until assemble(), which is the only
place capitalization happens. A token may hold several words ("one hundred",
"un millón"); assemble() splits them.
"""

from __future__ import annotations

from .exceptions import InvalidInput, ValueTooLarge
from .models import ScaleGroup
from .rules import OrdinalScope, RuleTable, pick_form
from .segmentation import segment


# ─── Single Group ───────────────────────────────────────────────────


def render_group(value: int, table: RuleTable, feminine: bool = False) -> list[str]:
    """Render 0-999 as word tokens. A zero group renders as no tokens.

    Args:
        value: The group value.
        table: Language rules.
        feminine: Agree with a feminine noun (table's `feminine` token map).

    Raises:
        InvalidInput: If value is outside 0-999.
    """
    if not 0 <= value <= 999:
        raise InvalidInput(f"Group value must be within 0-999, got {value}", value)

    words: list[str] = []
    hundreds, remainder = divmod(value, 100)

    if hundreds:
        if remainder == 0 and hundreds in table.exact_hundreds:
            words.append(table.exact_hundreds[hundreds])
        else:
            words.append(table.hundreds[hundreds])
        if remainder and table.hundred_conjunction:
            words.append(table.hundred_conjunction)

    if remainder in table.compounds:
        words.append(table.compounds[remainder])
    elif remainder >= 20:
        tens, units = divmod(remainder, 10)
        if units == 0:
            words.append(table.tens[tens])
        else:
            first, second = table.tens[tens], table.units[units]
            if table.units_before_tens:
                first, second = second, first
            words.append(first)
            if table.tens_conjunction:
                words.append(table.tens_conjunction)
            words.append(second)
    elif remainder >= 10:
        words.append(table.teens[remainder - 10])
    elif remainder:
        words.append(table.units[remainder])

    if feminine:
        words = [table.feminine.get(word, word) for word in words]
    return words


def _apocopate(words: list[str], table: RuleTable) -> list[str]:
    """Shorten the last token when a noun follows (Spanish "uno" → "un")."""
    if words and words[-1] in table.apocope:
        return [*words[:-1], table.apocope[words[-1]]]
    return words


def _render_scaled(
    group: ScaleGroup,
    table: RuleTable,
    feminine: bool,
    before_noun: bool,
    *,
    joins_lower: bool = False,
    after_compound: bool = False,
) -> list[str]:
    if group.scale == 0:
        words = render_group(group.value, table, feminine)
        return _apocopate(words, table) if before_noun else words

    number = _apocopate(render_group(group.value, table, feminine), table)
    category = table.plural_rule(group.value)
    if after_compound:
        # The noun is shared with the "mil" group above, so it is always plural
        return [*number, pick_form(table.scales[group.scale], "other")]

    if joins_lower:
        scale_name = table.compound_scales[group.scale]
    else:
        scale_name = pick_form(table.scales[group.scale], category)
    if category in table.scale_elides:
        return [scale_name]
    return [*number, scale_name]


# ─── Cardinal ───────────────────────────────────────────────────────


def cardinal_words(
    magnitude: int,
    table: RuleTable,
    *,
    feminine: bool = False,
    before_noun: bool = False,
) -> list[str]:
    """Render a nonnegative magnitude as cardinal word tokens.

    Args:
        magnitude: Absolute value to render.
        table: Language rules.
        feminine: The units group, and groups whose scale word is gender
            neutral, agree with a feminine noun.
        before_noun: A noun follows, so the final group is apocopated.

    Raises:
        ValueTooLarge: Beyond MAX_MAGNITUDE, or a scale the table does not name.
    """
    groups = segment(magnitude)
    if magnitude == 0:
        return [table.zero]

    for group in groups:
        if group.scale > table.max_scale:
            raise ValueTooLarge(magnitude)

    words: list[str] = []
    last = len(groups) - 1
    joined = False
    for index, group in enumerate(groups):
        if index:
            if table.group_conjunction:
                words.append(table.group_conjunction)
            elif (
                index == last
                and table.final_group_conjunction
                and group.scale == 0
                and group.value < 100
            ):
                words.append(table.final_group_conjunction)
        joins_lower = (
            group.scale in table.compound_scales
            and index < last
            and groups[index + 1].scale == group.scale - 1
        )
        agrees = group.scale == 0 or group.scale in table.gender_neutral_scales
        words.extend(
            _render_scaled(
                group,
                table,
                feminine and agrees,
                before_noun,
                joins_lower=joins_lower,
                after_compound=joined,
            )
        )
        joined = joins_lower
    return words


# ─── Ordinal ────────────────────────────────────────────────────────


def _ordinalize(word: str, table: RuleTable) -> str:
    if word in table.ordinal_words:
        return table.ordinal_words[word]
    if word in table.ordinal_keep:
        return word
    for ending, replacement in table.ordinal_suffixes:
        if word.endswith(ending):
            return word[: len(word) - len(ending)] + replacement
    return table.ordinal_prefix + word


def ordinal_words(magnitude: int, table: RuleTable) -> list[str]:
    """Render a nonnegative magnitude as ordinal word tokens.

    English changes only the final word ("twenty one" → "twenty first");
    Spanish and Arabic change every word. A replacement of "" drops the word.
    """
    if magnitude in table.ordinal_exact:
        return [table.ordinal_exact[magnitude]]

    tokens = " ".join(cardinal_words(magnitude, table)).split()
    if table.ordinal_scope is OrdinalScope.LAST:
        tokens[-1] = _ordinalize(tokens[-1], table)
    else:
        tokens = [_ordinalize(token, table) for token in tokens]
    return [token for token in tokens if token]


# ─── Assembly ───────────────────────────────────────────────────────


def assemble(words: list[str], table: RuleTable) -> str:
    """Join tokens, normalize whitespace, capitalize every non-conjunction word."""
    conjunctions = table.conjunctions
    return " ".join(
        word if word in conjunctions else word.capitalize()
        for word in " ".join(words).split()
    )
