"""
Romanian (short scale).

Scale nouns agree with their count:

    1 000       o mie              1 000 000    un milion
    2 000       două mii           2 000 000    două milioane
    20 000      douăzeci de mii    (counts of 20 and more take "de")

Counts before a scale noun use the feminine units (două, una). The digits
after the decimal separator are always read masculine.
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.segment import SegmentEngine, SegmentRules
from ..models import ConversionOptions, Gender
from ..segments import digits

ONES = {1: "unu", 2: "doi", 3: "trei", 4: "patru", 5: "cinci", 6: "șase", 7: "șapte", 8: "opt", 9: "nouă"}
ONES_FEMININE = {**ONES, 1: "una", 2: "două"}

TEENS = {
    0: "zece",
    1: "unsprezece",
    2: "douăsprezece",
    3: "treisprezece",
    4: "paisprezece",
    5: "cincisprezece",
    6: "șaisprezece",
    7: "șaptesprezece",
    8: "optsprezece",
    9: "nouăsprezece",
}
TEENS_MASCULINE = {**TEENS, 2: "doisprezece"}

TENS = {
    2: "douăzeci",
    3: "treizeci",
    4: "patruzeci",
    5: "cincizeci",
    6: "șaizeci",
    7: "șaptezeci",
    8: "optzeci",
    9: "nouăzeci",
}

HUNDREDS = {
    1: "o sută",
    2: "două sute",
    3: "trei sute",
    4: "patru sute",
    5: "cinci sute",
    6: "șase sute",
    7: "șapte sute",
    8: "opt sute",
    9: "nouă sute",
}

# (singular, plural, feminine noun)
SCALES = (
    ("mie", "mii", True),
    ("milion", "milioane", False),
    ("miliard", "miliarde", False),
    ("trilion", "trilioane", False),
    ("cvadrilion", "cvadrilioane", False),
    ("cvintilion", "cvintilioane", False),
    ("sextilion", "sextilioane", False),
    ("septilion", "septilioane", False),
    ("octilion", "octilioane", False),
    ("nonilion", "nonilioane", False),
    ("decilion", "decilioane", False),
)
PLURALS = {singular: plural for singular, plural, _ in SCALES}
FEMININE_NOUNS = {singular for singular, _, feminine in SCALES if feminine}


def spell(segment: int, ones: dict[int, str], teens: dict[int, str]) -> str:
    """Words for 1-999."""
    hundreds, tens, unit = digits(segment)
    words = [HUNDREDS[hundreds]] if hundreds else []
    if tens == 1:
        words.append(teens[unit])
    elif tens:
        words.append(f"{TENS[tens]} și {ones[unit]}" if unit else TENS[tens])
    elif unit:
        words.append(ones[unit])
    return " ".join(words)


def pluralize(word: str) -> str:
    return PLURALS.get(word, word)


def render_scale(segment: int, index: int, word: str) -> str:
    if segment == 1:
        article = "o" if word in FEMININE_NOUNS else "un"
        return f"{article} {word}"
    count = spell(segment, ONES_FEMININE, TEENS)
    return f"{count} de {word}" if segment >= 20 else f"{count} {word}"


def make_engine(ones: dict[int, str], teens: dict[int, str]) -> SegmentEngine:
    rules = SegmentRules(
        zero_word="zero",
        render_segment=lambda s: spell(s, ones, teens) if s else "",
        scale_words=tuple(singular for singular, _, _ in SCALES),
        pluralize=pluralize,
        render_scale=render_scale,
    )
    return SegmentEngine(rules)


def build(options: ConversionOptions) -> CardinalConverter:
    ones = ONES_FEMININE if options.gender == Gender.FEMININE else ONES
    lexicon = Lexicon(negative_word="minus", separator_word="virgulă", zero_word="zero")
    return CardinalConverter(
        lexicon,
        make_engine(ones, TEENS),
        decimal_engine=make_engine(ONES, TEENS_MASCULINE),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
