"""English (short scale). British "and" by default, none for region US."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.cardmatch import CardMatchEngine, CardMatchRules, Leaf
from ..models import ConversionOptions

CARDS = (
    (10**27, "octillion"),
    (10**24, "septillion"),
    (10**21, "sextillion"),
    (10**18, "quintillion"),
    (10**15, "quadrillion"),
    (10**12, "trillion"),
    (10**9, "billion"),
    (10**6, "million"),
    (1000, "thousand"),
    (100, "hundred"),
    (90, "ninety"),
    (80, "eighty"),
    (70, "seventy"),
    (60, "sixty"),
    (50, "fifty"),
    (40, "forty"),
    (30, "thirty"),
    (20, "twenty"),
    (19, "nineteen"),
    (18, "eighteen"),
    (17, "seventeen"),
    (16, "sixteen"),
    (15, "fifteen"),
    (14, "fourteen"),
    (13, "thirteen"),
    (12, "twelve"),
    (11, "eleven"),
    (10, "ten"),
    (9, "nine"),
    (8, "eight"),
    (7, "seven"),
    (6, "six"),
    (5, "five"),
    (4, "four"),
    (3, "three"),
    (2, "two"),
    (1, "one"),
    (0, "zero"),
)


def make_merge(use_and: bool):
    def merge(left: Leaf, right: Leaf) -> str:
        if left.value == 1 and right.value < 100:
            return right.text
        if left.value < 100 and left.value > right.value:
            return f"{left.text}-{right.text}"
        if left.value >= 100 and right.value < 100 and use_and:
            return f"{left.text} and {right.text}"
        return f"{left.text} {right.text}"

    return merge


def build(options: ConversionOptions) -> CardinalConverter:
    use_and = (options.region or "").upper() != "US"
    engine = CardMatchEngine(CardMatchRules(cards=CARDS, merge=make_merge(use_and)))
    lexicon = Lexicon(negative_word="minus", separator_word="point", zero_word="zero")
    return CardinalConverter(
        lexicon,
        engine,
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
