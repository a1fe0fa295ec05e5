"""French (long scale), with the Belgian septante/nonante variant.

Agreement rules handled by the merge:

    80       quatre-vingts        the card keeps its "s" when final
    81       quatre-vingt-un      ...and drops it when followed
    200      deux cents           cent takes "s" when multiplied and final
    21, 71   vingt et un, soixante et onze
    4·10^6   quatre millions      scale nouns above mille pluralize
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.cardmatch import CardMatchEngine, CardMatchRules, Leaf
from ..models import ConversionOptions

MILLION = 10**6

SCALES = (
    (10**27, "quadrilliard"),
    (10**24, "quadrillion"),
    (10**21, "trilliard"),
    (10**18, "trillion"),
    (10**15, "billiard"),
    (10**12, "billion"),
    (10**9, "milliard"),
    (MILLION, "million"),
    (1000, "mille"),
    (100, "cent"),
)

TENS = (
    (80, "quatre-vingts"),
    (60, "soixante"),
    (50, "cinquante"),
    (40, "quarante"),
    (30, "trente"),
    (20, "vingt"),
)

BELGIAN_TENS = ((90, "nonante"), (80, "quatre-vingts"), (70, "septante")) + TENS[1:]

UNITS = (
    (19, "dix-neuf"),
    (18, "dix-huit"),
    (17, "dix-sept"),
    (16, "seize"),
    (15, "quinze"),
    (14, "quatorze"),
    (13, "treize"),
    (12, "douze"),
    (11, "onze"),
    (10, "dix"),
    (9, "neuf"),
    (8, "huit"),
    (7, "sept"),
    (6, "six"),
    (5, "cinq"),
    (4, "quatre"),
    (3, "trois"),
    (2, "deux"),
    (1, "un"),
    (0, "zéro"),
)


def merge(left: Leaf, right: Leaf) -> str:
    c, n = left.value, right.value
    left_text, right_text = left.text, right.text

    if c == 1 and n < MILLION:
        return right_text

    followed_below_million = n < MILLION
    if followed_below_million and ((c - 80) % 100 == 0 or (c % 100 == 0 and c < 1000)):
        left_text = left_text.removesuffix("s")

    if 1 < c < 1000 and n != 1000 and n % 100 == 0 and not right_text.endswith("s"):
        right_text += "s"

    if n < c < 100:
        if n % 10 == 1 and c != 80:
            return f"{left_text} et {right_text}"
        return f"{left_text}-{right_text}"
    return f"{left_text} {right_text}"


def build(options: ConversionOptions) -> CardinalConverter:
    belgian = options.lang == "fr-BE" or (options.region or "").upper() == "BE"
    cards = SCALES + (BELGIAN_TENS if belgian else TENS) + UNITS
    engine = CardMatchEngine(CardMatchRules(cards=cards, merge=merge))
    lexicon = Lexicon(negative_word="moins", separator_word="virgule", zero_word="zéro")
    return CardinalConverter(
        lexicon,
        engine,
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
