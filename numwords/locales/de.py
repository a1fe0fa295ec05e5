"""German (long scale): compounds below a million, "einundzwanzig" order swap."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.cardmatch import CardMatchEngine, CardMatchRules, Leaf
from ..models import ConversionOptions

MILLION = 10**6

CARDS = (
    (10**27, "Quadrilliarde"),
    (10**24, "Quadrillion"),
    (10**21, "Trilliarde"),
    (10**18, "Trillion"),
    (10**15, "Billiarde"),
    (10**12, "Billion"),
    (10**9, "Milliarde"),
    (MILLION, "Million"),
    (1000, "tausend"),
    (100, "hundert"),
    (90, "neunzig"),
    (80, "achtzig"),
    (70, "siebzig"),
    (60, "sechzig"),
    (50, "fünfzig"),
    (40, "vierzig"),
    (30, "dreißig"),
    (20, "zwanzig"),
    (19, "neunzehn"),
    (18, "achtzehn"),
    (17, "siebzehn"),
    (16, "sechzehn"),
    (15, "fünfzehn"),
    (14, "vierzehn"),
    (13, "dreizehn"),
    (12, "zwölf"),
    (11, "elf"),
    (10, "zehn"),
    (9, "neun"),
    (8, "acht"),
    (7, "sieben"),
    (6, "sechs"),
    (5, "fünf"),
    (4, "vier"),
    (3, "drei"),
    (2, "zwei"),
    (1, "eins"),
    (0, "null"),
)


def plural(noun: str) -> str:
    """Million -> Millionen, Milliarde -> Milliarden."""
    return noun + "n" if noun.endswith("e") else noun + "en"


def merge(left: Leaf, right: Leaf) -> str:
    left_text = left.text
    if left.value == 1:
        if right.value in (100, 1000):
            return "ein" + right.text
        if right.value < MILLION:
            return right.text
        left_text = "eine"

    if right.value > left.value:
        if right.value >= MILLION:
            noun = plural(right.text) if left.value > 1 else right.text
            return f"{left_text} {noun}"
        if left_text.endswith("eins"):
            # einhunderteins + tausend -> einhunderteintausend
            left_text = left_text[:-1]
        return left_text + right.text

    if right.value < 10 and 10 < left.value < 100:
        ones = "ein" if right.text == "eins" else right.text
        return f"{ones}und{left_text}"
    if left.value >= MILLION:
        return f"{left_text} {right.text}"
    return left_text + right.text


def build(options: ConversionOptions) -> CardinalConverter:
    engine = CardMatchEngine(CardMatchRules(cards=CARDS, merge=merge))
    lexicon = Lexicon(negative_word="minus", separator_word="komma", zero_word="null")
    return CardinalConverter(
        lexicon,
        engine,
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
