"""Dutch (long scale).

Words below a million are written as one compound ("tweehonderdvijfendertig"),
the ones come before the tens ("eenentwintig") and, unless disabled,
1100-9999 read in hundreds ("twaalfhonderd drieënveertig").
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.cardmatch import CardMatchEngine, CardMatchRules, Leaf
from ..models import ConversionOptions

MILLION = 10**6

CARDS = (
    (10**27, "quadriljard"),
    (10**24, "quadriljoen"),
    (10**21, "triljard"),
    (10**18, "triljoen"),
    (10**15, "biljard"),
    (10**12, "biljoen"),
    (10**9, "miljard"),
    (MILLION, "miljoen"),
    (1000, "duizend"),
    (100, "honderd"),
    (90, "negentig"),
    (80, "tachtig"),
    (70, "zeventig"),
    (60, "zestig"),
    (50, "vijftig"),
    (40, "veertig"),
    (30, "dertig"),
    (20, "twintig"),
    (19, "negentien"),
    (18, "achttien"),
    (17, "zeventien"),
    (16, "zestien"),
    (15, "vijftien"),
    (14, "veertien"),
    (13, "dertien"),
    (12, "twaalf"),
    (11, "elf"),
    (10, "tien"),
    (9, "negen"),
    (8, "acht"),
    (7, "zeven"),
    (6, "zes"),
    (5, "vijf"),
    (4, "vier"),
    (3, "drie"),
    (2, "twee"),
    (1, "één"),
    (0, "nul"),
)


def make_merge(include_and: bool, accent_one: bool):
    def plain(text: str) -> str:
        return text.replace("één", "een")

    def merge(left: Leaf, right: Leaf) -> str:
        left_text, right_text = left.text, right.text

        if left.value == 1:
            if right.value < MILLION:
                return right_text
            left_text = "één" if accent_one else "een"

        if right.value > left.value:
            if right.value >= MILLION:
                text = f"{left_text} {right_text}"
            elif right.value > 100:
                text = f"{left_text}{right_text} "
            else:
                return plain(left_text + right_text)
            return text if accent_one else plain(text)

        spaced = False
        if right.value < 10 and 10 < left.value < 100:
            joiner = "ën" if right_text.endswith("e") else "en"
            left_text, right_text = right_text + joiner, left_text
        elif right.value < 13 and include_and and left.value < 1000:
            left_text += "en"
        elif right.value < 13 and include_and:
            right_text = f" en {right_text}"
            spaced = True
        elif left.value >= MILLION or left.value == 1000:
            left_text += " "
            spaced = True

        if not spaced or not accent_one:
            left_text, right_text = plain(left_text), plain(right_text)
        return left_text + right_text

    return merge


class HundredPairingEngine:
    """Reads 1100-9999 as a count of hundreds when the count is not round."""

    def __init__(self, engine: CardMatchEngine, include_and: bool):
        self.engine = engine
        self.joiner = " en " if include_and else " "

    def to_words(self, n: int) -> str:
        if 1100 <= n < 10_000:
            high, low = divmod(n, 100)
            if high % 10:
                words = self.engine.to_words(high) + "honderd"
                if low:
                    words += self.joiner + self.engine.to_words(low)
                return words
        return self.engine.to_words(n)


def build(options: ConversionOptions) -> CardinalConverter:
    merge = make_merge(options.include_optional_and, options.accent_one)
    cards = CARDS if options.accent_one else CARDS[:-2] + ((1, "een"), (0, "nul"))
    engine = CardMatchEngine(CardMatchRules(cards=cards, merge=merge))
    if not options.no_hundred_pairs:
        engine = HundredPairingEngine(engine, options.include_optional_and)
    lexicon = Lexicon(negative_word="min", separator_word="komma", zero_word="nul")
    return CardinalConverter(
        lexicon,
        engine,
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
