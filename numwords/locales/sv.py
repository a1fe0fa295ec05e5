"""Swedish (long scale)."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.cardmatch import CardMatchEngine, CardMatchRules, Leaf
from ..models import ConversionOptions

MILLION = 10**6

CARDS = (
    (10**24, "kvadriljon"),
    (10**21, "triljard"),
    (10**18, "triljon"),
    (10**15, "biljard"),
    (10**12, "biljon"),
    (10**9, "miljard"),
    (MILLION, "miljon"),
    (1000, "tusen"),
    (100, "hundra"),
    (90, "nittio"),
    (80, "åttio"),
    (70, "sjuttio"),
    (60, "sextio"),
    (50, "femtio"),
    (40, "fyrtio"),
    (30, "trettio"),
    (20, "tjugo"),
    (19, "nitton"),
    (18, "arton"),
    (17, "sjutton"),
    (16, "sexton"),
    (15, "femton"),
    (14, "fjorton"),
    (13, "tretton"),
    (12, "tolv"),
    (11, "elva"),
    (10, "tio"),
    (9, "nio"),
    (8, "åtta"),
    (7, "sju"),
    (6, "sex"),
    (5, "fem"),
    (4, "fyra"),
    (3, "tre"),
    (2, "två"),
    (1, "ett"),
    (0, "noll"),
)


def merge(left: Leaf, right: Leaf) -> str:
    if left.value == 1 and (right.value < 100 or right.value in (100, 1000)):
        return right.text
    if left.value < 100 and left.value > right.value:
        return f"{left.text}-{right.text}"
    if left.value >= 100 and right.value < 100:
        return f"{left.text} och {right.text}"
    if right.value > left.value and right.value >= MILLION:
        if left.value == 1:
            return f"en {right.text}"
        # miljon -> miljoner, miljard -> miljarder
        return f"{left.text} {right.text}er"
    return f"{left.text} {right.text}"


def build(options: ConversionOptions) -> CardinalConverter:
    engine = CardMatchEngine(CardMatchRules(cards=CARDS, merge=merge))
    lexicon = Lexicon(negative_word="minus", separator_word="komma", zero_word="noll")
    return CardinalConverter(
        lexicon,
        engine,
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
