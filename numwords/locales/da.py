"""Danish (long scale, vigesimal tens: halvtreds, tres, halvfjerds, firs, halvfems)."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.cardmatch import CardMatchEngine, CardMatchRules, Leaf
from ..models import ConversionOptions

MILLION = 10**6

CARDS = (
    (10**27, "quadrilliard"),
    (10**24, "quadrillion"),
    (10**21, "trilliard"),
    (10**18, "trillion"),
    (10**15, "billiard"),
    (10**12, "billion"),
    (10**9, "milliard"),
    (MILLION, "million"),
    (1000, "tusind"),
    (100, "hundrede"),
    (90, "halvfems"),
    (80, "firs"),
    (70, "halvfjerds"),
    (60, "tres"),
    (50, "halvtreds"),
    (40, "fyrre"),
    (30, "tredive"),
    (20, "tyve"),
    (19, "nitten"),
    (18, "atten"),
    (17, "sytten"),
    (16, "seksten"),
    (15, "femten"),
    (14, "fjorten"),
    (13, "tretten"),
    (12, "tolv"),
    (11, "elleve"),
    (10, "ti"),
    (9, "ni"),
    (8, "otte"),
    (7, "syv"),
    (6, "seks"),
    (5, "fem"),
    (4, "fire"),
    (3, "tre"),
    (2, "to"),
    (1, "et"),
    (0, "nul"),
)


def merge(left: Leaf, right: Leaf) -> str:
    left_text, right_text = left.text, right.text

    if left.value == 1:
        if right.value in (100, 1000):
            return "et" + right_text
        if right.value < MILLION:
            return right_text
        left_text = "en"

    if right.value > left.value:
        if right.value >= MILLION:
            noun = right_text + "er" if left.value > 1 else right_text
            return f"{left_text} {noun}"
        return left_text + right_text

    if 100 <= left.value < 1000:
        left_text += " og "
    elif 1000 <= left.value < MILLION:
        left_text += "e og "

    if right.value < 10 and 10 < left.value < 100:
        ones = "en" if right.value == 1 else right_text
        return f"{ones}og{left_text}"
    if left.value >= MILLION:
        return f"{left_text} {right_text}"
    return left_text + right_text


def build(options: ConversionOptions) -> CardinalConverter:
    engine = CardMatchEngine(CardMatchRules(cards=CARDS, merge=merge))
    lexicon = Lexicon(negative_word="minus", separator_word="komma", zero_word="nul")
    return CardinalConverter(
        lexicon,
        engine,
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
