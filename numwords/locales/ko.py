"""Korean (Sino-Korean numerals, myriad scales)."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.cardmatch import CardMatchEngine, CardMatchRules, Leaf
from ..models import ConversionOptions

MAN = 10_000

CARDS = (
    (10**28, "양"),
    (10**24, "자"),
    (10**20, "해"),
    (10**16, "경"),
    (10**12, "조"),
    (10**8, "억"),
    (MAN, "만"),
    (1000, "천"),
    (100, "백"),
    (10, "십"),
    (9, "구"),
    (8, "팔"),
    (7, "칠"),
    (6, "육"),
    (5, "오"),
    (4, "사"),
    (3, "삼"),
    (2, "이"),
    (1, "일"),
    (0, "영"),
)


def merge(left: Leaf, right: Leaf) -> str:
    # 일 is silent before 십, 백, 천 and 만 but spoken before 억 and above
    if left.value == 1 and right.value <= MAN:
        return right.text
    if left.value > right.value and left.value >= MAN:
        return f"{left.text} {right.text}"
    return left.text + right.text


def build(options: ConversionOptions) -> CardinalConverter:
    engine = CardMatchEngine(CardMatchRules(cards=CARDS, merge=merge))
    lexicon = Lexicon(negative_word="마이너스", separator_word="점", zero_word="영")
    return CardinalConverter(
        lexicon,
        engine,
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
