"""Ukrainian (short scale). Тисяча is feminine: одна тисяча, дві тисячі."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.slavic import SlavicEngine, SlavicRules
from ..models import ConversionOptions

ONES = dict(
    enumerate(("один", "два", "три", "чотири", "п'ять", "шість", "сім", "вісім", "дев'ять"), 1)
)
ONES_FEMININE = {**ONES, 1: "одна", 2: "дві"}

TEENS = dict(
    enumerate(
        (
            "десять",
            "одинадцять",
            "дванадцять",
            "тринадцять",
            "чотирнадцять",
            "п'ятнадцять",
            "шістнадцять",
            "сімнадцять",
            "вісімнадцять",
            "дев'ятнадцять",
        )
    )
)

TENS = dict(
    enumerate(
        (
            "двадцять",
            "тридцять",
            "сорок",
            "п'ятдесят",
            "шістдесят",
            "сімдесят",
            "вісімдесят",
            "дев'яносто",
        ),
        2,
    )
)

HUNDREDS = dict(
    enumerate(
        (
            "сто",
            "двісті",
            "триста",
            "чотириста",
            "п'ятсот",
            "шістсот",
            "сімсот",
            "вісімсот",
            "дев'ятсот",
        ),
        1,
    )
)

SCALE_FORMS = {
    1: ("тисяча", "тисячі", "тисяч"),
    2: ("мільйон", "мільйони", "мільйонів"),
    3: ("мільярд", "мільярди", "мільярдів"),
    4: ("трильйон", "трильйони", "трильйонів"),
    5: ("квадрильйон", "квадрильйони", "квадрильйонів"),
    6: ("квінтильйон", "квінтильйони", "квінтильйонів"),
    7: ("секстильйон", "секстильйони", "секстильйонів"),
    8: ("септильйон", "септильйони", "септильйонів"),
    9: ("октильйон", "октильйони", "октильйонів"),
    10: ("нонільйон", "нонільйони", "нонільйонів"),
}

RULES = SlavicRules(
    zero_word="нуль",
    ones=ONES,
    ones_feminine=ONES_FEMININE,
    teens=TEENS,
    tens=TENS,
    hundreds=HUNDREDS,
    scale_forms=SCALE_FORMS,
    feminine_tiers=frozenset({1}),
)


def build(options: ConversionOptions) -> CardinalConverter:
    lexicon = Lexicon(negative_word="мінус", separator_word="кома", zero_word="нуль")
    return CardinalConverter(
        lexicon,
        SlavicEngine(RULES, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
