"""Russian (short scale). Тысяча is feminine: одна тысяча, две тысячи."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.slavic import SlavicEngine, SlavicRules
from ..models import ConversionOptions

ONES = dict(
    enumerate(("один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"), 1)
)
ONES_FEMININE = {**ONES, 1: "одна", 2: "две"}

TEENS = dict(
    enumerate(
        (
            "десять",
            "одиннадцать",
            "двенадцать",
            "тринадцать",
            "четырнадцать",
            "пятнадцать",
            "шестнадцать",
            "семнадцать",
            "восемнадцать",
            "девятнадцать",
        )
    )
)

TENS = dict(
    enumerate(
        (
            "двадцать",
            "тридцать",
            "сорок",
            "пятьдесят",
            "шестьдесят",
            "семьдесят",
            "восемьдесят",
            "девяносто",
        ),
        2,
    )
)

HUNDREDS = dict(
    enumerate(
        (
            "сто",
            "двести",
            "триста",
            "четыреста",
            "пятьсот",
            "шестьсот",
            "семьсот",
            "восемьсот",
            "девятьсот",
        ),
        1,
    )
)

SCALE_FORMS = {
    1: ("тысяча", "тысячи", "тысяч"),
    2: ("миллион", "миллиона", "миллионов"),
    3: ("миллиард", "миллиарда", "миллиардов"),
    4: ("триллион", "триллиона", "триллионов"),
    5: ("квадриллион", "квадриллиона", "квадриллионов"),
    6: ("квинтиллион", "квинтиллиона", "квинтиллионов"),
    7: ("секстиллион", "секстиллиона", "секстиллионов"),
    8: ("септиллион", "септиллиона", "септиллионов"),
    9: ("октиллион", "октиллиона", "октиллионов"),
    10: ("нониллион", "нониллиона", "нониллионов"),
}

RULES = SlavicRules(
    zero_word="ноль",
    ones=ONES,
    ones_feminine=ONES_FEMININE,
    teens=TEENS,
    tens=TENS,
    hundreds=HUNDREDS,
    scale_forms=SCALE_FORMS,
    feminine_tiers=frozenset({1}),
)


def build(options: ConversionOptions) -> CardinalConverter:
    lexicon = Lexicon(negative_word="минус", separator_word="запятая", zero_word="ноль")
    return CardinalConverter(
        lexicon,
        SlavicEngine(RULES, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
