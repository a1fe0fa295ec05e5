"""
Polish (long scale: milion, miliard, bilion, biliard...).

One thousand is a bare "tysiąc"; only an exact count of one takes the
singular, so 21 000 is "dwadzieścia jeden tysięcy".
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.slavic import SlavicEngine, SlavicRules
from ..models import ConversionOptions
from ..segments import west_slavic_plural

ONES = dict(
    enumerate(
        ("jeden", "dwa", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć"), 1
    )
)
ONES_FEMININE = {**ONES, 1: "jedna", 2: "dwie"}

TEENS = dict(
    enumerate(
        (
            "dziesięć",
            "jedenaście",
            "dwanaście",
            "trzynaście",
            "czternaście",
            "piętnaście",
            "szesnaście",
            "siedemnaście",
            "osiemnaście",
            "dziewiętnaście",
        )
    )
)

TENS = dict(
    enumerate(
        (
            "dwadzieścia",
            "trzydzieści",
            "czterdzieści",
            "pięćdziesiąt",
            "sześćdziesiąt",
            "siedemdziesiąt",
            "osiemdziesiąt",
            "dziewięćdziesiąt",
        ),
        2,
    )
)

HUNDREDS = dict(
    enumerate(
        (
            "sto",
            "dwieście",
            "trzysta",
            "czterysta",
            "pięćset",
            "sześćset",
            "siedemset",
            "osiemset",
            "dziewięćset",
        ),
        1,
    )
)

SCALE_FORMS = {
    1: ("tysiąc", "tysiące", "tysięcy"),
    2: ("milion", "miliony", "milionów"),
    3: ("miliard", "miliardy", "miliardów"),
    4: ("bilion", "biliony", "bilionów"),
    5: ("biliard", "biliardy", "biliardów"),
    6: ("trylion", "tryliony", "trylionów"),
    7: ("tryliard", "tryliardy", "tryliardów"),
    8: ("kwadrylion", "kwadryliony", "kwadrylionów"),
    9: ("kwadryliard", "kwadryliardy", "kwadryliardów"),
    10: ("kwintylion", "kwintyliony", "kwintylionów"),
}

RULES = SlavicRules(
    zero_word="zero",
    ones=ONES,
    ones_feminine=ONES_FEMININE,
    teens=TEENS,
    tens=TENS,
    hundreds=HUNDREDS,
    scale_forms=SCALE_FORMS,
    plural_rule=west_slavic_plural,
    omit_one_before_scale=True,
)


def build(options: ConversionOptions) -> CardinalConverter:
    lexicon = Lexicon(negative_word="minus", separator_word="przecinek", zero_word="zero")
    return CardinalConverter(
        lexicon,
        SlavicEngine(RULES, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
