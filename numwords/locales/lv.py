"""
Latvian (short scale, two plural forms).

Hundreds are inflected: "simts" (100), "simtu" before units (101),
"divi simti" (200). One thousand is a bare "tūkstotis".
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.slavic import SlavicEngine, SlavicRules
from ..models import ConversionOptions
from ..segments import digits, latvian_plural

ONES = dict(
    enumerate(("viens", "divi", "trīs", "četri", "pieci", "seši", "septiņi", "astoņi", "deviņi"), 1)
)
ONES_FEMININE = dict(
    enumerate(
        ("viena", "divas", "trīs", "četras", "piecas", "sešas", "septiņas", "astoņas", "deviņas"),
        1,
    )
)

TEENS = dict(
    enumerate(
        (
            "desmit",
            "vienpadsmit",
            "divpadsmit",
            "trīspadsmit",
            "četrpadsmit",
            "piecpadsmit",
            "sešpadsmit",
            "septiņpadsmit",
            "astoņpadsmit",
            "deviņpadsmit",
        )
    )
)

TENS = dict(
    enumerate(
        (
            "divdesmit",
            "trīsdesmit",
            "četrdesmit",
            "piecdesmit",
            "sešdesmit",
            "septiņdesmit",
            "astoņdesmit",
            "deviņdesmit",
        ),
        2,
    )
)

SCALE_FORMS = {
    1: ("tūkstotis", "tūkstoši"),
    2: ("miljons", "miljoni"),
    3: ("miljards", "miljardi"),
    4: ("triljons", "triljoni"),
    5: ("kvadriljons", "kvadriljoni"),
    6: ("kvintiljons", "kvintiljoni"),
    7: ("sikstiljons", "sikstiljoni"),
    8: ("septiljons", "septiljoni"),
    9: ("oktiljons", "oktiljoni"),
    10: ("nontiljons", "nontiljoni"),
}


def hundreds_words(digit: int, segment: int) -> str:
    if digit > 1:
        return f"{ONES[digit]} simti"
    _, tens, ones = digits(segment)
    return "simtu" if tens == 0 and ones else "simts"


RULES = SlavicRules(
    zero_word="nulle",
    ones=ONES,
    ones_feminine=ONES_FEMININE,
    teens=TEENS,
    tens=TENS,
    scale_forms=SCALE_FORMS,
    plural_rule=latvian_plural,
    omit_one_before_scale=True,
    hundreds_rule=hundreds_words,
)


def build(options: ConversionOptions) -> CardinalConverter:
    lexicon = Lexicon(negative_word="mīnus", separator_word="komats", zero_word="nulle")
    return CardinalConverter(
        lexicon,
        SlavicEngine(RULES, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
