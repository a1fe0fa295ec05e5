"""
Czech (long scale: milion, miliarda, bilion, biliarda...).

The decimal separator agrees with the whole part: "jedna celá pět",
"dvě celé pět", "pět celých pět".
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.slavic import SlavicEngine, SlavicRules
from ..models import ConversionOptions
from ..segments import west_slavic_plural

ONES = dict(enumerate(("jedna", "dva", "tři", "čtyři", "pět", "šest", "sedm", "osm", "devět"), 1))
ONES_FEMININE = {**ONES, 2: "dvě"}

TEENS = dict(
    enumerate(
        (
            "deset",
            "jedenáct",
            "dvanáct",
            "třináct",
            "čtrnáct",
            "patnáct",
            "šestnáct",
            "sedmnáct",
            "osmnáct",
            "devatenáct",
        )
    )
)

TENS = dict(
    enumerate(
        ("dvacet", "třicet", "čtyřicet", "padesát", "šedesát", "sedmdesát", "osmdesát", "devadesát"),
        2,
    )
)

HUNDREDS = dict(
    enumerate(
        (
            "sto",
            "dvě stě",
            "tři sta",
            "čtyři sta",
            "pět set",
            "šest set",
            "sedm set",
            "osm set",
            "devět set",
        ),
        1,
    )
)

SCALE_FORMS = {
    1: ("tisíc", "tisíce", "tisíc"),
    2: ("milion", "miliony", "milionů"),
    3: ("miliarda", "miliardy", "miliard"),
    4: ("bilion", "biliony", "bilionů"),
    5: ("biliarda", "biliardy", "biliard"),
    6: ("trilion", "triliony", "trilionů"),
    7: ("triliarda", "triliardy", "triliard"),
    8: ("kvadrilion", "kvadriliony", "kvadrilionů"),
    9: ("kvadriliarda", "kvadriliardy", "kvadriliard"),
    10: ("kvintilion", "kvintiliony", "kvintilionů"),
}

RULES = SlavicRules(
    zero_word="nula",
    ones=ONES,
    ones_feminine=ONES_FEMININE,
    teens=TEENS,
    tens=TENS,
    hundreds=HUNDREDS,
    scale_forms=SCALE_FORMS,
    plural_rule=west_slavic_plural,
    # the -iarda nouns are feminine: dvě miliardy
    feminine_tiers=frozenset({3, 5, 7, 9}),
    omit_one_before_scale=True,
)


def separator_word(whole_number: int) -> str:
    if whole_number <= 1:
        return "celá"
    if whole_number <= 4:
        return "celé"
    return "celých"


def build(options: ConversionOptions) -> CardinalConverter:
    lexicon = Lexicon(negative_word="mínus", separator_word=separator_word, zero_word="nula")
    return CardinalConverter(
        lexicon,
        SlavicEngine(RULES, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
