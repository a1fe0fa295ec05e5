"""
Lithuanian (short scale).

Scale nouns take the genitive plural after 10-19 and round tens
("dvidešimt tūkstančių"), the nominative plural after 2-9
("du tūkstančiai"), and the singular after a final one.
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.slavic import SlavicEngine, SlavicRules
from ..models import ConversionOptions
from ..segments import lithuanian_plural

ONES = dict(
    enumerate(("vienas", "du", "trys", "keturi", "penki", "šeši", "septyni", "aštuoni", "devyni"), 1)
)
ONES_FEMININE = dict(
    enumerate(
        ("viena", "dvi", "trys", "keturios", "penkios", "šešios", "septynios", "aštuonios", "devynios"),
        1,
    )
)

TEENS = dict(
    enumerate(
        (
            "dešimt",
            "vienuolika",
            "dvylika",
            "trylika",
            "keturiolika",
            "penkiolika",
            "šešiolika",
            "septyniolika",
            "aštuoniolika",
            "devyniolika",
        )
    )
)

TENS = dict(
    enumerate(
        (
            "dvidešimt",
            "trisdešimt",
            "keturiasdešimt",
            "penkiasdešimt",
            "šešiasdešimt",
            "septyniasdešimt",
            "aštuoniasdešimt",
            "devyniasdešimt",
        ),
        2,
    )
)

SCALE_FORMS = {
    1: ("tūkstantis", "tūkstančiai", "tūkstančių"),
    2: ("milijonas", "milijonai", "milijonų"),
    3: ("milijardas", "milijardai", "milijardų"),
    4: ("trilijonas", "trilijonai", "trilijonų"),
    5: ("kvadrilijonas", "kvadrilijonai", "kvadrilijonų"),
    6: ("kvintilijonas", "kvintilijonai", "kvintilijonų"),
    7: ("sikstilijonas", "sikstilijonai", "sikstilijonų"),
    8: ("septilijonas", "septilijonai", "septilijonų"),
    9: ("oktilijonas", "oktilijonai", "oktilijonų"),
    10: ("naintilijonas", "naintilijonai", "naintilijonų"),
}


def hundreds_words(digit: int, segment: int) -> str:
    return f"{ONES[digit]} {'šimtas' if digit == 1 else 'šimtai'}"


RULES = SlavicRules(
    zero_word="nulis",
    ones=ONES,
    ones_feminine=ONES_FEMININE,
    teens=TEENS,
    tens=TENS,
    scale_forms=SCALE_FORMS,
    plural_rule=lithuanian_plural,
    hundreds_rule=hundreds_words,
)


def build(options: ConversionOptions) -> CardinalConverter:
    lexicon = Lexicon(negative_word="minus", separator_word="kablelis", zero_word="nulis")
    return CardinalConverter(
        lexicon,
        SlavicEngine(RULES, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
