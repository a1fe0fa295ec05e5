"""Croatian (long scale). Tisuća is feminine: jedna tisuća, dvije tisuće."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.slavic import SlavicEngine, SlavicRules
from ..models import ConversionOptions
from ..segments import south_slavic_plural

ONES = dict(enumerate(("jedan", "dva", "tri", "četiri", "pet", "šest", "sedam", "osam", "devet"), 1))
ONES_FEMININE = {**ONES, 1: "jedna", 2: "dvije"}

TEENS = dict(
    enumerate(
        (
            "deset",
            "jedanaest",
            "dvanaest",
            "trinaest",
            "četrnaest",
            "petnaest",
            "šesnaest",
            "sedamnaest",
            "osamnaest",
            "devetnaest",
        )
    )
)

TENS = dict(
    enumerate(
        ("dvadeset", "trideset", "četrdeset", "pedeset", "šezdeset", "sedamdeset", "osamdeset", "devedeset"),
        2,
    )
)

HUNDREDS = dict(
    enumerate(
        ("sto", "dvjesto", "tristo", "četiristo", "petsto", "šesto", "sedamsto", "osamsto", "devetsto"),
        1,
    )
)

SCALE_FORMS = {
    1: ("tisuća", "tisuće", "tisuća"),
    2: ("milijun", "milijuna", "milijuna"),
    3: ("milijarda", "milijarde", "milijarda"),
    4: ("bilijun", "bilijuna", "bilijuna"),
    5: ("bilijarda", "bilijarde", "bilijarda"),
    6: ("trilijun", "trilijuna", "trilijuna"),
    7: ("trilijarda", "trilijarde", "trilijarda"),
    8: ("kvadrilijun", "kvadrilijuna", "kvadrilijuna"),
    9: ("kvadrilijarda", "kvadrilijarde", "kvadrilijarda"),
    10: ("kvintilijun", "kvintilijuna", "kvintilijuna"),
}

RULES = SlavicRules(
    zero_word="nula",
    ones=ONES,
    ones_feminine=ONES_FEMININE,
    teens=TEENS,
    tens=TENS,
    hundreds=HUNDREDS,
    scale_forms=SCALE_FORMS,
    plural_rule=south_slavic_plural,
    feminine_tiers=frozenset({1}),
)


def build(options: ConversionOptions) -> CardinalConverter:
    lexicon = Lexicon(negative_word="minus", separator_word="zarez", zero_word="nula")
    return CardinalConverter(
        lexicon,
        SlavicEngine(RULES, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
