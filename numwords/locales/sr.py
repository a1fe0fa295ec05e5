"""
Serbian (long scale) in Latin or Cyrillic script.

The tables are kept in Latin; ``script=native`` (or ``lang="sr-Cyrl"``)
transliterates every word, which keeps the two scripts from drifting apart.
"""

from __future__ import annotations

from typing import Callable

from ..core import CardinalConverter, Lexicon
from ..engines.slavic import SlavicEngine, SlavicRules
from ..models import ConversionOptions, Script
from ..segments import south_slavic_plural

ONES = dict(enumerate(("jedan", "dva", "tri", "četiri", "pet", "šest", "sedam", "osam", "devet"), 1))
ONES_FEMININE = {**ONES, 1: "jedna", 2: "dve"}

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
        ("sto", "dvesta", "trista", "četiristo", "petsto", "šesto", "sedamsto", "osamsto", "devetsto"),
        1,
    )
)

SCALE_FORMS = {
    1: ("hiljada", "hiljade", "hiljada"),
    2: ("milion", "miliona", "miliona"),
    3: ("milijarda", "milijarde", "milijarda"),
    4: ("bilion", "biliona", "biliona"),
    5: ("bilijarda", "bilijarde", "bilijarda"),
    6: ("trilion", "triliona", "triliona"),
    7: ("trilijarda", "trilijarde", "trilijarda"),
    8: ("kvadrilion", "kvadriliona", "kvadriliona"),
    9: ("kvadrilijarda", "kvadrilijarde", "kvadrilijarda"),
    10: ("kvintilion", "kvintiliona", "kvintiliona"),
}

LEXICON_WORDS = {"negative_word": "minus", "separator_word": "zapeta", "zero_word": "nula"}

# Digraphs first so "lj" is not read as "l" + "j"
DIGRAPHS = {"lj": "љ", "nj": "њ", "dž": "џ"}
LETTERS = dict(
    zip(
        "abvgdđežzijklmnoprstćufhcčš",
        "абвгдђежзијклмнопрстћуфхцчш",
    )
)


def to_cyrillic(text: str) -> str:
    """Transliterate Serbian Latin to Serbian Cyrillic."""
    for latin, cyrillic in DIGRAPHS.items():
        text = text.replace(latin, cyrillic)
    return "".join(LETTERS.get(char, char) for char in text)


def transliterate(rules: SlavicRules, convert: Callable[[str], str]) -> SlavicRules:
    def table(words: dict[int, str]) -> dict[int, str]:
        return {key: convert(word) for key, word in words.items()}

    return SlavicRules(
        zero_word=convert(rules.zero_word),
        ones=table(rules.ones),
        ones_feminine=table(rules.ones_feminine),
        teens=table(rules.teens),
        tens=table(rules.tens),
        hundreds=table(rules.hundreds),
        scale_forms={
            tier: tuple(convert(form) for form in forms)
            for tier, forms in rules.scale_forms.items()
        },
        plural_rule=rules.plural_rule,
        feminine_tiers=rules.feminine_tiers,
    )


LATIN_RULES = SlavicRules(
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
CYRILLIC_RULES = transliterate(LATIN_RULES, to_cyrillic)


def build(options: ConversionOptions) -> CardinalConverter:
    cyrillic = options.script == Script.NATIVE or options.lang == "sr-Cyrl"
    if cyrillic:
        rules = CYRILLIC_RULES
        lexicon = Lexicon(**{key: to_cyrillic(word) for key, word in LEXICON_WORDS.items()})
    else:
        rules = LATIN_RULES
        lexicon = Lexicon(**LEXICON_WORDS)
    return CardinalConverter(
        lexicon,
        SlavicEngine(rules, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
