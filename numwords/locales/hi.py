"""Hindi (Indian grouping: हज़ार, लाख, करोड़, अरब...)."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.south_asian import SouthAsianEngine, SouthAsianRules
from ..models import ConversionOptions

BELOW_HUNDRED = (
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तेतालीस", "चवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानवे", "बानवे", "तिरानवे", "चौरानवे", "पचानवे", "छियानवे", "सत्तानवे", "अट्ठानवे", "निन्यानवे",
)

SCALE_WORDS = ("", "हज़ार", "लाख", "करोड़", "अरब", "खरब", "नील", "पद्म", "शंख")


def build(options: ConversionOptions) -> CardinalConverter:
    rules = SouthAsianRules(
        zero_word="शून्य",
        below_hundred=BELOW_HUNDRED,
        hundred_word="सौ",
        scale_words=SCALE_WORDS,
    )
    lexicon = Lexicon(negative_word="माइनस", separator_word="दशमलव", zero_word="शून्य")
    return CardinalConverter(
        lexicon,
        SouthAsianEngine(rules),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
