"""
Hebrew (short scale).

Thousands 1-9 use fused construct forms (אלפיים, שלשת אלפים); higher tiers
take the plural noun for any count above one. Only the final component is
joined with ו: "מאה עשרים ושלש". Decimals are read digit by digit.
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.semitic import ScaleForm, SemiticEngine, SemiticRules
from ..models import ConversionOptions, DecimalMode

ZERO = "אפס"

ONES = dict(enumerate(("אחת", "שתים", "שלש", "ארבע", "חמש", "שש", "שבע", "שמונה", "תשע"), 1))

UNITS = {
    **ONES,
    10: "עשר",
    **{10 + digit: f"{word} עשרה" for digit, word in ONES.items()},
}

TENS = dict(enumerate(("עשרים", "שלשים", "ארבעים", "חמישים", "ששים", "שבעים", "שמונים", "תשעים"), 2))

HUNDREDS = {1: "מאה", 2: "מאתיים", **{digit: f"{ONES[digit]} מאות" for digit in range(3, 10)}}

SCALE_FORMS = {
    ScaleForm.CONSTRUCT: {
        1: "אלף",
        2: "אלפיים",
        3: "שלשת אלפים",
        4: "ארבעת אלפים",
        5: "חמשת אלפים",
        6: "ששת אלפים",
        7: "שבעת אלפים",
        8: "שמונת אלפים",
        9: "תשעת אלפים",
    },
    ScaleForm.SINGULAR: {
        1: "אלף",
        2: "מיליון",
        3: "מיליארד",
        4: "טריליון",
        5: "קוודרליון",
        6: "קווינטיליון",
    },
    ScaleForm.PLURAL: {
        1: "אלפים",
        2: "מיליונים",
        3: "מיליארדים",
        4: "טריליונים",
        5: "קוודרליונים",
        6: "קווינטיליונים",
    },
}


def scale_form(segment: int, index: int, followed: bool) -> ScaleForm:
    if index == 1:
        return ScaleForm.CONSTRUCT if segment <= 9 else ScaleForm.SINGULAR
    return ScaleForm.SINGULAR if segment == 1 else ScaleForm.PLURAL


RULES = SemiticRules(
    zero_word=ZERO,
    units=UNITS,
    units_feminine=UNITS,
    tens=TENS,
    hundreds=HUNDREDS,
    scale_forms=SCALE_FORMS,
    scale_form=scale_form,
    conjunction="ו",
    final_conjunction_only=True,
)


def build(options: ConversionOptions) -> CardinalConverter:
    lexicon = Lexicon(
        negative_word="מינוס",
        separator_word="נקודה",
        zero_word=ZERO,
        decimal_mode=DecimalMode.PER_DIGIT,
        digit_words=(ZERO, *ONES.values()),
    )
    return CardinalConverter(
        lexicon,
        SemiticEngine(RULES, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
