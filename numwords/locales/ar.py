"""
Arabic (short scale).

Scale nouns agree with their count:

    1       ألف                 (singular, the count is dropped)
    2       ألفان               (dual, the count is dropped)
    3-10    ثلاثة آلاف          (plural)
    11-99   أحد عشر ألفاً و...  (accusative when more words follow)
    100+    مائة ألف            (singular)

Units come before tens ("ثلاثة وعشرون") and every component after the first
is joined with و.
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.semitic import ScaleForm, SemiticEngine, SemiticRules
from ..models import ConversionOptions

UNITS = dict(
    enumerate(
        (
            "واحد",
            "اثنان",
            "ثلاثة",
            "أربعة",
            "خمسة",
            "ستة",
            "سبعة",
            "ثمانية",
            "تسعة",
            "عشرة",
            "أحد عشر",
            "اثنا عشر",
            "ثلاثة عشر",
            "أربعة عشر",
            "خمسة عشر",
            "ستة عشر",
            "سبعة عشر",
            "ثمانية عشر",
            "تسعة عشر",
        ),
        1,
    )
)

UNITS_FEMININE = dict(
    enumerate(
        (
            "واحدة",
            "اثنتان",
            "ثلاث",
            "أربع",
            "خمس",
            "ست",
            "سبع",
            "ثمان",
            "تسع",
            "عشر",
            "إحدى عشرة",
            "اثنتا عشرة",
            "ثلاث عشرة",
            "أربع عشرة",
            "خمس عشرة",
            "ست عشرة",
            "سبع عشرة",
            "ثماني عشرة",
            "تسع عشرة",
        ),
        1,
    )
)

TENS = dict(enumerate(("عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون"), 2))

HUNDREDS = dict(
    enumerate(
        (
            "مائة",
            "مئتان",
            "ثلاثمائة",
            "أربعمائة",
            "خمسمائة",
            "ستمائة",
            "سبعمائة",
            "ثمانمائة",
            "تسعمائة",
        ),
        1,
    )
)


def _tiers(*words: str) -> dict[int, str]:
    return dict(enumerate(words, 1))


SCALE_FORMS = {
    ScaleForm.SINGULAR: _tiers(
        "ألف", "مليون", "مليار", "تريليون", "كوادريليون", "كوينتليون", "سكستيليون"
    ),
    ScaleForm.APPENDED: _tiers(
        "ألفاً", "مليوناً", "ملياراً", "تريليوناً", "كوادريليوناً", "كوينتليوناً", "سكستيليوناً"
    ),
    ScaleForm.PLURAL: _tiers(
        "آلاف", "ملايين", "مليارات", "تريليونات", "كوادريليونات", "كوينتليونات", "سكستيليونات"
    ),
    ScaleForm.DUAL: _tiers(
        "ألفان", "مليونان", "ملياران", "تريليونان", "كوادريليونان", "كوينتليونان", "سكستيليونان"
    ),
}


def scale_form(segment: int, index: int, followed: bool) -> ScaleForm:
    if segment == 1:
        return ScaleForm.SINGULAR
    if segment == 2:
        return ScaleForm.DUAL
    if 3 <= segment % 100 <= 10:
        return ScaleForm.PLURAL
    if followed and 11 <= segment % 100 <= 99:
        return ScaleForm.APPENDED
    return ScaleForm.SINGULAR


RULES = SemiticRules(
    zero_word="صفر",
    units=UNITS,
    units_feminine=UNITS_FEMININE,
    tens=TENS,
    hundreds=HUNDREDS,
    scale_forms=SCALE_FORMS,
    scale_form=scale_form,
    conjunction="و",
    ones_before_tens=True,
)


def build(options: ConversionOptions) -> CardinalConverter:
    lexicon = Lexicon(negative_word="ناقص", separator_word="فاصلة", zero_word="صفر")
    return CardinalConverter(
        lexicon,
        SemiticEngine(RULES, options.gender),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
