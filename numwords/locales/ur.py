"""Urdu (Indian grouping: ہزار, لاکھ, کروڑ...)."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.south_asian import SouthAsianEngine, SouthAsianRules
from ..models import ConversionOptions

BELOW_HUNDRED = (
    "صفر", "ایک", "دو", "تین", "چار", "پانچ", "چھ", "سات", "آٹھ", "نو",
    "دس", "گیارہ", "بارہ", "تیرہ", "چودہ", "پندرہ", "سولہ", "سترہ", "اٹھارہ", "انیس",
    "بیس", "اکیس", "بائیس", "تیئیس", "چوبیس", "پچیس", "چھبیس", "ستائیس", "اٹھائیس", "انتیس",
    "تیس", "اکتیس", "بتیس", "تینتیس", "چونتیس", "پینتیس", "چھتیس", "سینتیس", "اڑتیس", "انتالیس",
    "چالیس", "اکتالیس", "بیالیس", "تینتالیس", "چوالیس", "پینتالیس", "چھالیس", "سینتالیس", "اڑتالیس", "انچاس",
    "پچاس", "اکاون", "باون", "ترپن", "چون", "پچپن", "چھپن", "ستاون", "اٹھاون", "انسٹھ",
    "ساٹھ", "اکسٹھ", "باسٹھ", "ترسٹھ", "چونسٹھ", "پینسٹھ", "چھیاسٹھ", "سڑسٹھ", "اڑسٹھ", "انہتر",
    "ستر", "اکہتر", "بہتر", "تہتر", "چوہتر", "پچھتر", "چھہتر", "ستتر", "اٹھہتر", "اناسی",
    "اسی", "اکیاسی", "بیاسی", "تریاسی", "چوراسی", "پچاسی", "چھیاسی", "ستاسی", "اٹھاسی", "نواسی",
    "نوے", "اکانوے", "بانوے", "ترانوے", "چورانوے", "پچانوے", "چھیانوے", "ستانوے", "اٹھانوے", "ننانوے",
)

SCALE_WORDS = ("", "ہزار", "لاکھ", "کروڑ", "ارب", "کھرب", "نیل", "پدم", "شنکھ")


def build(options: ConversionOptions) -> CardinalConverter:
    rules = SouthAsianRules(
        zero_word="صفر",
        below_hundred=BELOW_HUNDRED,
        hundred_word="سو",
        scale_words=SCALE_WORDS,
    )
    lexicon = Lexicon(negative_word="منفی", separator_word="اعشاریہ", zero_word="صفر")
    return CardinalConverter(
        lexicon,
        SouthAsianEngine(rules),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
