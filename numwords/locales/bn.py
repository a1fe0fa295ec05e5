"""Bengali (Indian grouping: হাজার, লাখ, কোটি...)."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.south_asian import SouthAsianEngine, SouthAsianRules
from ..models import ConversionOptions

BELOW_HUNDRED = (
    "শূন্য", "এক", "দুই", "তিন", "চার", "পাঁচ", "ছয়", "সাত", "আট", "নয়",
    "দশ", "এগারো", "বারো", "তেরো", "চৌদ্দ", "পনেরো", "ষোল", "সতেরো", "আঠারো", "উনিশ",
    "বিশ", "একুশ", "বাইশ", "তেইশ", "চব্বিশ", "পঁচিশ", "ছাব্বিশ", "সাতাশ", "আঠাশ", "উনত্রিশ",
    "ত্রিশ", "একত্রিশ", "বত্রিশ", "তেত্রিশ", "চৌত্রিশ", "পঁয়ত্রিশ", "ছত্রিশ", "সাঁইত্রিশ", "আটত্রিশ", "উনচল্লিশ",
    "চল্লিশ", "একচল্লিশ", "বেয়াল্লিশ", "তেতাল্লিশ", "চুয়াল্লিশ", "পঁয়তাল্লিশ", "ছেচল্লিশ", "সাতচল্লিশ", "আটচল্লিশ", "উনপঞ্চাশ",
    "পঞ্চাশ", "একান্ন", "বাহান্ন", "তিপ্পান্ন", "চুয়ান্ন", "পঞ্চান্ন", "ছাপ্পান্ন", "সাতান্ন", "আটান্ন", "উনষাট",
    "ষাট", "একষট্টি", "বাষট্টি", "তেষট্টি", "চৌষট্টি", "পঁয়ষট্টি", "ছেষট্টি", "সাতষট্টি", "আটষট্টি", "ঊনসত্তর",
    "সত্তর", "একাত্তর", "বাহাত্তর", "তেহাত্তর", "চুয়াত্তর", "পঁচাত্তর", "ছিয়াত্তর", "সাতাত্তর", "আটাত্তর", "উনআশি",
    "আশি", "একাশি", "বিরাশি", "তিরাশি", "চুরাশি", "পঁচাশি", "ছিয়াশি", "সাতাশি", "আটাশি", "উননব্বই",
    "নব্বই", "একানব্বই", "বিরানব্বই", "তিরানব্বই", "চুরানব্বই", "পঁচানব্বই", "ছিয়ানব্বই", "সাতানব্বই", "আটানব্বই", "নিরানব্বই",
)

SCALE_WORDS = ("", "হাজার", "লাখ", "কোটি", "আরব", "খরব", "নীল", "পদ্ম", "শঙ্খ")


def build(options: ConversionOptions) -> CardinalConverter:
    rules = SouthAsianRules(
        zero_word="শূন্য",
        below_hundred=BELOW_HUNDRED,
        hundred_word="শত",
        scale_words=SCALE_WORDS,
    )
    lexicon = Lexicon(negative_word="মাইনাস", separator_word="দশমিক", zero_word="শূন্য")
    return CardinalConverter(
        lexicon,
        SouthAsianEngine(rules),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
