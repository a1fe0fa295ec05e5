"""Malay (short scale). One of any scale fuses into "se-": seribu, sejuta."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.segment import SegmentEngine, SegmentPart, SegmentRules, SegmentTables
from ..models import ConversionOptions

ONES = {
    1: "satu",
    2: "dua",
    3: "tiga",
    4: "empat",
    5: "lima",
    6: "enam",
    7: "tujuh",
    8: "lapan",
    9: "sembilan",
}

TABLES = SegmentTables(
    ones=ONES,
    teens={0: "sepuluh", 1: "sebelas", **{d: f"{ONES[d]} belas" for d in range(2, 10)}},
    tens={d: f"{ONES[d]} puluh" for d in range(2, 10)},
    hundreds={1: "seratus", **{d: f"{ONES[d]} ratus" for d in range(2, 10)}},
)

SCALE_WORDS = ("ribu", "juta", "bilion", "trilion", "kuadrilion", "kuintilion")


def join(parts: list[SegmentPart]) -> str:
    # omit_one leaves a bare scale word for a count of one
    return " ".join(
        "se" + p.text if p.index and p.value == 1 else p.text for p in parts
    )


def build(options: ConversionOptions) -> CardinalConverter:
    rules = SegmentRules(
        zero_word="sifar",
        render_segment=TABLES.render,
        scale_words=SCALE_WORDS,
        omit_one=lambda index: True,
        join=join,
    )
    lexicon = Lexicon(negative_word="minus", separator_word="perpuluhan", zero_word="sifar")
    return CardinalConverter(
        lexicon,
        SegmentEngine(rules),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
