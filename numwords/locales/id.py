"""Indonesian (short scale). The "se-" prefix reads one of ten, hundred and thousand."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.segment import SegmentEngine, SegmentRules, SegmentTables
from ..models import ConversionOptions

ONES = {
    1: "satu",
    2: "dua",
    3: "tiga",
    4: "empat",
    5: "lima",
    6: "enam",
    7: "tujuh",
    8: "delapan",
    9: "sembilan",
}

TEENS = {0: "sepuluh", 1: "sebelas", **{d: f"{ONES[d]} belas" for d in range(2, 10)}}
TENS = {d: f"{ONES[d]} puluh" for d in range(2, 10)}
HUNDREDS = {1: "seratus", **{d: f"{ONES[d]} ratus" for d in range(2, 10)}}

TABLES = SegmentTables(ones=ONES, teens=TEENS, tens=TENS, hundreds=HUNDREDS)

SCALE_WORDS = (
    "ribu",
    "juta",
    "miliar",
    "triliun",
    "kuadriliun",
    "kuantiliun",
    "sekstiliun",
    "septiliun",
    "oktiliun",
    "noniliun",
    "desiliun",
)


def render_scale(segment: int, index: int, word: str) -> str:
    if segment == 1 and index == 1:
        return "se" + word
    return f"{TABLES.render(segment)} {word}"


def build(options: ConversionOptions) -> CardinalConverter:
    rules = SegmentRules(
        zero_word="nol",
        render_segment=TABLES.render,
        scale_words=SCALE_WORDS,
        render_scale=render_scale,
    )
    lexicon = Lexicon(negative_word="min", separator_word="koma", zero_word="nol")
    return CardinalConverter(
        lexicon,
        SegmentEngine(rules),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
