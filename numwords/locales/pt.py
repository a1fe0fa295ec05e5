"""European Portuguese (compound long scale: mil milhões, bilião)."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.segment import ScaleMode, SegmentEngine, SegmentPart, SegmentRules, SegmentTables
from ..models import ConversionOptions

ONES = {1: "um", 2: "dois", 3: "três", 4: "quatro", 5: "cinco", 6: "seis", 7: "sete", 8: "oito", 9: "nove"}

TEENS = {
    0: "dez",
    1: "onze",
    2: "doze",
    3: "treze",
    4: "catorze",
    5: "quinze",
    6: "dezasseis",
    7: "dezassete",
    8: "dezoito",
    9: "dezanove",
}

TENS = {
    2: "vinte",
    3: "trinta",
    4: "quarenta",
    5: "cinquenta",
    6: "sessenta",
    7: "setenta",
    8: "oitenta",
    9: "noventa",
}

HUNDREDS = {
    1: "cento",
    2: "duzentos",
    3: "trezentos",
    4: "quatrocentos",
    5: "quinhentos",
    6: "seiscentos",
    7: "setecentos",
    8: "oitocentos",
    9: "novecentos",
}

SCALE_WORDS = ("milhão", "bilião", "trilião", "quatrilião", "quintilião", "sextilião")


def pluralize(word: str) -> str:
    """milhão -> milhões."""
    return word[: -len("ão")] + "ões" if word.endswith("ão") else word


def join(parts: list[SegmentPart]) -> str:
    """Insert "e" before the last part when it is below 100 or a round hundred."""
    texts = [p.text for p in parts]
    last = parts[-1].value
    if len(parts) > 1 and (last < 100 or last % 100 == 0):
        return " ".join(texts[:-1]) + " e " + texts[-1]
    return " ".join(texts)


def build(options: ConversionOptions) -> CardinalConverter:
    tables = SegmentTables(
        ones=ONES,
        teens=TEENS,
        tens=TENS,
        hundreds=HUNDREDS,
        exact_hundred="cem",
        tens_joiner=" e ",
        hundreds_joiner=" e ",
    )
    rules = SegmentRules(
        zero_word="zero",
        render_segment=tables.render,
        scale_words=SCALE_WORDS,
        scale_mode=ScaleMode.COMPOUND,
        thousand_word="mil",
        pluralize=pluralize,
        omit_one=lambda index: index % 2 == 1,
        join=join,
    )
    lexicon = Lexicon(negative_word="menos", separator_word="vírgula", zero_word="zero")
    return CardinalConverter(
        lexicon,
        SegmentEngine(rules),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
