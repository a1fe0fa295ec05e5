"""Spanish (long scale), masculine and feminine."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.cardmatch import CardMatchEngine, CardMatchRules, Leaf
from ..models import ConversionOptions, Gender

MILLION = 10**6

HUNDREDS_STEMS = {5: "quinien", 7: "setecien", 9: "novecien"}


def cards(feminine: bool) -> tuple[tuple[int, str], ...]:
    one = "una" if feminine else "uno"
    return (
        (10**24, "cuatrillón"),
        (10**18, "trillón"),
        (10**12, "billón"),
        (MILLION, "millón"),
        (1000, "mil"),
        (100, "cien"),
        (90, "noventa"),
        (80, "ochenta"),
        (70, "setenta"),
        (60, "sesenta"),
        (50, "cincuenta"),
        (40, "cuarenta"),
        (30, "treinta"),
        (29, "veintinueve"),
        (28, "veintiocho"),
        (27, "veintisiete"),
        (26, "veintiséis"),
        (25, "veinticinco"),
        (24, "veinticuatro"),
        (23, "veintitrés"),
        (22, "veintidós"),
        (21, "veinti" + one),
        (20, "veinte"),
        (19, "diecinueve"),
        (18, "dieciocho"),
        (17, "diecisiete"),
        (16, "dieciséis"),
        (15, "quince"),
        (14, "catorce"),
        (13, "trece"),
        (12, "doce"),
        (11, "once"),
        (10, "diez"),
        (9, "nueve"),
        (8, "ocho"),
        (7, "siete"),
        (6, "seis"),
        (5, "cinco"),
        (4, "cuatro"),
        (3, "tres"),
        (2, "dos"),
        (1, one),
        (0, "cero"),
    )


def apocopate(text: str) -> str:
    """uno -> un, veintiuno -> veintiún before a noun."""
    if text.endswith("veintiuno"):
        return text[: -len("uno")] + "ún"
    if text.endswith("uno"):
        return text[: -len("o")]
    return text


def masculine(text: str) -> str:
    """Counts of millón and above agree with the masculine noun."""
    text = text.replace("ientas", "ientos")
    if text.endswith("una"):
        text = text[: -len("a")]
    return text.replace("veintiun", "veintiún") if text.endswith("veintiun") else text


def make_merge(stem: str):
    def merge(left: Leaf, right: Leaf) -> str:
        left_text, right_text = left.text, right.text

        if left.value == 1:
            if right.value < MILLION:
                return right_text
            left_text = "un"
        elif left.value == 100 and right.value % 1000 != 0:
            left_text = "ciento"

        if right.value < left.value:
            if left.value < 100:
                return f"{left_text} y {right_text}"
            return f"{left_text} {right_text}"

        if right.value >= 1000:
            left_text = apocopate(left_text)
        if right.value >= MILLION:
            left_text = masculine(left_text)
            if left.value > 1:
                # millón -> millones, billón -> billones
                right_text = right_text[: -len("ón")] + "ones"

        if right.value == 100:
            head = HUNDREDS_STEMS.get(left.value, left_text + "cien")
            return f"{head}t{stem}s"
        return f"{left_text} {right_text}"

    return merge


def build(options: ConversionOptions) -> CardinalConverter:
    feminine = options.gender == Gender.FEMININE
    rules = CardMatchRules(cards=cards(feminine), merge=make_merge("a" if feminine else "o"))
    lexicon = Lexicon(negative_word="menos", separator_word="punto", zero_word="cero")
    return CardinalConverter(
        lexicon,
        CardMatchEngine(rules),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
