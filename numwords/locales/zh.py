"""
Chinese, Simplified (zh-Hans) and Traditional (zh-Hant).

Myriad grouping: 4-digit segments under 万 and 亿. Above that the count of 亿
is read as a number of its own (一万亿, 一亿亿). ``formal`` switches to
the financial numerals (壹贰叁 / 壹貳參) used on cheques and invoices.

零 marks skipped digits once per run, both inside a segment (一千零一) and
between segments (一万零一, 壹拾萬零壹仟).
"""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.segment import ScaleMode, SegmentEngine, SegmentPart, SegmentRules
from ..models import ConversionOptions, DecimalMode

ZERO = "零"

DIGITS = {
    ("hans", False): "零一二三四五六七八九",
    ("hans", True): "零壹贰叁肆伍陆柒捌玖",
    ("hant", False): "零一二三四五六七八九",
    ("hant", True): "零壹貳參肆伍陸柒捌玖",
}

UNITS = {False: ("", "十", "百", "千"), True: ("", "拾", "佰", "仟")}

SCALE_WORDS = {
    "hans": ("万", "亿"),
    "hant": ("萬", "億"),
}

LEXICON_WORDS = {
    "hans": {"negative_word": "负", "separator_word": "点"},
    "hant": {"negative_word": "負", "separator_word": "點"},
}


def make_renderer(digits: str, units: tuple[str, ...]):
    def render(segment: int) -> str:
        words: list[str] = []
        pending_zero = False
        for power in (3, 2, 1, 0):
            digit = segment // 10**power % 10
            if not digit:
                pending_zero = pending_zero or bool(words)
                continue
            if pending_zero:
                words.append(ZERO)
                pending_zero = False
            words.append(digits[digit] + units[power])
        return "".join(words)

    return render


def join(parts: list[SegmentPart]) -> str:
    # After 亿 a zero is written only when the 千万 digit is empty; after 万
    # also when the 万 count ends in zero (一十万零一千).
    words = [parts[0].text]
    for upper, lower in zip(parts, parts[1:]):
        skipped = (
            (upper.index == 1 and upper.value % 10 == 0)
            or lower.value < 1000
            or upper.index - lower.index > 1
        )
        if skipped:
            words.append(ZERO)
        words.append(lower.text)
    return "".join(words)


def build(options: ConversionOptions) -> CardinalConverter:
    script = "hant" if options.lang == "zh-Hant" else "hans"
    digits = DIGITS[(script, options.formal)]
    rules = SegmentRules(
        zero_word=ZERO,
        render_segment=make_renderer(digits, UNITS[options.formal]),
        scale_words=SCALE_WORDS[script],
        width=4,
        scale_mode=ScaleMode.MYRIAD,
        scale_joiner="",
        join=join,
        recursive_top=True,
    )
    lexicon = Lexicon(
        zero_word=ZERO,
        space_separator="",
        decimal_mode=DecimalMode.PER_DIGIT,
        digit_words=tuple(digits),
        **LEXICON_WORDS[script],
    )
    return CardinalConverter(
        lexicon,
        SegmentEngine(rules),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
