"""Japanese (myriad scales). 一 is silent before 十, 百 and 千 but spoken before 万 and above."""

from __future__ import annotations

from ..core import CardinalConverter, Lexicon
from ..engines.segment import ScaleMode, SegmentEngine, SegmentRules
from ..models import ConversionOptions, DecimalMode

DIGITS = "零一二三四五六七八九"

SCALE_WORDS = (
    "万",
    "億",
    "兆",
    "京",
    "垓",
    "秭",
    "穣",
    "溝",
    "澗",
    "正",
    "載",
    "極",
    "恒河沙",
    "阿僧祇",
    "那由他",
    "不可思議",
    "無量大数",
)


def render_segment(segment: int) -> str:
    words = []
    for power, unit in ((3, "千"), (2, "百"), (1, "十")):
        digit = segment // 10**power % 10
        if digit:
            words.append(unit if digit == 1 else DIGITS[digit] + unit)
    if segment % 10:
        words.append(DIGITS[segment % 10])
    return "".join(words)


def build(options: ConversionOptions) -> CardinalConverter:
    rules = SegmentRules(
        zero_word="零",
        render_segment=render_segment,
        scale_words=SCALE_WORDS,
        width=4,
        scale_mode=ScaleMode.MYRIAD,
        scale_joiner="",
        part_joiner="",
    )
    lexicon = Lexicon(
        negative_word="マイナス",
        separator_word="点",
        zero_word="零",
        space_separator="",
        decimal_mode=DecimalMode.PER_DIGIT,
        digit_words=tuple(DIGITS),
    )
    return CardinalConverter(
        lexicon,
        SegmentEngine(rules),
        space_separator=options.space_separator,
        drop_spaces=options.drop_spaces,
    )
