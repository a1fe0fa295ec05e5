"""
Tests for the segment-scale engine and Portuguese, Indonesian, Malay,
Romanian, Chinese and Japanese.
"""

from __future__ import annotations

import pytest

import numwords
from numwords.engines.segment import ScaleMode, SegmentEngine, SegmentRules, SegmentTables
from numwords.exceptions import LocaleDataError, MissingVocabularyError

ONES = {1: "one", 2: "two", 3: "three", 4: "four", 5: "five", 6: "six", 7: "seven", 8: "eight", 9: "nine"}

TABLES = SegmentTables(
    ones=ONES,
    teens={d: f"teen{d}" for d in range(10)},
    tens={d: f"ty{d}" for d in range(2, 10)},
    hundreds={d: f"{ONES[d]} hundred" for d in range(1, 10)},
)


def _rules(**overrides) -> SegmentRules:
    fields = {"zero_word": "zero", "render_segment": TABLES.render, "scale_words": ("thousand",)}
    fields.update(overrides)
    return SegmentRules(**fields)


# ═══════════════════════════════════════════════════════════════════════
# ENGINE
# ═══════════════════════════════════════════════════════════════════════


class TestSegmentTables:
    def test_render(self) -> None:
        assert TABLES.render(0) == ""
        assert TABLES.render(7) == "seven"
        assert TABLES.render(13) == "teen3"
        assert TABLES.render(40) == "ty4"
        assert TABLES.render(305) == "three hundred five"
        assert TABLES.render(999) == "nine hundred ty9 nine"

    def test_missing_entries(self) -> None:
        with pytest.raises(LocaleDataError) as exc:
            SegmentTables(ones={1: "one"}, teens={}, tens={}, hundreds={})
        assert exc.value.details["table"] == "ones"


class TestSegmentEngine:
    def test_short_scale(self) -> None:
        engine = SegmentEngine(_rules())
        assert engine.to_words(0) == "zero"
        assert engine.to_words(1001) == "one thousand one"
        assert engine.to_words(20000) == "ty2 thousand"

    def test_missing_scale_word(self) -> None:
        engine = SegmentEngine(_rules())
        with pytest.raises(MissingVocabularyError):
            engine.to_words(10**6)

    def test_long_scale(self) -> None:
        engine = SegmentEngine(
            _rules(
                scale_words=("million",),
                scale_mode=ScaleMode.LONG,
                thousand_word="thousand",
                ard_words=("milliard",),
                pluralize=lambda word: word + "s",
            )
        )
        assert engine.to_words(10**6) == "one million"
        assert engine.to_words(2 * 10**6) == "two millions"
        assert engine.to_words(3 * 10**9) == "three milliards"
        with pytest.raises(MissingVocabularyError):
            engine.to_words(10**12)

    def test_omit_one(self) -> None:
        engine = SegmentEngine(_rules(omit_one=lambda index: True))
        assert engine.to_words(1000) == "thousand"
        assert engine.to_words(2000) == "two thousand"

    def test_invalid_width(self) -> None:
        with pytest.raises(LocaleDataError):
            SegmentEngine(_rules(width=5))

    def test_myriad_needs_four_digits(self) -> None:
        with pytest.raises(LocaleDataError):
            SegmentEngine(_rules(scale_mode=ScaleMode.MYRIAD))

    def test_compound_needs_thousand_word(self) -> None:
        with pytest.raises(LocaleDataError):
            SegmentEngine(_rules(scale_mode=ScaleMode.COMPOUND))

    def test_recursive_top_reads_count(self) -> None:
        engine = SegmentEngine(_rules(recursive_top=True))
        assert engine.to_words(1000) == "one thousand"
        assert engine.to_words(10**6) == "one thousand thousand"
        assert engine.to_words(2 * 10**6 + 5) == "two thousand thousand five"

    def test_recursive_top_needs_short_or_myriad(self) -> None:
        with pytest.raises(LocaleDataError):
            SegmentEngine(
                _rules(recursive_top=True, scale_mode=ScaleMode.LONG, thousand_word="thousand")
            )


# ═══════════════════════════════════════════════════════════════════════
# LANGUAGES
# ═══════════════════════════════════════════════════════════════════════


class TestPortuguese:
    @pytest.mark.parametrize(
        "value,words",
        [
            (21, "vinte e um"),
            (100, "cem"),
            (101, "cento e um"),
            (1000, "mil"),
            (1100, "mil e cem"),
            (1234, "mil duzentos e trinta e quatro"),
            (2000, "dois mil"),
            (1000000, "um milhão"),
            (2500000, "dois milhões e quinhentos mil"),
            (1000000000, "mil milhões"),
            (1500000000, "mil e quinhentos milhões"),
            (2000000000000, "dois biliões"),
        ],
    )
    def test_cardinals(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="pt") == words

    def test_decimals(self) -> None:
        assert numwords.convert("3.5", lang="pt") == "três vírgula cinco"


class TestIndonesianMalay:
    @pytest.mark.parametrize(
        "value,words",
        [
            (11, "sebelas"),
            (100, "seratus"),
            (115, "seratus lima belas"),
            (1000, "seribu"),
            (2000, "dua ribu"),
            (1000000, "satu juta"),
        ],
    )
    def test_indonesian(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="id") == words

    @pytest.mark.parametrize(
        "value,words",
        [
            (18, "lapan belas"),
            (1000, "seribu"),
            (1000000, "sejuta"),
            (2001, "dua ribu satu"),
        ],
    )
    def test_malay(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="ms") == words


class TestRomanian:
    @pytest.mark.parametrize(
        "value,words",
        [
            (1, "unu"),
            (21, "douăzeci și unu"),
            (100, "o sută"),
            (1000, "o mie"),
            (2000, "două mii"),
            (20000, "douăzeci de mii"),
            (1000000, "un milion"),
            (2000000, "două milioane"),
        ],
    )
    def test_cardinals(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="ro") == words

    def test_feminine(self) -> None:
        assert numwords.convert(2, lang="ro", gender="feminine") == "două"

    def test_decimals_are_masculine(self) -> None:
        assert numwords.convert("2.12", lang="ro", gender="feminine") == "două virgulă doisprezece"


class TestChinese:
    @pytest.mark.parametrize(
        "value,words",
        [
            (0, "零"),
            (10, "一十"),
            (101, "一百零一"),
            (1010, "一千零一十"),
            (10001, "一万零一"),
            (30210, "三万零二百一十"),
            (200000, "二十万"),
            (200000000, "二亿"),
            (22222222222, "二百二十二亿二千二百二十二万二千二百二十二"),
        ],
    )
    def test_common_numerals(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="zh-Hans") == words

    @pytest.mark.parametrize(
        "value,words",
        [(11, "壹拾壹"), (1001, "壹仟零壹"), (10000, "壹万")],
    )
    def test_formal_numerals(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="zh-Hans", formal=True) == words

    @pytest.mark.parametrize(
        "value,words",
        [
            (10**12, "一万亿"),
            (10**16, "一亿亿"),
            (1050000000, "一十亿五千万"),
            (1012345678, "一十亿一千二百三十四万五千六百七十八"),
            (100005000000, "一千亿零五百万"),
            (10**12 + 1, "一万亿零一"),
        ],
    )
    def test_count_of_yi_read_recursively(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="zh-Hans") == words

    def test_traditional(self) -> None:
        assert numwords.convert(10**12, lang="zh-Hant") == "一萬億"
        assert numwords.convert(10000, lang="zh-Hant") == "一萬"
        assert numwords.convert(11, lang="zh-Hant", formal=True) == "壹拾壹"
        assert numwords.convert(-1, lang="zh-Hant") == "負一"

    def test_per_digit_decimals(self) -> None:
        assert numwords.convert("0.007", lang="zh-Hans") == "零点零零七"
        assert numwords.convert("-17.42", lang="zh-Hans") == "负一十七点四二"


class TestJapanese:
    @pytest.mark.parametrize(
        "value,words",
        [
            (10, "十"),
            (11, "十一"),
            (100, "百"),
            (1000, "千"),
            (10000, "一万"),
            (12345, "一万二千三百四十五"),
            (100000000, "一億"),
        ],
    )
    def test_cardinals(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="ja") == words

    def test_decimals(self) -> None:
        assert numwords.convert("0.5", lang="ja") == "零点五"
