"""
Tests for Indian digit grouping (Hindi, Bengali, Urdu).
"""

from __future__ import annotations

import pytest

import numwords
from numwords.engines.south_asian import SouthAsianEngine, SouthAsianRules
from numwords.exceptions import LocaleDataError
from numwords.locales import hi
from numwords.segments import group_three_then_twos


class TestGrouping:
    @pytest.mark.parametrize(
        "value,groups",
        [
            (0, [0]),
            (999, [999]),
            (1000, [1, 0]),
            (100000, [1, 0, 0]),
            (123456789, [12, 34, 56, 789]),
        ],
    )
    def test_three_then_twos(self, value: int, groups: list[int]) -> None:
        assert group_three_then_twos(value) == groups

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            group_three_then_twos(-1)


class TestEngine:
    def setup_method(self) -> None:
        self.engine = SouthAsianEngine(
            SouthAsianRules(
                zero_word=hi.BELOW_HUNDRED[0],
                below_hundred=hi.BELOW_HUNDRED,
                hundred_word="सौ",
                scale_words=hi.SCALE_WORDS,
            )
        )

    def test_group_words(self) -> None:
        assert self.engine.group_words(7) == "सात"
        assert self.engine.group_words(100) == "एक सौ"
        assert self.engine.group_words(101) == "एक सौ एक"

    def test_zero_groups_are_silent(self) -> None:
        # 1 करोड़ 0 लाख 0 हज़ार 5
        assert self.engine.to_words(10**7 + 5) == "एक करोड़ पाँच"

    def test_beyond_top_scale_reads_count(self) -> None:
        top = hi.SCALE_WORDS[-1]
        assert self.engine.to_words(10**19) == f"एक सौ {top}"
        assert self.engine.to_words(10**19 + 1) == f"एक सौ {top} एक"

    def test_table_size_checked(self) -> None:
        with pytest.raises(LocaleDataError):
            SouthAsianEngine(
                SouthAsianRules(zero_word="0", below_hundred=("0",), hundred_word="h", scale_words=("", "k"))
            )

    def test_scale_words_start_empty(self) -> None:
        with pytest.raises(LocaleDataError):
            SouthAsianEngine(
                SouthAsianRules(
                    zero_word="0",
                    below_hundred=hi.BELOW_HUNDRED,
                    hundred_word="h",
                    scale_words=("k", "l"),
                )
            )


class TestLanguages:
    @pytest.mark.parametrize(
        "value,words",
        [
            (0, "शून्य"),
            (11, "ग्यारह"),
            (1000, "एक हज़ार"),
            (100000, "एक लाख"),
            (10000000, "एक करोड़"),
        ],
    )
    def test_hindi(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="hi") == words

    def test_lakh_appears_once(self) -> None:
        assert numwords.convert(100000, lang="hi").split().count("लाख") == 1

    def test_bengali(self) -> None:
        assert numwords.convert(100000, lang="bn") == "এক লাখ"
        assert numwords.convert(200, lang="bn") == "দুই শত"

    def test_urdu(self) -> None:
        assert numwords.convert(1000, lang="ur") == "ایک ہزار"
        assert numwords.convert("-1.5", lang="ur") == "منفی ایک اعشاریہ پانچ"

    def test_decimals(self) -> None:
        assert numwords.convert("2.05", lang="hi") == "दो दशमलव शून्य पाँच"
