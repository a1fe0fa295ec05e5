"""
Tests for the three-form plural engine: Russian, Ukrainian, Polish, Czech,
Croatian, Serbian, Latvian and Lithuanian.
"""

from __future__ import annotations

import pytest

import numwords
from numwords.engines.slavic import SlavicEngine, SlavicRules
from numwords.exceptions import LocaleDataError, MissingVocabularyError
from numwords.locales import ru, sr
from numwords.segments import (
    FEW,
    MANY,
    SINGULAR,
    latvian_plural,
    lithuanian_plural,
    pluralize,
    slavic_plural,
    south_slavic_plural,
    west_slavic_plural,
)


# ═══════════════════════════════════════════════════════════════════════
# PLURAL RULES
# ═══════════════════════════════════════════════════════════════════════


class TestPluralRules:
    @pytest.mark.parametrize("n", range(0, 1000))
    def test_east_slavic_rule(self, n: int) -> None:
        if n % 10 == 1 and n % 100 != 11:
            expected = SINGULAR
        elif 2 <= n % 10 <= 4 and not 12 <= n % 100 <= 14:
            expected = FEW
        else:
            expected = MANY
        assert slavic_plural(n) == expected

    @pytest.mark.parametrize(
        "n,expected", [(1, SINGULAR), (2, FEW), (5, MANY), (12, MANY), (21, MANY), (22, FEW), (101, MANY)]
    )
    def test_west_slavic_rule(self, n: int, expected: int) -> None:
        assert west_slavic_plural(n) == expected

    @pytest.mark.parametrize("n,expected", [(1, SINGULAR), (11, MANY), (21, SINGULAR), (24, FEW), (14, MANY)])
    def test_south_slavic_rule(self, n: int, expected: int) -> None:
        assert south_slavic_plural(n) == expected

    def test_latvian_rule(self) -> None:
        assert latvian_plural(21) == SINGULAR
        assert latvian_plural(11) == FEW
        assert latvian_plural(5) == FEW

    def test_lithuanian_rule(self) -> None:
        assert lithuanian_plural(1) == SINGULAR
        assert lithuanian_plural(3) == FEW
        assert lithuanian_plural(10) == MANY
        assert lithuanian_plural(15) == MANY
        assert lithuanian_plural(21) == SINGULAR

    def test_two_form_tuple(self) -> None:
        assert pluralize(5, ("one", "other")) == "other"
        assert pluralize(21, ("one", "other")) == "one"


# ═══════════════════════════════════════════════════════════════════════
# ENGINE
# ═══════════════════════════════════════════════════════════════════════


class TestEngine:
    def test_missing_table_entries(self) -> None:
        with pytest.raises(LocaleDataError) as exc:
            SlavicEngine(
                SlavicRules(
                    zero_word="z",
                    ones=ru.ONES,
                    ones_feminine=ru.ONES_FEMININE,
                    teens={0: "ten"},
                    tens=ru.TENS,
                    hundreds=ru.HUNDREDS,
                    scale_forms=ru.SCALE_FORMS,
                )
            )
        assert exc.value.details["table"] == "teens"

    def test_beyond_vocabulary(self) -> None:
        with pytest.raises(MissingVocabularyError):
            numwords.convert(10**33, lang="ru")

    def test_segment_words(self) -> None:
        engine = SlavicEngine(ru.RULES)
        assert engine.segment_words(21, 1) == ["двадцать", "одна", "тысяча"]


# ═══════════════════════════════════════════════════════════════════════
# LANGUAGES
# ═══════════════════════════════════════════════════════════════════════


class TestRussianUkrainian:
    @pytest.mark.parametrize(
        "value,words",
        [
            (123, "сто двадцать три"),
            (1000, "одна тысяча"),
            (2000, "две тысячи"),
            (5000, "пять тысяч"),
            (11000, "одиннадцать тысяч"),
            (21000, "двадцать одна тысяча"),
            (1000000, "один миллион"),
            (2000000, "два миллиона"),
            (5000000, "пять миллионов"),
        ],
    )
    def test_russian(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="ru") == words

    def test_russian_feminine(self) -> None:
        assert numwords.convert(2002, lang="ru", gender="feminine") == "две тысячи две"

    def test_russian_decimals(self) -> None:
        assert numwords.convert("1.5", lang="ru") == "один запятая пять"

    def test_ukrainian(self) -> None:
        assert numwords.convert(2000, lang="uk") == "дві тисячі"
        assert numwords.convert(5000000, lang="uk") == "п'ять мільйонів"
        assert numwords.convert(-1, lang="uk") == "мінус один"


class TestPolish:
    @pytest.mark.parametrize(
        "value,words",
        [
            (1000, "tysiąc"),
            (2000, "dwa tysiące"),
            (5000, "pięć tysięcy"),
            (12000, "dwanaście tysięcy"),
            (21000, "dwadzieścia jeden tysięcy"),
            (22000, "dwadzieścia dwa tysiące"),
            (1000000, "milion"),
            (2000000, "dwa miliony"),
        ],
    )
    def test_cardinals(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="pl") == words


class TestCzech:
    @pytest.mark.parametrize(
        "value,words",
        [
            (1000, "tisíc"),
            (1097, "tisíc devadesát sedm"),
            (3766, "tři tisíce sedm set šedesát šest"),
            (2000000000, "dvě miliardy"),
        ],
    )
    def test_cardinals(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="cs") == words

    @pytest.mark.parametrize(
        "value,words",
        [
            ("0.5", "nula celá pět"),
            ("1.007", "jedna celá nula nula sedm"),
            ("2.5", "dva celé pět"),
            ("17.42", "sedmnáct celých čtyřicet dva"),
        ],
    )
    def test_separator_agrees_with_whole_part(self, value: str, words: str) -> None:
        assert numwords.convert(value, lang="cs") == words


class TestSouthSlavic:
    def test_croatian(self) -> None:
        assert numwords.convert(1000, lang="hr") == "jedna tisuća"
        assert numwords.convert(2000, lang="hr") == "dvije tisuće"
        assert numwords.convert(21000, lang="hr") == "dvadeset jedna tisuća"
        assert numwords.convert(2000000, lang="hr") == "dva milijuna"

    def test_serbian_latin(self) -> None:
        assert numwords.convert(2000, lang="sr") == "dve hiljade"
        assert numwords.convert(5000, lang="sr") == "pet hiljada"

    @pytest.mark.parametrize("options", [{"lang": "sr", "script": "native"}, {"lang": "sr-Cyrl"}])
    def test_serbian_cyrillic(self, options: dict) -> None:
        assert numwords.convert(2000, **options) == "две хиљаде"
        assert numwords.convert("1.5", **options) == "један запета пет"

    def test_transliteration_digraphs(self) -> None:
        assert sr.to_cyrillic("ljubav njega džep") == "љубав њега џеп"


class TestBaltic:
    @pytest.mark.parametrize(
        "value,words",
        [
            (100, "simts"),
            (101, "simtu viens"),
            (200, "divi simti"),
            (1000, "tūkstotis"),
            (2000, "divi tūkstoši"),
            (21000, "divdesmit viens tūkstotis"),
        ],
    )
    def test_latvian(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="lv") == words

    @pytest.mark.parametrize(
        "value,words",
        [
            (100, "vienas šimtas"),
            (200, "du šimtai"),
            (1000, "vienas tūkstantis"),
            (2000, "du tūkstančiai"),
            (10000, "dešimt tūkstančių"),
            (21000, "dvidešimt vienas tūkstantis"),
        ],
    )
    def test_lithuanian(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="lt") == words

    def test_lithuanian_feminine(self) -> None:
        assert numwords.convert(2, lang="lt", gender="feminine") == "dvi"
