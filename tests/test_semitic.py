"""
Tests for the Semitic engine: dual, construct and appended scale forms in
Hebrew and Arabic.
"""

from __future__ import annotations

import pytest

import numwords
from numwords.engines.semitic import ScaleForm, SemiticEngine, SemiticRules
from numwords.exceptions import LocaleDataError, MissingVocabularyError
from numwords.locales import ar, he


class TestScaleFormRules:
    @pytest.mark.parametrize(
        "segment,followed,form",
        [
            (1, False, ScaleForm.SINGULAR),
            (2, True, ScaleForm.DUAL),
            (3, False, ScaleForm.PLURAL),
            (10, True, ScaleForm.PLURAL),
            (11, False, ScaleForm.SINGULAR),
            (11, True, ScaleForm.APPENDED),
            (103, False, ScaleForm.PLURAL),
            (100, True, ScaleForm.SINGULAR),
        ],
    )
    def test_arabic(self, segment: int, followed: bool, form: ScaleForm) -> None:
        assert ar.scale_form(segment, 1, followed) == form

    def test_hebrew_construct_only_for_thousands(self) -> None:
        assert he.scale_form(3, 1, False) == ScaleForm.CONSTRUCT
        assert he.scale_form(3, 2, False) == ScaleForm.PLURAL
        assert he.scale_form(1, 2, False) == ScaleForm.SINGULAR
        assert he.scale_form(12, 1, False) == ScaleForm.SINGULAR


class TestEngine:
    def test_missing_table_entries(self) -> None:
        with pytest.raises(LocaleDataError) as exc:
            SemiticEngine(
                SemiticRules(
                    zero_word="0",
                    units=ar.UNITS,
                    units_feminine=ar.UNITS_FEMININE,
                    tens={2: "twenty"},
                    hundreds=ar.HUNDREDS,
                    scale_forms=ar.SCALE_FORMS,
                    scale_form=ar.scale_form,
                    conjunction="and-",
                )
            )
        assert exc.value.details["table"] == "tens"

    def test_conjoin_prefixes_every_word_after_the_first(self) -> None:
        engine = SemiticEngine(ar.RULES)
        assert engine.conjoin(["a", "b", "c"]) == "a وb وc"

    def test_beyond_vocabulary(self) -> None:
        with pytest.raises(MissingVocabularyError) as exc:
            numwords.convert(10**24, lang="ar")
        assert exc.value.details["form"] == "singular"


class TestHebrew:
    @pytest.mark.parametrize(
        "value,words",
        [
            (0, "אפס"),
            (1, "אחת"),
            (15, "חמש עשרה"),
            (23, "עשרים ושלש"),
            (123, "מאה עשרים ושלש"),
            (1000, "אלף"),
            (2000, "אלפיים"),
            (2001, "אלפיים ואחת"),
            (3000, "שלשת אלפים"),
            (10000, "עשר אלף"),
            (1000000, "מיליון"),
            (2000000, "שתים מיליונים"),
        ],
    )
    def test_cardinals(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="he") == words

    @pytest.mark.parametrize(
        "value,words",
        [
            (1100, "אלף ומאה"),
            (103000, "מאה ושלש אלף"),
            (120000, "מאה ועשרים אלף"),
            (123000123, "מאה ועשרים ושלש מיליונים מאה עשרים ושלש"),
            (
                123456789,
                "מאה ועשרים ושלש מיליונים ארבע מאות וחמישים ושש אלף שבע מאות שמונים ותשע",
            ),
        ],
    )
    def test_conjunctions(self, value: int, words: str) -> None:
        # counts before a scale word are joined inside; the units segment
        # only takes ו before its final word
        assert numwords.convert(value, lang="he") == words

    def test_decimals_read_per_digit(self) -> None:
        assert numwords.convert("1.25", lang="he") == "אחת נקודה שתים חמש"

    def test_negative(self) -> None:
        assert numwords.convert(-5, lang="he") == "מינוס חמש"


class TestArabic:
    @pytest.mark.parametrize(
        "value,words",
        [
            (0, "صفر"),
            (1, "واحد"),
            (23, "ثلاثة وعشرون"),
            (1000, "ألف"),
            (1001, "ألف وواحد"),
            (2000, "ألفان"),
            (3000, "ثلاثة آلاف"),
            (11500, "أحد عشر ألفاً وخمسمائة"),
            (100000, "مائة ألف"),
            (103000, "مائة وثلاثة آلاف"),
            (2000000, "مليونان"),
        ],
    )
    def test_cardinals(self, value: int, words: str) -> None:
        assert numwords.convert(value, lang="ar") == words

    def test_feminine_units(self) -> None:
        assert numwords.convert(2, lang="ar", gender="feminine") == "اثنتان"

    def test_decimals(self) -> None:
        assert numwords.convert("-1.5", lang="ar") == "ناقص واحد فاصلة خمسة"
