"""
Three-form plural engine (Slavic and Baltic numerals).

Numbers are read in 3-digit segments. Every segment above the units gets a
scale word whose form agrees with the segment's count:

    2 000     два  тысячи       (few)
    5 000     пять тысяч        (many)
    21 000    двадцать одна тысяча  (singular, feminine "одна")

Units digits pick the masculine or feminine table: a tier listed in
``feminine_tiers`` is always feminine (тысяча), and the final segment follows
the gender option. Languages differ only in tables and the injected plural
rule, hundreds rule and flags.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional

from ..exceptions import LocaleDataError, MissingVocabularyError
from ..models import Gender
from ..segments import PluralRule, digits, group_by, indexed, pluralize, slavic_plural

logger = logging.getLogger(__name__)

# (hundreds digit, whole segment) -> words for the hundreds part
HundredsRule = Callable[[int, int], str]


@dataclass(frozen=True)
class SlavicRules:
    """Per-language tables and strategies.

    Attributes:
        ones / ones_feminine: digit words 1-9.
        teens: 10-19 keyed by the ones digit (0-9).
        tens: 20-90 keyed by the tens digit (2-9).
        hundreds: 100-900 keyed by the hundreds digit, unless hundreds_rule is set.
        scale_forms: tier index (1 = thousands) -> (singular, few, many) or
            (singular, plural) for two-form languages.
        plural_rule: count -> form index.
        feminine_tiers: tiers whose noun is feminine regardless of options.
        omit_one_before_scale: read 1000 as "tysiąc", not "jeden tysiąc".
        hundreds_rule: replaces the hundreds table (Latvian/Lithuanian).
    """

    zero_word: str
    ones: Mapping[int, str]
    ones_feminine: Mapping[int, str]
    teens: Mapping[int, str]
    tens: Mapping[int, str]
    scale_forms: Mapping[int, tuple[str, ...]]
    hundreds: Mapping[int, str] = field(default_factory=dict)
    plural_rule: PluralRule = slavic_plural
    feminine_tiers: frozenset[int] = frozenset()
    omit_one_before_scale: bool = False
    hundreds_rule: Optional[HundredsRule] = None


class SlavicEngine:
    """Integer engine for three-form plural languages."""

    def __init__(self, rules: SlavicRules, gender: Gender = Gender.MASCULINE):
        self._validate(rules)
        self.rules = rules
        self.gender = gender

    @staticmethod
    def _validate(rules: SlavicRules) -> None:
        required = {
            "ones": (rules.ones, range(1, 10)),
            "ones_feminine": (rules.ones_feminine, range(1, 10)),
            "teens": (rules.teens, range(0, 10)),
            "tens": (rules.tens, range(2, 10)),
        }
        if rules.hundreds_rule is None:
            required["hundreds"] = (rules.hundreds, range(1, 10))

        for name, (table, keys) in required.items():
            missing = [k for k in keys if k not in table]
            if missing:
                raise LocaleDataError(
                    f"Table {name!r} is missing entries {missing}",
                    {"table": name, "missing": missing},
                )

    def pluralize(self, count: int, forms: tuple[str, ...]) -> str:
        """Select the form of a scale noun for a count."""
        return pluralize(count, forms, self.rules.plural_rule)

    def scale_word(self, segment: int, index: int) -> str:
        forms = self.rules.scale_forms.get(index)
        if not forms:
            raise MissingVocabularyError(
                f"No scale word for 10^{3 * index}",
                {"scale_index": index, "segment": segment},
            )
        return self.pluralize(segment, forms)

    def _ones(self, digit: int, index: int) -> str:
        feminine = index in self.rules.feminine_tiers or (
            index == 0 and self.gender == Gender.FEMININE
        )
        table = self.rules.ones_feminine if feminine else self.rules.ones
        return table[digit]

    def _hundreds(self, digit: int, segment: int) -> str:
        if self.rules.hundreds_rule is not None:
            return self.rules.hundreds_rule(digit, segment)
        return self.rules.hundreds[digit]

    def segment_words(self, segment: int, index: int) -> list[str]:
        """Words for one non-zero segment, scale word included."""
        hundreds, tens, ones = digits(segment)
        words: list[str] = []

        if hundreds:
            words.append(self._hundreds(hundreds, segment))
        if tens > 1:
            words.append(self.rules.tens[tens])
        if tens == 1:
            words.append(self.rules.teens[ones])
        elif ones:
            omit = self.rules.omit_one_before_scale and index > 0 and segment == 1
            if not omit:
                words.append(self._ones(ones, index))

        if index > 0:
            words.append(self.scale_word(segment, index))
        return words

    def to_words(self, n: int) -> str:
        if n == 0:
            return self.rules.zero_word

        words: list[str] = []
        for segment, index in indexed(group_by(n, 3)):
            if segment:
                words.extend(self.segment_words(segment, index))
        return " ".join(words)
