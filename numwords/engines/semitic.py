"""
Semitic morphology engine (Hebrew, Arabic).

Numbers are read in 3-digit segments, most significant first. What sets
these languages apart is how a count agrees with its scale noun:

    DUAL        exactly two replaces count + noun       ألفان (2000)
    CONSTRUCT   1-9 thousand fuse into one form          שלשת אלפים (3000)
    PLURAL      3-10 take the plural noun                ثلاثة آلاف
    APPENDED    11-99 followed by more words: tanween    أحد عشر ألفاً و...
    SINGULAR    everything else                          مائة ألف

A language supplies a ``scale_form`` rule choosing one of these from the
segment, its tier, and whether a non-zero segment follows. The engine
derives every case from that context rather than from a list of round
numbers.

Conjunctions ("ו", "و") attach to each word after the first inside a
segment. Between segments Arabic repeats the conjunction, while Hebrew
splits the units segment into separate words and puts a single conjunction
before the final component.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from ..exceptions import LocaleDataError, MissingVocabularyError
from ..models import Gender
from ..segments import digits, group_by, indexed

logger = logging.getLogger(__name__)


class ScaleForm(str, Enum):
    SINGULAR = "singular"
    DUAL = "dual"
    PLURAL = "plural"
    APPENDED = "appended"
    CONSTRUCT = "construct"


# (segment, scale index, followed by a non-zero segment) -> form
ScaleFormRule = Callable[[int, int, bool], ScaleForm]

# Forms that already contain the count
_ABSORBING = {ScaleForm.DUAL, ScaleForm.CONSTRUCT}


@dataclass(frozen=True)
class SemiticRules:
    """Per-language tables and agreement rule.

    Attributes:
        zero_word: the whole-number zero.
        units / units_feminine: words for 1-19.
        tens: 20-90 keyed by the tens digit.
        hundreds: 100-900 keyed by the hundreds digit.
        scale_forms: form -> {scale index: word}; CONSTRUCT is keyed by count.
        scale_form: picks the form for a segment.
        conjunction: "and", prefixed to the word it joins.
        ones_before_tens: read 23 as "three and twenty".
        final_conjunction_only: units words stand alone and only the last
            component takes the conjunction (Hebrew); otherwise segments are
            joined with the conjunction (Arabic).
    """

    zero_word: str
    units: Mapping[int, str]
    units_feminine: Mapping[int, str]
    tens: Mapping[int, str]
    hundreds: Mapping[int, str]
    scale_forms: Mapping[ScaleForm, Mapping[int, str]]
    scale_form: ScaleFormRule
    conjunction: str
    ones_before_tens: bool = False
    final_conjunction_only: bool = False


class SemiticEngine:
    """Integer engine with dual, construct and appended scale forms."""

    def __init__(self, rules: SemiticRules, gender: Gender = Gender.MASCULINE):
        for name, table, keys in (
            ("units", rules.units, range(1, 20)),
            ("units_feminine", rules.units_feminine, range(1, 20)),
            ("tens", rules.tens, range(2, 10)),
            ("hundreds", rules.hundreds, range(1, 10)),
        ):
            missing = [k for k in keys if k not in table]
            if missing:
                raise LocaleDataError(
                    f"Table {name!r} is missing entries {missing}",
                    {"table": name, "missing": missing},
                )
        self.rules = rules
        self.gender = gender
        logger.debug("SemiticEngine ready: gender=%s", gender.value)

    def scale_word(self, form: ScaleForm, segment: int, index: int) -> str:
        key = segment if form == ScaleForm.CONSTRUCT else index
        word = self.rules.scale_forms.get(form, {}).get(key)
        if not word:
            raise MissingVocabularyError(
                f"No {form.value} scale word for 10^{3 * index}",
                {"scale_index": index, "form": form.value, "segment": segment},
            )
        return word

    def count_words(self, segment: int, index: int) -> list[str]:
        """Words for a segment in [1, 999] without conjunctions."""
        rules = self.rules
        units = (
            rules.units_feminine
            if index == 0 and self.gender == Gender.FEMININE
            else rules.units
        )
        hundreds, tens, ones = digits(segment)
        rest = segment % 100

        words: list[str] = []
        if hundreds:
            words.append(rules.hundreds[hundreds])
        if 0 < rest < 20:
            words.append(units[rest])
        elif rest:
            tail = [rules.tens[tens]]
            if ones:
                tail.append(units[ones])
                if rules.ones_before_tens:
                    tail.reverse()
            words.extend(tail)
        return words

    def conjoin(self, words: list[str]) -> str:
        """Join words, prefixing the conjunction to all but the first."""
        conj = self.rules.conjunction
        return " ".join([words[0]] + [conj + w for w in words[1:]])

    def segment_phrase(self, segment: int, index: int, followed: bool) -> list[str]:
        """Count and scale word for a segment above the units."""
        form = self.rules.scale_form(segment, index, followed)
        word = self.scale_word(form, segment, index)
        if form in _ABSORBING or (segment == 1 and form == ScaleForm.SINGULAR):
            return [word]
        return [self.conjoin(self.count_words(segment, index)), word]

    def to_words(self, n: int) -> str:
        if n == 0:
            return self.rules.zero_word

        nonzero = [(s, i) for s, i in indexed(group_by(n, 3)) if s]
        components: list[str] = []
        for position, (segment, index) in enumerate(nonzero):
            followed = position < len(nonzero) - 1
            if index:
                components.append(" ".join(self.segment_phrase(segment, index, followed)))
            elif self.rules.final_conjunction_only:
                components.extend(self.count_words(segment, 0))
            else:
                components.append(self.conjoin(self.count_words(segment, 0)))

        if self.rules.final_conjunction_only:
            if len(components) > 1:
                components[-1] = self.rules.conjunction + components[-1]
            return " ".join(components)
        return self.conjoin(components)
