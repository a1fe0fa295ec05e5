"""
South Asian grouping engine (Hindi, Bengali, Urdu).

Indian numbering groups the last three digits, then pairs:

    12,34,56,789   →   12 करोड़ · 34 लाख · 56 हज़ार · 789

Every number below a hundred has its own word in these languages, so groups
render from a full 0-99 table plus the hundred word. A group's scale word is
spoken only when the group is non-zero.

Numbers beyond the largest scale word read their head recursively followed
by that word, the same way "one thousand crore" is said colloquially.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..exceptions import LocaleDataError
from ..segments import group_three_then_twos, indexed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SouthAsianRules:
    """Per-language vocabulary.

    Attributes:
        zero_word: the whole-number zero.
        below_hundred: words for 0-99 (index 0 is unused inside numbers).
        hundred_word: the word for "hundred".
        scale_words: group index -> word; index 0 is the empty units scale,
            then thousand, lakh, crore, arab, kharab...
    """

    zero_word: str
    below_hundred: tuple[str, ...]
    hundred_word: str
    scale_words: tuple[str, ...]


class SouthAsianEngine:
    """Integer engine for 3-2-2 digit grouping."""

    def __init__(self, rules: SouthAsianRules):
        if len(rules.below_hundred) != 100:
            raise LocaleDataError(
                f"below_hundred needs 100 entries, got {len(rules.below_hundred)}",
                {"entries": len(rules.below_hundred)},
            )
        if len(rules.scale_words) < 2 or rules.scale_words[0] != "":
            raise LocaleDataError(
                "scale_words must start with an empty units entry and name at least thousand",
                {"scale_words": list(rules.scale_words)},
            )
        self.rules = rules
        self.top_index = len(rules.scale_words) - 1
        # value of one unit of the top scale: 10^3 * 100^(top-1)
        self.top_value = 1000 * 100 ** (self.top_index - 1)
        logger.debug("SouthAsianEngine ready: top scale %s", rules.scale_words[-1])

    def group_words(self, group: int) -> str:
        """Words for a group in [1, 999]."""
        below = self.rules.below_hundred
        if group < 100:
            return below[group]
        hundreds, rest = divmod(group, 100)
        words = [below[hundreds], self.rules.hundred_word]
        if rest:
            words.append(below[rest])
        return " ".join(words)

    def to_words(self, n: int) -> str:
        if n == 0:
            return self.rules.zero_word

        words: list[str] = []
        count, tail = divmod(n, self.top_value)
        if count >= 100:
            # past the last named scale: the count is read recursively
            words.extend([self.to_words(count), self.rules.scale_words[-1]])
        else:
            tail = n

        for group, index in indexed(group_three_then_twos(tail)):
            if not group:
                continue
            words.append(self.group_words(group))
            if index:
                words.append(self.rules.scale_words[index])
        return " ".join(words)
