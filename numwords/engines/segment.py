"""
Segment-scale engine (fixed-width segment lookup).

The number is cut into 3-digit segments (10^4 for myriad languages). Every
segment string is rendered once at construction, so a conversion is a table
lookup per segment plus a scale word per non-zero segment:

    1 243 097   →   [1 | 243 | 097]   →   "um milhão" "duzentos e quarenta e três mil" "noventa e sete"

Scale words follow one of four patterns:

    SHORT      10^3k  → scale_words[k-1]                     (juta, miliar, ...)
    COMPOUND   10^6k  → scale_words[k-1]; 10^(6k+3) → thousand + plural
                                                            (mil milhões)
    LONG       10^6k  → scale_words[k-1]; 10^(6k+3) → ard_words[k-1]
                                                            (Milliarde)
    MYRIAD     10^4k  → scale_words[k-1]                     (万, 億, 兆)

Language quirks are hooks on SegmentRules: ``omit_one`` drops the count
before a scale word, ``pluralize`` inflects the scale word, ``render_scale``
replaces the whole "count + scale" phrase, and ``join`` assembles the
rendered parts (Portuguese "e", Chinese zero insertion). With ``recursive_top``
the count of the last scale tier is read as a number of its own (一万亿).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Mapping, Optional

from ..exceptions import LocaleDataError, MissingVocabularyError
from ..segments import digits, group_by, indexed

logger = logging.getLogger(__name__)


class ScaleMode(str, Enum):
    SHORT = "short"
    COMPOUND = "compound"
    LONG = "long"
    MYRIAD = "myriad"


@dataclass(frozen=True)
class SegmentPart:
    """One rendered non-zero segment: its value, tier and words."""

    value: int
    index: int
    text: str


SegmentRenderer = Callable[[int], str]
# (segment, index, scale word) -> full phrase
ScaleRenderer = Callable[[int, int, str], str]
PartJoiner = Callable[[list[SegmentPart]], str]


def _never(index: int) -> bool:
    return False


# ─── Segment Tables ──────────────────────────────────────────────────


@dataclass(frozen=True)
class SegmentTables:
    """Lookup tables for a regular 3-digit segment.

    Attributes:
        ones: 1-9.
        teens: 10-19 keyed by the ones digit.
        tens: 20-90 keyed by the tens digit.
        hundreds: 100-900 keyed by the hundreds digit.
        exact_hundred: word for exactly 100 when it differs (Portuguese "cem").
        tens_joiner: between tens and ones ("vinte e um").
        hundreds_joiner: between hundreds and the rest ("cento e um").
    """

    ones: Mapping[int, str]
    teens: Mapping[int, str]
    tens: Mapping[int, str]
    hundreds: Mapping[int, str]
    exact_hundred: Optional[str] = None
    tens_joiner: str = " "
    hundreds_joiner: str = " "

    def __post_init__(self):
        for name, keys in (
            ("ones", range(1, 10)),
            ("teens", range(0, 10)),
            ("tens", range(2, 10)),
            ("hundreds", range(1, 10)),
        ):
            missing = [k for k in keys if k not in getattr(self, name)]
            if missing:
                raise LocaleDataError(
                    f"Segment table {name!r} is missing entries {missing}",
                    {"table": name, "missing": missing},
                )

    def render(self, segment: int) -> str:
        """Words for 0-999; empty for 0."""
        hundreds, tens, ones = digits(segment)

        if segment == 100 and self.exact_hundred:
            head = self.exact_hundred
        else:
            head = self.hundreds[hundreds] if hundreds else ""

        if tens == 0:
            tail = self.ones[ones] if ones else ""
        elif tens == 1:
            tail = self.teens[ones]
        elif ones:
            tail = self.tens[tens] + self.tens_joiner + self.ones[ones]
        else:
            tail = self.tens[tens]

        if head and tail:
            return head + self.hundreds_joiner + tail
        return head or tail


# ─── Rules ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class SegmentRules:
    """Per-language configuration for the segment engine.

    Attributes:
        zero_word: the whole-number zero.
        render_segment: segment value -> words, empty for 0.
        scale_words: see the module docstring for how each mode indexes it.
        width: digits per segment (3, or 4 for MYRIAD).
        scale_mode: how scale indices map to words.
        thousand_word: index 1 word for COMPOUND and LONG.
        ard_words: odd-index words for LONG.
        pluralize: inflects a scale word for counts above one.
        omit_one: index -> whether a count of one is silent.
        render_scale: builds the whole "count + scale" phrase.
        join: assembles rendered parts; defaults to part_joiner.
        scale_joiner: between a count and its scale word.
        part_joiner: between rendered parts.
        recursive_top: past the last scale word, read the count of the top
            tier as a number of its own (一万亿, 一亿亿) instead of failing.
    """

    zero_word: str
    render_segment: SegmentRenderer
    scale_words: tuple[str, ...]
    width: int = 3
    scale_mode: ScaleMode = ScaleMode.SHORT
    thousand_word: str = ""
    ard_words: tuple[str, ...] = field(default_factory=tuple)
    pluralize: Optional[Callable[[str], str]] = None
    omit_one: Callable[[int], bool] = _never
    render_scale: Optional[ScaleRenderer] = None
    join: Optional[PartJoiner] = None
    scale_joiner: str = " "
    part_joiner: str = " "
    recursive_top: bool = False


# ─── Engine ──────────────────────────────────────────────────────────


class SegmentEngine:
    """Integer engine for regular segment-and-scale numbering."""

    def __init__(self, rules: SegmentRules):
        if rules.width not in (3, 4):
            raise LocaleDataError(
                f"Segment width must be 3 or 4, got {rules.width}", {"width": rules.width}
            )
        if rules.scale_mode == ScaleMode.MYRIAD and rules.width != 4:
            raise LocaleDataError("Myriad scales need 4-digit segments", {"width": rules.width})
        if rules.scale_mode in (ScaleMode.COMPOUND, ScaleMode.LONG) and not rules.thousand_word:
            raise LocaleDataError(
                f"{rules.scale_mode.value} scales need a thousand word", {}
            )
        if rules.recursive_top and (
            rules.scale_mode not in (ScaleMode.SHORT, ScaleMode.MYRIAD) or not rules.scale_words
        ):
            raise LocaleDataError(
                "A recursive top tier needs a short or myriad scale with scale words",
                {"scale_mode": rules.scale_mode.value},
            )

        self.rules = rules
        self.segments = tuple(rules.render_segment(s) for s in range(10**rules.width))
        logger.debug(
            "SegmentEngine ready: width=%d, mode=%s, %d scale words",
            rules.width,
            rules.scale_mode.value,
            len(rules.scale_words),
        )

    def _lookup(self, table: tuple[str, ...], position: int, index: int) -> str:
        if position >= len(table) or not table[position]:
            raise MissingVocabularyError(
                f"No scale word for 10^{self.rules.width * index}",
                {"scale_index": index},
            )
        return table[position]

    def _plural(self, word: str, count: int) -> str:
        if count > 1 and self.rules.pluralize is not None:
            return self.rules.pluralize(word)
        return word

    def scale_word(self, count: int, index: int) -> str:
        """The scale word for a segment tier, inflected for count."""
        if index == 0:
            return ""

        rules = self.rules
        if rules.scale_mode in (ScaleMode.SHORT, ScaleMode.MYRIAD):
            return self._plural(self._lookup(rules.scale_words, index - 1, index), count)
        if index == 1:
            return rules.thousand_word

        position = index // 2 - 1
        if index % 2 == 0:
            return self._plural(self._lookup(rules.scale_words, position, index), count)
        if rules.scale_mode == ScaleMode.LONG:
            return self._plural(self._lookup(rules.ard_words, position, index), count)
        # "mil milhões": the base is plural whatever the count
        base = self._lookup(rules.scale_words, position, index)
        return rules.thousand_word + " " + self._plural(base, 2)

    def render_part(self, segment: int, index: int, scale: Optional[str] = None) -> SegmentPart:
        """Render one non-zero segment with its scale word."""
        rules = self.rules
        if index == 0:
            return SegmentPart(segment, 0, self.segments[segment])

        word = self.scale_word(segment, index) if scale is None else scale
        if rules.render_scale is not None:
            text = rules.render_scale(segment, index, word)
        else:
            count = "" if segment == 1 and rules.omit_one(index) else self.segments[segment]
            text = rules.scale_joiner.join(w for w in (count, word) if w)
        return SegmentPart(segment, index, text)

    def parts(self, n: int) -> list[SegmentPart]:
        """Rendered non-zero segments, most significant first."""
        rules = self.rules
        if rules.recursive_top:
            top = len(rules.scale_words)
            count, rest = divmod(n, 10 ** (rules.width * top))
            if count:
                words = "" if count == 1 and rules.omit_one(top) else self.to_words(count)
                text = rules.scale_joiner.join(w for w in (words, rules.scale_words[-1]) if w)
                return [SegmentPart(count, top, text)] + (self.parts(rest) if rest else [])

        segments = group_by(n, self.rules.width)
        if self.rules.scale_mode != ScaleMode.COMPOUND:
            return [self.render_part(s, i) for s, i in indexed(segments) if s]

        # A compound pair (thousands of X, X) shares one scale word after
        # the lower segment: "mil e quinhentos milhões".
        by_index = {i: s for s, i in indexed(segments)}
        result = []
        for segment, index in indexed(segments):
            if not segment:
                continue
            if index >= 3 and index % 2 == 1:
                lower = by_index.get(index - 1, 0)
                scale = self.rules.thousand_word if lower else None
                result.append(self.render_part(segment, index, scale))
            elif index >= 2:
                count = by_index.get(index + 1, 0) * 1000 + segment
                result.append(self.render_part(segment, index, self.scale_word(count, index)))
            else:
                result.append(self.render_part(segment, index))
        return result

    def to_words(self, n: int) -> str:
        if n == 0:
            return self.rules.zero_word
        parts = self.parts(n)
        if self.rules.join is not None:
            return self.rules.join(parts)
        return self.rules.part_joiner.join(p.text for p in parts)
