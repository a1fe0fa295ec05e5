"""
Greedy card-match engine (Western, Romance, Germanic and Korean numerals).

A language supplies a descending list of cards, ``(threshold, word)``, and a
``merge(left, right)`` rule. Conversion has two phases:

1. **Decompose** (greedy): take the largest card C <= v and split
   ``v = q*C + r``. The multiplier is the "one" leaf when q == 1 (the merge
   rule decides whether "one" is spoken) or the decomposition of q otherwise:

       1999  →  Pair( Pair(one, thousand),
                      Pair( Pair(nine, hundred),
                            Pair( Pair(one, ninety), Pair(one, nine) ) ) )

2. **Reduce**: fold the tree bottom-up. Each combine asks the language for
   the text and derives the value structurally: ``left*right`` when the
   right side is larger (a multiplier meets its card), else ``left+right``.

Termination is structural: for every card C > 1 the quotient q = v // C is
strictly smaller than v, and the construction checks guarantee a card
exists for every v >= 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..exceptions import LocaleDataError, MissingVocabularyError

logger = logging.getLogger(__name__)


# ─── Decomposition Tree ──────────────────────────────────────────────


@dataclass(frozen=True)
class Leaf:
    """Fully reduced words and the value they spell."""

    text: str
    value: int


@dataclass(frozen=True)
class Pair:
    """Two sub-trees awaiting a merge."""

    left: Node
    right: Node


Node = Union[Leaf, Pair]

MergeRule = Callable[[Leaf, Leaf], str]


@dataclass(frozen=True)
class CardMatchRules:
    """Per-language configuration for the card-match engine.

    Attributes:
        cards: (threshold, word) pairs, strictly decreasing, including 1 and 0.
        merge: returns the text for two adjacent reduced leaves.
        finalize: optional post-processing of the final text.
    """

    cards: tuple[tuple[int, str], ...]
    merge: MergeRule
    finalize: Optional[Callable[[str], str]] = None


# ─── Engine ──────────────────────────────────────────────────────────


class CardMatchEngine:
    """Integer engine driven by cards and a merge rule."""

    def __init__(self, rules: CardMatchRules):
        self.rules = rules
        self._validate(rules.cards)
        self.words = dict(rules.cards)
        # zero only ever short-circuits, so the search list excludes it
        self._positive = [(t, w) for t, w in rules.cards if t > 0]
        self.unit = Leaf(self.words[1], 1)
        self.zero = Leaf(self.words[0], 0)
        top = self._positive[0][0]
        # above top**2 a multiplier would exceed its card and read as addition
        self.limit = top * top if top > 1 else 2
        logger.debug("CardMatchEngine ready: %d cards, top=%d", len(rules.cards), top)

    @staticmethod
    def _validate(cards: tuple[tuple[int, str], ...]) -> None:
        thresholds = [t for t, _ in cards]
        if any(a <= b for a, b in zip(thresholds, thresholds[1:])):
            raise LocaleDataError(
                "Card thresholds must be strictly decreasing",
                {"thresholds": thresholds},
            )
        if 0 not in thresholds or 1 not in thresholds:
            raise LocaleDataError(
                "Cards for 0 and 1 are required", {"thresholds": thresholds}
            )
        above_one = [t for t in thresholds if t > 1]
        if above_one and above_one[-1] != 2:
            # without a 2 card, 2 would decompose as 1+1 and read "one one"
            raise LocaleDataError(
                "The smallest card above 1 must be 2", {"thresholds": thresholds}
            )
        for larger, smaller in zip(above_one, above_one[1:]):
            if larger > smaller * smaller:
                raise LocaleDataError(
                    f"Gap between cards {smaller} and {larger} is too wide: "
                    f"multipliers of {smaller} would reach {smaller}",
                    {"thresholds": thresholds},
                )

    # ─── Phase 1: decompose ──────────────────────────────────────────

    def decompose(self, value: int) -> Node:
        """Greedy highest-card decomposition of value."""
        if value == 0:
            return self.zero
        if value >= self.limit:
            raise MissingVocabularyError(
                f"No scale word large enough for {value}",
                {"value": str(value), "limit": str(self.limit)},
            )

        threshold, word = next((t, w) for t, w in self._positive if t <= value)
        quantity, remainder = divmod(value, threshold)
        multiplier = self.unit if quantity == 1 else self.decompose(quantity)
        head = Pair(multiplier, Leaf(word, threshold))
        if remainder:
            return Pair(head, self.decompose(remainder))
        return head

    # ─── Phase 2: reduce ─────────────────────────────────────────────

    def combine(self, left: Leaf, right: Leaf) -> Leaf:
        multiplicative = right.value > left.value or left.value == right.value == 1
        value = left.value * right.value if multiplicative else left.value + right.value
        return Leaf(self.rules.merge(left, right), value)

    def reduce(self, node: Node) -> Leaf:
        """Fold a tree to one leaf, post-order, with an explicit stack."""
        stack: list[tuple[Node, bool]] = [(node, False)]
        reduced: list[Leaf] = []

        while stack:
            current, children_done = stack.pop()
            if isinstance(current, Leaf):
                reduced.append(current)
            elif children_done:
                right = reduced.pop()
                left = reduced.pop()
                reduced.append(self.combine(left, right))
            else:
                stack.append((current, True))
                stack.append((current.right, False))
                stack.append((current.left, False))

        return reduced[0]

    def to_words(self, n: int) -> str:
        text = self.reduce(self.decompose(n)).text
        if self.rules.finalize is not None:
            text = self.rules.finalize(text)
        return text.strip()
