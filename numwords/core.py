"""
Core conversion contract shared by every language.

A CardinalConverter owns the language-independent steps:

    sign  →  integer words (engine)  →  separator  →  decimal words  →  join

and delegates the integer part to a pluggable engine (anything with a
``to_words(n: int) -> str`` method). Engines never see signs or decimals.

The whole number is passed explicitly to the separator lookup, so a
converter holds no per-call state and one instance can serve any number of
threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Protocol, Union

from .exceptions import LocaleDataError
from .models import DecimalMode, NormalizedNumber

logger = logging.getLogger(__name__)

# A separator is fixed ("point") or chosen from the whole part (Czech "celá/celé/celých").
SeparatorWord = Union[str, Callable[[int], str]]


class IntegerEngine(Protocol):
    """Converts a non-negative integer to words."""

    def to_words(self, n: int) -> str: ...


# ─── Lexicon ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Lexicon:
    """The handful of words every language supplies to the core contract."""

    negative_word: str
    separator_word: SeparatorWord
    zero_word: str
    space_separator: str = " "
    decimal_mode: DecimalMode = DecimalMode.GROUPED
    digit_words: tuple[str, ...] = ()  # 0-9, required for per-digit decimals

    def separator_for(self, whole_number: int) -> str:
        if callable(self.separator_word):
            return self.separator_word(whole_number)
        return self.separator_word


# ─── Converter ───────────────────────────────────────────────────────


class CardinalConverter:
    """Turns a NormalizedNumber into words for one language.

    Usage:
        converter = CardinalConverter(lexicon, engine)
        converter.convert(normalize("-3.05"))  # "minus three point zero five"

    Args:
        lexicon: negative/separator/zero words and decimal mode.
        engine: integer engine for the whole part.
        decimal_engine: optional engine for the grouped decimal digits, for
            languages that read decimals in a fixed gender.
        space_separator: overrides ``lexicon.space_separator`` when given.
        drop_spaces: remove every space from the final text.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        engine: IntegerEngine,
        decimal_engine: IntegerEngine | None = None,
        *,
        space_separator: str | None = None,
        drop_spaces: bool = False,
    ):
        if lexicon.decimal_mode == DecimalMode.PER_DIGIT and len(lexicon.digit_words) != 10:
            raise LocaleDataError(
                "Per-digit decimal mode needs exactly 10 digit words, "
                f"got {len(lexicon.digit_words)}",
                {"digit_words": list(lexicon.digit_words)},
            )
        self.lexicon = lexicon
        self.engine = engine
        self.decimal_engine = decimal_engine or engine
        self.joiner = lexicon.space_separator if space_separator is None else space_separator
        self.drop_spaces = drop_spaces

    def convert(self, number: NormalizedNumber) -> str:
        """Convert a normalized number to its cardinal words."""
        words: list[str] = []

        if number.is_negative:
            words.append(self.lexicon.negative_word)

        words.append(self.engine.to_words(number.integer_part))

        if number.decimal_digits:
            words.append(self.lexicon.separator_for(number.integer_part))
            words.extend(self.decimal_words(number.decimal_digits))

        text = self.joiner.join(words)
        if self.drop_spaces:
            text = text.replace(" ", "")
        return text

    def decimal_words(self, decimal_digits: str) -> list[str]:
        """Words for the digits after the separator."""
        if self.lexicon.decimal_mode == DecimalMode.PER_DIGIT:
            return [self.lexicon.digit_words[int(d)] for d in decimal_digits]

        significant = decimal_digits.lstrip("0")
        words = [self.lexicon.zero_word] * (len(decimal_digits) - len(significant))
        if significant:
            words.append(self.decimal_engine.to_words(int(significant)))
        return words
