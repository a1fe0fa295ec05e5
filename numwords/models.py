"""
Pydantic models for conversion input: options and the normalized number.

Both models are frozen. Frozen options are hashable, which lets the registry
cache one converter per distinct option set.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ─── Enumerations ───────────────────────────────────────────────────


class Gender(str, Enum):
    """Grammatical gender applied to the units of the final segment."""

    MASCULINE = "masculine"
    FEMININE = "feminine"


class Script(str, Enum):
    """Writing system for languages published in more than one script."""

    LATIN = "latin"
    NATIVE = "native"


class DecimalMode(str, Enum):
    """How the fractional digits are read out."""

    GROUPED = "grouped"  # "3.14" -> three point fourteen
    PER_DIGIT = "per_digit"  # "3.14" -> three point one four


# ─── Options ────────────────────────────────────────────────────────


class ConversionOptions(BaseModel):
    """Language-dependent superset of conversion options.

    Options a language does not understand are ignored by that language.
    camelCase aliases (``dropSpaces``, ``spaceSeparator``) are accepted.
    """

    lang: Optional[str] = None  # None -> configured default language
    gender: Gender = Gender.MASCULINE
    script: Optional[Script] = None
    region: Optional[str] = None
    ordinal: bool = False
    formal: bool = False  # zh: financial numerals (壹贰叁...)
    drop_spaces: bool = False
    space_separator: Optional[str] = None
    include_optional_and: bool = False  # nl: "honderd en een"
    no_hundred_pairs: bool = False  # nl: "duizend honderd" instead of "elfhonderd"
    accent_one: bool = True  # nl: "één" when the one stands alone

    model_config = {
        "frozen": True,
        "extra": "forbid",
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


# ─── Normalized Input ───────────────────────────────────────────────


class NormalizedNumber(BaseModel):
    """Canonical numeric input consumed by every converter."""

    is_negative: bool = False
    integer_part: int = Field(ge=0)
    decimal_digits: Optional[str] = Field(default=None, pattern=r"^[0-9]+$")

    model_config = {"frozen": True}
