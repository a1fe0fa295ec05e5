"""
numwords: convert numbers to cardinal words in many languages.

    >>> import numwords
    >>> numwords.convert(1234)
    'one thousand two hundred and thirty-four'
    >>> numwords.convert("2.5", lang="ru", gender="feminine")
    'две запятая пять'

Families: greedy card matching (en, de, fr, es, nl, sv, da, ko), fixed-width
segments (pt, id, ms, ro, zh, ja), Indian grouping (hi, bn, ur), Slavic
plurals (ru, uk, pl, cs, hr, sr, lv, lt) and Semitic morphology (he, ar).
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from pydantic import ValidationError

from .exceptions import (
    InvalidFormatError,
    InvalidOptionsError,
    InvalidTypeError,
    LocaleDataError,
    MissingVocabularyError,
    NotANumberError,
    NumWordsError,
    UnsupportedLocaleError,
)
from .models import ConversionOptions, Gender, Script
from .normalizer import normalize
from .registry import get_converter, supported_languages

__version__ = "1.0.0"

__all__ = [
    "ConversionOptions",
    "Gender",
    "InvalidFormatError",
    "InvalidOptionsError",
    "InvalidTypeError",
    "LocaleDataError",
    "MissingVocabularyError",
    "NotANumberError",
    "NumWordsError",
    "Script",
    "UnsupportedLocaleError",
    "convert",
    "resolve_options",
    "supported_languages",
]

OptionsInput = Union[ConversionOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsInput = None, **overrides: Any) -> ConversionOptions:
    """Merge keyword overrides onto options and validate the result.

    Raises:
        InvalidOptionsError: unknown option, bad value, or options of the wrong type.
    """
    if options is None:
        base: dict[str, Any] = {}
    elif isinstance(options, ConversionOptions):
        if not overrides:
            return options
        base = options.model_dump(exclude_defaults=True)
    elif isinstance(options, Mapping):
        base = dict(options)
    else:
        raise InvalidOptionsError(
            f"Options must be ConversionOptions or a mapping, received {type(options).__name__}",
            {"type": type(options).__name__},
        )

    try:
        return ConversionOptions.model_validate({**base, **overrides})
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise InvalidOptionsError(
            f"Invalid option {field!r}: {first['msg']}",
            {"errors": [{"field": ".".join(map(str, err["loc"])), "message": err["msg"]} for err in e.errors()]},
        ) from e


def convert(value: object, options: OptionsInput = None, **overrides: Any) -> str:
    """Convert a number to cardinal words.

    Args:
        value: int, float, Decimal or numeral string ("-12.50").
        options: ConversionOptions, a mapping of options, or None.
        **overrides: option fields merged on top of ``options``.

    Returns:
        The number in words.

    Raises:
        NumWordsError: any input, option or vocabulary failure (see
            ``numwords.exceptions`` for the specific subclasses).
    """
    resolved = resolve_options(options, **overrides)
    converter = get_converter(resolved)
    return converter.convert(normalize(value))
