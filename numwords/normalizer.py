"""
Validate and canonicalize raw numeric input.

Accepted inputs:
    int (arbitrary size)          12, -7, 10**40
    float                         3.5, 1e-7 (exponent expanded), 2.0 -> 2
    decimal.Decimal               Decimal("3.050")
    numeral string                "-12.5", "0012", ".5", "7."

Numeral strings are an optional leading '-', digits and at most one '.'.
Exponent notation, thousands separators and '+' are rejected: strings are
read literally, so "3.50" keeps its trailing zero as decimal digits "50".
"""

from __future__ import annotations

import math
import re
import sys
from decimal import Decimal

from .exceptions import InvalidFormatError, InvalidTypeError, NotANumberError
from .models import NormalizedNumber

_NUMERAL_RE = re.compile(r"^(-)?([0-9]*)(?:\.([0-9]*))?$")


def normalize(value: object) -> NormalizedNumber:
    """Turn a supported value into a NormalizedNumber.

    Raises:
        InvalidTypeError: value is not int/float/Decimal/str (bool included).
        NotANumberError: value is NaN.
        InvalidFormatError: value is infinite or not a numeral string.
    """
    # bool is an int subclass but never a meaningful number here
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, str)):
        raise InvalidTypeError(
            f"Invalid value type: expected int, float, Decimal or str, "
            f"received {type(value).__name__}",
            {"type": type(value).__name__},
        )

    if isinstance(value, int):
        return NormalizedNumber(is_negative=value < 0, integer_part=abs(value))

    if isinstance(value, float):
        if math.isnan(value):
            raise NotANumberError("NaN cannot be converted to words", {"value": "nan"})
        if math.isinf(value):
            raise InvalidFormatError(
                f"Number must be finite, received {value!r}", {"value": repr(value)}
            )
        if value.is_integer():
            as_int = int(value)
            return NormalizedNumber(is_negative=as_int < 0, integer_part=abs(as_int))
        return _parse_numeral(format(Decimal(repr(value)), "f"), value)

    if isinstance(value, Decimal):
        if value.is_nan():
            raise NotANumberError("NaN cannot be converted to words", {"value": str(value)})
        if not value.is_finite():
            raise InvalidFormatError(
                f"Number must be finite, received {value}", {"value": str(value)}
            )
        return _parse_numeral(format(value, "f"), value)

    return _parse_numeral(value.strip(), value)


def _parse_numeral(text: str, original: object) -> NormalizedNumber:
    match = _NUMERAL_RE.match(text)
    if match is None or not (match.group(2) or match.group(3)):
        raise InvalidFormatError(
            f"Invalid number format: {original!r}", {"value": str(original)}
        )

    sign, integer_digits, decimal_digits = match.groups()
    _check_length(integer_digits, "Integer")
    _check_length(decimal_digits, "Decimal")

    return NormalizedNumber(
        is_negative=sign is not None,
        integer_part=int(integer_digits or "0"),
        decimal_digits=decimal_digits or None,
    )


def _check_length(digits: str | None, part: str) -> None:
    """Both parts are read as ints, so both are bound by the interpreter's limit."""
    limit = sys.get_int_max_str_digits()
    if digits and limit and len(digits) > limit:
        raise InvalidFormatError(
            f"{part} part too long: {len(digits)} digits (limit {limit})",
            {"part": part.lower(), "digits": len(digits), "limit": limit},
        )
