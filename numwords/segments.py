"""
Digit grouping and numeral plural rules shared by the engines.

Segments are returned most-significant first, paired with their scale index
(0 = units). All arithmetic is on Python ints, so magnitudes are unbounded.
"""

from __future__ import annotations

from typing import Callable, Iterator

# A plural rule maps a count to an index into a form tuple.
PluralRule = Callable[[int], int]

SINGULAR, FEW, MANY = 0, 1, 2


# ─── Grouping ────────────────────────────────────────────────────────


def group_by(n: int, width: int) -> list[int]:
    """Split n into base-10**width segments, most significant first.

    >>> group_by(1234567, 3)
    [1, 234, 567]
    """
    if n < 0:
        raise ValueError(f"Cannot segment a negative number: {n}")
    base = 10**width
    segments = []
    while True:
        n, segment = divmod(n, base)
        segments.append(segment)
        if n == 0:
            break
    segments.reverse()
    return segments


def group_three_then_twos(n: int) -> list[int]:
    """Indian grouping: last three digits, then pairs.

    >>> group_three_then_twos(123456789)
    [12, 34, 56, 789]
    """
    if n < 0:
        raise ValueError(f"Cannot segment a negative number: {n}")
    n, last = divmod(n, 1000)
    groups = [last]
    while n:
        n, pair = divmod(n, 100)
        groups.append(pair)
    groups.reverse()
    return groups


def indexed(segments: list[int]) -> Iterator[tuple[int, int]]:
    """Yield (segment, scale_index) pairs, most significant first."""
    top = len(segments) - 1
    for position, segment in enumerate(segments):
        yield segment, top - position


def digits(segment: int) -> tuple[int, int, int]:
    """(hundreds, tens, ones) of a segment in [0, 999]."""
    hundreds, rest = divmod(segment, 100)
    tens, ones = divmod(rest, 10)
    return hundreds, tens, ones


# ─── Plural Rules ────────────────────────────────────────────────────


def slavic_plural(n: int) -> int:
    """East Slavic rule: many for 11-19, else keyed on the last digit."""
    if 11 <= n % 100 <= 19:
        return MANY
    if n % 10 == 1:
        return SINGULAR
    if 2 <= n % 10 <= 4:
        return FEW
    return MANY


def west_slavic_plural(n: int) -> int:
    """Polish/Czech/Croatian/Serbian variant keyed on the tens/ones digits.

    Only exactly one is singular (21 tysięcy, not 21 tysiąc); few requires
    a last digit of 2-4 outside the 10-20 band.
    """
    last_two = n % 100
    if n == 1:
        return SINGULAR
    if 2 <= n % 10 <= 4 and (last_two < 10 or last_two > 20):
        return FEW
    return MANY


def south_slavic_plural(n: int) -> int:
    """Croatian/Serbian: like east Slavic but 21, 31... are singular."""
    last_two = n % 100
    if n % 10 == 1 and (last_two < 10 or last_two > 20):
        return SINGULAR
    if 2 <= n % 10 <= 4 and (last_two < 10 or last_two > 20):
        return FEW
    return MANY


def latvian_plural(n: int) -> int:
    """Two-form rule: singular for ...1 except ...11."""
    if n % 10 == 1 and n % 100 != 11:
        return SINGULAR
    return FEW


def lithuanian_plural(n: int) -> int:
    """Genitive plural for 0, 10-19 and round tens; singular for ...1."""
    if n % 10 == 0 or 10 <= n % 100 <= 19:
        return MANY
    if n % 10 == 1:
        return SINGULAR
    return FEW


def romance_plural(n: int) -> int:
    """Two-form singular/plural: only exactly one is singular."""
    return SINGULAR if n == 1 else FEW


def pluralize(n: int, forms: tuple[str, ...], rule: PluralRule = slavic_plural) -> str:
    """Pick the form for count n.

    Two-element form sets are accepted; index 2 then falls back to index 1.
    """
    index = rule(n)
    return forms[min(index, len(forms) - 1)]
