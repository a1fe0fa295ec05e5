"""
Integer engines, one per numbering family.

Each engine exposes ``to_words(n: int) -> str`` for non-negative integers and
is configured by a frozen rules dataclass built in ``numwords.locales``.
"""

from .cardmatch import CardMatchEngine, CardMatchRules, Leaf, Pair
from .segment import ScaleMode, SegmentEngine, SegmentPart, SegmentRules, SegmentTables
from .semitic import ScaleForm, SemiticEngine, SemiticRules
from .slavic import SlavicEngine, SlavicRules
from .south_asian import SouthAsianEngine, SouthAsianRules

__all__ = [
    "CardMatchEngine",
    "CardMatchRules",
    "Leaf",
    "Pair",
    "ScaleForm",
    "ScaleMode",
    "SegmentEngine",
    "SegmentPart",
    "SegmentRules",
    "SegmentTables",
    "SemiticEngine",
    "SemiticRules",
    "SlavicEngine",
    "SlavicRules",
    "SouthAsianEngine",
    "SouthAsianRules",
]
