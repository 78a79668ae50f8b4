"""Feed ordering - latest chapter first."""

import math
import re
from typing import Iterable, List, Optional

from manga_details.core import FeedEntry

# Leading decimal number, as read by a browser's parseFloat ("10.5 (v2)" -> 10.5).
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|Infinity))")


def chapter_sort_value(chapter: Optional[str]) -> float:
    """Numeric ordering value of a chapter number; 0 when no leading number is found."""
    if not isinstance(chapter, str):
        return 0.0
    match = _LEADING_NUMBER.match(chapter)
    if match is None:
        return 0.0
    value = float(match.group(1).replace("Infinity", "inf"))
    return 0.0 if math.isnan(value) else value


def sort_feed(entries: Iterable[FeedEntry]) -> List[FeedEntry]:
    """Return a new list ordered by descending chapter number.

    The sort is stable, so entries with equal values keep their relative
    order and sorting an already sorted feed leaves it unchanged.
    """
    return sorted(entries, key=lambda entry: chapter_sort_value(entry.chapter), reverse=True)
