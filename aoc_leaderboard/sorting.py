from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .models import Member

__all__ = ('SortMode', 'Comparator', 'BY_LOCAL_SCORE', 'BY_GLOBAL_SCORE', 'BY_STARS', 'comparator_for', 'sort_members')


class SortMode(enum.Enum):
    NONE = 0
    BY_LOCAL_SCORE = 1
    BY_GLOBAL_SCORE = 2
    BY_STARS = 3


@dataclass(frozen=True)
class Comparator:
    """Orders members by ``primary``, falling back to ``tiebreak`` on equal values.

    Both are attribute names of :class:`Member`. The natural order is
    ascending; rankings use ``sort(..., descending=True)``.
    """

    primary: str
    tiebreak: str

    def key(self, member: Member) -> Tuple[int, int]:
        return getattr(member, self.primary), getattr(member, self.tiebreak)

    def less(self, a: Member, b: Member) -> bool:
        return self.key(a) < self.key(b)

    def sort(self, members: Iterable[Member], descending: bool = True) -> List[Member]:
        # sorted() is stable with reverse=True too: members equal on both keys keep their order
        return sorted(members, key=self.key, reverse=descending)


BY_LOCAL_SCORE = Comparator('local_score', 'stars')
BY_GLOBAL_SCORE = Comparator('global_score', 'local_score')
BY_STARS = Comparator('stars', 'local_score')

_COMPARATORS = {
    SortMode.BY_LOCAL_SCORE: BY_LOCAL_SCORE,
    SortMode.BY_GLOBAL_SCORE: BY_GLOBAL_SCORE,
    SortMode.BY_STARS: BY_STARS,
}


def comparator_for(mode: SortMode) -> Comparator:
    try:
        return _COMPARATORS[mode]
    except KeyError:
        raise ValueError(f'{mode!r} has no comparator') from None


def sort_members(members: Iterable[Member], mode: SortMode = SortMode.NONE) -> List[Member]:
    """Returns a new list ranked highest first by ``mode``; ``SortMode.NONE`` keeps the input order."""
    if mode is SortMode.NONE:
        return list(members)
    return comparator_for(mode).sort(members)
