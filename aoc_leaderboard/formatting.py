from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from .models import Member
from .sorting import SortMode, comparator_for

__all__ = ('render_ranking',)


def render_ranking(
    members: Sequence[Member],
    sort: SortMode = SortMode.BY_LOCAL_SCORE,
    name_of: Optional[Callable[[Member], str]] = None,
) -> List[str]:
    """Renders already ranked members as one line each.

    The score column shows the field ``sort`` ranks by. Members sharing a
    score share a rank, so only the first of them gets a number.
    """
    if not members:
        return []

    field = comparator_for(SortMode.BY_LOCAL_SCORE if sort is SortMode.NONE else sort).primary
    name_of = name_of or (lambda m: m.display_name)

    scores = [getattr(m, field) for m in members]
    score_width = len(str(max(scores)))
    index_width = len(str(len(members))) + 1

    lines = []
    previous_score = None
    for idx, (member, score) in enumerate(zip(members, scores), start=1):
        if score == previous_score:
            index = ''.rjust(index_width)
        else:
            index = f'{idx})'.rjust(index_width)
        previous_score = score

        lines.append(f'`{index} {str(score).rjust(score_width)}` {name_of(member)}')
    return lines
