from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, TypedDict, Union

from .errors import DecodeError
from .timestamps import JSONTime

__all__ = ('LevelData', 'UserData', 'LeaderboardData', 'Level', 'Member', 'Leaderboard')

RawTimestamp = Union[str, int, None]


class LevelData(TypedDict, total=False):
    star_index: int
    get_star_ts: RawTimestamp


class UserData(TypedDict, total=False):
    id: Union[str, int]
    name: Optional[str]
    stars: int
    local_score: int
    global_score: int
    last_star_ts: RawTimestamp
    completion_day_level: Dict[str, Dict[str, LevelData]]


class LeaderboardData(TypedDict):
    owner_id: Union[str, int]
    event: str
    members: Dict[str, UserData]


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DecodeError(f'{what} must be a JSON object, got {type(value).__name__}')
    return value


def _count(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f'{key!r} must be an integer, got {value!r}')
    if value < 0:
        raise DecodeError(f'{key!r} must not be negative, got {value}')
    return value


@dataclass(frozen=True)
class Level:
    """When a single star was earned."""

    timestamp: JSONTime = JSONTime.ZERO

    @classmethod
    def from_dict(cls, data: LevelData) -> Level:
        data = _mapping(data, 'level')
        return cls(timestamp=JSONTime.parse(data.get('get_star_ts')))


@dataclass(frozen=True)
class Member:
    """A single participant's score record.

    Not hashable: ``days`` is a plain dict.
    """

    __hash__ = None  # type: ignore[assignment]

    id: str
    name: Optional[str] = None
    stars: int = 0
    local_score: int = 0
    global_score: int = 0
    last_star_ts: JSONTime = JSONTime.ZERO
    days: Dict[str, Dict[str, Level]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: UserData) -> Member:
        data = _mapping(data, 'member')
        if 'id' not in data:
            raise DecodeError('member is missing its id')

        name = data.get('name')
        if name is not None and not isinstance(name, str):
            raise DecodeError(f'member name must be a string, got {name!r}')

        raw_days = data.get('completion_day_level')
        days = {
            str(day): {
                str(level): Level.from_dict(level_data)
                for level, level_data in _mapping(levels, f'day {day}').items()
            }
            for day, levels in _mapping({} if raw_days is None else raw_days, 'completion_day_level').items()
        }

        return cls(
            id=str(data['id']),
            name=name,
            stars=_count(data, 'stars'),
            local_score=_count(data, 'local_score'),
            global_score=_count(data, 'global_score'),
            last_star_ts=JSONTime.parse(data.get('last_star_ts')),
            days=days,
        )

    @property
    def display_name(self) -> str:
        """The name as the site shows it, anonymous users included."""
        return self.name or f'(anonymous user #{self.id})'

    def completed_levels(self) -> int:
        return sum(1 for levels in self.days.values() for level in levels.values() if level.timestamp)


@dataclass(frozen=True)
class Leaderboard:
    __hash__ = None  # type: ignore[assignment]

    owner_id: str
    event: str
    members: Dict[str, Member] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: LeaderboardData) -> Leaderboard:
        data = _mapping(data, 'leaderboard')
        try:
            owner_id, event = data['owner_id'], data['event']
        except KeyError as e:
            raise DecodeError(f'leaderboard is missing {e.args[0]!r}') from None

        raw_members = data.get('members')
        members = {
            str(key): Member.from_dict(value)
            for key, value in _mapping({} if raw_members is None else raw_members, 'members').items()
        }
        return cls(owner_id=str(owner_id), event=str(event), members=members)
