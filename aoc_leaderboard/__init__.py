"""Client for Advent of Code private leaderboards."""

from .client import (
    DEFAULT_BASE_URL,
    count_total_stars,
    fetch_leaderboard,
    fetch_members,
    get_members,
    leaderboard_url,
)
from .errors import (
    AuthOrServerError,
    ConversionError,
    DecodeError,
    HTTPError,
    LeaderboardError,
    TransportError,
)
from .formatting import render_ranking
from .models import Leaderboard, Level, Member
from .sorting import Comparator, SortMode, comparator_for, sort_members
from .timestamps import JSONTime, to_normal_time

__all__ = [
    'DEFAULT_BASE_URL',
    'count_total_stars',
    'fetch_leaderboard',
    'fetch_members',
    'get_members',
    'leaderboard_url',
    'AuthOrServerError',
    'ConversionError',
    'DecodeError',
    'HTTPError',
    'LeaderboardError',
    'TransportError',
    'render_ranking',
    'Leaderboard',
    'Level',
    'Member',
    'Comparator',
    'SortMode',
    'comparator_for',
    'sort_members',
    'JSONTime',
    'to_normal_time',
]
