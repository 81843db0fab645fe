"""Settings for the Discord bot, read from the environment (usually a ``.env`` file)."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime

import dotenv

from .sorting import SortMode

__all__ = ('SORT_NAMES', 'get', 'BotConfig')

SORT_NAMES = {
    'local': SortMode.BY_LOCAL_SCORE,
    'global': SortMode.BY_GLOBAL_SCORE,
    'stars': SortMode.BY_STARS,
}


def get(k: str) -> str:
    v = os.getenv(k)
    if not v:
        raise RuntimeError("'%s' not set in the .env file!" % k)
    return v


@dataclass(frozen=True)
class BotConfig:
    token: str = field(repr=False)
    guild_id: int
    leaderboard_id: int
    session_cookie: str = field(repr=False)
    year: int
    sort: SortMode = SortMode.BY_LOCAL_SCORE

    @classmethod
    def from_env(cls, load: bool = True) -> BotConfig:
        if load:
            dotenv.load_dotenv()

        sort_name = (os.getenv('AOC_SORT') or 'local').lower()
        if sort_name not in SORT_NAMES:
            raise RuntimeError(f"'AOC_SORT' must be one of {', '.join(SORT_NAMES)}, not {sort_name!r}")

        return cls(
            token=get('TOKEN'),
            guild_id=int(get('GUILD_ID')),
            leaderboard_id=int(get('LEADERBOARD_ID')),
            session_cookie=get('AOC_SESSION'),
            year=int(os.getenv('AOC_YEAR') or datetime.now().year),
            sort=SORT_NAMES[sort_name],
        )
