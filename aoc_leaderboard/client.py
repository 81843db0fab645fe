"""Fetching and ranking Advent of Code private leaderboards.

The coroutines take an :class:`aiohttp.ClientSession` owned by the caller.
:func:`get_members` is the blocking variant for code without an event loop;
it opens a session for the single request and closes it afterwards.
"""
from __future__ import annotations

import asyncio
from logging import getLogger
from typing import Iterable, List

import aiohttp

from .errors import AuthOrServerError, DecodeError, HTTPError, TransportError
from .models import Leaderboard, Member
from .sorting import SortMode, sort_members

__all__ = (
    'DEFAULT_BASE_URL',
    'leaderboard_url',
    'fetch_leaderboard',
    'fetch_members',
    'get_members',
    'count_total_stars',
)

_log = getLogger(__name__)

DEFAULT_BASE_URL = 'https://adventofcode.com'


def leaderboard_url(leaderboard_id: int, year: int, base_url: str = DEFAULT_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}/{year}/leaderboard/private/view/{leaderboard_id}.json"


async def fetch_leaderboard(
    session: aiohttp.ClientSession,
    leaderboard_id: int,
    session_cookie: str,
    year: int,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> Leaderboard:
    """|coro| Downloads and decodes a private leaderboard.

    Raises
    ------
    AuthOrServerError
        The server answered 500, which is also what a bad session cookie gets.
    HTTPError
        Any other status than 200.
    TransportError
        No response was received at all.
    DecodeError
        The body is not a leaderboard.
    """
    url = leaderboard_url(leaderboard_id, year, base_url)
    headers = {
        'Accept': 'application/json',
        'Cookie': f'session={session_cookie}',
    }
    _log.debug("Fetching leaderboard %s", url)

    try:
        # without a valid cookie AoC redirects to the HTML login page
        async with session.get(url, headers=headers, allow_redirects=False) as resp:
            if resp.status == 500:
                raise AuthOrServerError(resp.status)
            if resp.status != 200:
                raise HTTPError(resp.status)

            try:
                data = await resp.json(content_type=None)
            except ValueError as e:
                raise DecodeError(f'leaderboard body is not valid JSON: {e}') from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise TransportError(str(e) or type(e).__name__) from e

    return Leaderboard.from_dict(data)


async def fetch_members(
    session: aiohttp.ClientSession,
    leaderboard_id: int,
    session_cookie: str,
    year: int,
    sort: SortMode = SortMode.NONE,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> List[Member]:
    """|coro| Returns the members of a private leaderboard, ranked highest first by ``sort``."""
    leaderboard = await fetch_leaderboard(session, leaderboard_id, session_cookie, year, base_url=base_url)
    members = sort_members(leaderboard.members.values(), sort)
    _log.info("Fetched %d members of leaderboard %s (%s)", len(members), leaderboard_id, leaderboard.event)
    return members


def get_members(
    leaderboard_id: int,
    session_cookie: str,
    year: int,
    sort: SortMode = SortMode.NONE,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> List[Member]:
    """Blocking version of :func:`fetch_members`.

    Must not be called from a running event loop.
    """

    async def runner() -> List[Member]:
        async with aiohttp.ClientSession() as session:
            return await fetch_members(session, leaderboard_id, session_cookie, year, sort, base_url=base_url)

    return asyncio.run(runner())


def count_total_stars(members: Iterable[Member]) -> int:
    return sum(m.stars for m in members)
