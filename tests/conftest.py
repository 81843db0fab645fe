"""Shared fixtures for the leaderboard tests."""

from collections.abc import Callable

import pytest

from aoc_leaderboard import Member


@pytest.fixture
def make_member() -> Callable[..., Member]:
    """Build a Member with only the fields a test cares about."""

    def factory(id: str = "1", **kwargs) -> Member:
        return Member(id=id, **kwargs)

    return factory
