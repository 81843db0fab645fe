"""Tests for the /leaderboard slash command with a mocked interaction."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from discord import app_commands

from aoc_leaderboard import HTTPError, Member, SortMode
from aoc_leaderboard.config import BotConfig
from cogs.leaderboard import Leaderboard


@pytest.fixture
def cog() -> Leaderboard:
    config = BotConfig(
        token="t", guild_id=1, leaderboard_id=12345, session_cookie="s3cr3t", year=2023, sort=SortMode.BY_LOCAL_SCORE
    )
    return Leaderboard(SimpleNamespace(config=config, session=MagicMock()))


@pytest.fixture
def interaction() -> MagicMock:
    interaction = MagicMock()
    interaction.response.defer = AsyncMock()
    interaction.followup.send = AsyncMock()
    return interaction


class TestDisplayLeaderboard:
    """Tests for the leaderboard command callback."""

    @pytest.mark.asyncio
    async def test_sends_ranking_with_star_total(self, cog: Leaderboard, interaction: MagicMock) -> None:
        members = [Member(id="1", name="Ann", stars=4, local_score=20), Member(id="2", name="Bob", stars=2, local_score=8)]
        with patch("cogs.leaderboard.fetch_members", new=AsyncMock(return_value=members)) as fetch:
            await cog.display_leaderboard.callback(cog, interaction, None)

        fetch.assert_awaited_once_with(cog.bot.session, 12345, "s3cr3t", 2023, SortMode.BY_LOCAL_SCORE)
        page = interaction.followup.send.await_args.args[0]
        assert "`1) 20` Ann" in page
        assert "`2)  8` Bob" in page
        assert "6 stars collected by 2 members" in page

    @pytest.mark.asyncio
    async def test_sort_choice_overrides_config(self, cog: Leaderboard, interaction: MagicMock) -> None:
        choice = app_commands.Choice(name="Stars", value="stars")
        with patch("cogs.leaderboard.fetch_members", new=AsyncMock(return_value=[Member(id="1", stars=1)])) as fetch:
            await cog.display_leaderboard.callback(cog, interaction, choice)

        assert fetch.await_args.args[-1] is SortMode.BY_STARS

    @pytest.mark.asyncio
    async def test_library_error_is_reported(self, cog: Leaderboard, interaction: MagicMock) -> None:
        with patch("cogs.leaderboard.fetch_members", new=AsyncMock(side_effect=HTTPError(404))):
            await cog.display_leaderboard.callback(cog, interaction, None)

        args, kwargs = interaction.followup.send.await_args
        assert "HTTP code 404" in args[0]
        assert "ephemeral" not in kwargs

    @pytest.mark.asyncio
    async def test_empty_leaderboard(self, cog: Leaderboard, interaction: MagicMock) -> None:
        with patch("cogs.leaderboard.fetch_members", new=AsyncMock(return_value=[])):
            await cog.display_leaderboard.callback(cog, interaction, None)

        assert "Nobody" in interaction.followup.send.await_args.args[0]
