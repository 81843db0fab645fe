from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Optional

import discord
from discord import app_commands
from discord.ext import commands

from aoc_leaderboard import LeaderboardError, Member, SortMode, count_total_stars, fetch_members, render_ranking
from aoc_leaderboard.config import SORT_NAMES

if TYPE_CHECKING:
    from bot import LeaderboardBot

_log = getLogger(__name__)

SORT_CHOICES = [
    app_commands.Choice(name='Local score', value='local'),
    app_commands.Choice(name='Global score', value='global'),
    app_commands.Choice(name='Stars', value='stars'),
]


class Leaderboard(commands.Cog):
    def __init__(self, bot: LeaderboardBot) -> None:
        super().__init__()
        self.bot = bot

    async def fetch(self, sort: SortMode) -> list[Member]:
        config = self.bot.config
        return await fetch_members(self.bot.session, config.leaderboard_id, config.session_cookie, config.year, sort)

    @app_commands.command(name='leaderboard')
    @app_commands.describe(sort='What to rank members by.')
    @app_commands.choices(sort=SORT_CHOICES)
    async def display_leaderboard(self, interaction: discord.Interaction, sort: Optional[app_commands.Choice[str]] = None):
        """Displays the AOC private leaderboard"""
        await interaction.response.defer()

        mode = SORT_NAMES[sort.value] if sort else self.bot.config.sort
        try:
            members = await self.fetch(mode)
        except LeaderboardError as e:
            _log.warning("Could not fetch leaderboard %s: %s", self.bot.config.leaderboard_id, e)
            return await interaction.followup.send(f'Could not fetch the leaderboard: {e}')

        if not members:
            return await interaction.followup.send('Nobody has joined the leaderboard yet.')

        paginator = commands.Paginator(prefix="", suffix="")
        for line in render_ranking(members, mode):
            paginator.add_line(line)
        paginator.add_line(f"\n⭐ {count_total_stars(members)} stars collected by {len(members)} members")

        pages = iter(paginator.pages)
        await interaction.followup.send(next(pages))

        for page in pages:
            if isinstance(interaction.channel, discord.abc.Messageable):
                await interaction.channel.send(page)
            else:
                await interaction.followup.send(page)


async def setup(bot: LeaderboardBot):
    await bot.add_cog(Leaderboard(bot))
