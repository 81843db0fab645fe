from __future__ import annotations

import asyncio
import traceback
from logging import getLogger

import aiohttp
import discord
from discord.ext import commands

from aoc_leaderboard.config import BotConfig

log = getLogger('bot')

INITIAL_EXTENSIONS = ['cogs.errorhandler', 'cogs.leaderboard']


class LeaderboardBot(commands.Bot):
    """Shows an Advent of Code private leaderboard in a Discord guild"""

    def __init__(self, config: BotConfig, session: aiohttp.ClientSession) -> None:
        super().__init__(
            intents=discord.Intents(guilds=True),
            command_prefix=commands.when_mentioned,
            help_command=None,
            activity=discord.Activity(type=discord.ActivityType.watching, name='/leaderboard'),
        )
        self.config: BotConfig = config
        self.session: aiohttp.ClientSession = session

    async def setup_hook(self) -> None:
        """|coro| A coroutine called by the library between .login() and .connect()"""
        for extension in INITIAL_EXTENSIONS:
            try:
                await self.load_extension(extension)
                log.info('Loaded extension %s', extension)
            except commands.ExtensionError:
                log.error("Failed to load %s:\n%s", extension, traceback.format_exc())

        guild = discord.Object(id=self.config.guild_id)
        self.tree.copy_global_to(guild=guild)
        await self.tree.sync(guild=guild)

    async def on_ready(self) -> None:
        """|coro| Called when the bot's internal cache is ready."""
        log.info("Logged in as %s", str(self.user))

    async def on_error(self, event_method: str, /, *args, **kwargs) -> None:
        log.error("Error in event '%s'\n%s", event_method, traceback.format_exc())


if __name__ == "__main__":
    config = BotConfig.from_env()

    async def startup():
        async with aiohttp.ClientSession() as session, LeaderboardBot(config, session) as bot:
            discord.utils.setup_logging()
            await bot.start(token=config.token)

    asyncio.run(startup())
