from logging import getLogger

import discord
from discord import app_commands
from discord.ext import commands

_log = getLogger('command errors')


class ErrorHandler(commands.Cog):
    def __init__(self, bot: commands.Bot) -> None:
        self.bot = bot
        self._old_tree_error = None

    async def cog_load(self) -> None:
        self._old_tree_error = self.bot.tree.on_error
        self.bot.tree.on_error = self.on_app_command_error

    async def cog_unload(self) -> None:
        if self._old_tree_error is not None:
            self.bot.tree.on_error = self._old_tree_error

    @commands.Cog.listener()
    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError):
        if isinstance(error, (commands.CommandNotFound, commands.CheckFailure)):
            return
        _log.error('Exception in command %s', ctx.command, exc_info=error)

    async def on_app_command_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        if isinstance(error, app_commands.CheckFailure):
            return
        command = interaction.command.qualified_name if interaction.command else None
        _log.error('Exception in app command %s', command, exc_info=error)


async def setup(bot: commands.Bot):
    await bot.add_cog(ErrorHandler(bot))
