"""
Help Commands package

Static usage text for the dice bot.
"""
from typing import List, Tuple

from discord.ext import commands

from utils.cog_loader import load_cogs
from .main import HelpCommands


async def setup_help_commands(bot: commands.Bot) -> Tuple[int, int, List[str]]:
    """
    Set up help command modules.

    Returns:
        Tuple of (successful_loads, failed_loads, failed_modules)
    """
    return await load_cogs(bot, "help", [
        ("HelpCommands", HelpCommands),
    ])


__all__ = ['setup_help_commands', 'HelpCommands']
