"""
Merit Commands Package

Merit card image lookup.
"""
from discord.ext import commands

from utils.cog_loader import load_cogs
from .lookup import MeritCommands


async def setup_merits(bot: commands.Bot):
    """
    Setup all merit command modules.

    Returns:
        tuple: (successful_count, failed_count, failed_modules)
    """
    return await load_cogs(bot, "merit", [
        ("MeritCommands", MeritCommands),
    ])


__all__ = ['setup_merits', 'MeritCommands']
