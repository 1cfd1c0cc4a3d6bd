"""
Character Commands Package

Viewing and editing per-user character stats used by attribute rolls.
"""
from discord.ext import commands

from utils.cog_loader import load_cogs
from .stats import CharacterStatsCommands


async def setup_characters(bot: commands.Bot):
    """
    Setup all character command modules.

    Returns:
        tuple: (successful_count, failed_count, failed_modules)
    """
    return await load_cogs(bot, "character", [
        ("CharacterStatsCommands", CharacterStatsCommands),
    ])


__all__ = ['setup_characters', 'CharacterStatsCommands']
