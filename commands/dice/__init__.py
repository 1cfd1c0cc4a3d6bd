"""
Dice Commands Package

Chronicles of Darkness d10 dice pool rolling.
"""
from discord.ext import commands

from utils.cog_loader import load_cogs
from .rolls import DiceRollCommands


async def setup_dice(bot: commands.Bot):
    """
    Setup all dice command modules.

    Returns:
        tuple: (successful_count, failed_count, failed_modules)
    """
    return await load_cogs(bot, "dice", [
        ("DiceRollCommands", DiceRollCommands),
    ])


__all__ = ['setup_dice', 'DiceRollCommands']
