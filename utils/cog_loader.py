"""
Cog Loading

Shared setup routine for the command packages.
"""
import logging
from typing import List, Tuple, Type

from discord.ext import commands

logger = logging.getLogger(__name__)


async def load_cogs(
    bot: commands.Bot,
    package_name: str,
    cogs: List[Tuple[str, Type[commands.Cog]]]
) -> Tuple[int, int, List[str]]:
    """
    Add each cog to the bot, carrying on past failures.

    Args:
        bot: Bot to add the cogs to
        package_name: Package name for log messages
        cogs: (cog_name, cog_class) pairs; each class is built with the bot

    Returns:
        tuple: (successful_count, failed_count, failed_modules)
    """
    successful = 0
    failed = 0
    failed_modules = []

    for cog_name, cog_class in cogs:
        try:
            await bot.add_cog(cog_class(bot))
            logger.info(f"✅ Loaded {cog_name}")
            successful += 1
        except Exception as e:
            logger.error(f"❌ Failed to load {cog_name}: {e}", exc_info=True)
            failed += 1
            failed_modules.append(cog_name)

    if failed == 0:
        logger.info(f"🎉 All {successful} {package_name} command modules loaded successfully")
    else:
        logger.warning(f"⚠️  {package_name} commands loaded with issues: {successful} successful, {failed} failed")

    return successful, failed, failed_modules
