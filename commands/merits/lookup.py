"""
Merit Lookup Commands

Implements !merit, which posts a merit's card image from the merits directory.
"""
from pathlib import Path
from typing import List, Optional

import discord
from discord.ext import commands

from config import get_config
from utils.decorators import logged_command
from utils.logging import get_contextual_logger
from views.embeds import EmbedTemplate
from .merit_names import MERIT_NAMES

MERIT_NOT_FOUND = "Could not find merit."
MAX_SUGGESTIONS = 5


def merit_image_filename(merit_name: str) -> str:
    """
    Card image file name for a merit.

    Examples:
        >>> merit_image_filename("Eye for the Strange")
        'eye_for_the_strange.png'
    """
    return f"{merit_name.replace(' ', '_').lower()}.png"


def suggest_merits(partial_name: str, limit: int = MAX_SUGGESTIONS) -> List[str]:
    """Known merit names containing the given text (case-insensitive)."""
    current = partial_name.lower().strip()
    if not current:
        return []
    return [name for name in MERIT_NAMES if current in name.lower()][:limit]


class MeritCommands(commands.Cog):
    """Merit card lookup handlers."""

    def __init__(self, bot: commands.Bot, merits_dir: Optional[Path] = None):
        self.bot = bot
        self._merits_dir = merits_dir
        self.logger = get_contextual_logger(f'{__name__}.MeritCommands')

    @property
    def merits_dir(self) -> Path:
        if self._merits_dir is None:
            return Path(get_config().merits_dir)
        return self._merits_dir

    @commands.command(name="merit")
    @logged_command("!merit")
    async def merit(self, ctx: commands.Context, *, name: Optional[str] = None):
        """Show the card for a merit (!merit Fast Reflexes)."""
        if name is None or not name.strip():
            self.logger.info("Merit command had no arguments")
            return

        name = name.strip()
        file_name = merit_image_filename(name)
        self.logger.debug(f"Looking up merit image: {file_name}")
        file_path = self.merits_dir / file_name

        # Names containing path separators never map to a card
        if file_path.parent != self.merits_dir or not file_path.exists():
            suggestions = suggest_merits(name)
            message = MERIT_NOT_FOUND
            if suggestions:
                message += f" Did you mean: {', '.join(suggestions)}?"
            await ctx.send(message)
            return

        embed = EmbedTemplate.merit_card(name, file_name)
        await ctx.send(embed=embed, file=discord.File(file_path, filename=file_name))
