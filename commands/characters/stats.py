"""
Character Stats Commands

Implements !stats (alias !character) for viewing and editing the invoking
user's character sheet.
"""
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from discord.ext import commands

from config import get_config
from services.character_service import CharacterService, character_service
from utils.decorators import logged_command
from utils.logging import get_contextual_logger
from utils.text_utils import format_character_sheet, split_message

EDIT_USAGE = "`!stats edit <stat_name> <stat_value>`"
VALUE_NOT_A_NUMBER = "`The <stat_value> argument must be a number`"
STATS_USAGE = "`!stats print|show` or `!stats edit <stat_name> <stat_value>`"
EDIT_ACKNOWLEDGED = "Got it."

INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')


@dataclass
class StatEdit:
    """A validated `edit <stat_name> <stat_value>` request."""
    key: str
    value: int


def parse_stat_edit(args: Sequence[str]) -> Tuple[Optional[StatEdit], Optional[str]]:
    """
    Validate the arguments following `edit`.

    Returns:
        (edit, None) when valid, otherwise (None, message to show the user)
    """
    if len(args) != 2:
        return None, EDIT_USAGE

    key, raw_value = args
    if not INTEGER_PATTERN.match(raw_value):
        return None, VALUE_NOT_A_NUMBER

    return StatEdit(key=key, value=int(raw_value)), None


class CharacterStatsCommands(commands.Cog):
    """Character sheet command handlers."""

    def __init__(self, bot: commands.Bot, characters: Optional[CharacterService] = None):
        self.bot = bot
        self.characters = characters or character_service
        self.logger = get_contextual_logger(f'{__name__}.CharacterStatsCommands')

    @commands.command(name="stats", aliases=["character"])
    @logged_command("!stats")
    async def stats(self, ctx: commands.Context, action: Optional[str] = None, *args: str):
        """Show your character (!stats print) or set a stat (!stats edit strength 3)."""
        if action is None:
            self.logger.debug("No action supplied to stats command")
            await ctx.send(STATS_USAGE)
            return

        self.logger.debug(f"Stats command, action is {action}")
        action = action.lower()

        if action in ("print", "show"):
            await self._send_sheet(ctx)
        elif action == "edit":
            await self._edit_stat(ctx, args)
        else:
            await ctx.send(STATS_USAGE)

    async def _send_sheet(self, ctx: commands.Context):
        character = self.characters.get_character(ctx.author.name)
        sheet = format_character_sheet(character)
        for chunk in split_message(sheet, get_config().discord_message_limit, wrapper="```"):
            await ctx.send(chunk)

    async def _edit_stat(self, ctx: commands.Context, args: Sequence[str]):
        edit, error = parse_stat_edit(args)
        if edit is None:
            self.logger.info("Rejected stat edit", reason=error, arg_count=len(args))
            await ctx.send(error)
            return

        self.logger.debug(f"Stats edit args are: {edit.key} | {edit.value}")
        await self.characters.set_stat(ctx.author.name, edit.key, edit.value)
        await ctx.send(EDIT_ACKNOWLEDGED)
