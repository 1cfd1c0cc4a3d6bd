"""
Dice Rolling Commands

Implements the !roll prefix command for Chronicles of Darkness d10 pools.
"""
from typing import Optional

from discord.ext import commands

from config import get_config
from services.character_service import CharacterService, character_service
from utils.decorators import logged_command
from utils.dice_utils import CHANCE, resolve_modifier, roll_dice
from utils.logging import get_contextual_logger
from utils.roll_parser import extract_again_token, is_direct_pool, parse_attribute_roll
from utils.text_utils import format_attribute_result, format_chance_result, format_pool_result, split_message

ROLL_USAGE = "❌ Please provide a dice pool. Usage: `!roll 4`, `!roll chance` or `!roll strength + athletics 9again`"


class DiceRollCommands(commands.Cog):
    """Dice rolling command handlers."""

    def __init__(self, bot: commands.Bot, characters: Optional[CharacterService] = None):
        self.bot = bot
        self.characters = characters or character_service
        self.logger = get_contextual_logger(f'{__name__}.DiceRollCommands')

    @commands.command(name="roll", aliases=["r"])
    @logged_command("!roll")
    async def roll(self, ctx: commands.Context, *, expression: Optional[str] = None):
        """Roll a dice pool (!roll 4), a chance die (!roll chance) or an attribute pool (!roll wits + composure)."""
        if expression is None or not expression.strip():
            self.logger.debug("No roll expression provided")
            await ctx.send(ROLL_USAGE)
            return

        if is_direct_pool(expression):
            text = self._roll_direct(expression)
        else:
            text = self._roll_attributes(ctx.author.name, expression)

        # Long warnings can push the reply past the message limit
        for chunk in split_message(f"{ctx.author.mention} {text}", get_config().discord_message_limit):
            await ctx.send(chunk)

    def _roll_direct(self, expression: str) -> str:
        """Roll a bare dice count or the chance die."""
        line, _ = extract_again_token(expression)
        dice = line.split()[0]

        if dice == CHANCE:
            rolls = roll_dice(CHANCE, resolve_modifier(expression))
            self.logger.info("Chance die rolled", value=rolls[0].value)
            return format_chance_result(rolls[0])

        pool = int(dice)
        error = self._check_pool_size(pool)
        if error:
            return error

        rolls = roll_dice(pool, resolve_modifier(expression))
        self.logger.info("Dice pool rolled", pool=pool, roll_count=len(rolls))
        return format_pool_result(pool, rolls)

    def _roll_attributes(self, username: str, expression: str) -> str:
        """Evaluate an attribute expression for the user's character and roll it."""
        character = self.characters.get_character(username)
        result = parse_attribute_roll(character, expression)

        error = self._check_pool_size(result.pool)
        if error:
            return error

        if result.attributes_not_found:
            self.logger.info("Attributes defaulted to 0", attributes=result.attributes_not_found)

        # Pools that evaluate below zero roll no dice
        rolls = roll_dice(max(result.pool, 0), result.modifier)
        self.logger.info("Attribute pool rolled", pool=result.pool, roll_count=len(rolls))
        return format_attribute_result(result, rolls)

    def _check_pool_size(self, pool: int) -> Optional[str]:
        max_pool = get_config().max_dice_pool
        if pool > max_pool:
            self.logger.warning("Dice pool too large", pool=pool, max_pool=max_pool)
            return f"can't roll {pool} dice, the limit is {max_pool}."
        return None
