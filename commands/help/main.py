"""
Help Command

Prints usage for the roll, stats and merit commands.
"""
from discord.ext import commands

from utils.decorators import logged_command
from utils.logging import get_contextual_logger

HELP_TEXT = """Chronicles of Darkness dice roller bot

To use, type '!roll # <mod>', where # is a positive number or 'chance', and <mod> is one of:

* 9again - to re-roll 10s and 9s
* 8again - to re-roll 10s, 9s, and 8s
* no10again - to not re-roll any values

Note that the '<mod>' portion is optional; 10s are re-rolled by default.

Examples:

* !roll 4
* !roll chance
* !roll 10 9again

You can also keep stats for your character with the following commands:

* !stats print|show
* !stats edit <name> <value>

Then, you can roll using those stats, like:

!stats edit strength 3
!roll strength + 1 9again

Stats you haven't set count as 0 and are listed in a warning.

Look up a merit card with:

!merit <merit name>
"""


class HelpCommands(commands.Cog):
    """Help command handler."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot
        self.logger = get_contextual_logger(f'{__name__}.HelpCommands')

    @commands.command(name="help")
    @logged_command("!help")
    async def show_help(self, ctx: commands.Context):
        """Show how to use the bot."""
        await ctx.send(f"```\n{HELP_TEXT}```")
