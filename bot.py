"""
Chronicles Dice Bot - Main Entry Point

discord.py prefix-command bot for Chronicles of Darkness dice pools.
"""
import asyncio
import logging
import os
from logging.handlers import RotatingFileHandler

import discord
from discord.ext import commands

from config import get_config
from exceptions import BotException, ConfigurationException
from utils.logging import JSONFormatter


def setup_logging():
    """Configure hybrid logging: human-readable console + structured JSON files."""
    config = get_config()
    os.makedirs(config.log_dir, exist_ok=True)

    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationException(f"Unknown log level: {config.log_level}")

    logger = logging.getLogger('dice_bot')
    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    ))
    logger.addHandler(console_handler)

    json_handler = RotatingFileHandler(
        os.path.join(config.log_dir, 'dice_bot.json'),
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=5
    )
    json_handler.setFormatter(JSONFormatter())
    logger.addHandler(json_handler)

    # Command modules log under their own module names; they reach these
    # handlers through the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:
        root_logger.addHandler(console_handler)
        root_logger.addHandler(json_handler)

    logger.propagate = False

    return logger


class DiceBot(commands.Bot):
    """Custom bot class for the dice roller."""

    def __init__(self):
        intents = discord.Intents.default()
        intents.message_content = True  # Prefix commands read message text

        super().__init__(
            command_prefix=get_config().command_prefix,
            case_insensitive=True,
            help_command=None,  # Replaced by commands.help
            intents=intents,
            description="Chronicles of Darkness dice roller"
        )

        self.logger = logging.getLogger('dice_bot')

    async def setup_hook(self):
        """Called when the bot is starting up."""
        self.logger.info("Setting up bot...")
        await self._load_command_packages()

    async def _load_command_packages(self):
        """Load all command packages with resilient error handling."""
        from commands.dice import setup_dice
        from commands.characters import setup_characters
        from commands.help import setup_help_commands
        from commands.merits import setup_merits

        command_packages = [
            ("dice", setup_dice),
            ("characters", setup_characters),
            ("help", setup_help_commands),
            ("merits", setup_merits),
        ]

        total_successful = 0
        total_failed = 0

        for package_name, setup_func in command_packages:
            try:
                self.logger.info(f"Loading {package_name} commands...")
                successful, failed, _ = await setup_func(self)
                total_successful += successful
                total_failed += failed
            except Exception as e:
                self.logger.error(f"❌ Failed to load {package_name} package: {e}", exc_info=True)
                total_failed += 1

        if total_failed == 0:
            self.logger.info(f"🎉 All command packages loaded successfully ({total_successful} total cogs)")
        else:
            self.logger.warning(f"⚠️  Command loading completed with issues: {total_successful} successful, {total_failed} failed")

    async def on_ready(self):
        """Called when the bot is ready."""
        self.logger.info(f"Bot ready! Logged in as {self.user}")
        self.logger.info(f"Connected to {len(self.guilds)} guilds")

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError):
        """Global error handler for prefix commands."""
        if isinstance(error, commands.CommandNotFound):
            return

        original = getattr(error, 'original', error)

        if isinstance(original, BotException):
            self.logger.warning(f"Command error in '{ctx.message.content}': {original}")
            await ctx.send(f"❌ {original}")
            return

        if isinstance(error, commands.UserInputError):
            await ctx.send(f"❌ {error}")
            return

        self.logger.error(
            f"Unhandled command error in '{ctx.message.content}': {original}",
            exc_info=original
        )
        message = "❌ An unexpected error occurred. Please try again."
        if get_config().is_development:
            message += f"\n\nDevelopment error: {original}"
        await ctx.send(message)


async def main():
    """Main entry point."""
    logger = setup_logging()

    config = get_config()
    logger.info("Starting dice bot")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"Character data: {config.data_file}")

    bot = DiceBot()
    try:
        await bot.start(config.bot_token)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
    finally:
        await bot.close()


if __name__ == "__main__":
    asyncio.run(main())
