"""
Pytest configuration and fixtures for the dice bot tests.

This file provides test isolation and shared fixtures.
"""
import os
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest
from discord.ext import commands

# Ensure environment is set up before any imports happen
os.environ.setdefault("BOT_TOKEN", "test_bot_token")
os.environ.setdefault("TESTING", "true")

from services.character_service import CharacterService  # noqa: E402
from utils.logging import clear_context  # noqa: E402


@pytest.fixture(autouse=True)
def reset_singleton_state():
    """
    Reset global state between tests.
    """
    yield

    clear_context()

    # Reset config singleton to ensure clean state
    import config as cfg
    cfg._config = None


@pytest.fixture
def bot():
    """Create a mock bot instance."""
    return AsyncMock(spec=commands.Bot)


@pytest.fixture
def character_service(tmp_path):
    """Character service backed by a file in a temporary directory."""
    return CharacterService(data_file=tmp_path / "data.json")


@pytest.fixture
def mock_context():
    """Create a mock Discord context for prefix commands."""
    ctx = AsyncMock(spec=commands.Context)

    author = MagicMock(spec=discord.User)
    author.name = "Paul"
    author.display_name = "Paul"
    author.mention = "<@12345>"
    author.id = 12345
    ctx.author = author

    ctx.guild = None
    ctx.channel = MagicMock()
    ctx.channel.id = 555666

    # Context assigns message in __init__, so the mock needs it set explicitly
    ctx.message = MagicMock()
    ctx.message.content = "!roll 4"

    ctx.send = AsyncMock()

    return ctx
