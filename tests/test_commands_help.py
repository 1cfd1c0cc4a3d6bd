"""
Tests for the help command
"""
import pytest

from commands.help.main import HELP_TEXT, HelpCommands


class TestHelpCommands:
    """Test the !help command."""

    @pytest.fixture
    def help_cog(self, bot):
        return HelpCommands(bot)

    @pytest.mark.asyncio
    async def test_help_sends_usage(self, help_cog, mock_context):
        await help_cog.show_help.callback(help_cog, mock_context)

        mock_context.send.assert_called_once_with(f"```\n{HELP_TEXT}```")

    def test_help_covers_commands(self):
        for text in ("!roll", "9again", "8again", "no10again", "!stats", "!merit", "chance"):
            assert text in HELP_TEXT

    def test_help_fits_in_one_message(self):
        assert len(HELP_TEXT) + 7 <= 2000

    def test_help_command_registration(self, help_cog):
        assert help_cog.show_help.name == "help"
