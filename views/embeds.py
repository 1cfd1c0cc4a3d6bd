"""
Embed Templates for the dice bot

Provides consistent embed styling.
"""
from dataclasses import dataclass
from typing import Optional, Union

import discord


@dataclass(frozen=True)
class EmbedColors:
    """Standard color palette for embeds."""
    PRIMARY: int = 0x5b2a86      # Chronicles purple


class EmbedTemplate:
    """Base embed template with consistent styling."""

    @staticmethod
    def create_base_embed(
        title: Optional[str] = None,
        description: Optional[str] = None,
        color: Union[int, discord.Color] = EmbedColors.PRIMARY,
        timestamp: bool = True
    ) -> discord.Embed:
        """Create a base embed with standard formatting."""
        embed = discord.Embed(
            title=title,
            description=description,
            color=color
        )

        if timestamp:
            embed.timestamp = discord.utils.utcnow()

        return embed

    @staticmethod
    def merit_card(merit_name: str, image_filename: str) -> discord.Embed:
        """Create an embed showing an attached merit card image."""
        embed = EmbedTemplate.create_base_embed(title=merit_name, timestamp=False)
        embed.set_image(url=f"attachment://{image_filename}")
        return embed
