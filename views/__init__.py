"""
Discord UI components for the dice bot

### Embed Templates (views.embeds)
- EmbedTemplate: Standard embed creation with consistent styling
- EmbedColors: Standard color palette
"""

from .embeds import EmbedColors, EmbedTemplate

__all__ = [
    'EmbedColors',
    'EmbedTemplate',
]
