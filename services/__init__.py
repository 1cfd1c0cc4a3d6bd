"""
Business logic services for the dice bot

Service layer providing clean interfaces to data operations.
"""

from .character_service import CharacterService, character_service

__all__ = [
    'CharacterService', 'character_service',
]
