"""
Data models for the dice bot

Pydantic models for persisted characters, dataclasses for transient rolls.
"""

from models.base import DiceBotBaseModel
from models.character import Character, CharacterStore, Health
from models.roll import AttribRollResult, Roll, RollModifier

__all__ = [
    'DiceBotBaseModel',
    'Character',
    'CharacterStore',
    'Health',
    'AttribRollResult',
    'Roll',
    'RollModifier',
]
