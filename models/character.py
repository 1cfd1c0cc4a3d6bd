"""
Character models for the attribute store

A character owns a flat map of lower-cased stat names to integers plus a health
track. The store holds every character known to the bot and is persisted as a
single JSON document by services.character_service.
"""
from typing import Dict, List, Optional, Tuple

from pydantic import Field, model_serializer, model_validator

from models.base import DiceBotBaseModel


class Health(DiceBotBaseModel):
    """Health track for a character."""
    max: int = Field(0, ge=0, description="Total health boxes")
    bashing: int = Field(0, ge=0, description="Bashing damage boxes")
    lethal: int = Field(0, ge=0, description="Lethal damage boxes")
    aggravated: int = Field(0, ge=0, description="Aggravated damage boxes")

    @model_validator(mode='after')
    def validate_damage_fits(self):
        """Damage can never exceed the number of health boxes."""
        if self.damage > self.max:
            raise ValueError(
                f"Damage ({self.damage}) cannot exceed max health ({self.max})"
            )
        return self

    @property
    def damage(self) -> int:
        return self.bashing + self.lethal + self.aggravated

    @property
    def is_tracked(self) -> bool:
        """Whether any health information has been recorded."""
        return self.max > 0 or self.damage > 0

    def boxes(self) -> List[str]:
        """Health boxes, worst damage first, empty boxes last."""
        return (
            ['A'] * self.aggravated
            + ['L'] * self.lethal
            + ['B'] * self.bashing
            + [' '] * (self.max - self.damage)
        )


class Character(DiceBotBaseModel):
    """A single player character."""
    name: str = Field(..., description="Character name (the Discord username)")
    stats: Dict[str, int] = Field(default_factory=dict, description="Lower-cased stat name to value")
    health: Health = Field(default_factory=Health, description="Health track")

    @model_serializer(mode='wrap')
    def _omit_untracked_health(self, handler):
        data = handler(self)
        if not self.health.is_tracked:
            data.pop('health', None)
        return data

    def get_value(self, key: str) -> Tuple[bool, int]:
        """
        Look up a stat by name (case-insensitive).

        Returns:
            (found, value) - value is 0 when the stat is not stored, so callers can
            tell an absent stat apart from one stored as 0.
        """
        key = key.lower()
        if key in self.stats:
            return True, self.stats[key]
        return False, 0

    def set_value(self, key: str, value: int) -> None:
        """Store a stat under its lower-cased name, replacing any previous value."""
        self.stats[key.lower()] = value


class CharacterStore(DiceBotBaseModel):
    """All known characters, looked up by exact name."""
    characters: List[Character] = Field(default_factory=list)

    def get(self, name: str) -> Optional[Character]:
        """Get a stored character by exact name, or None."""
        for character in self.characters:
            if character.name == name:
                return character
        return None

    def get_or_create(self, name: str) -> Character:
        """
        Get a stored character by exact name, creating it when absent.

        The returned character is the stored instance, so edits to it are part of
        the store and are written out by the next save.
        """
        character = self.get(name)
        if character is None:
            character = Character(name=name)
            self.characters.append(character)
        return character

    get_mut = get_or_create

    def __len__(self) -> int:
        return len(self.characters)
