"""
Roll result types

Plain dataclasses: rolls are transient and never persisted.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List


class RollModifier(Enum):
    """Which die faces trigger a re-roll."""
    AGAIN_10 = "10again"
    AGAIN_9 = "9again"
    AGAIN_8 = "8again"
    NO_AGAIN = "no10again"


@dataclass
class Roll:
    """A single d10 result. Bonus dice come from a re-roll trigger."""
    value: int
    is_bonus: bool = False

    @property
    def is_success(self) -> bool:
        return self.value > 7

    def __str__(self) -> str:
        if self.is_bonus:
            return f"({self.value})"
        return str(self.value)


@dataclass
class AttribRollResult:
    """Outcome of evaluating an attribute roll expression."""
    pool: int
    modifier: RollModifier
    attributes: Dict[str, int] = field(default_factory=dict)
    attributes_not_found: List[str] = field(default_factory=list)
