"""
Dice Rolling Utilities

d10 dice-pool mechanics: re-roll modifiers, the chance die, and pool rolling
with chained bonus dice.
"""
import random
import re
from typing import List, Union

from models.roll import Roll, RollModifier

CHANCE = "chance"
DIE_SIDES = 10

NUMERIC_PATTERN = re.compile(r'^\d+$')


def resolve_modifier(token: str) -> RollModifier:
    """Map a re-roll keyword to its modifier.

    Matches by substring so the keyword can be found inside a whole message.
    Anything unrecognised (including an empty string) is the default 10-again.

    Examples:
        >>> resolve_modifier("9again")
        <RollModifier.AGAIN_9: '9again'>
        >>> resolve_modifier("")
        <RollModifier.AGAIN_10: '10again'>
    """
    if "no10again" in token:
        return RollModifier.NO_AGAIN
    if "9again" in token:
        return RollModifier.AGAIN_9
    if "8again" in token:
        return RollModifier.AGAIN_8
    return RollModifier.AGAIN_10


def roll_again(value: int, modifier: RollModifier) -> bool:
    """Whether a die showing `value` earns another die under `modifier`."""
    if modifier == RollModifier.AGAIN_10:
        return value == 10
    if modifier == RollModifier.AGAIN_9:
        return value >= 9
    if modifier == RollModifier.AGAIN_8:
        return value >= 8
    return False


def roll_die() -> int:
    return random.randint(1, DIE_SIDES)


def roll_dice(pool_spec: Union[str, int], modifier: RollModifier) -> List[Roll]:
    """Roll a pool of d10s.

    Args:
        pool_spec: "chance" for a single chance die, otherwise a non-negative
                   dice count (int or digit string)
        modifier: Re-roll policy applied to every die except the chance die

    Returns:
        Rolls in generation order; each original die is followed directly by the
        bonus dice it triggered.

    Raises:
        ValueError: If pool_spec is neither "chance" nor a non-negative count
    """
    if pool_spec == CHANCE:
        return [Roll(value=roll_die(), is_bonus=False)]

    if isinstance(pool_spec, str):
        if not NUMERIC_PATTERN.match(pool_spec):
            raise ValueError(f'Cannot roll dice pool **{pool_spec}**')
        pool_spec = int(pool_spec)
    if pool_spec < 0:
        raise ValueError(f'Cannot roll a negative dice pool ({pool_spec})')

    rolls = []
    for _ in range(pool_spec):
        is_bonus = False
        while True:
            value = roll_die()
            rolls.append(Roll(value=value, is_bonus=is_bonus))
            if not roll_again(value, modifier):
                break
            is_bonus = True

    return rolls
