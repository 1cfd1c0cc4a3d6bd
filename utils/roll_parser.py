"""
Roll Expression Parsing

Turns free-text roll expressions such as "strength + athletics - 1 9again" into
a signed dice pool, resolving attribute names against a character.
"""
import re
from typing import Optional, Tuple

from models.character import Character
from models.roll import AttribRollResult
from utils.dice_utils import CHANCE, NUMERIC_PATTERN, resolve_modifier

AGAIN_PATTERN = re.compile(r'^(?:no)?\d+again$')
DEFAULT_AGAIN = "10again"


def extract_again_token(line: str) -> Tuple[str, Optional[str]]:
    """Pull the first re-roll keyword out of a line.

    Returns:
        (line without the keyword, keyword or None)
    """
    parts = line.split()
    for index, part in enumerate(parts):
        if AGAIN_PATTERN.match(part):
            return ' '.join(parts[:index] + parts[index + 1:]), part
    return line, None


def is_direct_pool(expression: str) -> bool:
    """Whether the expression is a bare dice count or the chance keyword.

    The re-roll keyword is ignored; anything else (attribute names, arithmetic)
    has to go through parse_attribute_roll.
    """
    line, _ = extract_again_token(expression)
    parts = line.split()
    return len(parts) == 1 and (parts[0] == CHANCE or bool(NUMERIC_PATTERN.match(parts[0])))


def parse_attribute_roll(character: Character, line: str) -> AttribRollResult:
    """Evaluate an attribute roll expression against a character.

    Unknown attribute names count as 0 and are reported in
    `attributes_not_found` (original spelling, in the order they appear).

    Examples:
        "strength + athletics - 1 9again" with strength=3, athletics=1
        -> pool 3, modifier AGAIN_9
    """
    line, again_token = extract_again_token(line)
    modifier = resolve_modifier(again_token or DEFAULT_AGAIN)

    # "strength-1" and "strength - 1" tokenize the same
    line = line.replace('+', ' + ').replace('-', ' - ')

    result = AttribRollResult(pool=0, modifier=modifier)
    multiplier = 1
    for part in line.split():
        if part == '-':
            multiplier = -1
            continue
        if NUMERIC_PATTERN.match(part):
            result.pool += int(part) * multiplier
        elif part != '+':
            found, value = character.get_value(part)
            if found:
                result.attributes[part] = value
            else:
                result.attributes_not_found.append(part)
            result.pool += value * multiplier
        multiplier = 1

    return result
