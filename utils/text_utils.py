"""
Text Utility Functions

Renders roll results and character sheets as Discord message text.
"""
from typing import Dict, List, Optional

from models.character import Character, Health
from models.roll import AttribRollResult, Roll

NOT_FOUND_WARNING = "Warning: these attributes were not found and defaulted to 0: "


def count_successes(rolls: List[Roll]) -> str:
    """
    Success count prefix for a roll listing.

    Examples:
        >>> count_successes([Roll(10), Roll(8)])
        '2 successes: '
        >>> count_successes([Roll(9)])
        '1 success: '
    """
    count = sum(1 for roll in rolls if roll.is_success)
    noun = "success" if count == 1 else "successes"
    return f"{count} {noun}: "


def format_rolls(rolls: List[Roll]) -> str:
    """Join rolls in generation order, bonus dice parenthesized."""
    return ', '.join(str(roll) for roll in rolls)


def _successes_and_listing(rolls: List[Roll]) -> str:
    listing = format_rolls(rolls)
    if not listing:
        return count_successes(rolls)
    return f"{count_successes(rolls)}`{listing}`"


def format_chance_result(roll: Roll) -> str:
    """Chance dice only succeed on a 10."""
    if roll.value == 10:
        return "rolled a chance die and succeeded!"
    return f"rolled a chance die and failed: {roll.value}"


def format_pool_result(pool: int, rolls: List[Roll]) -> str:
    return f"rolled {pool} dice and got {_successes_and_listing(rolls)}"


def format_attribute_result(result: AttribRollResult, rolls: List[Roll]) -> str:
    """
    Render an attribute roll with its pool breakdown.

    The breakdown follows the order attributes appeared in the expression.
    Unresolved names are listed in a trailing warning.
    """
    breakdown = ', '.join(f"{name} = {value}" for name, value in result.attributes.items())
    text = f"rolled {result.pool} dice [{breakdown}] and got {_successes_and_listing(rolls)}"
    if result.attributes_not_found:
        text += "\n\n" + NOT_FOUND_WARNING + ', '.join(result.attributes_not_found)
    return text


def format_health(health: Health) -> List[str]:
    if health.max == 0:
        return ["No health info"]
    boxes = '|'.join(health.boxes())
    return [f"Health (max {health.max}):", f"|{boxes}|"]


def _format_stat_table(stats: Dict[str, int]) -> List[str]:
    # Two columns, filled top to bottom then left to right
    items = sorted(stats.items())
    rows = (len(items) + 1) // 2
    width = max(len("Name"), *(len(name) for name, _ in items))
    header_cell = f"{'Name':<{width}}  Value"
    lines = [f"{header_cell}    {header_cell}", '-' * (len(header_cell) * 2 + 4)]
    for index in range(rows):
        name, value = items[index]
        line = f"{name:<{width}}  {value:>5}"
        if index + rows < len(items):
            other_name, other_value = items[index + rows]
            line += f"    {other_name:<{width}}  {other_value:>5}"
        lines.append(line)
    return lines


def format_character_sheet(character: Character) -> str:
    """Plain-text character sheet: health track then a two-column stat table."""
    lines = [character.name, '']
    lines.extend(format_health(character.health))
    lines.append('')
    if character.stats:
        lines.append("Stats:")
        lines.extend(_format_stat_table(character.stats))
    else:
        lines.append("No stats info")
    return '\n'.join(lines)


def split_message(text: str, limit: int = 2000, wrapper: Optional[str] = None) -> List[str]:
    """
    Split text into Discord-sized messages on line boundaries.

    Args:
        text: Text to split
        limit: Maximum characters per message, including the wrapper
        wrapper: Optional fence (e.g. "```") placed around every chunk

    Returns:
        Message chunks in order; lines longer than the limit are hard-split
    """
    overhead = 2 * (len(wrapper) + 1) if wrapper else 0
    max_length = limit - overhead
    if max_length <= 0:
        raise ValueError(f"Message limit {limit} is too small for wrapper {wrapper!r}")

    chunks: List[str] = []
    current = ''
    for line in text.split('\n'):
        while len(line) > max_length:
            if current:
                chunks.append(current)
                current = ''
            chunks.append(line[:max_length])
            line = line[max_length:]
        candidate = f"{current}\n{line}" if current else line
        if current and len(candidate) > max_length:
            chunks.append(current)
            current = line
        else:
            current = candidate
    if current or not chunks:
        chunks.append(current)

    if wrapper:
        return [f"{wrapper}\n{chunk}\n{wrapper}" for chunk in chunks]
    return chunks
