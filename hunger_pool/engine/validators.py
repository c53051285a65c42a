"""
Hunger Pool - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise a descriptive GameError.
"""

import re
from typing import Sequence

from hunger_pool.engine.base import MAX_POOL_DICE, MAX_REROLL_DICE
from hunger_pool.engine.errors import OutOfRange, ParseError

_INT_TOKEN = re.compile(r"-?[0-9]+")
_MAX_DIGITS = 18


def parse_int(token: str, name: str = "value") -> int:
    """
    Convert a single input token to an integer.

    Args:
        token: Raw text token
        name: Label used in the error message

    Returns:
        The parsed integer

    Raises:
        ParseError: If the token is not a base-10 integer
    """
    if not _INT_TOKEN.fullmatch(token):
        raise ParseError(f"{name} is not a number: {token!r}")
    if len(token.lstrip("-")) > _MAX_DIGITS:
        raise ParseError(f"{name} is too long: {token[:_MAX_DIGITS]}...")
    return int(token)


def parse_ints(tokens: Sequence[str], name: str = "index") -> tuple[int, ...]:
    """Convert every token to an integer, failing on the first bad one."""
    return tuple(parse_int(token, name) for token in tokens)


def validate_pool_size(total_dice: int, hunger_dice: int) -> tuple[int, int]:
    """
    Validate the dice counts for a new pool.

    Args:
        total_dice: Size of the whole pool
        hunger_dice: How many of those are Hunger dice

    Returns:
        (normal_dice, hunger_dice)

    Raises:
        OutOfRange: If a count is negative or hunger exceeds total
    """
    if total_dice < 0:
        raise OutOfRange(f"Total dice cannot be negative, got {total_dice}.")
    if total_dice > MAX_POOL_DICE:
        raise OutOfRange(f"Total dice cannot exceed {MAX_POOL_DICE}, got {total_dice}.")
    if hunger_dice < 0:
        raise OutOfRange(f"Hunger dice cannot be negative, got {hunger_dice}.")
    if hunger_dice > total_dice:
        raise OutOfRange(
            f"Hunger dice ({hunger_dice}) cannot exceed total dice ({total_dice})."
        )
    return total_dice - hunger_dice, hunger_dice


def validate_difficulty(difficulty: int) -> int:
    """Difficulty must be zero (just count successes) or positive."""
    if difficulty < 0:
        raise OutOfRange(f"Difficulty cannot be negative, got {difficulty}.")
    return difficulty


def validate_indexes(indexes: Sequence[int], dice_count: int) -> tuple[int, ...]:
    """
    Validate pool indexes. Duplicates are kept as given.

    Raises:
        OutOfRange: If any index does not address a die in the pool
    """
    for idx in indexes:
        if not (0 <= idx < dice_count):
            raise OutOfRange(f"Index {idx} is out of range for a pool of {dice_count}.")
    return tuple(indexes)


def validate_reroll_count(count: int) -> int:
    """Reroll-by-count accepts 1 to MAX_REROLL_DICE dice."""
    if not (1 <= count <= MAX_REROLL_DICE):
        raise OutOfRange(
            f"Reroll count must be between 1 and {MAX_REROLL_DICE}, got {count}."
        )
    return count
