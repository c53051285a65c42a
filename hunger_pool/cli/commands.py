"""
Hunger Pool - Command Parsing

Turns one input line into a command object. Lines are split on whitespace:

    <total> <hunger> [difficulty]   set up and roll a new pool
    r <n>                           reroll the first n Normal dice
    r - <idx> [idx ...]             reroll the dice at these indexes
    bs                              blood surge (with a rouse check)
    rc                              standalone rouse check
    q                               quit
"""

from dataclasses import dataclass

from hunger_pool.engine.errors import ParseError
from hunger_pool.engine.validators import parse_int, parse_ints


@dataclass(frozen=True)
class SetupCommand:
    total: int
    hunger: int
    difficulty: int = 0


@dataclass(frozen=True)
class RerollCountCommand:
    count: int


@dataclass(frozen=True)
class RerollIndexesCommand:
    indexes: tuple[int, ...]


@dataclass(frozen=True)
class BloodSurgeCommand:
    pass


@dataclass(frozen=True)
class RouseCheckCommand:
    pass


@dataclass(frozen=True)
class QuitCommand:
    pass


Command = (
    SetupCommand
    | RerollCountCommand
    | RerollIndexesCommand
    | BloodSurgeCommand
    | RouseCheckCommand
    | QuitCommand
)

_KEYWORDS = {
    "bs": BloodSurgeCommand,
    "rc": RouseCheckCommand,
    "q": QuitCommand,
}


def parse_line(line: str) -> Command | None:
    """
    Parse a single input line.

    Returns:
        The command, or None for a blank line

    Raises:
        ParseError: If the line is malformed
    """
    tokens = line.split()
    if not tokens:
        return None

    head, args = tokens[0], tokens[1:]

    if head in _KEYWORDS:
        if args:
            raise ParseError(f"'{head}' takes no arguments")
        return _KEYWORDS[head]()

    if head == "r":
        return _parse_reroll(args)

    return _parse_setup(tokens)


def _parse_reroll(args: list[str]) -> Command:
    if not args:
        raise ParseError("Reroll needs a count or '-' followed by indexes")

    if args[0] == "-":
        if len(args) == 1:
            raise ParseError("Reroll by index needs at least one index")
        return RerollIndexesCommand(indexes=parse_ints(args[1:], "index"))

    if len(args) != 1:
        raise ParseError("Reroll by count takes exactly one number")
    return RerollCountCommand(count=parse_int(args[0], "reroll count"))


def _parse_setup(tokens: list[str]) -> SetupCommand:
    if not 2 <= len(tokens) <= 3:
        raise ParseError("Wrong input: expected <total> <hunger> [difficulty]")

    total = parse_int(tokens[0], "total dice")
    hunger = parse_int(tokens[1], "hunger dice")
    difficulty = parse_int(tokens[2], "difficulty") if len(tokens) == 3 else 0
    return SetupCommand(total=total, hunger=hunger, difficulty=difficulty)
