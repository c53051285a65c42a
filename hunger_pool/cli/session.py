"""
Hunger Pool - Command Session

Owns the single Game for an interactive session and writes the text
protocol for each command. Rejected commands print one diagnostic line
and leave the game untouched.
"""

import logging
import random
from typing import Iterable, TextIO

from hunger_pool.cli.commands import (
    BloodSurgeCommand,
    Command,
    QuitCommand,
    RerollCountCommand,
    RerollIndexesCommand,
    RouseCheckCommand,
    SetupCommand,
    parse_line,
)
from hunger_pool.engine import Game, GameError, rouse_check

logger = logging.getLogger(__name__)

ROLL_START = "-------------ROLL START-------------"
ROLL_END = "-------------ROLL END---------------"
ROUSE_START = "-------------ROUSE CHECK-------------"
ROUSE_END = "-------------------------------------"
EXIT = "Exit"


class Session:
    """
    A sequential command loop around one Game.

    Args:
        out: Stream the protocol is written to
        rng: Random source shared by the main game and rouse checks
    """

    def __init__(self, out: TextIO, rng: random.Random | None = None) -> None:
        self.out = out
        self.rng = rng if rng is not None else random.Random()
        self.game = Game(rng=self.rng)

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def handle_line(self, line: str) -> bool:
        """
        Process one input line.

        Returns:
            False once the session should stop, True otherwise
        """
        try:
            command = parse_line(line)
        except GameError as exc:
            self._reject(line, exc)
            return True

        if command is None:
            return True
        if isinstance(command, QuitCommand):
            return False

        self._print(ROLL_START)
        try:
            self.execute(command)
        except GameError as exc:
            logger.debug("Rejected %r: %s", line.strip(), exc)
            self._print(str(exc))
        self._print(ROLL_END)
        return True

    def _reject(self, line: str, exc: GameError) -> None:
        logger.debug("Unparseable input %r: %s", line.strip(), exc)
        self._print(ROLL_START)
        self._print(str(exc))
        self._print(ROLL_END)

    def execute(self, command: Command) -> None:
        """Run a parsed command against the game and print the result."""
        if isinstance(command, SetupCommand):
            self.game.setup(command.total, command.hunger, command.difficulty)
            self.game.roll()
            self._print(self.game.render())
        elif isinstance(command, RerollCountCommand):
            self.game.can_reroll_count(command.count)
            self.game.reroll_count(command.count)
            self._print(self.game.render())
        elif isinstance(command, RerollIndexesCommand):
            self.game.can_reroll_by_index(command.indexes)
            self.game.reroll_by_index(command.indexes)
            self._print(self.game.render())
        elif isinstance(command, BloodSurgeCommand):
            self.game.can_grow_pool()
            self._print(ROUSE_START)
            self._print(f"Rouse Check {rouse_check(self.rng).render()}")
            self._print(ROUSE_END)
            self.game.grow_pool()
            self._print(self.game.render())
        elif isinstance(command, RouseCheckCommand):
            self._print(rouse_check(self.rng).render())
        else:
            raise TypeError(f"Unknown command {command!r}")

    def run(self, lines: Iterable[str]) -> None:
        """Consume lines until 'q' or end of input, then print Exit."""
        for line in lines:
            if not self.handle_line(line):
                break
        self._print(EXIT)
