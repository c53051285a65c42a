"""
Hunger Pool - Game

The stateful dice pool for one roll cycle:

    setup -> roll -> (one reroll | one blood surge) -> render

Rules:
    - Hunger dice always sit at the end of a fresh pool
    - Hunger dice are never rerolled
    - Reroll (by index or by count) and blood surge are one-shot and
      mutually exclusive within a roll cycle
    - Every check runs before any mutation, so a rejected call leaves the
      pool exactly as it was
"""

import logging
import random
from dataclasses import replace
from typing import Sequence

from hunger_pool.engine.base import (
    BLOOD_SURGE_DICE,
    Die,
    DieKind,
    PoolEvaluation,
    ResultLabel,
)
from hunger_pool.engine.errors import (
    AlreadyUsed,
    ConflictingAction,
    EmptyPool,
    IllegalDie,
    InsufficientDice,
)
from hunger_pool.engine.evaluator import evaluate
from hunger_pool.engine.outcome import classify_evaluation
from hunger_pool.engine.validators import (
    validate_difficulty,
    validate_indexes,
    validate_pool_size,
    validate_reroll_count,
)

logger = logging.getLogger(__name__)


class Game:
    """
    A dice pool with its difficulty, one-shot flags and derived result.

    One instance is held per session and reset by setup(). Derived fields
    are recomputed after every mutation.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._dice: list[Die] = []
        self._difficulty = 0
        self._used_reroll = False
        self._used_blood_surge = False
        self._evaluation = PoolEvaluation()
        self._result: ResultLabel | None = None

    # --- read-only state -------------------------------------------------

    @property
    def dice(self) -> tuple[Die, ...]:
        """Copies of the pool dice; changing them does not touch the game."""
        return tuple(replace(die) for die in self._dice)

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @property
    def used_reroll(self) -> bool:
        return self._used_reroll

    @property
    def used_blood_surge(self) -> bool:
        return self._used_blood_surge

    @property
    def success_count(self) -> int:
        return self._evaluation.success_count

    @property
    def critical_count(self) -> int:
        return self._evaluation.critical_count

    @property
    def hunger_crit_present(self) -> bool:
        return self._evaluation.hunger_crit_present

    @property
    def hunger_bestial_fail_present(self) -> bool:
        return self._evaluation.hunger_bestial_fail_present

    @property
    def result(self) -> ResultLabel | None:
        """None until the pool has been evaluated once."""
        return self._result

    @property
    def normal_dice_count(self) -> int:
        return sum(1 for die in self._dice if not die.is_hunger)

    # --- lifecycle -------------------------------------------------------

    def setup(self, total_dice: int, hunger_dice: int, difficulty: int = 0) -> None:
        """
        Replace the pool with fresh, unrolled dice.

        Args:
            total_dice: Pool size
            hunger_dice: How many of the pool are Hunger dice (placed last)
            difficulty: Successes required, 0 for "any success"

        Raises:
            OutOfRange: If the counts or difficulty are invalid
        """
        normal_dice, hunger_dice = validate_pool_size(total_dice, hunger_dice)
        difficulty = validate_difficulty(difficulty)

        self._dice = [Die(DieKind.NORMAL) for _ in range(normal_dice)]
        self._dice.extend(Die(DieKind.HUNGER) for _ in range(hunger_dice))
        self._difficulty = difficulty
        self._used_reroll = False
        self._used_blood_surge = False
        self._evaluation = PoolEvaluation()
        self._result = None
        logger.debug(
            "Setup pool: %d normal, %d hunger, difficulty %d",
            normal_dice, hunger_dice, difficulty,
        )

    def roll(self) -> ResultLabel:
        """Roll every die and start a new roll cycle."""
        for die in self._dice:
            die.roll(self._rng)
        self._used_reroll = False
        self._used_blood_surge = False
        return self._evaluate()

    # --- reroll ----------------------------------------------------------

    def can_reroll_by_index(self, indexes: Sequence[int]) -> None:
        """
        Raises:
            OutOfRange: If an index does not address a die
            IllegalDie: If an index addresses a Hunger die
        """
        for idx in validate_indexes(indexes, len(self._dice)):
            if self._dice[idx].is_hunger:
                raise IllegalDie(f"Index {idx} is a Hunger die and cannot be rerolled.")

    def reroll_by_index(self, indexes: Sequence[int]) -> ResultLabel:
        """
        Reroll the dice at the given indexes. A repeated index is rolled
        again, the last roll wins.

        Raises:
            OutOfRange, IllegalDie: See can_reroll_by_index
            AlreadyUsed: If a reroll was already spent this cycle
            ConflictingAction: If blood surge was used this cycle
        """
        self.can_reroll_by_index(indexes)
        self._check_reroll_available()

        for idx in indexes:
            self._dice[idx].roll(self._rng)
        self._used_reroll = True
        logger.debug("Rerolled indexes %s", list(indexes))
        return self._evaluate()

    def can_reroll_count(self, count: int) -> None:
        """
        Raises:
            OutOfRange: If count is not 1-3
            InsufficientDice: If there are fewer Normal dice than count
        """
        validate_reroll_count(count)
        available = self.normal_dice_count
        if available < count:
            raise InsufficientDice(
                f"Not enough dice to reroll: wanted {count}, have {available} normal."
            )

    def reroll_count(self, count: int) -> ResultLabel:
        """
        Reroll the first `count` Normal dice in pool order.

        Raises:
            OutOfRange, InsufficientDice: See can_reroll_count
            AlreadyUsed: If a reroll was already spent this cycle
            ConflictingAction: If blood surge was used this cycle
        """
        self.can_reroll_count(count)
        self._check_reroll_available()

        targets = [i for i, die in enumerate(self._dice) if not die.is_hunger][:count]
        for idx in targets:
            self._dice[idx].roll(self._rng)
        self._used_reroll = True
        logger.debug("Rerolled first %d normal dice at %s", count, targets)
        return self._evaluate()

    def _check_reroll_available(self) -> None:
        if self._used_reroll:
            raise AlreadyUsed("Reroll was already used this roll.")
        if self._used_blood_surge:
            raise ConflictingAction("Cannot reroll, blood surge was used this roll.")

    # --- blood surge -----------------------------------------------------

    def can_grow_pool(self) -> None:
        """
        Raises:
            EmptyPool: If nothing has been set up yet
            AlreadyUsed: If blood surge was already used this cycle
            ConflictingAction: If a reroll was used this cycle
        """
        if not self._dice:
            raise EmptyPool("Need to roll first.")
        if self._used_blood_surge:
            raise AlreadyUsed("Blood surge was already used this roll.")
        if self._used_reroll:
            raise ConflictingAction("Cannot use blood surge, reroll was used this roll.")

    def grow_pool(self) -> ResultLabel:
        """Add freshly rolled Normal dice to the front of the pool."""
        self.can_grow_pool()

        surge = [Die(DieKind.NORMAL) for _ in range(BLOOD_SURGE_DICE)]
        for die in surge:
            die.roll(self._rng)
        self._dice[:0] = surge
        self._used_blood_surge = True
        logger.debug("Blood surge added %d dice, pool is now %d", len(surge), len(self._dice))
        return self._evaluate()

    # --- evaluation and output -------------------------------------------

    def _evaluate(self) -> ResultLabel:
        self._evaluation = evaluate(self._dice)
        self._result = classify_evaluation(self._evaluation, self._difficulty)
        logger.debug(
            "Evaluated pool: %s with %d successes (%d criticals)",
            self._result.value, self._evaluation.success_count,
            self._evaluation.critical_count,
        )
        return self._result

    def render(self) -> str:
        """One line per die, a blank line, then the result line."""
        lines = [
            f"{i} - {die.kind.value} Dice. {die.classify().value} ({die.value})"
            for i, die in enumerate(self._dice)
        ]
        label = self._result.value if self._result is not None else "Not rolled"
        lines.append("")
        lines.append(f"Roll Result: {label}! ({self.success_count})")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def rouse_check(rng: random.Random | None = None) -> Game:
    """Roll a throwaway rouse check: setup(1, 1, 0), a lone Hunger die."""
    game = Game(rng=rng)
    game.setup(1, 1, 0)
    game.roll()
    return game
