"""
Hunger Pool - Pool Evaluator

Turns a sequence of rolled dice into success and critical counts.
"""

from typing import Iterable

from hunger_pool.engine.base import Die, PoolEvaluation, RollResult


def critical_bonus(critical_count: int) -> int:
    """
    Successes contributed by criticals.

    Each pair of criticals is worth 4, a leftover single critical is worth 1.
    0, 1, 2, 3, 4 criticals give 0, 1, 4, 5, 8.
    """
    return critical_count * 2 - critical_count % 2


def evaluate(dice: Iterable[Die]) -> PoolEvaluation:
    """
    Aggregate a pool into a PoolEvaluation.

    Args:
        dice: Dice in pool order (current values are read, nothing is rolled)

    Returns:
        PoolEvaluation with the critical pairing bonus already applied
    """
    successes = 0
    criticals = 0
    hunger_crit = False
    hunger_bestial_fail = False

    for die in dice:
        result = die.classify()
        if result is RollResult.SUCCESS:
            successes += 1
        elif result is RollResult.CRITICAL_SUCCESS:
            criticals += 1
            if die.is_hunger:
                hunger_crit = True
        elif result is RollResult.BESTIAL_FAIL:
            hunger_bestial_fail = True

    return PoolEvaluation(
        success_count=successes + critical_bonus(criticals),
        critical_count=criticals,
        hunger_crit_present=hunger_crit,
        hunger_bestial_fail_present=hunger_bestial_fail,
    )
