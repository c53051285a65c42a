"""
Hunger Pool - Outcome Classifier

Maps evaluated counts and a difficulty to a ResultLabel.
"""

from hunger_pool.engine.base import PoolEvaluation, ResultLabel


def is_success(success_count: int, difficulty: int) -> bool:
    """Difficulty 0 means any success passes."""
    if difficulty == 0:
        return success_count > 0
    return success_count >= difficulty


def classify(
    success_count: int,
    critical_count: int,
    hunger_crit_present: bool,
    hunger_bestial_fail_present: bool,
    difficulty: int,
) -> ResultLabel:
    """
    Classify a pool result.

    Pass/fail is decided first. A pass with two or more criticals is a
    critical success, downgraded to messy if any Hunger die crit. A fail is
    bestial if any Hunger die showed a 1.
    """
    if is_success(success_count, difficulty):
        if critical_count < 2:
            return ResultLabel.SUCCESS
        if hunger_crit_present:
            return ResultLabel.MESSY_CRITICAL
        return ResultLabel.CRITICAL_SUCCESS

    if hunger_bestial_fail_present:
        return ResultLabel.BESTIAL_FAILURE
    return ResultLabel.FAILURE


def classify_evaluation(evaluation: PoolEvaluation, difficulty: int) -> ResultLabel:
    """Convenience wrapper taking a PoolEvaluation."""
    return classify(
        evaluation.success_count,
        evaluation.critical_count,
        evaluation.hunger_crit_present,
        evaluation.hunger_bestial_fail_present,
        difficulty,
    )
