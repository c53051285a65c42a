"""
Hunger Pool Game Engine.

Pure Python game logic with zero UI/config dependencies.
Handles dice rolling, pool evaluation, outcome classification and the
reroll / blood surge rules.
"""

from hunger_pool.engine.base import (
    BLOOD_SURGE_DICE,
    DIE_FACES,
    MAX_REROLL_DICE,
    Die,
    DieKind,
    PoolEvaluation,
    ResultLabel,
    RollResult,
)
from hunger_pool.engine.errors import (
    AlreadyUsed,
    ConflictingAction,
    EmptyPool,
    GameError,
    IllegalDie,
    InsufficientDice,
    OutOfRange,
    ParseError,
)
from hunger_pool.engine.evaluator import critical_bonus, evaluate
from hunger_pool.engine.game import Game, rouse_check
from hunger_pool.engine.outcome import classify, classify_evaluation

__all__ = [
    # Constants
    "BLOOD_SURGE_DICE",
    "DIE_FACES",
    "MAX_REROLL_DICE",
    # Data Classes
    "Die",
    "PoolEvaluation",
    # Enums
    "DieKind",
    "ResultLabel",
    "RollResult",
    # Errors
    "GameError",
    "ParseError",
    "OutOfRange",
    "IllegalDie",
    "InsufficientDice",
    "AlreadyUsed",
    "ConflictingAction",
    "EmptyPool",
    # Evaluation
    "critical_bonus",
    "evaluate",
    "classify",
    "classify_evaluation",
    # Game
    "Game",
    "rouse_check",
]
