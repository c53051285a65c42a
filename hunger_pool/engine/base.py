"""
Hunger Pool - Engine Base Types

Enums, the single die record, and the aggregated pool evaluation shared by
every other engine module.
"""

import random
from dataclasses import dataclass
from enum import Enum


DIE_FACES = 10
MAX_REROLL_DICE = 3
BLOOD_SURGE_DICE = 2
MAX_POOL_DICE = 100


class DieKind(Enum):
    """Variant of a pool die."""
    NORMAL = "Normal"
    HUNGER = "Hunger"


class RollResult(Enum):
    """Outcome of a single die."""
    FAIL = "Fail"
    SUCCESS = "Success"
    CRITICAL_SUCCESS = "Critical Success"
    BESTIAL_FAIL = "Bestial Fail"


class ResultLabel(Enum):
    """Outcome of a whole pool against its difficulty."""
    SUCCESS = "Success"
    CRITICAL_SUCCESS = "Critical Success"
    MESSY_CRITICAL = "Messy Critical"
    FAILURE = "Failure"
    BESTIAL_FAILURE = "Bestial Failure"


@dataclass
class Die:
    """
    A single d10 in the pool.

    Attributes:
        kind: Normal or Hunger, fixed at creation
        value: Current face (0 until the first roll, then 1-10)
    """
    kind: DieKind = DieKind.NORMAL
    value: int = 0

    def __setattr__(self, name: str, value: object) -> None:
        if name == "kind" and "kind" in self.__dict__:
            raise AttributeError("Die kind cannot change once created")
        super().__setattr__(name, value)

    @property
    def is_hunger(self) -> bool:
        return self.kind is DieKind.HUNGER

    def roll(self, rng: random.Random) -> int:
        """Roll the die and return the new face."""
        self.value = rng.randint(1, DIE_FACES)
        return self.value

    def classify(self) -> RollResult:
        """
        Classify the current face.

        Normal: 10 critical, 6-9 success, anything else fail.
        Hunger: same, except a 1 is a bestial fail.
        """
        if self.value == DIE_FACES:
            return RollResult.CRITICAL_SUCCESS
        if self.kind is DieKind.HUNGER and self.value == 1:
            return RollResult.BESTIAL_FAIL
        if 6 <= self.value < DIE_FACES:
            return RollResult.SUCCESS
        return RollResult.FAIL


@dataclass(frozen=True)
class PoolEvaluation:
    """
    Aggregated counts for a pool.

    Attributes:
        success_count: Successes including the critical pairing bonus
        critical_count: Number of dice showing a critical
        hunger_crit_present: A Hunger die rolled a critical
        hunger_bestial_fail_present: A Hunger die rolled a bestial fail
    """
    success_count: int = 0
    critical_count: int = 0
    hunger_crit_present: bool = False
    hunger_bestial_fail_present: bool = False
