"""
Hunger Pool - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable, Iterable

import pytest

from hunger_pool.engine import Game


class ScriptedRng:
    """
    Stand-in random source returning predetermined faces.

    Only randint() is used by the engine. Running out of faces is a test
    bug, so it raises instead of inventing values.
    """

    def __init__(self, faces: Iterable[int] = ()) -> None:
        self.faces = list(faces)
        self.calls = 0

    def push(self, *faces: int) -> None:
        self.faces.extend(faces)

    def randint(self, a: int, b: int) -> int:
        if not self.faces:
            raise AssertionError("ScriptedRng ran out of faces")
        self.calls += 1
        value = self.faces.pop(0)
        assert a <= value <= b
        return value


@pytest.fixture
def rng() -> ScriptedRng:
    """An empty scripted random source; push faces before rolling."""
    return ScriptedRng()


@pytest.fixture
def rolled_game(rng: ScriptedRng) -> Callable[..., Game]:
    """
    Factory for a set-up and rolled Game with forced faces.

    Usage: rolled_game(total, hunger, difficulty, faces)
    Faces are consumed in pool order. The returned game keeps using the
    same scripted source, so push more faces before rerolls.
    """

    def _make(total: int, hunger: int, difficulty: int, faces: Iterable[int]) -> Game:
        game = Game(rng=rng)
        game.setup(total, hunger, difficulty)
        rng.push(*faces)
        game.roll()
        return game

    return _make


# =============================================================================
# RULE TABLES
# =============================================================================

@pytest.fixture
def normal_face_results() -> dict[int, str]:
    """Expected Normal die outcome name for every face."""
    return {
        1: "Fail", 2: "Fail", 3: "Fail", 4: "Fail", 5: "Fail",
        6: "Success", 7: "Success", 8: "Success", 9: "Success",
        10: "Critical Success",
    }


@pytest.fixture
def hunger_face_results(normal_face_results: dict[int, str]) -> dict[int, str]:
    """Expected Hunger die outcome name for every face."""
    return {**normal_face_results, 1: "Bestial Fail"}
