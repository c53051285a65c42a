"""
Hunger Pool - Engine Errors

Every error is recoverable: the game state is untouched when one is raised.
"""


class GameError(ValueError):
    """Base class for rejected game operations."""
    pass


class ParseError(GameError):
    """Raised when input is not an integer or has the wrong number of tokens"""
    pass


class OutOfRange(GameError):
    """Raised when an index, count or setup value is outside its bounds"""
    pass


class IllegalDie(GameError):
    """Raised when a Hunger die is picked for a reroll"""
    pass


class InsufficientDice(GameError):
    """Raised when the pool has fewer Normal dice than a reroll asks for"""
    pass


class AlreadyUsed(GameError):
    """Raised when a one-shot action was already spent this roll"""
    pass


class ConflictingAction(GameError):
    """Raised when reroll and blood surge are mixed in one roll"""
    pass


class EmptyPool(GameError):
    """Raised when the pool has no dice yet"""
    pass
