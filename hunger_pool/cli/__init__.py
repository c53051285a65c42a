"""
Hunger Pool Command Loop.

Line-oriented text protocol over stdin/stdout around a single Game.
"""

from hunger_pool.cli.commands import parse_line
from hunger_pool.cli.session import Session

__all__ = ["Session", "parse_line"]
