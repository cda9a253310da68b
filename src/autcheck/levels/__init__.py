"""Levels module: constraint automata and the levels that apply them."""

from autcheck.levels.level import LEVELS, Level, Level0, Level1, Level2

__all__ = [
    "LEVELS",
    "Level",
    "Level0",
    "Level1",
    "Level2",
]
