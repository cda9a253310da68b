"""Game levels: a level is a list of constraints applied to a maze automaton."""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Optional, Type

from autcheck.alphabet.symbol import SymbolTable
from autcheck.automaton.automaton import Automaton
from autcheck.config import Config
from autcheck.levels import constraints
from autcheck.parser.aut_parser import AutomatonParser

logger = logging.getLogger(__name__)

Constraint = Callable[[SymbolTable], Automaton]


class Level(ABC):
    """Base class for all levels."""

    name: str = ""

    def __init__(self, config: Optional[Config] = None) -> None:
        self.config = config or Config.default()

    @abstractmethod
    def constraints(self) -> List[Constraint]:
        """Return the constraint factories of this level, in application order."""
        ...

    def apply_constraints(self, automaton: Automaton) -> Automaton:
        """Return the automaton restricted by every constraint of this level."""
        for constraint in self.constraints():
            automaton = automaton.intersection(constraint(automaton.alphabet))
            logger.info(
                "Applied %s: %d states", constraint.__name__, automaton.size()
            )
        return automaton

    def run(self, filename: str) -> Optional[str]:
        """Solve the maze in an '.aut' file.

        Returns:
            The shortest string accepted by the constrained maze, or None if
            the maze cannot be solved on this level.

        Raises:
            OSError: If the file cannot be read.
            AutcheckError: If the file is not a valid '.aut' file.
        """
        parser = AutomatonParser(filename, self.config)
        parser.parse()
        automaton = self.apply_constraints(parser.automaton())
        return automaton.shortest_example(True, self.config.separator)


class Level0(Level):
    """God Mode: the maze is solved as it is."""

    name = "God Mode"

    def constraints(self) -> List[Constraint]:
        return []


class Level1(Level):
    """Rincewind Level."""

    name = "Rincewind"

    def constraints(self) -> List[Constraint]:
        return [
            constraints.find_at_least_two_treasures,
            constraints.find_key_before_passing_through_gates,
            constraints.jump_in_river_when_passing_dragon_without_sword,
        ]


class Level2(Level):
    """Cohan Level."""

    name = "Cohan"

    def constraints(self) -> List[Constraint]:
        return [
            constraints.find_key_before_passing_through_gates,
            constraints.jump_in_river_when_passing_dragon_without_sword,
            constraints.find_no_treasures_after_dragon_has_been_passed,
            constraints.find_at_least_two_treasures_and_lose_all_when_passing_through_arc,
        ]


LEVELS: Dict[int, Type[Level]] = {0: Level0, 1: Level1, 2: Level2}
