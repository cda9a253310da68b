"""
autcheck - shortest witnesses for languages of finite automata.

Automata with epsilon transitions are built from named declarations,
intersected without determinization, and searched breadth-first for the
shortest word they accept (or reject).

Example usage:
    >>> from autcheck import AutomatonBuilder, SymbolTable
    >>> builder = AutomatonBuilder(SymbolTable(["X", "Y"]))
    >>> builder.set_start_state("q0")
    >>> builder.add_transition("q0", "q1", "X")
    >>> builder.add_accept_state("q1")
    >>> builder.get_result().shortest_example()
    'X'

Reading '.aut' files:
    >>> from autcheck import load_aut
    >>> load_aut("maze.aut").shortest_example()
"""

from autcheck.alphabet.symbol import EPSILON, Symbol, SymbolTable, intern
from autcheck.automaton.automaton import Automaton
from autcheck.automaton.builder import AutomatonBuilder
from autcheck.automaton.closure import epsilon_closure
from autcheck.automaton.state import State
from autcheck.config import Config
from autcheck.parser.aut_parser import AutomatonParser, load_aut, parse_aut
from autcheck.levels.level import LEVELS, Level, Level0, Level1, Level2
from autcheck.exceptions import (
    AlreadyFinishedError,
    AutcheckError,
    InvalidArgumentError,
    NoStartStateError,
    ParseError,
    UnknownSymbolError,
)

__version__ = "0.1.0"

__all__ = [
    # Alphabet
    "EPSILON",
    "Symbol",
    "SymbolTable",
    "intern",
    # Automata
    "Automaton",
    "AutomatonBuilder",
    "State",
    "epsilon_closure",
    # Configuration
    "Config",
    # Files
    "AutomatonParser",
    "load_aut",
    "parse_aut",
    # Levels
    "LEVELS",
    "Level",
    "Level0",
    "Level1",
    "Level2",
    # Exceptions
    "AutcheckError",
    "InvalidArgumentError",
    "UnknownSymbolError",
    "AlreadyFinishedError",
    "NoStartStateError",
    "ParseError",
    # Version
    "__version__",
]
