"""Automaton module: states, construction, intersection and search."""

from autcheck.automaton.state import State
from autcheck.automaton.automaton import Automaton
from autcheck.automaton.builder import AutomatonBuilder
from autcheck.automaton.closure import epsilon_closure, epsilon_closure_of_set
from autcheck.automaton.product import intersect
from autcheck.automaton.search import shortest_word

__all__ = [
    "State",
    "Automaton",
    "AutomatonBuilder",
    "epsilon_closure",
    "epsilon_closure_of_set",
    "intersect",
    "shortest_word",
]
