"""Epsilon closures."""

from collections import deque
from typing import FrozenSet, Iterable, Set

from autcheck.alphabet.symbol import EPSILON
from autcheck.automaton.state import State


def epsilon_closure(state: State) -> FrozenSet[State]:
    """Compute the states reachable from ``state`` using only epsilon edges.

    The closure always contains ``state`` itself. Epsilon cycles are allowed;
    every state is visited at most once.
    """
    closure: Set[State] = {state}
    queue = deque([state])

    while queue:
        current = queue.popleft()
        for target in current.transitions(EPSILON):
            if target not in closure:
                closure.add(target)
                queue.append(target)

    return frozenset(closure)


def epsilon_closure_of_set(states: Iterable[State]) -> FrozenSet[State]:
    """Compute the union of the epsilon closures of several states."""
    result: Set[State] = set()
    for state in states:
        if state not in result:
            result |= epsilon_closure(state)
    return frozenset(result)
