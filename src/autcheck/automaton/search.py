"""Breadth-first search for shortest witness words."""

import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, FrozenSet, Optional, Set, Tuple

from autcheck.alphabet.symbol import Symbol
from autcheck.automaton.closure import epsilon_closure
from autcheck.automaton.state import State, ordered

if TYPE_CHECKING:
    from autcheck.automaton.automaton import Automaton

logger = logging.getLogger(__name__)

Word = Tuple[Symbol, ...]


def _matches(closure: FrozenSet[State], accept: bool) -> bool:
    """Check whether a configuration has the requested acceptance kind."""
    accepting = any(state.is_accept() for state in closure)
    return accepting if accept else not accepting


def shortest_word(automaton: "Automaton", accept: bool = True) -> Optional[Word]:
    """Find a shortest word that is (or, if ``accept`` is False, is not) accepted.

    The search runs breadth-first over the number of consumed symbols.
    Each dequeued state is examined through its epsilon closure: the word is
    a match when the closure contains an accepting state (``accept=True``) or
    contains none (``accept=False``). Symbol moves are then taken from every
    member of the closure, so epsilon moves never lengthen a word.

    Symbols are tried in alphabet order and states in index order, which
    makes the result reproducible. Which of several equally short words is
    returned is otherwise unspecified.

    With ``accept=False`` the check is made per reached state, not on the
    set of all states the word can reach. In a nondeterministic automaton the
    returned word may therefore still be accepted through another path;
    check ``Automaton.accepts()`` before treating it as a non-member.

    Returns:
        The word as a tuple of symbols, or None if no such word exists.
    """
    start = automaton.start
    visited: Set[State] = {start}
    queue: Deque[Tuple[State, Word]] = deque([(start, ())])

    while queue:
        state, word = queue.popleft()
        closure = epsilon_closure(state)
        if _matches(closure, accept):
            logger.debug("Found %s word of length %d", _kind(accept), len(word))
            return word

        visited |= closure
        members = ordered(closure)
        for symbol in automaton.alphabet:
            for member in members:
                for target in ordered(member.transitions(symbol)):
                    if target not in visited:
                        visited.add(target)
                        queue.append((target, word + (symbol,)))

    logger.debug("No %s word exists", _kind(accept))
    return None


def _kind(accept: bool) -> str:
    return "accepted" if accept else "rejected"
