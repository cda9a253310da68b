"""Immutable finite automata."""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from autcheck.alphabet.symbol import Symbol, SymbolTable
from autcheck.automaton.closure import epsilon_closure_of_set
from autcheck.automaton.state import State

logger = logging.getLogger(__name__)


class Automaton:
    """A finished, read-only NFA with epsilon transitions.

    Automata are produced by ``AutomatonBuilder.get_result()`` or by
    ``intersection()``. The constructor freezes every state it is given, so
    no state, edge or accept flag can change afterwards.

    Attributes:
        states: All states, ordered by index.
        start: The start state.
        alphabet: The symbol table the automaton was built over.
    """

    __slots__ = ("states", "start", "alphabet")

    def __init__(
        self, states: Sequence[State], start: State, alphabet: SymbolTable
    ) -> None:
        states = tuple(states)
        for position, state in enumerate(states):
            if state.index != position:
                raise ValueError(f"state {state!r} stored at position {position}")
        if not _owns(states, start):
            raise ValueError(f"start state {start!r} is not part of the automaton")
        for state in states:
            for label in state.labels():
                for target in state.transitions(label):
                    if not _owns(states, target):
                        raise ValueError(
                            f"edge {state!r} -{label!r}-> {target!r} leaves the automaton"
                        )

        for state in states:
            state.freeze()

        object.__setattr__(self, "states", states)
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "alphabet", alphabet)
        logger.debug(
            "Finished automaton: %d states, %d transitions",
            len(states),
            self.transition_count(),
        )

    @property
    def accept_states(self) -> List[State]:
        return [state for state in self.states if state.is_accept()]

    def size(self) -> int:
        """Return number of states."""
        return len(self.states)

    def transition_count(self) -> int:
        """Return total number of edges, epsilon edges included."""
        return sum(
            len(state.transitions(label))
            for state in self.states
            for label in state.labels()
        )

    def intersection(self, other: "Automaton") -> "Automaton":
        """Return an automaton accepting the words accepted by both automata.

        Neither operand is modified; the result owns fresh states.
        """
        from autcheck.automaton.product import intersect

        return intersect(self, other)

    def shortest_word(self, accept: bool = True) -> Optional[Tuple[Symbol, ...]]:
        """Return a shortest word that is (``accept``) or is not accepted.

        A rejected word is checked per reached state; see ``search.shortest_word``.

        Returns:
            The word as a tuple of symbols, or None if no such word exists.
        """
        from autcheck.automaton.search import shortest_word

        return shortest_word(self, accept)

    def shortest_example(self, accept: bool = True, separator: str = "") -> Optional[str]:
        """Return the shortest (not) accepted string, or None if there is none.

        Args:
            accept: True for an accepted string, False for a rejected one.
            separator: Text placed between consecutive symbol labels.
        """
        word = self.shortest_word(accept)
        if word is None:
            return None
        return separator.join(symbol.label for symbol in word)

    def accepts(self, word: Iterable[Union[str, Symbol]]) -> bool:
        """Check whether the automaton accepts a word.

        Acceptance is decided on epsilon closures. A label outside the
        alphabet makes the word rejected.
        """
        current = epsilon_closure_of_set([self.start])
        for item in word:
            label = item.label if isinstance(item, Symbol) else item
            if label not in self.alphabet:
                return False
            symbol = self.alphabet.lookup(label)
            current = epsilon_closure_of_set(
                target for state in current for target in state.transitions(symbol)
            )
            if not current:
                return False
        return any(state.is_accept() for state in current)

    def __setattr__(self, name, value):
        raise AttributeError("Automaton is immutable")

    def __delattr__(self, name):
        raise AttributeError("Automaton is immutable")

    def __repr__(self) -> str:
        return (
            f"Automaton(states={self.size()}, accepting={len(self.accept_states)}, "
            f"transitions={self.transition_count()})"
        )


def _owns(states: Tuple[State, ...], state: State) -> bool:
    return 0 <= state.index < len(states) and states[state.index] is state
