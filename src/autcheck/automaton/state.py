"""States of an automaton's transition graph."""

from typing import AbstractSet, Dict, FrozenSet, Iterable, List

from autcheck.alphabet.symbol import Label
from autcheck.exceptions import AlreadyFinishedError

_NO_STATES: FrozenSet["State"] = frozenset()


class State:
    """A node of the transition graph.

    A state belongs to exactly one automaton. Its ``index`` is its position
    in that automaton's state list and is the only identity it keeps once
    the automaton is finished.

    Attributes:
        index: Position of the state in its owner's state list.
    """

    __slots__ = ("index", "_accept", "_transitions", "_frozen")

    def __init__(self, index: int, accept: bool = False) -> None:
        self.index = index
        self._accept = accept
        self._transitions: Dict[Label, AbstractSet["State"]] = {}
        self._frozen = False

    def add_transition(self, destination: "State", label: Label) -> None:
        """Add an edge to ``destination`` on ``label`` (a symbol or EPSILON)."""
        self._check_mutable()
        targets = self._transitions.get(label)
        if targets is None:
            targets = self._transitions[label] = set()
        targets.add(destination)

    def transitions(self, label: Label) -> AbstractSet["State"]:
        """Return the destinations reached on ``label``; empty if there are none."""
        return self._transitions.get(label, _NO_STATES)

    def labels(self) -> List[Label]:
        """Return the labels this state has outgoing edges on."""
        return list(self._transitions)

    def set_accept(self, accept: bool) -> None:
        self._check_mutable()
        self._accept = accept

    def is_accept(self) -> bool:
        return self._accept

    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the state read-only."""
        if self._frozen:
            return
        self._transitions = {
            label: frozenset(targets) for label, targets in self._transitions.items()
        }
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise AlreadyFinishedError("state belongs to a finished automaton")

    def __repr__(self) -> str:
        flag = ", accept" if self._accept else ""
        return f"State({self.index}{flag})"


def ordered(states: Iterable[State]) -> List[State]:
    """Return states sorted by index, for reproducible iteration."""
    return sorted(states, key=lambda state: state.index)
