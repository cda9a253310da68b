"""Step-by-step construction of automata from named declarations."""

from typing import Dict, List, Optional

from autcheck.alphabet.symbol import SymbolTable
from autcheck.automaton.automaton import Automaton
from autcheck.automaton.state import State
from autcheck.exceptions import (
    AlreadyFinishedError,
    InvalidArgumentError,
    NoStartStateError,
)


class AutomatonBuilder:
    """Builds an ``Automaton`` from state, transition and accept declarations.

    States are referred to by name while building. The first reference to a
    name creates its state; later references reuse it. Declarations may come
    in any order. ``get_result()`` finishes the automaton exactly once and
    drops the names; every later call on the builder raises
    ``AlreadyFinishedError``.

    A rejected call leaves the builder unchanged.

    Example:
        >>> builder = AutomatonBuilder(SymbolTable(["X"]))
        >>> builder.set_start_state("q0")
        >>> builder.add_transition("q0", "q1", "X")
        >>> builder.add_accept_state("q1")
        >>> builder.get_result().shortest_example()
        'X'
    """

    def __init__(self, alphabet: SymbolTable) -> None:
        self.alphabet = alphabet
        self._states: List[State] = []
        self._names: Optional[Dict[str, int]] = {}
        self._start: Optional[State] = None

    @property
    def finished(self) -> bool:
        return self._names is None

    def add_state(self, name: str) -> None:
        """Declare a state, creating it if it does not exist yet."""
        self._check_open()
        self._resolve(self._validate_name(name))

    def add_accept_state(self, name: str) -> None:
        """Declare a state and mark it accepting."""
        self._check_open()
        self._resolve(self._validate_name(name)).set_accept(True)

    def add_transition(
        self, source: str, destination: str, label: Optional[str] = None
    ) -> None:
        """Declare an edge from ``source`` to ``destination``.

        Args:
            source: Name of the source state.
            destination: Name of the destination state.
            label: A label of the alphabet, or None (or "") for an epsilon edge.

        Raises:
            UnknownSymbolError: If the label is not part of the alphabet.
        """
        self._check_open()
        source = self._validate_name(source)
        destination = self._validate_name(destination)
        key = self.alphabet.resolve(label)
        self._resolve(source).add_transition(self._resolve(destination), key)

    def set_start_state(self, name: str) -> None:
        """Make the named state the start state, replacing any earlier choice."""
        self._check_open()
        self._start = self._resolve(self._validate_name(name))

    def get_result(self) -> Automaton:
        """Finish and return the automaton.

        Raises:
            NoStartStateError: If no start state was set.
            AlreadyFinishedError: If the automaton was already returned.
        """
        self._check_open()
        if self._start is None:
            raise NoStartStateError("no start state has been set")
        automaton = Automaton(self._states, self._start, self.alphabet)
        self._names = None
        self._states = []
        self._start = None
        return automaton

    def _check_open(self) -> None:
        if self._names is None:
            raise AlreadyFinishedError("the automaton has already been built")

    def _validate_name(self, name: str) -> str:
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError(f"invalid state name {name!r}")
        return name

    def _resolve(self, name: str) -> State:
        index = self._names.get(name)
        if index is None:
            index = self._names[name] = len(self._states)
            self._states.append(State(index))
        return self._states[index]
