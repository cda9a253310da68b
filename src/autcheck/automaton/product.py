"""Cross-product construction for language intersection."""

import logging
from collections import deque
from typing import Deque, Dict, List, Tuple

from autcheck.alphabet.symbol import EPSILON
from autcheck.automaton.automaton import Automaton
from autcheck.automaton.state import State, ordered

logger = logging.getLogger(__name__)

StatePair = Tuple[State, State]


def intersect(left: Automaton, right: Automaton) -> Automaton:
    """Build the product automaton of ``left`` and ``right``.

    Product states are pairs (a, b) created on demand from the pair of start
    states and deduplicated by pair identity. A pair accepts when both of its
    components accept; epsilon-reachable acceptance is left to the search.

    Edges of a pair (a, b):

    - on a symbol s: (a, b) -> (a', b') for every a' in a.transitions(s) and
      b' in b.transitions(s), so both sides consume s together;
    - on epsilon: (a, b) -> (a', b) for every epsilon edge a -> a', and
      (a, b) -> (a, b') for every epsilon edge b -> b', so each side may take
      its silent moves alone.

    Only pairs reachable from the start pair are built. Neither operand is
    modified and the result shares no states with them.
    """
    alphabet = left.alphabet.merged(right.alphabet)
    states: List[State] = []
    pairs: Dict[StatePair, State] = {}
    queue: Deque[StatePair] = deque()

    def product_state(pair: StatePair) -> State:
        state = pairs.get(pair)
        if state is None:
            a, b = pair
            state = State(len(states), accept=a.is_accept() and b.is_accept())
            states.append(state)
            pairs[pair] = state
            queue.append(pair)
        return state

    start = product_state((left.start, right.start))

    while queue:
        pair = queue.popleft()
        a, b = pair
        source = pairs[pair]

        for symbol in alphabet:
            a_targets = ordered(a.transitions(symbol))
            if not a_targets:
                continue
            b_targets = ordered(b.transitions(symbol))
            for a2 in a_targets:
                for b2 in b_targets:
                    source.add_transition(product_state((a2, b2)), symbol)

        for a2 in ordered(a.transitions(EPSILON)):
            source.add_transition(product_state((a2, b)), EPSILON)
        for b2 in ordered(b.transitions(EPSILON)):
            source.add_transition(product_state((a, b2)), EPSILON)

    logger.debug(
        "Intersected %d x %d states into %d product states",
        left.size(),
        right.size(),
        len(states),
    )
    return Automaton(states, start, alphabet)
