"""Constraint automata for the game levels.

Every constraint is an automaton over the level alphabet. Symbols a
constraint does not mention loop on every state, so a constraint only
restricts the events it is about:

    T  find a treasure          S  find a sword
    K  find a key               R  jump in the river
    G  pass through a gate      A  pass through an arc
    D  pass the dragon
"""

from typing import Dict, Iterable, Tuple

from autcheck.alphabet.symbol import SymbolTable
from autcheck.automaton.automaton import Automaton
from autcheck.automaton.builder import AutomatonBuilder

TREASURE = "T"
KEY = "K"
GATE = "G"
DRAGON = "D"
SWORD = "S"
RIVER = "R"
ARC = "A"

# (source, label) -> destination
Moves = Dict[Tuple[str, str], str]


def _build(
    alphabet: SymbolTable,
    states: Iterable[str],
    start: str,
    accepting: Iterable[str],
    moves: Moves,
    blocked: Iterable[Tuple[str, str]] = (),
) -> Automaton:
    """Build a constraint automaton.

    Labels without an entry in ``moves`` loop on their state, except for the
    (state, label) pairs listed in ``blocked``, which have no edge at all.
    """
    blocked = set(blocked)
    builder = AutomatonBuilder(alphabet)
    builder.set_start_state(start)
    for name in accepting:
        builder.add_accept_state(name)
    for name in states:
        builder.add_state(name)
        for label in alphabet.labels:
            if (name, label) in blocked:
                continue
            builder.add_transition(name, moves.get((name, label), name), label)
    return builder.get_result()


def find_at_least_two_treasures(alphabet: SymbolTable) -> Automaton:
    """At least two treasures are found."""
    return _build(
        alphabet,
        states=["none", "one", "two"],
        start="none",
        accepting=["two"],
        moves={("none", TREASURE): "one", ("one", TREASURE): "two"},
    )


def find_key_before_passing_through_gates(alphabet: SymbolTable) -> Automaton:
    """No gate is passed before the key has been found."""
    return _build(
        alphabet,
        states=["locked", "unlocked"],
        start="locked",
        accepting=["locked", "unlocked"],
        moves={("locked", KEY): "unlocked"},
        blocked=[("locked", GATE)],
    )


def jump_in_river_when_passing_dragon_without_sword(alphabet: SymbolTable) -> Automaton:
    """Passing the dragon without a sword must be followed by a jump in the river."""
    fleeing = "fleeing"
    return _build(
        alphabet,
        states=["unarmed", "armed", fleeing],
        start="unarmed",
        accepting=["unarmed", "armed"],
        moves={
            ("unarmed", SWORD): "armed",
            ("unarmed", DRAGON): fleeing,
            (fleeing, RIVER): "unarmed",
        },
        blocked=[(fleeing, label) for label in alphabet.labels if label != RIVER],
    )


def find_no_treasures_after_dragon_has_been_passed(alphabet: SymbolTable) -> Automaton:
    """No treasure is found once the dragon has been passed."""
    return _build(
        alphabet,
        states=["before", "after"],
        start="before",
        accepting=["before", "after"],
        moves={("before", DRAGON): "after"},
        blocked=[("after", TREASURE)],
    )


def find_at_least_two_treasures_and_lose_all_when_passing_through_arc(
    alphabet: SymbolTable,
) -> Automaton:
    """At least two treasures are held at the end; every arc takes them all."""
    return _build(
        alphabet,
        states=["none", "one", "two"],
        start="none",
        accepting=["two"],
        moves={
            ("none", TREASURE): "one",
            ("one", TREASURE): "two",
            ("one", ARC): "none",
            ("two", ARC): "none",
        },
    )
