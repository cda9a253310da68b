"""Tests for the cross-product intersection."""

import itertools

import pytest

from autcheck.alphabet.symbol import EPSILON, SymbolTable, intern
from autcheck.automaton.automaton import Automaton
from autcheck.automaton.builder import AutomatonBuilder
from autcheck.automaton.product import intersect

ALPHABET = SymbolTable(["X", "Y"])


def build(edges, accepting, start="s0", alphabet=ALPHABET) -> Automaton:
    """Build an automaton from (source, destination, label) triples."""
    builder = AutomatonBuilder(alphabet)
    builder.set_start_state(start)
    for source, destination, label in edges:
        builder.add_transition(source, destination, label)
    for name in accepting:
        builder.add_accept_state(name)
    return builder.get_result()


def accepts_only_x() -> Automaton:
    return build([("s0", "s1", "X")], ["s1"])


def accepts_x_or_y() -> Automaton:
    return build([("s0", "s1", "X"), ("s0", "s2", "Y")], ["s1", "s2"])


def even_xs() -> Automaton:
    """Words over {X, Y} with an even number of X, via epsilon detours."""
    return build(
        [
            ("even", "odd", "X"),
            ("even", "even", "Y"),
            ("odd", "hop", None),
            ("hop", "even", "X"),
            ("odd", "odd", "Y"),
        ],
        ["even"],
        start="even",
    )


def ends_with_y() -> Automaton:
    return build(
        [("s0", "s0", "X"), ("s0", "s0", "Y"), ("s0", "s1", "Y"), ("s1", "f", None)],
        ["f"],
    )


def words(length):
    for n in range(length + 1):
        for word in itertools.product("XY", repeat=n):
            yield "".join(word)


class TestIntersection:
    def test_literal_automata(self):
        product = accepts_only_x().intersection(accepts_x_or_y())
        assert product.shortest_example(True) == "X"
        assert product.shortest_example(False) == ""

    def test_disjoint_languages(self):
        only_y = build([("s0", "s1", "Y")], ["s1"])
        assert accepts_only_x().intersection(only_y).shortest_example(True) is None

    def test_accept_flag_is_conjunction(self):
        product = accepts_only_x().intersection(accepts_x_or_y())
        start = product.start
        assert not start.is_accept()
        (target,) = start.transitions(intern("X"))
        assert target.is_accept()
        assert len(start.transitions(intern("Y"))) == 0

    def test_epsilon_moves_are_independent(self):
        left = build([("s0", "s1", None), ("s1", "s2", "X")], ["s2"])
        right = build([("s0", "s1", "X"), ("s1", "s2", None)], ["s2"])
        product = left.intersection(right)
        assert len(product.start.transitions(EPSILON)) == 1
        assert product.shortest_example(True) == "X"

    def test_epsilon_on_both_sides(self):
        left = build([("s0", "s1", None)], ["s1"])
        right = build([("s0", "s1", None)], ["s1"])
        product = left.intersection(right)
        assert len(product.start.transitions(EPSILON)) == 2
        assert product.shortest_example(True) == ""

    def test_operands_are_unchanged(self):
        left, right = even_xs(), ends_with_y()
        left_states, right_states = left.size(), right.size()
        product = left.intersection(right)
        assert left.size() == left_states
        assert right.size() == right_states
        assert not set(product.states) & set(left.states)
        assert not set(product.states) & set(right.states)
        assert all(state.is_frozen() for state in product.states)

    def test_size_is_bounded_by_product(self):
        left, right = even_xs(), ends_with_y()
        product = left.intersection(right)
        assert product.size() <= left.size() * right.size()

    @pytest.mark.parametrize("word", list(words(5)))
    def test_language_is_intersection(self, word):
        left, right = even_xs(), ends_with_y()
        product = intersect(left, right)
        expected = left.accepts(word) and right.accepts(word)
        assert product.accepts(word) == expected

    @pytest.mark.parametrize("word", list(words(4)))
    def test_commutative(self, word):
        left, right = even_xs(), ends_with_y()
        assert left.intersection(right).accepts(word) == right.intersection(
            left
        ).accepts(word)

    def test_shortest_example_of_product(self):
        product = even_xs().intersection(ends_with_y())
        assert product.shortest_example(True) == "Y"

    def test_chained_intersection(self):
        product = even_xs().intersection(ends_with_y()).intersection(
            build([("s0", "s1", "X"), ("s1", "s1", "X"), ("s1", "s1", "Y")], ["s1"])
        )
        assert product.shortest_example(True) == "XXY"

    def test_operands_can_be_reused(self):
        left, right = accepts_only_x(), accepts_x_or_y()
        first = left.intersection(right)
        second = left.intersection(right)
        assert first.shortest_example(True) == second.shortest_example(True) == "X"
        assert first.size() == second.size()

    def test_different_alphabets(self):
        left = build([("s0", "s1", "X")], ["s1"])
        right = build(
            [("s0", "s1", "X"), ("s0", "s2", "Z")],
            ["s1", "s2"],
            alphabet=SymbolTable(["X", "Z"]),
        )
        product = left.intersection(right)
        assert product.alphabet.labels == ("X", "Y", "Z")
        assert product.shortest_example(True) == "X"
