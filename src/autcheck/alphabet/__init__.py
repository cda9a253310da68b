"""Alphabet module: interned symbols and transition labels."""

from autcheck.alphabet.symbol import EPSILON, Epsilon, Label, Symbol, SymbolTable, intern

__all__ = [
    "EPSILON",
    "Epsilon",
    "Label",
    "Symbol",
    "SymbolTable",
    "intern",
]
