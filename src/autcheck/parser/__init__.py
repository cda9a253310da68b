"""Parser module for '.aut' automaton descriptions."""

from autcheck.parser.aut_parser import (
    AutomatonParser,
    Declaration,
    FinalDeclaration,
    StartDeclaration,
    TransitionDeclaration,
    load_aut,
    parse_aut,
    parse_declarations,
)

__all__ = [
    "AutomatonParser",
    "Declaration",
    "FinalDeclaration",
    "StartDeclaration",
    "TransitionDeclaration",
    "load_aut",
    "parse_aut",
    "parse_declarations",
]
