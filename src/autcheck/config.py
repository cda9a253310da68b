"""Configuration for autcheck."""

from dataclasses import dataclass
from typing import Tuple

from autcheck.alphabet.symbol import SymbolTable
from autcheck.exceptions import InvalidArgumentError

# Treasure, key, gate, dragon, sword, river, arc.
DEFAULT_ALPHABET: Tuple[str, ...] = ("T", "K", "G", "D", "S", "R", "A")


@dataclass(frozen=True)
class Config:
    """Settings shared by the parser, the levels and the command line.

    Attributes:
        alphabet: The fixed, ordered alphabet. Its order is the order in which
            symbols are tried by intersection and search.
        epsilon_token: Label text that denotes an epsilon transition.
        separator: Text placed between symbol labels of a rendered word.
        log_level: Name of the logging level used by the command line.
    """

    alphabet: Tuple[str, ...] = DEFAULT_ALPHABET
    epsilon_token: str = "$"
    separator: str = ""
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.epsilon_token in self.alphabet:
            raise InvalidArgumentError(
                f"label {self.epsilon_token!r} is reserved for epsilon transitions"
            )

    @classmethod
    def default(cls) -> "Config":
        """Return the default configuration."""
        return cls()

    def symbol_table(self) -> SymbolTable:
        """Return the symbol table for the configured alphabet."""
        return SymbolTable(self.alphabet)
