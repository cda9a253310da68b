"""Interned symbols and the fixed alphabets built from them."""

from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from autcheck.exceptions import InvalidArgumentError, UnknownSymbolError


class Symbol:
    """A transition label.

    Symbols are interned: constructing a symbol twice from the same label
    yields the same instance, so symbols compare and hash by identity.
    """

    __slots__ = ("label",)

    _interned: Dict[str, "Symbol"] = {}

    def __new__(cls, label: str) -> "Symbol":
        if not isinstance(label, str) or not label:
            raise InvalidArgumentError(f"invalid symbol label {label!r}")
        try:
            return cls._interned[label]
        except KeyError:
            pass
        symbol = super().__new__(cls)
        object.__setattr__(symbol, "label", label)
        return cls._interned.setdefault(label, symbol)

    def __setattr__(self, name, value):
        raise AttributeError("Symbol is immutable")

    def __reduce__(self):
        return (Symbol, (self.label,))

    def __copy__(self) -> "Symbol":
        return self

    def __deepcopy__(self, memo) -> "Symbol":
        return self

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"Symbol({self.label!r})"


class Epsilon(Enum):
    """Key of transitions that consume no input."""

    EPSILON = "ε"

    def __repr__(self) -> str:
        return "EPSILON"


EPSILON = Epsilon.EPSILON

# A transition key is either a Symbol or EPSILON, never None.
Label = Union[Symbol, Epsilon]


def intern(label: str) -> Symbol:
    """Return the unique symbol for a label, creating it on first use."""
    return Symbol(label)


class SymbolTable:
    """A fixed, ordered alphabet.

    The table is declared once and never grows. Its order is the order in
    which intersection and search iterate over symbols.
    """

    def __init__(self, labels: Iterable[str]) -> None:
        by_label: Dict[str, Symbol] = {}
        for label in labels:
            if label not in by_label:
                by_label[label] = intern(label)
        self._by_label = by_label
        self._symbols: Tuple[Symbol, ...] = tuple(by_label.values())

    @property
    def symbols(self) -> Tuple[Symbol, ...]:
        """All symbols in declaration order."""
        return self._symbols

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(symbol.label for symbol in self._symbols)

    def lookup(self, label: str) -> Symbol:
        """Return the symbol for a declared label.

        Raises:
            UnknownSymbolError: If the label is not part of this alphabet.
        """
        try:
            return self._by_label[label]
        except (KeyError, TypeError):
            raise UnknownSymbolError(label) from None

    def resolve(self, label: Optional[str]) -> Label:
        """Map a caller-supplied label to a transition key.

        ``None`` and the empty string denote an epsilon transition.
        """
        if label is None or label == "":
            return EPSILON
        return self.lookup(label)

    def merged(self, other: "SymbolTable") -> "SymbolTable":
        """Return this alphabet followed by the extra symbols of another."""
        if other is self or other.symbols == self._symbols:
            return self
        return SymbolTable(self.labels + other.labels)

    def __contains__(self, item) -> bool:
        if isinstance(item, Symbol):
            return self._by_label.get(item.label) is item
        return item in self._by_label

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"SymbolTable({list(self.labels)!r})"
