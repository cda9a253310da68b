"""Custom exceptions for autcheck."""


class AutcheckError(Exception):
    """Base exception for all autcheck errors."""

    pass


class InvalidArgumentError(AutcheckError):
    """Raised when a state name is empty or otherwise invalid."""

    pass


class UnknownSymbolError(AutcheckError):
    """Raised when a transition label is not part of the declared alphabet."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"unknown symbol {label!r}")


class AlreadyFinishedError(AutcheckError):
    """Raised when a builder is used after its automaton was produced."""

    pass


class NoStartStateError(AutcheckError):
    """Raised when an automaton is requested before a start state was set."""

    pass


class ParseError(AutcheckError):
    """Raised when an automaton description cannot be parsed."""

    def __init__(self, message: str, line: int = -1) -> None:
        self.line = line
        super().__init__(message)

    def __str__(self) -> str:
        if self.line >= 0:
            return f"{super().__str__()} on line {self.line}"
        return super().__str__()
