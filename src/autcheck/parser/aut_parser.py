"""
Reader for '.aut' files.

An '.aut' file holds one declaration per line:

    (START) |- q0        q0 is the start state
    q0 T q1              an edge from q0 to q1 on symbol T
    q1 $ q2              an epsilon edge from q1 to q2
    q2 -| (FINAL)        q2 is accepting

Blank lines are ignored and '#' starts a comment. Declarations may appear in
any order; each one becomes exactly one builder call.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

import parsy as p

from autcheck.automaton.automaton import Automaton
from autcheck.automaton.builder import AutomatonBuilder
from autcheck.config import Config
from autcheck.exceptions import ParseError

logger = logging.getLogger(__name__)

### Declarations


@dataclass(frozen=True)
class StartDeclaration:
    """``(START) |- name``"""

    name: str

    def apply(self, builder: AutomatonBuilder, config: Config) -> None:
        builder.set_start_state(self.name)


@dataclass(frozen=True)
class FinalDeclaration:
    """``name -| (FINAL)``"""

    name: str

    def apply(self, builder: AutomatonBuilder, config: Config) -> None:
        builder.add_accept_state(self.name)


@dataclass(frozen=True)
class TransitionDeclaration:
    """``source label destination``"""

    source: str
    label: str
    destination: str

    def apply(self, builder: AutomatonBuilder, config: Config) -> None:
        label = None if self.label == config.epsilon_token else self.label
        builder.add_transition(self.source, self.destination, label)


Declaration = Union[StartDeclaration, FinalDeclaration, TransitionDeclaration]

### Grammar

# Whitespace inside a line; newlines end declarations
spaces = p.regex(r"[ \t]*")
comment = p.regex(r"#[^\r\n]*")
newline = p.regex(r"\r?\n")


def lexeme(parser):
    "parser followed by in-line whitespace."
    return parser << spaces


name = lexeme(p.regex(r"[^\s()#]+")).desc("state name")

start_declaration = (
    lexeme(p.string("(START)")) >> lexeme(p.string("|-")) >> name
).map(StartDeclaration)

final_declaration = (
    name << lexeme(p.string("-|")) << lexeme(p.string("(FINAL)"))
).map(FinalDeclaration)

transition_declaration = p.seq(name, name.desc("label"), name).combine(
    TransitionDeclaration
)

declaration = start_declaration | final_declaration | transition_declaration

line = spaces >> declaration.optional() << comment.optional() << newline

aut_file = line.many() << p.eof

### Top-level functions


def parse_declarations(text: str) -> List[Declaration]:
    """Parse the text of an '.aut' file into its declarations.

    Raises:
        ParseError: If a line is not a valid declaration.
    """
    if not text.endswith("\n"):
        text += "\n"
    try:
        lines = aut_file.parse(text)
    except p.ParseError as e:
        linenum, _ = p.line_info_at(e.stream, e.index)
        expected = ", ".join(sorted(e.expected))
        raise ParseError(f"expected {expected}", line=linenum + 1) from None
    return [item for item in lines if item is not None]


def parse_aut(text: str, config: Optional[Config] = None) -> Automaton:
    """Build an automaton from the text of an '.aut' file.

    Raises:
        ParseError: If the text is malformed.
        UnknownSymbolError: If an edge uses a label outside the alphabet.
        NoStartStateError: If no start state is declared.
    """
    config = config or Config.default()
    builder = AutomatonBuilder(config.symbol_table())
    declarations = parse_declarations(text)
    for item in declarations:
        item.apply(builder, config)
    automaton = builder.get_result()
    logger.debug(
        "Parsed %d declarations into %d states", len(declarations), automaton.size()
    )
    return automaton


def load_aut(filename: str, config: Optional[Config] = None) -> Automaton:
    """Read and build the automaton described by an '.aut' file."""
    with open(filename, encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise ParseError(f"{filename} is not valid UTF-8: {e.reason}") from e
    return parse_aut(text, config)


class AutomatonParser:
    """Builds an ``Automaton`` from an '.aut' file.

    Example:
        >>> parser = AutomatonParser("maze.aut")
        >>> parser.parse()
        >>> parser.automaton().shortest_example()
    """

    def __init__(self, filename: str, config: Optional[Config] = None) -> None:
        self.filename = filename
        self.config = config or Config.default()
        self._automaton: Optional[Automaton] = None

    def automaton(self) -> Optional[Automaton]:
        """Return the parsed automaton, or None before a successful ``parse()``."""
        return self._automaton

    def parse(self) -> None:
        """Read the file and build its automaton.

        Raises:
            OSError: If the file cannot be read.
            AutcheckError: If the file is not a valid '.aut' file.
        """
        logger.info("Reading automaton from %s", self.filename)
        self._automaton = load_aut(self.filename, self.config)
