"""Command line front end.

Usage:
    autcheck maze.aut --level 1
"""

import argparse
import logging
import sys
from typing import List, Optional

from autcheck.config import DEFAULT_ALPHABET, Config
from autcheck.exceptions import AutcheckError, InvalidArgumentError
from autcheck.levels.level import LEVELS

logger = logging.getLogger(__name__)

INVALID_FILE_MESSAGE = "Error: The given file is not a valid '.aut' file."
NO_EXAMPLE_MESSAGE = "No accepted string exists."


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autcheck",
        description="Print the shortest string accepted by an '.aut' automaton "
        "under the constraints of a level.",
    )
    parser.add_argument("path", help="path to the '.aut' file to check")
    parser.add_argument(
        "-l",
        "--level",
        type=int,
        choices=sorted(LEVELS),
        default=0,
        help="level whose constraints are applied (default: 0)",
    )
    parser.add_argument(
        "-a",
        "--alphabet",
        default=",".join(DEFAULT_ALPHABET),
        help="comma-separated list of transition labels (default: %(default)s)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log progress to stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    labels = tuple(label.strip() for label in args.alphabet.split(",") if label.strip())
    try:
        config = Config(
            alphabet=labels, log_level="INFO" if args.verbose else "WARNING"
        )
    except InvalidArgumentError as e:
        parser.error(str(e))
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(levelname)s: %(message)s",
    )

    level = LEVELS[args.level](config)
    logger.info("Checking %s on level %d (%s)", args.path, args.level, level.name)
    try:
        example = level.run(args.path)
    except (AutcheckError, OSError) as e:
        logger.error("%s: %s", args.path, e)
        print(INVALID_FILE_MESSAGE)
        return 1

    if example is None:
        print(NO_EXAMPLE_MESSAGE)
    else:
        print(example)
    logger.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
