"""Command line calculator: evaluate an expression, a file, or stdin line by line."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Final, Iterable, TextIO

from . import __version__
from .errors import MathParserError
from .evaluator import Evaluation, try_evaluate
from .operators import function_names

logger = logging.getLogger(__name__)

_LOG_LEVEL: Final[str] = os.environ.get("MATH_PARSER_LOG_LEVEL", "WARNING").upper()


def _epilog() -> str:
    names = ", ".join(function_names())
    return (
        "operators: + - * / ^, unary + and -, parentheses. "
        f"functions ({names}) use the call syntax name!arg[,arg], e.g. log!100,10."
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="math-parser",
        description="Evaluate arithmetic expressions in single precision.",
        epilog=_epilog(),
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-s",
        "--input-string",
        help="takes a string and tries to parse it",
    )
    source.add_argument(
        "-f",
        "--input-file",
        help="takes a file and tries to parse its content",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="solves notation step by step",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def report(outcome: Evaluation | MathParserError, *, debug: bool, out: TextIO) -> bool:
    """Print one evaluation outcome; returns False when it was an error."""
    if isinstance(outcome, MathParserError):
        print(outcome, file=out)
        return False
    if debug:
        for line in outcome.trace:
            print(line, file=out)
    print(outcome.text, file=out)
    return True


def run_lines(lines: Iterable[str], *, debug: bool, out: TextIO) -> int:
    """Evaluate each non-blank line; returns the number of rejected lines."""
    failures = 0
    for line in lines:
        expression = line.strip()
        if not expression:
            continue
        if not report(try_evaluate(expression, trace=debug), debug=debug, out=out):
            failures += 1
    return failures


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=_LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    if args.input_string is None and args.input_file is None:
        failures = run_lines(sys.stdin, debug=args.debug, out=sys.stdout)
        logger.info("stdin session finished with %d rejected line(s)", failures)
        return 0

    if args.input_string is not None:
        source = args.input_string
    else:
        try:
            source = Path(args.input_file).read_text(encoding="utf-8")
        except OSError as err:
            print(f"Invalid file: {args.input_file} ({err.strerror or err})", file=sys.stderr)
            return 1

    ok = report(try_evaluate(source, trace=args.debug), debug=args.debug, out=sys.stdout)
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
