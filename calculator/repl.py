import argparse
import logging
import sys
from typing import Iterable, Iterator, Optional, TextIO

from calculator import config
from calculator.evaluator import evaluate
from calculator.logging_config import configure_logging
from calculator.tokenizer import tokenize
from calculator.utils import CalculatorError

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_PRECISION = 6


def evaluate_line(line: str) -> float:
    return evaluate(tokenize(line))


def format_result(value: float, precision: int = DEFAULT_PRECISION) -> str:
    return format(value, f".{precision}g")


def run(
    lines: Iterable[str],
    out: TextIO,
    err: TextIO,
    keep_going: bool = False,
    precision: int = DEFAULT_PRECISION,
) -> int:
    """Evaluates every non-empty line and returns the process exit status.

    Without ``keep_going`` the first failing line stops the loop.
    """
    failed = False
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line:
            continue

        try:
            result = evaluate_line(line)
        except CalculatorError as e:
            logger.info("Line %d failed: %s", lineno, type(e).__name__)
            print(e, file=err)
            if not keep_going:
                return 1
            failed = True
            continue

        print(format_result(result, precision), file=out)

    return 1 if failed else 0


def read_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="calculator",
        description="Evaluate infix arithmetic expressions read line by line from standard input.",
    )
    parser.add_argument(
        "-k",
        "--keep-going",
        action="store_true",
        default=config.KEEP_GOING,
        help="report a malformed line and continue instead of exiting",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        default=config.PRECISION,
        help="significant digits in printed results (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        default=config.LOG_LEVEL,
        help="logging level (default: %(default)s)",
    )
    # string defaults go through type= but not through choices=
    args = parser.parse_args(argv)
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r}, choose from {', '.join(LOG_LEVELS)}")
    if args.precision < 1:
        parser.error("--precision must be at least 1")
    return args


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    prompt = "> " if sys.stdin.isatty() else ""
    return run(read_lines(prompt), sys.stdout, sys.stderr, keep_going=args.keep_going, precision=args.precision)
