import argparse
import logging
import sys
from typing import Iterable, Optional, Sequence, TextIO

from .Calc import Calculator
from .Errors import EvalError, RenderError
from .Language import DivisionMode, RomanDef, standard_def

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="romanparsec",
        description="Evaluate arithmetic expressions written with Roman numerals.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r"),
        help="File with one expression per line (default: standard input)",
    )
    parser.add_argument(
        "-e",
        "--expression",
        action="append",
        default=[],
        metavar="EXPR",
        help="Evaluate EXPR instead of reading lines (repeatable)",
    )
    parser.add_argument(
        "--roman",
        action="store_true",
        help="Print results as numerals instead of decimal integers",
    )
    parser.add_argument(
        "--division",
        choices=[m.value for m in DivisionMode],
        default=standard_def.division.value,
        help="Rounding of integer division on negative operands (default: floor)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every evaluation step",
    )
    return parser


def run_lines(
    calc: Calculator,
    lines: Iterable[str],
    out: TextIO,
    err: TextIO,
    roman: bool = False,
    source_name: str = "",
) -> int:
    """
    Evaluate each line and print its result. A failing line is reported on err
    and the remaining lines are still processed. Returns the number of failures.
    """
    failures = 0
    for lineno, raw in enumerate(lines, 1):
        line = calc.strip_blanks(raw.rstrip("\r\n"))
        if not line:
            continue
        name = f"{source_name} line {lineno}" if source_name else ""
        try:
            value = calc.evaluate(line, name)
            out.write((calc.render(value) if roman else str(value)) + "\n")
        except (EvalError, RenderError) as e:
            failures += 1
            where = f"{name}: " if name else ""
            err.write(f"error: {where}{e}\n")
            logger.debug("Line %d failed: %r", lineno, line)
    return failures


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    calc = Calculator(RomanDef(division=DivisionMode(args.division)))

    if args.expression:
        lines: Iterable[str] = args.expression
        source_name = ""
    elif args.file is not None:
        lines = args.file
        source_name = args.file.name
    else:
        lines = sys.stdin
        source_name = "<stdin>"

    try:
        failures = run_lines(calc, lines, sys.stdout, sys.stderr, args.roman, source_name)
    finally:
        if args.file is not None:
            args.file.close()
    return 1 if failures else 0

