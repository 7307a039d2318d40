import argparse
import logging
import sys

from prop_dnf.errors import ExpressionError
from prop_dnf.parser import parse

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def format_table(expression):
    header = " ".join(expression.variables) + " | " + expression.source.strip()
    lines = [header, "-" * len(header)]
    for row in expression.truth_table():
        cells = " ".join("1" if row.assignment[name] else "0" for name in expression.variables)
        lines.append(f"{cells} | {int(row.result)}")
    return "\n".join(lines)


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="prop-dnf",
        description="Print the disjunctive normal form of a propositional expression.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="variables A-Z; operators ! & | > (implies) - (iff) + (xor); brackets ()",
    )
    parser.add_argument("--cnf", action="store_true", help="also print the conjunctive normal form")
    parser.add_argument("--table", action="store_true", help="also print the truth table")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.verbose)

    source = args.expression
    if source is None:
        print("operators: !, &, |, >, -, +, (); var: A..Z")
        print("Enter logical expression: ")
        source = input()

    try:
        expression = parse(source)
        if args.table:
            print(format_table(expression))
        print("DNF: ", expression.to_dnf())
        if args.cnf:
            print("CNF: ", expression.to_cnf())
    except ExpressionError as exc:
        logger.debug("failed on %r", source, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
