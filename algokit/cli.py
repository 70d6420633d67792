"""Command line entry point for a few of the package's exercises."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from algokit.calculator import OPERATION_NAMES, UnknownOperatorError, calculate
from algokit.geometry import hypotenuse
from algokit.primes import primes_up_to


def _run_hypotenuse(args: argparse.Namespace) -> int:
    if len(args.legs) < 2:
        print("Not enough arguments!")
        return 0
    a, b = args.legs[:2]
    print(f"The hypotenuse is: {hypotenuse(a, b):f}")
    return 0


def _run_sieve(args: argparse.Namespace) -> int:
    print(" ".join(str(p) for p in primes_up_to(args.n)))
    return 0


def _run_calc(args: argparse.Namespace) -> int:
    try:
        result = calculate(args.operator, args.a, args.b)
    except ZeroDivisionError:
        print("ERROR:you opted division with denominator zero")
        return 1
    except UnknownOperatorError:
        print("Cannot recognise the operator")
        return 1
    print(f"you opted for {OPERATION_NAMES[args.operator]}\nresult: {result:.2f}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit")
    commands = parser.add_subparsers(dest="command", required=True)

    hyp = commands.add_parser("hypotenuse", help="hypotenuse from two legs")
    hyp.add_argument("legs", nargs="*", type=float)
    hyp.set_defaults(handler=_run_hypotenuse)

    sieve = commands.add_parser("sieve", help="primes up to n")
    sieve.add_argument("n", type=int)
    sieve.set_defaults(handler=_run_sieve)

    calc = commands.add_parser("calc", help="apply + - * / to two operands")
    calc.add_argument("operator")
    calc.add_argument("a", type=float)
    calc.add_argument("b", type=float)
    calc.set_defaults(handler=_run_calc)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv`` and run the chosen command, returning its exit status."""
    args = _build_parser().parse_args(argv)
    return args.handler(args)