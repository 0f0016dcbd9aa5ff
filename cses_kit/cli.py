"""Command-line entry point that reads problem input from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from cses_kit.introductory import NoSolutionError, hanoi_moves, palindrome_reorder
from cses_kit.piles import can_empty, can_empty_by_search

NO_SOLUTION = "NO SOLUTION"


class InputFormatError(ValueError):
    """Raised when standard input does not hold what a command expects."""


def _int_token(tokens: Sequence[str], index: int, what: str) -> int:
    try:
        return int(tokens[index])
    except IndexError:
        raise InputFormatError(f"missing {what}") from None
    except ValueError:
        raise InputFormatError(f"{what} must be an integer, got {tokens[index]!r}") from None


def _hanoi(tokens: Sequence[str], _args: argparse.Namespace) -> Iterator[str]:
    n = _int_token(tokens, 0, "number of disks")
    if n < 0:
        raise InputFormatError("number of disks must not be negative")
    yield str(2**n - 1)
    for source, target in hanoi_moves(n):
        yield f"{source} {target}"


def _palindrome(tokens: Sequence[str], _args: argparse.Namespace) -> Iterator[str]:
    text = tokens[0] if tokens else ""
    try:
        yield palindrome_reorder(text)
    except NoSolutionError:
        yield NO_SOLUTION


def _coin_piles(tokens: Sequence[str], args: argparse.Namespace) -> Iterator[str]:
    decide: Callable[[int, int], bool] = can_empty_by_search if args.search else can_empty
    tests = _int_token(tokens, 0, "number of tests")
    if tests < 0:
        raise InputFormatError("number of tests must not be negative")
    answers = []
    for case in range(tests):
        a = _int_token(tokens, 1 + 2 * case, f"first pile of test {case + 1}")
        b = _int_token(tokens, 2 + 2 * case, f"second pile of test {case + 1}")
        answers.append("YES" if decide(a, b) else "NO")
    yield from answers


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cses-kit",
        description="Solve a problem whose input is read from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    hanoi = commands.add_parser("hanoi", help="print the moves of the Tower of Hanoi")
    hanoi.set_defaults(handler=_hanoi)

    palindrome = commands.add_parser("palindrome", help="reorder a string into a palindrome")
    palindrome.set_defaults(handler=_palindrome)

    piles = commands.add_parser("coin-piles", help="decide whether coin piles can be emptied")
    piles.add_argument(
        "--search",
        action="store_true",
        help="decide by trying every move count instead of the closed form",
    )
    piles.set_defaults(handler=_coin_piles)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a command on standard input and print its answer; return the exit status."""
    args = _build_parser().parse_args(argv)
    tokens = sys.stdin.read().split()
    try:
        lines = list(args.handler(tokens, args))
    except InputFormatError as error:
        print(f"cses-kit: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())