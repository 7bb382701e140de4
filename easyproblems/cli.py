"""Command line: answer puzzles read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from easyproblems.sequences import is_sum_triple
from easyproblems.strings import is_amusing_joke


def _joke(tokens: Sequence[str]) -> Iterator[str]:
    if len(tokens) < 3:
        raise ValueError("expected the guest's name, the host's name and the pile")
    guest, host, pile = tokens[:3]
    yield "YES" if is_amusing_joke(guest, host, pile) else "NO"


def _sum(tokens: Sequence[str]) -> Iterator[str]:
    if not tokens:
        raise ValueError("expected the number of test cases")
    cases = int(tokens[0])
    numbers = [int(token) for token in tokens[1 : 1 + 3 * cases]]
    if len(numbers) < 3 * cases:
        raise ValueError("not enough numbers for the test cases")
    for start in range(0, 3 * cases, 3):
        a, b, c = numbers[start : start + 3]
        yield "Yes" if is_sum_triple(a, b, c) else "No"


_HANDLERS: dict[str, Callable[[Sequence[str]], Iterator[str]]] = {
    "joke": _joke,
    "sum": _sum,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="easyproblems", description="Answer a puzzle read from standard input."
    )
    parser.add_argument(
        "puzzle",
        choices=sorted(_HANDLERS),
        help="joke: three words, is the pile both names; "
        "sum: count then triples, is one the sum of the others",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen puzzle on standard input and print its answers."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    try:
        answers = list(_HANDLERS[args.puzzle](tokens))
    except ValueError as exc:
        parser.error(str(exc))
    for answer in answers:
        print(answer)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())