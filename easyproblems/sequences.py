"""Puzzles over short sequences of integers."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import pairwise

_CLOCK_MIN = 1
_CLOCK_MAX = 12


def round_summands(n: int) -> list[int]:
    """Split ``n`` into round numbers (one non-zero digit), lowest place first."""
    summands = []
    place = 1
    while n > 0:
        n, digit = divmod(n, 10)
        if digit:
            summands.append(digit * place)
        place *= 10
    return summands


def arrival_swaps(heights: Iterable[int]) -> int:
    """Adjacent swaps that put the first tallest soldier first and the last
    shortest soldier last.

    Raises ValueError for an empty line-up.
    """
    values = list(heights)
    if not values:
        raise ValueError("the line-up is empty")
    tallest = values.index(max(values))
    values.insert(0, values.pop(tallest))
    lowest = min(values)
    shortest = max(i for i, value in enumerate(values) if value == lowest)
    return tallest + (len(values) - 1 - shortest)


def is_sum_triple(a: int, b: int, c: int) -> bool:
    """True when one of the three numbers is the sum of the other two."""
    low, mid, high = sorted((a, b, c))
    return low + mid == high


def contains_value(values: Iterable[int], k: int) -> bool:
    """True when ``k`` occurs among the values."""
    return k in values


def doremy_paint(values: Iterable[int]) -> bool:
    """True when the values can be arranged so all adjacent pair sums match.

    Raises ValueError for an empty sequence.
    """
    counts = Counter(values)
    if not counts:
        raise ValueError("the sequence is empty")
    if len(counts) == 1:
        return True
    if len(counts) > 2:
        return False
    first, second = counts.values()
    return abs(first - second) <= 1


def jagged_swaps_sortable(values: Sequence[int]) -> bool:
    """True when the permutation can be sorted by the jagged swap operation.

    Raises ValueError for an empty sequence.
    """
    if not values:
        raise ValueError("the sequence is empty")
    return values[0] == 1


def line_trip_tank(values: Sequence[int], x: int) -> int:
    """Smallest tank volume for a round trip from 0 to ``x`` and back.

    ``values`` are the ascending positions of the gas stations.
    Raises ValueError when there are no stations.
    """
    if not values:
        raise ValueError("there are no gas stations")
    longest = max(
        [values[0], *(right - left for left, right in pairwise(values))]
    )
    return max(longest, 2 * (x - values[-1]))


def halloumi_sortable(values: Sequence[int], k: int) -> bool:
    """True when reversing subarrays of length up to ``k`` can sort the values."""
    return k > 1 or all(left <= right for left, right in pairwise(values))


def sort_pair(a: int, b: int) -> tuple[int, int]:
    """The two numbers as (smaller, larger)."""
    return min(a, b), max(a, b)


def strings_intersect(a: int, b: int, c: int, d: int) -> bool:
    """True when the chord a-b crosses the chord c-d on a twelve-hour clock.

    Raises ValueError when a position is not between 1 and 12.
    """
    for position in (a, b, c, d):
        if not _CLOCK_MIN <= position <= _CLOCK_MAX:
            raise ValueError(f"clock position out of range: {position}")
    low, high = sort_pair(a, b)
    inside = sum(1 for position in {c, d} if low < position < high)
    return inside == 1