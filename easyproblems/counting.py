"""Counting and small arithmetic puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, groupby
from string import ascii_lowercase

_FACES = {
    "Tetrahedron": 4,
    "Cube": 6,
    "Octahedron": 8,
    "Dodecahedron": 12,
}
_DEFAULT_FACES = 20  # any other name is an icosahedron


def is_easy(responses: Iterable[int]) -> bool:
    """Return True when nobody answered 1 (called the problem hard)."""
    return all(response != 1 for response in responses)


def tram_capacity(stops: Iterable[tuple[int, int]]) -> int:
    """Smallest capacity that holds every passenger load along the route.

    Each stop is a pair ``(exiting, entering)``; the tram starts empty.
    """
    loads = accumulate((enter - leave for leave, enter in stops), initial=0)
    return max(loads)


def count_teams(problems: Iterable[Sequence[int]]) -> int:
    """Count problems for which at least two friends are sure of a solution."""
    return sum(1 for votes in problems if sum(votes) > 1)


def count_magnet_groups(magnets: Iterable[str]) -> int:
    """Count groups of equal adjacent magnets."""
    return sum(1 for _ in groupby(magnets))


def count_rooms(rooms: Iterable[tuple[int, int]]) -> int:
    """Count rooms ``(occupied, capacity)`` with space for two more people."""
    return sum(1 for occupied, capacity in rooms if occupied + 2 <= capacity)


def count_faces(names: Iterable[str]) -> int:
    """Total number of faces of the named polyhedrons."""
    return sum(_FACES.get(name, _DEFAULT_FACES) for name in names)


def count_distinct_letters(text: str) -> int:
    """Count distinct lowercase ASCII letters in the text."""
    return len(set(text) & set(ascii_lowercase))


def horseshoes_to_buy(colors: Iterable[int]) -> int:
    """Number of horseshoes to replace so that all colours differ."""
    colors = list(colors)
    return len(colors) - len(set(colors))


def candy_ways(n: int) -> int:
    """Ways to split ``n`` candies into a > b > 0 shares for two sisters."""
    return n // 2 if n % 2 else n // 2 - 1


def domino_count(m: int, n: int) -> int:
    """Maximum number of 2x1 dominoes on an m by n board."""
    return m * n // 2


def calculating_function(n: int) -> int:
    """Value of -1 + 2 - 3 + ... + (-1)^n * n."""
    return n // 2 if n % 2 == 0 else -((n + 1) // 2)


def game_winner(n: int) -> str:
    """Winner of the divisible-by-three game: ``"First"`` or ``"Second"``."""
    remainder = n % 3
    # The first player wins at once by moving n onto a multiple of three;
    # otherwise the second player can always mirror back to one.
    if remainder == 0:
        return "Second"
    return "First"