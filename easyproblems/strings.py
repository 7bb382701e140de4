"""String puzzles."""

from __future__ import annotations

from string import ascii_letters, ascii_lowercase

_MAX_DOUBLINGS = 6


def is_amusing_joke(guest: str, host: str, pile: str) -> bool:
    """True when the pile holds exactly the letters of both names."""
    return sorted(guest + host) == sorted(pile)


def ultra_fast_xor(a: str, b: str) -> str:
    """Digit-wise difference of two binary strings of equal length.

    Raises ValueError when the lengths differ.
    """
    if len(a) != len(b):
        raise ValueError("numbers must have the same length")
    return "".join("1" if x != y else "0" for x, y in zip(a, b))


def abbreviate(word: str) -> str:
    """Shorten words longer than ten letters to first, count, last."""
    if len(word) > 10:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def is_pangram(text: str) -> bool:
    """True when every Latin letter appears, in either case."""
    letters = {char.lower() for char in text if char in ascii_letters}
    return letters >= set(ascii_lowercase)


def different_string(s: str) -> str | None:
    """Rearrange ``s`` into a different string, or None if impossible.

    The first pair of differing neighbours is swapped.
    """
    for i, (left, right) in enumerate(zip(s, s[1:])):
        if left != right:
            return s[:i] + right + left + s[i + 2:]
    return None


def binary_cut_pieces(s: str) -> int:
    """Fewest pieces to cut a binary string into so they can be sorted."""
    pairs = list(zip(s, s[1:]))
    transitions = sum(1 for left, right in pairs if left != right)
    descending = ("1", "0") in pairs
    if transitions == 0:
        return 1
    if transitions == 1 and descending:
        return 2
    return transitions


def min_doublings(x: str, s: str) -> int:
    """Fewest self-concatenations of ``x`` after which ``s`` occurs in it.

    Returns -1 when six doublings are not enough.
    """
    for count in range(_MAX_DOUBLINGS + 1):
        if s in x:
            return count
        x += x
    return -1


def cover_in_water(s: str) -> int:
    """Fewest actions to fill every empty cell ('.') of a row with water."""
    segments = [part.count(".") for part in s.split("#")]
    if any(length >= 3 for length in segments):
        return 2
    return sum(segments)


def fox_snake(rows: int, cols: int) -> list[str]:
    """Lines of the snake pattern on a rows by cols grid."""
    lines = []
    turns = 0
    for row in range(1, rows + 1):
        if row % 2:
            lines.append("#" * cols)
            continue
        if turns % 2 == 0:
            lines.append("." * (cols - 1) + "#")
        else:
            lines.append("#" + "." * (cols - 1))
        turns += 1
    return lines