"""Introductory combinatorial and string problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from itertools import groupby


class NoSolutionError(ValueError):
    """Raised when a problem instance has no solution."""


def apple_division(weights: Iterable[int]) -> int:
    """Return the smallest possible difference between two groups' total weights."""
    values = list(weights)
    total = sum(values)
    sums = {0}
    for weight in values:
        sums |= {s + weight for s in sums}
    return min(abs(total - 2 * s) for s in sums)


def gray_code(n: int) -> list[str]:
    """Return the reflected Gray code of ``n`` bits as strings.

    Any ``n`` below 2 yields the one-bit code.
    """
    codes = ["0", "1"]
    for _ in range(2, n + 1):
        codes = ["0" + c for c in codes] + ["1" + c for c in reversed(codes)]
    return codes


def increasing_array_moves(values: Iterable[int]) -> int:
    """Return the fewest unit increments that make the sequence non-decreasing."""
    moves = 0
    current: int | None = None
    for value in values:
        if current is not None and value < current:
            moves += current - value
        else:
            current = value
    return moves


def palindrome_reorder(text: str) -> str:
    """Return a palindrome using exactly the characters of ``text``.

    Raises NoSolutionError if more than one character occurs an odd number of times.
    """
    counts = sorted(Counter(text).items())
    odd = [char for char, count in counts if count % 2]
    if len(odd) > 1:
        raise NoSolutionError("NO SOLUTION")
    half = "".join(char * (count // 2) for char, count in counts)
    middle = odd[0] if odd else ""
    return half + middle + half[::-1]


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n with no adjacent values differing by one.

    Raises NoSolutionError when no such permutation exists.
    """
    if n == 1:
        return [1]
    if n <= 3:
        raise NoSolutionError("NO SOLUTION")
    half = n // 2
    front = [2 * i + 1 for i in range(half)]
    back = [2 * i + 2 for i in reversed(range(half))]
    middle = [n] if n % 2 else []
    result = front + middle + back
    pivot = half if n % 2 else half - 1
    result[0], result[pivot] = result[pivot], result[0]
    return result


def longest_repetition(text: str) -> int:
    """Return the length of the longest run of one repeated character."""
    if not text:
        raise ValueError("text must not be empty")
    return max(sum(1 for _ in run) for _, run in groupby(text))


def _hanoi(source: int, spare: int, target: int, n: int) -> Iterator[tuple[int, int]]:
    if n == 0:
        return
    yield from _hanoi(source, target, spare, n - 1)
    yield (source, target)
    yield from _hanoi(spare, source, target, n - 1)


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry ``n`` disks from peg 1 to peg 3."""
    if n < 0:
        raise ValueError("number of disks must not be negative")
    return list(_hanoi(1, 2, 3, n))


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of ``n!``."""
    count = 0
    power = 5
    while n // power >= 1:
        count += n // power
        power *= 5
    return count