"""Deciding whether two coin piles can be emptied together.

Each move removes two coins from one pile and one coin from the other.
"""

from __future__ import annotations


def can_empty(a: int, b: int) -> bool:
    """Return whether both piles can be emptied, by the closed-form test."""
    return (a + b) % 3 == 0 and min(a, b) * 2 >= max(a, b)


def can_empty_by_search(a: int, b: int) -> bool:
    """Return whether both piles can be emptied, by trying every move count."""
    if a < 0 or b < 0:
        return False
    # x moves take (2, 1), the rest take (1, 2): 2x + y = a and x + 2y = b.
    return any(x + 2 * (a - 2 * x) == b for x in range(a // 2 + 1))