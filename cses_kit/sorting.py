"""Greedy matching problems solved by sorting and two pointers."""

from __future__ import annotations

from collections.abc import Iterable


def apartments(applicants: Iterable[int], apartments: Iterable[int], tolerance: int) -> int:
    """Return how many applicants can be given an apartment.

    An applicant who wants size ``d`` accepts any apartment whose size lies
    within ``tolerance`` of ``d``. Each apartment goes to at most one applicant.
    """
    wanted = sorted(applicants)
    sizes = sorted(apartments)
    i = j = 0
    matched = 0
    while i < len(wanted) and j < len(sizes):
        if abs(sizes[j] - wanted[i]) <= tolerance:
            matched += 1
            i += 1
            j += 1
        elif sizes[j] + tolerance > wanted[i]:
            i += 1
        else:
            j += 1
    return matched


def distinct_count(values: Iterable[int]) -> int:
    """Return the number of distinct values."""
    return len(set(values))


def ferris_wheel_gondolas(weights: Iterable[int], limit: int) -> int:
    """Return the fewest gondolas needed when each holds one or two children.

    Two children share a gondola only if their total weight is at most ``limit``.
    """
    ordered = sorted(weights)
    left, right = 0, len(ordered) - 1
    gondolas = 0
    while left <= right:
        if ordered[left] + ordered[right] <= limit:
            left += 1
        right -= 1
        gondolas += 1
    return gondolas