"""Counting ordered ways to reach a sum, modulo a large prime."""

from __future__ import annotations

from collections.abc import Iterable

MOD = 1_000_000_007


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Return the number of ordered coin sequences summing to ``target``, mod ``MOD``."""
    values = list(coins)
    if target < 0:
        raise ValueError("target must not be negative")
    if any(coin <= 0 for coin in values):
        raise ValueError("coin values must be positive")
    ways = [0] * (target + 1)
    ways[0] = 1
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - coin] for coin in values if coin <= total) % MOD
    return ways[target]


def dice_combinations(n: int) -> int:
    """Return the number of ordered die-roll sequences summing to ``n``, mod ``MOD``."""
    return coin_combinations(range(1, 7), n)