"""Counting and optimisation problems solved by dynamic programming."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Optional

_MOD = 1_000_000_007
_TRAP = "*"


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    bad = [coin for coin in values if coin < 1]
    if bad:
        raise ValueError(f"coin values must be positive, got {bad[0]}")
    return values


def book_shop(prices: Iterable[int], pages: Iterable[int], budget: int) -> int:
    """Return the most pages obtainable with ``budget``.

    Each book may be bought any number of times, and a book can only be
    bought while the money left is strictly greater than its price, so the
    total spent never exceeds ``budget - 1``.
    """
    price_list = list(prices)
    page_list = list(pages)
    if len(price_list) != len(page_list):
        raise ValueError("prices and pages must have the same length")
    _non_negative("budget", budget)
    for price in price_list:
        _non_negative("price", price)

    best = [0] * (budget + 1)
    for price, gain in zip(price_list, page_list):
        for amount in range(price + 1, budget + 1):
            best[amount] = max(best[amount], gain + best[amount - price])
    return best[budget]


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``, modulo 10**9 + 7."""
    values = _positive_coins(coins)
    _non_negative("target", target)

    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in values if coin <= amount) % _MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count multisets of coins summing to ``target``, modulo 10**9 + 7.

    Every entry of ``coins`` is a separate coin kind, even if values repeat.
    """
    values = _positive_coins(coins)
    _non_negative("target", target)

    ways = [1] + [0] * target
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % _MOD
    return ways[target]


def dice_combinations(n: int) -> int:
    """Count ordered sequences of die throws (1 to 6) summing to ``n``, modulo 10**9 + 7."""
    _non_negative("n", n)

    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[total - face] for face in range(1, min(6, total) + 1)) % _MOD
    return ways[n]


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths through a square grid avoiding ``*`` cells.

    Paths run from the top-left to the bottom-right cell; the result is
    taken modulo 10**9 + 7. An empty grid has no paths.
    """
    rows = list(grid)
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("grid must be square")

    below = [0] * (size + 1)
    for i in reversed(range(size)):
        current = [0] * (size + 1)
        for j in reversed(range(size)):
            if rows[i][j] == _TRAP:
                current[j] = 0
            elif i == size - 1 and j == size - 1:
                current[j] = 1
            else:
                current[j] = (below[j] + current[j + 1]) % _MOD
        below = current
    return below[0]


def min_coins(coins: Iterable[int], target: int) -> Optional[int]:
    """Return the fewest coins summing to ``target``, or None if impossible."""
    values = _positive_coins(coins)
    _non_negative("target", target)

    best: list[float] = [0.0] + [math.inf] * target
    for coin in values:
        for amount in range(coin, target + 1):
            best[amount] = min(best[amount], best[amount - coin] + 1)
    result = best[target]
    return None if math.isinf(result) else int(result)


def remove_digits(n: int) -> int:
    """Return the fewest steps to reach zero, each step subtracting one digit of the number."""
    _non_negative("n", n)

    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        steps[value] = 1 + min(steps[value - int(digit)] for digit in str(value) if digit != "0")
    return steps[n]