"""Dynamic-programming exercises."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence

_STAIR_MOD = 1_000_000_000
_MOD = 10007


def _require_positive(n: int) -> None:
    if n < 1:
        raise ValueError("n must be at least 1")


def stair_numbers(n: int) -> int:
    """Count n-digit numbers whose adjacent digits differ by one, modulo 10^9."""
    _require_positive(n)
    counts = [0] + [1] * 9
    for _ in range(n - 1):
        counts = [
            ((counts[d - 1] if d > 0 else 0) + (counts[d + 1] if d < 9 else 0)) % _STAIR_MOD
            for d in range(10)
        ]
    return sum(counts) % _STAIR_MOD


def max_candy(grid: Iterable[Iterable[int]]) -> int:
    """Return the most candy collected moving right, down or diagonally."""
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid must be rectangular")

    previous: list[int] = []
    for row in rows:
        current: list[int] = []
        for j, candy in enumerate(row):
            options = []
            if j:
                options.append(current[j - 1])
            if previous:
                options.append(previous[j])
                if j:
                    options.append(previous[j - 1])
            current.append(candy + max(options, default=0))
        previous = current
    return previous[-1]


def binomial_mod(n: int, k: int) -> int:
    """Return C(n, k) modulo 10007."""
    if not 0 <= k <= n:
        raise ValueError("k must lie between 0 and n")
    row = [1]
    for _ in range(n):
        row = [1] + [(a + b) % _MOD for a, b in zip(row, row[1:])] + [1]
    return row[k]


def max_card_price(prices: Sequence[int]) -> int:
    """Return the most money for buying exactly len(prices) cards from packs.

    ``prices[i]`` is the price of a pack holding ``i + 1`` cards.
    """
    if not prices:
        raise ValueError("prices must not be empty")
    best = [0]
    for size, price in enumerate(prices, start=1):
        split = max((best[j] + best[size - j] for j in range(1, size // 2 + 1)), default=-1)
        best.append(max(split, price))
    return best[-1]


def max_increasing_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a strictly increasing subsequence."""
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    sums: list[int] = []
    for i, value in enumerate(values):
        prior = max([0, *(s for s, w in zip(sums, values[:i]) if value > w)])
        sums.append(prior + value)
    return max([0, *sums])


def non_decreasing_numbers(n: int) -> int:
    """Count n-digit strings with non-decreasing digits, modulo 10007."""
    _require_positive(n)
    counts = [1] * 10
    for _ in range(n - 1):
        counts = [total % _MOD for total in accumulate(counts)]
    return sum(counts) % _MOD


def tiling_count(n: int) -> int:
    """Count tilings of a 2xn board with 1x2 and 2x1 tiles, modulo 10007."""
    _require_positive(n)
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, (previous + current) % _MOD
    return current


def tiling_count_with_squares(n: int) -> int:
    """Count tilings of a 2xn board with 1x2, 2x1 and 2x2 tiles, modulo 10007."""
    _require_positive(n)
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, (current + 2 * previous) % _MOD
    return current


def longest_increasing_length(values: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    values = list(values)
    lengths: list[int] = []
    for i, value in enumerate(values):
        prior = max((n for n, w in zip(lengths, values[:i]) if w < value), default=0)
        lengths.append(prior + 1)
    return max(lengths, default=0)


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count the unordered ways to pay ``target`` with unlimited coins."""
    coins = sorted(coins)
    if any(coin < 1 for coin in coins):
        raise ValueError("coin values must be positive")
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [1] + [0] * target
    for coin in coins:
        for amount in range(coin, target + 1):
            ways[amount] += ways[amount - coin]
    return ways[target]


def min_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins paying ``target``, or -1 if it cannot be paid."""
    coins = sorted(coins)
    if not coins or any(coin < 1 for coin in coins):
        raise ValueError("coin values must be positive and at least one is needed")
    if target < 1:
        raise ValueError("target must be at least 1")
    best: list[int | None] = [0] + [None] * target
    for amount in range(1, target + 1):
        options = [
            count + 1
            for coin in coins
            if coin <= amount and (count := best[amount - coin]) is not None
        ]
        best[amount] = min(options, default=None)
    result = best[target]
    return -1 if result is None else result


def min_moves_to_sort(children: Sequence[int]) -> int:
    """Return how many children must move for the line to be in increasing order."""
    return len(children) - longest_increasing_length(children)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def padovan(n: int) -> int:
    """Return the n-th term of the triangle-spiral sequence 1, 1, 1, 2, 2, ..."""
    _require_positive(n)
    terms = [1, 1, 1, 2, 2]
    while len(terms) < n:
        terms.append(terms[-1] + terms[-5])
    return terms[n - 1]


def max_sticker_score(stickers: Sequence[Sequence[int]]) -> int:
    """Return the best score from a 2xn sticker sheet without taking edge neighbours."""
    if len(stickers) != 2:
        raise ValueError("stickers must have exactly two rows")
    top, bottom = stickers
    if len(top) != len(bottom) or not top:
        raise ValueError("rows must be non-empty and of equal length")

    take_top = take_bottom = 0
    best_two_back = best_one_back = 0
    for upper, lower in zip(top, bottom):
        new_top = max(best_two_back, take_bottom) + upper
        new_bottom = max(best_two_back, take_top) + lower
        best_two_back = best_one_back
        take_top, take_bottom = new_top, new_bottom
        best_one_back = max(new_top, new_bottom)
    return best_one_back


class PrefixSum2D:
    """Answers rectangle sums over a fixed grid in constant time."""

    def __init__(self, grid: Iterable[Iterable[int]]):
        rows = [list(row) for row in grid]
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("grid must be rectangular")
        self._height = len(rows)
        self._width = width
        self._table = [[0] * (width + 1)]
        for row in rows:
            above = self._table[-1]
            running = 0
            line = [0]
            for j, value in enumerate(row, start=1):
                running += value
                line.append(above[j] + running)
            self._table.append(line)

    def query(self, top: int, left: int, bottom: int, right: int) -> int:
        """Sum the cells from (top, left) to (bottom, right), 1-based and inclusive."""
        if not (1 <= top <= bottom <= self._height and 1 <= left <= right <= self._width):
            raise ValueError("rectangle lies outside the grid")
        t = self._table
        return t[bottom][right] - t[top - 1][right] - t[bottom][left - 1] + t[top - 1][left - 1]