"""Greedy and exhaustive-search exercises."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Sequence

_BLOCK = 3
_BASES = "ACGT"
_DIGITS_ASCENDING = "0123456789"
_DIGITS_DESCENDING = "9876543210"


def _to_bits(matrix: Iterable[Iterable[object]]) -> list[list[bool]]:
    return [[cell in ("1", 1, True) for cell in row] for row in matrix]


def matrix_flip_count(a, b) -> int:
    """Return the fewest 3x3 inversions turning ``a`` into ``b``, or -1 if impossible.

    Cells may be ``'0'``/``'1'`` characters, integers or booleans.
    """
    grid = _to_bits(a)
    target = _to_bits(b)
    if len(grid) != len(target):
        raise ValueError("matrices have different numbers of rows")
    width = len(grid[0]) if grid else 0
    for row, goal in zip(grid, target):
        if len(row) != width or len(goal) != width:
            raise ValueError("matrices must be rectangular and of the same shape")

    height = len(grid)
    if height < _BLOCK or width < _BLOCK:
        return 0 if grid == target else -1

    flips = 0
    solvable = True
    for i, (row, goal) in enumerate(zip(grid, target)):
        for j, goal_cell in enumerate(goal):
            if row[j] == goal_cell:
                continue
            if i + _BLOCK <= height and j + _BLOCK <= width:
                flips += 1
                for block_row in grid[i:i + _BLOCK]:
                    block_row[j:j + _BLOCK] = [not cell for cell in block_row[j:j + _BLOCK]]
            else:
                solvable = False
    return flips if solvable else -1


def min_mismatch(shorter: str, longer: str) -> int:
    """Return the smallest number of differing characters over all alignments."""
    if len(shorter) > len(longer):
        raise ValueError("the first string must not be longer than the second")
    return min(
        sum(x != y for x, y in zip(shorter, longer[offset:]))
        for offset in range(len(longer) - len(shorter) + 1)
    )


def _number(token: str) -> int:
    if not token:
        return 0
    if not (token.isascii() and token.isdigit()):
        raise ValueError(f"invalid number: {token!r}")
    return int(token)


def min_expression_value(expression: str) -> int:
    """Return the smallest value reachable by adding parentheses to a +/- expression."""
    head, minus, tail = expression.strip().partition("-")
    total = sum(_number(token) for token in head.split("+"))
    if minus:
        total -= sum(_number(token) for token in re.split(r"[+-]", tail))
    return total


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Return how many (start, end) meetings fit into one room without overlap."""
    current = 0
    count = 0
    for end, start in sorted((end, start) for start, end in meetings):
        if start >= current:
            count += 1
            current = end
    return count


def consensus_dna(dnas: Sequence[str]) -> tuple[str, int]:
    """Return the consensus string and its total Hamming distance to ``dnas``."""
    dnas = list(dnas)
    if not dnas:
        return "", 0
    width = len(dnas[0])
    if any(len(dna) != width for dna in dnas):
        raise ValueError("all strings must have the same length")

    letters = []
    distance = 0
    for column in zip(*dnas):
        counts = Counter(column)
        best = max(_BASES, key=lambda base: counts[base])
        letters.append(best)
        distance += len(dnas) - counts[best]
    return "".join(letters), distance


def _holds(sign: str, left: str, right: str) -> bool:
    return left < right if sign == "<" else left > right


def _first_valid(signs: list[str], order: str) -> str:
    def extend(prefix: str) -> str | None:
        if len(prefix) == len(signs) + 1:
            return prefix
        for digit in order:
            if digit in prefix:
                continue
            if prefix and not _holds(signs[len(prefix) - 1], prefix[-1], digit):
                continue
            found = extend(prefix + digit)
            if found is not None:
                return found
        return None

    result = extend("")
    if result is None:
        raise ValueError("no digit sequence satisfies the signs")
    return result


def inequality_extremes(signs: Iterable[str]) -> tuple[str, str]:
    """Return the largest and smallest distinct-digit strings obeying the signs."""
    ops = list(signs)
    if any(op not in ("<", ">") for op in ops):
        raise ValueError("signs must be '<' or '>'")
    if len(ops) > 9:
        raise ValueError("at most nine signs are supported")
    return _first_valid(ops, _DIGITS_DESCENDING), _first_valid(ops, _DIGITS_ASCENDING)