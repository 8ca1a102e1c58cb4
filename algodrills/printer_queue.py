"""Priority-driven printer queue simulation."""

from __future__ import annotations

from collections import deque
from typing import Sequence


def print_order(priorities: Sequence[int], target: int) -> int:
    """Return the 1-based turn at which document ``target`` is printed.

    The front document is printed only when no waiting document has a
    higher priority; otherwise it moves to the back of the queue.
    """
    if not 0 <= target < len(priorities):
        raise ValueError("target index is out of range")
    queue = deque(enumerate(priorities))
    printed = 0
    while queue:
        index, priority = queue.popleft()
        if any(other > priority for _, other in queue):
            queue.append((index, priority))
            continue
        printed += 1
        if index == target:
            return printed
    raise AssertionError("target document was never printed")