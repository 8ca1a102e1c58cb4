"""Stack-based exercises."""

from __future__ import annotations

from typing import Sequence

_PRIORITY = {"(": 0, "+": 1, "-": 1, "*": 2, "/": 2}
_CLOSERS = {")": ("(", 2), "]": ("[", 3)}


def next_greater(values: Sequence[int]) -> list[int]:
    """Return, for each value, the first larger value to its right, or -1."""
    result = [-1] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            result[pending.pop()] = value
        pending.append(index)
    return result


def stack_sequence_ops(target: Sequence[int]) -> list[str] | None:
    """Return the push (``+``) and pop (``-``) steps producing ``target``.

    Numbers 1..n are pushed in increasing order. Returns None when the
    sequence cannot be produced this way.
    """
    target = list(target)
    if sorted(target) != list(range(1, len(target) + 1)):
        raise ValueError("target must be a permutation of 1..n")
    ops: list[str] = []
    stack: list[int] = []
    following = 1
    for wanted in target:
        while following <= wanted:
            stack.append(following)
            ops.append("+")
            following += 1
        if not stack or stack[-1] != wanted:
            return None
        stack.pop()
        ops.append("-")
    return ops


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression over letters A-Z to postfix notation."""
    output: list[str] = []
    operators: list[str] = []
    for char in expression:
        if "A" <= char <= "Z":
            output.append(char)
        elif char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise ValueError("unbalanced closing parenthesis")
            operators.pop()
        elif char in _PRIORITY:
            while operators and _PRIORITY[char] <= _PRIORITY[operators[-1]]:
                output.append(operators.pop())
            operators.append(char)
        else:
            raise ValueError(f"unexpected character {char!r}")
    if "(" in operators:
        raise ValueError("unbalanced opening parenthesis")
    output.extend(reversed(operators))
    return "".join(output)


def evaluate_postfix(expression: str, values: Sequence[float]) -> float:
    """Evaluate a postfix expression whose letters A, B, ... stand for ``values``."""
    stack: list[float] = []
    for char in expression:
        if "A" <= char <= "Z":
            index = ord(char) - ord("A")
            if index >= len(values):
                raise ValueError(f"no value given for {char!r}")
            stack.append(float(values[index]))
            continue
        if len(stack) < 2:
            raise ValueError("malformed postfix expression")
        right = stack.pop()
        left = stack.pop()
        if char == "+":
            stack.append(left + right)
        elif char == "-":
            stack.append(left - right)
        elif char == "*":
            stack.append(left * right)
        elif char == "/":
            stack.append(left / right)
        else:
            raise ValueError(f"unexpected character {char!r}")
    if len(stack) != 1:
        raise ValueError("malformed postfix expression")
    return stack[0]


def bracket_value(text: str) -> int:
    """Return the value of a bracket string, or 0 when it is not well formed.

    ``()`` is worth 2 and ``[]`` 3; nesting multiplies, juxtaposition adds.
    """
    frames: list[tuple[str | None, int]] = [(None, 0)]
    for char in text:
        if char in "([":
            frames.append((char, 0))
        elif char in _CLOSERS:
            opener, factor = _CLOSERS[char]
            if len(frames) == 1 or frames[-1][0] != opener:
                return 0
            _, inner = frames.pop()
            parent, total = frames[-1]
            frames[-1] = (parent, total + factor * (inner or 1))
    if len(frames) != 1:
        return 0
    return frames[0][1]