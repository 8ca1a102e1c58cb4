"""String-processing exercises."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase, ascii_uppercase
from typing import Iterable, Sequence

_VOWELS = frozenset("aeiou")
_CAMBRIDGE = frozenset("CAMBRIDGE")
_PAIRS = {")": "(", "]": "["}
_ALPHABET_SIZE = 26
_CAESAR_SHIFT = 3


def common_pattern(names: Iterable[str]) -> str:
    """Return a pattern matching every name, with ``?`` where they differ."""
    names = list(names)
    if not names:
        raise ValueError("at least one name is required")
    width = len(names[0])
    if any(len(name) != width for name in names):
        raise ValueError("all names must have the same length")
    return "".join(
        column[0] if all(char == column[0] for char in column) else "?"
        for column in zip(*names)
    )


def letter_counts(word: str) -> list[int]:
    """Return how often each letter a..z occurs in a lowercase word."""
    if any(char not in ascii_lowercase for char in word):
        raise ValueError("word must consist of lowercase letters only")
    counts = Counter(word)
    return [counts[letter] for letter in ascii_lowercase]


def count_vowels(word: str) -> int:
    """Return the number of lowercase vowels in ``word``."""
    return sum(1 for char in word if char in _VOWELS)


def is_palindrome(word: str) -> bool:
    """Return whether ``word`` reads the same backwards."""
    return word == word[::-1]


def rotate_mirror(rows: Iterable[str], mode: int) -> list[str]:
    """Return the grid as seen in the mirror for the given mode.

    Mode 1 leaves it unchanged, mode 2 flips it left to right and mode 3
    flips it top to bottom.
    """
    grid = ["".join(row) for row in rows]
    if mode == 1:
        return grid
    if mode == 2:
        return [row[::-1] for row in grid]
    if mode == 3:
        return grid[::-1]
    raise ValueError("mode must be 1, 2 or 3")


def heard_and_seen(heard: Iterable[str], seen: Iterable[str]) -> list[str]:
    """Return, sorted, the names that appear both in ``heard`` and ``seen``."""
    known = set(heard)
    return sorted(name for name in seen if name in known)


def strip_cambridge(word: str) -> str:
    """Remove every letter of CAMBRIDGE from ``word``."""
    return "".join(char for char in word if char not in _CAMBRIDGE)


def fbi_agents(names: Iterable[str]) -> list[int]:
    """Return the 1-based positions of the names containing ``FBI``."""
    return [position for position, name in enumerate(names, start=1) if "FBI" in name]


def short_form(name: str) -> str:
    """Return the capital letters of ``name`` in order."""
    return "".join(char for char in name if char in ascii_uppercase)


def is_balanced(line: str) -> bool:
    """Return whether the round and square brackets in ``line`` are balanced."""
    stack: list[str] = []
    for char in line:
        if char in "([":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack[-1] != _PAIRS[char]:
                return False
            stack.pop()
    return not stack


def shift_distances(a: str, b: str) -> list[int]:
    """Return, per position, how far forward in the alphabet ``a`` must shift to reach ``b``."""
    if len(a) != len(b):
        raise ValueError("words must have the same length")
    return [(ord(y) - ord(x)) % _ALPHABET_SIZE for x, y in zip(a, b)]


def count_joi_ioi(text: str) -> tuple[int, int]:
    """Return how many times ``JOI`` and ``IOI`` occur in ``text``, overlaps included."""
    joi = ioi = 0
    for start in range(len(text) - 2):
        window = text[start:start + 3]
        if window == "JOI":
            joi += 1
        elif window == "IOI":
            ioi += 1
    return joi, ioi


def caesar_decode(word: str) -> str:
    """Undo a Caesar shift of three on an uppercase word."""
    if any(char not in ascii_uppercase for char in word):
        raise ValueError("word must consist of uppercase letters only")
    return "".join(
        ascii_uppercase[(ascii_uppercase.index(char) - _CAESAR_SHIFT) % _ALPHABET_SIZE]
        for char in word
    )


def find_password(words: Sequence[str]) -> tuple[int, str]:
    """Find a word whose reverse is also listed; return its length and middle letter."""
    known = set(words)
    for word in words:
        if word and word[::-1] in known:
            return len(word), word[len(word) // 2]
    raise ValueError("no word has its reverse in the list")


def suffixes(word: str) -> list[str]:
    """Return all non-empty suffixes of ``word`` in dictionary order."""
    return sorted(word[start:] for start in range(len(word)))