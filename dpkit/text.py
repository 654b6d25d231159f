"""String puzzles: word chains, grouping, frequency balancing, walks and wildcards."""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import Iterable
from itertools import accumulate


def longest_string_chain(words: Iterable[str]) -> int:
    """Longest chain of words where each word adds exactly one letter to the previous."""
    best: dict[str, int] = {}
    for word in sorted(words, key=len):
        best[word] = max(
            (best.get(word[:i] + word[i + 1 :], 0) + 1 for i in range(len(word))),
            default=1,
        )
    return max(best.values(), default=0)


def divide_string(s: str, k: int, fill: str) -> list[str]:
    """Split ``s`` into groups of ``k`` characters, padding the last with ``fill``."""
    if k < 1:
        raise ValueError("k must be positive")
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    groups = [s[start : start + k] for start in range(0, len(s), k)]
    if groups:
        groups[-1] = groups[-1].ljust(k, fill)
    return groups


def min_deletions_k_special(word: str, k: int) -> int:
    """Fewest deletions so that any two letter frequencies differ by at most ``k``."""
    frequencies = list(Counter(word).values())
    return min(
        (
            sum(f if f < base else max(0, f - base - k) for f in frequencies)
            for base in frequencies
        ),
        default=0,
    )


def max_manhattan_distance(s: str, k: int) -> int:
    """Greatest distance from the origin reached along ``s`` when up to ``k`` moves may change."""
    counts: Counter[str] = Counter()
    best = 0
    for steps, move in enumerate(s, 1):
        counts[move] += 1
        distance = abs(counts["N"] - counts["S"]) + abs(counts["W"] - counts["E"])
        best = max(best, distance + min(2 * k, steps - distance))
    return best


def wildcard_match(s: str, p: str) -> bool:
    """Whether pattern ``p`` matches all of ``s``; ``?`` is one character, ``*`` any run."""
    # row[i] tells whether the pattern consumed so far matches s[:i].
    row = [True] + [False] * len(s)
    for ch in p:
        if ch == "*":
            row = list(accumulate(row, operator.or_))
        else:
            row = [False] + [
                matched and (ch == "?" or ch == other) for matched, other in zip(row, s)
            ]
    return row[-1]