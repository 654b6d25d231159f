"""Dynamic-programming problems over pairs of strings and their subsequences."""

from __future__ import annotations

_DISTINCT_MODULUS = 1_000_000_007


def _lcs_table(text1: str, text2: str) -> list[list[int]]:
    """Full table where cell (i, j) is the LCS length of text1[:i] and text2[:j]."""
    table = [[0] * (len(text2) + 1)]
    for ch in text1:
        previous = table[-1]
        current = [0]
        for j, other in enumerate(text2, 1):
            if ch == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        table.append(current)
    return table


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest subsequence common to both strings."""
    previous = [0] * (len(text2) + 1)
    for ch in text1:
        current = [0]
        for j, other in enumerate(text2, 1):
            if ch == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def shortest_common_supersequence(text1: str, text2: str) -> str:
    """A shortest string having both inputs as subsequences."""
    table = _lcs_table(text1, text2)
    i, j = len(text1), len(text2)
    backwards: list[str] = []
    while i and j:
        if text1[i - 1] == text2[j - 1]:
            backwards.append(text1[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            backwards.append(text1[i - 1])
            i -= 1
        else:
            backwards.append(text2[j - 1])
            j -= 1
    backwards.extend(reversed(text1[:i]))
    backwards.extend(reversed(text2[:j]))
    return "".join(reversed(backwards))


def longest_palindromic_subsequence(s: str) -> int:
    """Length of the longest subsequence of ``s`` that reads the same both ways."""
    return longest_common_subsequence(s, s[::-1])


def min_insertions_palindrome(s: str) -> int:
    """Fewest character insertions that turn ``s`` into a palindrome."""
    return len(s) - longest_palindromic_subsequence(s)


def min_delete_distance(text1: str, text2: str) -> int:
    """Fewest character deletions, from either string, that make them equal."""
    common = longest_common_subsequence(text1, text2)
    return len(text1) + len(text2) - 2 * common


def num_distinct(s: str, t: str) -> int:
    """Number of distinct subsequences of ``s`` equal to ``t``, modulo 10**9 + 7."""
    ways = [1] + [0] * len(t)
    for ch in s:
        # Walk backwards so each character of s is used at most once per count.
        for j in range(len(t), 0, -1):
            if t[j - 1] == ch:
                ways[j] = (ways[j] + ways[j - 1]) % _DISTINCT_MODULUS
    return ways[-1]


def edit_distance(word1: str, word2: str) -> int:
    """Fewest single-character insertions, deletions or replacements from word1 to word2."""
    previous = list(range(len(word2) + 1))
    for i, ch in enumerate(word1, 1):
        current = [i]
        for j, other in enumerate(word2, 1):
            if ch == other:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]