"""Dynamic-programming problems over integer sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

_COIN_MODULUS = 10_000_000_007


def length_of_lis(nums: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def largest_divisible_subset(nums: Iterable[int]) -> list[int]:
    """Largest subset in which every pair divides one way; returned ascending."""
    values = sorted(nums)
    if not values:
        raise ValueError("nums must not be empty")
    lengths = [1] * len(values)
    parents = list(range(len(values)))
    for i, value in enumerate(values):
        for prev, smaller in enumerate(values[:i]):
            if value % smaller == 0 and lengths[prev] + 1 > lengths[i]:
                lengths[i] = lengths[prev] + 1
                parents[i] = prev
    best = max(range(len(values)), key=lengths.__getitem__)
    chain = [values[best]]
    while parents[best] != best:
        best = parents[best]
        chain.append(values[best])
    chain.reverse()
    return chain


def coin_change_ways(amount: int, coins: Sequence[int]) -> int:
    """Number of coin combinations summing to ``amount``, modulo 10**10 + 7."""
    if amount == 0:
        return 1
    if not coins:
        return 0
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] = (ways[total] + ways[total - coin]) % _COIN_MODULUS
    return ways[amount]


def min_cut_cost(n: int, cuts: Iterable[int]) -> int:
    """Least total cost of cutting a stick of length ``n`` at every position in ``cuts``.

    Each cut costs the length of the piece being cut.
    """
    points = [0, *sorted(cuts), n]
    count = len(points) - 2
    cost = [[0] * (count + 2) for _ in range(count + 2)]
    for i in range(count, 0, -1):
        for j in range(i, count + 1):
            span = points[j + 1] - points[i - 1]
            cost[i][j] = span + min(
                cost[i][mid - 1] + cost[mid + 1][j] for mid in range(i, j + 1)
            )
    return cost[1][count] if count else 0