"""Maximum trading profit from a series of daily prices under various rules."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

_NEG_INF = float("-inf")


def max_profit_single(prices: Sequence[int]) -> int:
    """Best profit from at most one buy followed by one later sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit with any number of non-overlapping transactions."""
    return sum(max(0, today - yesterday) for yesterday, today in pairwise(prices))


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Best profit with at most two non-overlapping transactions."""
    return max_profit_k_transactions(2, prices)


def max_profit_k_transactions(k: int, prices: Sequence[int]) -> int:
    """Best profit with at most ``k`` non-overlapping transactions."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0 or not prices:
        return 0
    if 2 * k >= len(prices):
        return max_profit_unlimited(prices)
    # cash[t]: best profit having completed t sales and holding nothing.
    # hold[t]: best profit holding a share bought after t completed sales.
    cash = [0] * (k + 1)
    hold = [_NEG_INF] * k
    for price in prices:
        for t in range(k):
            hold[t] = max(hold[t], cash[t] - price)
            cash[t + 1] = max(cash[t + 1], hold[t] + price)
    return int(max(cash))


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Best profit with unlimited transactions and a one-day wait after each sale."""
    hold = _NEG_INF
    sold = 0
    rest = 0
    for price in prices:
        hold, sold, rest = max(hold, rest - price), hold + price, max(rest, sold)
    return int(max(sold, rest))


def max_profit_with_fee(prices: Sequence[int], fee: int) -> int:
    """Best profit with unlimited transactions, each sale costing ``fee``."""
    cash = 0
    hold = _NEG_INF
    for price in prices:
        hold = max(hold, cash - price)
        cash = max(cash, hold + price - fee)
    return int(cash)