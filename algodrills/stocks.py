"""Stock trading drills: best profits under different trading rules."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def max_single_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one purchase followed by one sale."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def max_multi_profit(prices: Sequence[int]) -> int:
    """Return the best profit from any number of non-overlapping trades."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def max_profit_k_transactions(prices: Sequence[int], k: int) -> int:
    """Return the best profit from at most ``k`` non-overlapping trades."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    if k == 0 or len(prices) <= 1:
        return 0
    if 2 * k > len(prices):
        return max_multi_profit(prices)
    # Even states hold a share after a purchase, odd states follow a sale.
    states = [float("-inf") if state % 2 == 0 else 0 for state in range(2 * k)]
    for price in prices:
        states[0] = max(states[0], -price)
        for state in range(1, 2 * k):
            change = price if state % 2 else -price
            states[state] = max(states[state], states[state - 1] + change)
    return int(states[2 * k - 1])


def buy_sell_days(prices: Sequence[int]) -> list[tuple[int, int]]:
    """Return ``(buy day, sell day)`` pairs, one for each rising stretch of prices."""
    trades: list[tuple[int, int]] = []
    if not prices:
        return trades
    buy = sell = 0
    for day in range(1, len(prices)):
        if prices[day] < prices[sell]:
            if buy != sell:
                trades.append((buy, sell))
            buy = sell = day
        else:
            sell = day
    if buy != sell:
        trades.append((buy, sell))
    return trades