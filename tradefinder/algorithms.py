"""
Single-transaction trade finders.

Both finders take a chronological price sequence and return the
``(buy_index, sell_index)`` pair with the largest non-negative profit.
``(0, 0)`` means "no trade": the sequence is shorter than two elements or
no later price ever exceeds an earlier one.

The functions are pure. They accept anything supporting ``len()`` and integer
indexing (lists, tuples, numpy arrays) and never modify it. Passing
non-numeric data is undefined behaviour; callers validate raw input first.
"""
from typing import Sequence, Tuple

__all__ = ["find_optimal_trade", "find_optimal_trade_fast", "realized_profit"]

TradeResult = Tuple[int, int]


def find_optimal_trade(prices: Sequence[float]) -> TradeResult:
    """
    Finds the best buy/sell pair by scanning every later price for a buy candidate.

    The outer scan only visits buy positions that can still improve the result.
    Whenever the inner scan sees a price below the current buy price, the next
    buy candidate is the first such price: every position skipped on the way
    is priced at or above the current candidate, so all of its trades were
    already dominated by the pairs just scanned. If an inner scan sees no
    price drop at all, no later buy can do better and the best pair so far is
    returned immediately.

    Time Complexity: O(n²) in the worst case (e.g. falling prices).

    Args:
        prices: Prices in chronological order, one per period.

    Returns:
        ``(buy_index, sell_index)``; ties keep the first maximal pair found.
    """
    n = len(prices)
    best_buy, best_sell = 0, 0
    buy = 0

    while buy < n - 1:
        best_profit = prices[best_sell] - prices[best_buy]
        next_buy = -1

        for sell in range(buy + 1, n):
            profit = prices[sell] - prices[buy]
            if profit > best_profit:
                best_buy, best_sell = buy, sell
                best_profit = profit
            # First drop below the buy price is the next local minimum.
            if next_buy == -1 and profit < 0:
                next_buy = sell

        if next_buy == -1:
            return best_buy, best_sell
        buy = next_buy

    return best_buy, best_sell


def find_optimal_trade_fast(prices: Sequence[float]) -> TradeResult:
    """
    Finds the best buy/sell pair in a single pass.

    Tracks the index of the lowest price seen so far. A new low only moves
    the tracker; any other price is evaluated as a sell against it.

    Time Complexity: O(n). Space Complexity: O(1).

    Example: for ``[7, 1, 5, 3, 6, 4]`` the tracked low is 1 (index 1) and the
    best sell is 6 (index 4), so the result is ``(1, 4)`` with profit 5.
    """
    if len(prices) < 2:
        return 0, 0

    min_index = 0
    max_profit = 0
    best_buy, best_sell = 0, 0

    for i in range(1, len(prices)):
        if prices[i] < prices[min_index]:
            min_index = i
        else:
            profit = prices[i] - prices[min_index]
            if profit > max_profit:
                max_profit = profit
                best_buy, best_sell = min_index, i

    return best_buy, best_sell


def realized_profit(prices: Sequence[float], trade: TradeResult) -> float:
    """Profit of ``trade`` on ``prices``; 0.0 when there is nothing to trade."""
    if len(prices) < 2:
        return 0.0
    buy, sell = trade
    return float(prices[sell] - prices[buy])
