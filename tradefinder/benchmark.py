"""
Timing and dataset generation for comparing the two trade finders.
"""
import logging
import math
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from tradefinder.algorithms import (
    TradeResult,
    find_optimal_trade,
    find_optimal_trade_fast,
    realized_profit,
)
from tradefinder.types import Method, TradeReport

__all__ = [
    "BenchmarkResult",
    "FINDERS",
    "time_finder",
    "make_report",
    "generate_prices",
    "clamp_dataset_size",
    "write_dataset",
    "run_benchmark",
]

log = logging.getLogger(__name__)

Finder = Callable[[Sequence[float]], TradeResult]

FINDERS: List[Tuple[Method, Finder]] = [
    ("O(n²)", find_optimal_trade),
    ("O(n)", find_optimal_trade_fast),
]


@dataclass(frozen=True)
class BenchmarkResult:
    """Both finders timed on the same dataset."""

    size: int
    dataset_path: Optional[Path]
    quadratic: TradeReport
    linear: TradeReport

    @property
    def speedup(self) -> float:
        """How many times faster the linear finder ran."""
        if self.linear.elapsed_ms == 0:
            return math.inf
        return self.quadratic.elapsed_ms / self.linear.elapsed_ms


def time_finder(prices: Sequence[float], finder: Finder) -> Tuple[TradeResult, float]:
    """Runs ``finder`` once and returns its result with the elapsed milliseconds."""
    start = time.perf_counter()
    result = finder(prices)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result, elapsed_ms


def make_report(method: Method, prices: Sequence[float], finder: Finder) -> TradeReport:
    """Times ``finder`` on ``prices`` and wraps the outcome in a TradeReport."""
    (buy, sell), elapsed_ms = time_finder(prices, finder)
    has_prices = len(prices) > 0
    log.debug(f"{method}: buy={buy} sell={sell} in {elapsed_ms:.4f}ms")
    return TradeReport(
        method=method,
        buy_index=buy,
        sell_index=sell,
        buy_price=float(prices[buy]) if has_prices else None,
        sell_price=float(prices[sell]) if has_prices else None,
        profit=realized_profit(prices, (buy, sell)),
        elapsed_ms=elapsed_ms,
    )


def generate_prices(size: int, max_price: int, seed: Optional[int] = None) -> List[int]:
    """
    Generates ``size`` random integer prices, uniform in ``[0, max_price)``.

    Returns a plain list so both finders index Python ints, not numpy scalars.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    rng = np.random.default_rng(seed)
    return rng.integers(0, max_price, size=size).tolist()


def clamp_dataset_size(size: int, minimum: int) -> int:
    """Raises sizes below ``minimum`` up to it."""
    return minimum if size < minimum else size


# impure
def write_dataset(prices: Sequence[float], path: Path) -> Path:
    """
    Writes the prices to ``path`` as a single comma-separated line.
    #impure: Writes to the filesystem.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(",".join(str(p) for p in prices), encoding="utf-8")
    log.info(f"Saved dataset of {len(prices)} prices to {path}")
    return path


def run_benchmark(
    prices: Sequence[float], dataset_path: Optional[Path] = None
) -> BenchmarkResult:
    """
    Times both finders on ``prices``.

    Args:
        prices: The dataset to run both finders on.
        dataset_path: If given, the dataset is written there first.

    Returns:
        A BenchmarkResult with one report per finder.
    """
    if dataset_path is not None:
        write_dataset(prices, dataset_path)

    (quad_method, quad_finder), (lin_method, lin_finder) = FINDERS
    quadratic = make_report(quad_method, prices, quad_finder)
    linear = make_report(lin_method, prices, lin_finder)

    if quadratic.profit != linear.profit:
        log.warning(
            f"Finders disagree on profit: {quadratic.profit} (O(n²)) vs {linear.profit} (O(n))"
        )

    log.info(
        f"Benchmark on {len(prices)} prices: O(n²) {quadratic.elapsed_ms:.2f}ms, "
        f"O(n) {linear.elapsed_ms:.2f}ms"
    )
    return BenchmarkResult(
        size=len(prices),
        dataset_path=dataset_path,
        quadratic=quadratic,
        linear=linear,
    )
