"""
Console output for trade reports, benchmarks and scenario checks.
"""
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tradefinder.algorithms import TradeResult
from tradefinder.benchmark import BenchmarkResult
from tradefinder.scenarios import ScenarioOutcome
from tradefinder.types import TradeReport

__all__ = ["print_prices", "print_report", "print_benchmark", "print_scenarios"]


def _fmt(value: Optional[float]) -> str:
    """Prints whole-number prices without a trailing '.0'."""
    if value is None:
        return "N/A"
    return str(int(value)) if float(value).is_integer() else str(value)


def _fmt_list(values: Sequence[float]) -> str:
    return escape(f"[{', '.join(_fmt(v) for v in values)}]")


def print_prices(prices: Sequence[float], console: Console) -> None:
    console.print(f"Input array: {_fmt_list(prices)}")


def print_report(report: TradeReport, console: Console, precision: int = 4) -> None:
    """Prints one finder run: buy, sell, profit and execution time."""
    console.print(f"Buy at price {_fmt(report.buy_price)} (index {report.buy_index})")
    console.print(f"Sell at price {_fmt(report.sell_price)} (index {report.sell_index})")
    console.print(f"Profit: {_fmt(report.profit)}")
    console.print(f"Execution time: {report.elapsed_ms:.{precision}f}ms")


def _benchmark_line(report: TradeReport, label: str) -> str:
    return (
        f"{label} Buy at price {_fmt(report.buy_price)} (index {report.buy_index}), "
        f"Sell at price {_fmt(report.sell_price)} (index {report.sell_index}), "
        f"Profit: {_fmt(report.profit)}, Time: {report.elapsed_ms:.2f}ms"
    )


def print_benchmark(
    result: BenchmarkResult,
    prices: Sequence[float],
    console: Console,
    preview: int = 20,
) -> None:
    """Prints the dataset preview, where it was saved and both timings."""
    console.print(f"\nGenerated dataset of {result.size} elements")
    if preview > 0:
        console.print(f"First {preview}: {_fmt_list(prices[:preview])}")
        console.print(f"Last {preview}: {_fmt_list(prices[-preview:])}")

    if result.dataset_path is not None:
        console.print(f"\nThe large dataset has been saved to [cyan]'{escape(str(result.dataset_path))}'[/cyan]")

    console.print("\n[bold]Benchmark results:[/bold]")
    console.print(_benchmark_line(result.quadratic, "O(n²):"))
    console.print(_benchmark_line(result.linear, "O(n): "))
    console.print(f"\nThe O(n) method is {result.speedup:.1f}x faster")


def print_scenarios(outcomes: Sequence[ScenarioOutcome], console: Console) -> None:
    """Renders the scenario check as a table, one row per scenario."""
    table = Table(title="Scenario check")
    table.add_column("Description")
    table.add_column("Input")
    table.add_column("Expected")
    table.add_column("O(n²)")
    table.add_column("O(n)")
    table.add_column("Profit", justify="right")

    def _cell(result: TradeResult, passed: bool) -> str:
        mark = "[green]PASS[/green]" if passed else "[bold red]FAIL[/bold red]"
        return f"{mark} {result}"

    for outcome in outcomes:
        s = outcome.scenario
        profit = s.prices[s.expected[1]] - s.prices[s.expected[0]] if s.prices else None
        table.add_row(
            s.description,
            _fmt_list(s.prices),
            str(s.expected),
            _cell(outcome.quadratic, outcome.quadratic_passed),
            _cell(outcome.linear, outcome.linear_passed),
            _fmt(profit),
        )

    console.print(table)
    failed = sum(1 for o in outcomes if not o.passed)
    if failed:
        console.print(f"[bold red]{failed} of {len(outcomes)} scenarios failed.[/bold red]")
    else:
        console.print(f"[bold green]All {len(outcomes)} scenarios passed.[/bold green]")
