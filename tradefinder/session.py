"""
Menu-driven interactive session around the two trade finders.
"""
import logging
from pathlib import Path
from typing import List, Sequence

from rich.console import Console

from tradefinder.algorithms import find_optimal_trade, find_optimal_trade_fast
from tradefinder.benchmark import generate_prices, make_report, run_benchmark
from tradefinder.config import Config
from tradefinder.prompts import (
    InputError,
    InputProvider,
    ask_dataset_size,
    ask_prices,
    ask_yes_no,
)
from tradefinder.reporting import print_benchmark, print_prices, print_report

__all__ = ["run_interactive", "analyze_prices", "run_performance_benchmark"]

log = logging.getLogger(__name__)

MENU: List[str] = [
    "1. Enter prices manually",
    "2. Run performance benchmark",
    "3. Exit",
]


# impure
def run_performance_benchmark(
    provider: InputProvider, config: Config, console: Console
) -> None:
    """
    Asks for a dataset size, then generates, saves and benchmarks a random dataset.
    #impure: Writes the dataset file.
    """
    bench = config.benchmark
    size = ask_dataset_size(provider, bench.min_size)
    prices = generate_prices(size, bench.max_price, bench.seed)
    result = run_benchmark(prices, Path(bench.dataset_path))
    print_benchmark(result, prices, console, preview=bench.preview)


def analyze_prices(
    prices: Sequence[float], provider: InputProvider, config: Config, console: Console
) -> None:
    """Runs the O(n²) finder, then optionally the O(n) finder and a larger benchmark."""
    precision = config.reporting.time_precision
    console.print()
    print_prices(prices, console)

    console.print("\n[bold]Running O(n²) method:[/bold]")
    print_report(make_report("O(n²)", prices, find_optimal_trade), console, precision)

    if not ask_yes_no(provider, "Would you like to run the O(n) efficient method for comparison?"):
        return

    console.print("\n[bold]Running O(n) method:[/bold]")
    print_report(make_report("O(n)", prices, find_optimal_trade_fast), console, precision)

    if ask_yes_no(provider, "Would you like to run a benchmark with a larger dataset?"):
        run_performance_benchmark(provider, config, console)


def run_interactive(provider: InputProvider, config: Config, console: Console) -> None:
    """
    Main menu loop. Runs until the user picks Exit or declines to continue.

    Invalid input or a dataset file that cannot be written abandons the
    current round with a message; the session itself keeps going.
    """
    while True:
        console.print("\nChoose option:")
        for line in MENU:
            console.print(line)

        choice = provider.ask("Enter choice (1-3)").strip()
        if choice == "3":
            break

        try:
            if choice == "1":
                analyze_prices(ask_prices(provider), provider, config, console)
            elif choice == "2":
                run_performance_benchmark(provider, config, console)
            else:
                console.print("[yellow]Invalid option. Please try again.[/yellow]")
        except InputError as e:
            log.debug(f"Round abandoned on invalid input: {e}")
            console.print(f"[bold red]Input Error:[/bold red] {e}")
        except OSError as e:
            log.debug(f"Round abandoned on dataset write failure: {e}")
            console.print(f"[bold red]Could not write dataset:[/bold red] {e}")

        if not ask_yes_no(provider, "Would you like to continue?"):
            break

    console.print("Goodbye.")
