"""
CLI entry point for the tradefinder application.
"""
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from tradefinder.benchmark import FINDERS, clamp_dataset_size, generate_prices, make_report
from tradefinder.benchmark import run_benchmark as run_the_benchmark
from tradefinder.config import Config, default_config, load_config
from tradefinder.prompts import ConsoleInputProvider, InputError, parse_price, parse_price_list
from tradefinder.reporting import print_benchmark, print_prices, print_report, print_scenarios
from tradefinder.scenarios import check_scenarios
from tradefinder.session import run_interactive

# Console is created once and passed down.
# Log to stderr to separate from potential data output to stdout.
app = typer.Typer(pretty_exceptions_show_locals=False, help="Best single buy/sell trade finder.")
console = Console(stderr=True)

METHODS = {"quadratic": ["O(n²)"], "linear": ["O(n)"], "both": ["O(n²)", "O(n)"]}


def _load_config_or_exit(config_path: Optional[Path]) -> Config:
    """Helper to load config and exit on failure."""
    if config_path is None:
        return default_config()
    try:
        return load_config(config_path)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]Configuration Error:[/bold red] {e}")
        raise typer.Exit(code=1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Best single buy/sell trade finder."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def analyze(
    prices: Optional[List[str]] = typer.Argument(
        None, help="Prices in chronological order. Put -- first when a price is negative, e.g. analyze -- -5 3."
    ),
    prices_text: Optional[str] = typer.Option(
        None, "--prices", "-p", help='Comma-separated prices, e.g. "7,1,5,3,6,4".'
    ),
    method: str = typer.Option("both", "--method", "-m", help="quadratic, linear or both."),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to the YAML configuration file.", exists=True
    ),
):
    """Find the best trade in the given prices."""
    config = _load_config_or_exit(config_path)
    if method not in METHODS:
        console.print(f"[bold red]Input Error:[/bold red] Unknown method {method!r}.")
        raise typer.Exit(code=1)

    try:
        values = [parse_price(p) for p in prices or []]
        if prices_text:
            values += parse_price_list(prices_text)
    except InputError as e:
        console.print(f"[bold red]Input Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    print_prices(values, console)
    for label, finder in FINDERS:
        if label not in METHODS[method]:
            continue
        console.print(f"\n[bold]Running {label} method:[/bold]")
        print_report(make_report(label, values, finder), console, config.reporting.time_precision)


@app.command()
def benchmark(
    size: Optional[int] = typer.Option(None, "--size", "-n", help="Number of random prices."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the dataset."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Where to save the dataset."),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to the YAML configuration file.", exists=True
    ),
):
    """Benchmark both methods on a generated dataset."""
    config = _load_config_or_exit(config_path)
    bench = config.benchmark

    requested = bench.size if size is None else size
    if requested < 0:
        console.print(f"[bold red]Input Error:[/bold red] Size must not be negative: {requested}")
        raise typer.Exit(code=1)
    n = clamp_dataset_size(requested, bench.min_size)
    dataset_path = output or Path(bench.dataset_path)

    try:
        prices = generate_prices(n, bench.max_price, bench.seed if seed is None else seed)
        result = run_the_benchmark(prices, dataset_path)
    except OSError as e:
        console.print(f"[bold red]Could not write dataset:[/bold red] {e}")
        raise typer.Exit(code=1)
    except Exception as e:
        console.print(f"[bold red]An unexpected error occurred during the benchmark:[/bold red] {e}")
        raise typer.Exit(code=1)

    print_benchmark(result, prices, console, preview=bench.preview)


@app.command()
def check():
    """Run both methods against the fixed scenarios."""
    outcomes = check_scenarios()
    print_scenarios(outcomes, console)
    if not all(o.passed for o in outcomes):
        raise typer.Exit(code=1)


@app.command()
def interactive(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to the YAML configuration file.", exists=True
    ),
):
    """Start the interactive menu."""
    config = _load_config_or_exit(config_path)
    try:
        run_interactive(ConsoleInputProvider(console), config, console)
    except (KeyboardInterrupt, EOFError):
        console.print("\nInterrupted.")
        raise typer.Exit(code=130)
    except Exception as e:
        console.print(f"[bold red]An unexpected error occurred during the session:[/bold red] {e}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
