"""
Validated user input for the interactive session and the CLI.

Questions go through an injected InputProvider rather than a global
terminal handle, so the session can be driven by a console or by a script.
"""
import math
import re
from typing import List, Protocol

from rich.console import Console
from rich.prompt import Prompt

from tradefinder.benchmark import clamp_dataset_size

__all__ = [
    "InputError",
    "InputProvider",
    "ConsoleInputProvider",
    "parse_price",
    "parse_size",
    "parse_price_list",
    "ask_yes_no",
    "ask_prices",
    "ask_dataset_size",
]


class InputError(ValueError):
    """Raised when user-supplied text cannot be turned into valid input."""


class InputProvider(Protocol):
    def ask(self, question: str) -> str:
        ...


class ConsoleInputProvider:
    """Asks questions on the terminal via rich."""

    def __init__(self, console: Console):
        self.console = console

    def ask(self, question: str) -> str:
        return Prompt.ask(question, console=self.console, default="", show_default=False)


def parse_price(text: str) -> float:
    try:
        value = float(text.strip())
    except ValueError as e:
        raise InputError(f"Not a number: {text!r}") from e
    if not math.isfinite(value):
        raise InputError(f"Price must be finite: {text!r}")
    return value


def parse_size(text: str) -> int:
    try:
        value = int(text.strip())
    except ValueError as e:
        raise InputError(f"Not a whole number: {text!r}") from e
    if value < 0:
        raise InputError(f"Size must not be negative: {value}")
    return value


def parse_price_list(text: str) -> List[float]:
    """Parses prices separated by commas and/or whitespace, e.g. ``"7, 1 5"``."""
    tokens = [t for t in re.split(r"[,\s]+", text.strip()) if t]
    return [parse_price(t) for t in tokens]


def ask_yes_no(provider: InputProvider, question: str) -> bool:
    """Anything starting with 'y' counts as yes."""
    answer = provider.ask(f"{question} (y/n)")
    return answer.strip().lower().startswith("y")


def ask_prices(provider: InputProvider) -> List[float]:
    """Asks for the number of prices, then for each price in turn."""
    size = parse_size(provider.ask("Enter array size"))
    return [parse_price(provider.ask(f"Enter price {i + 1}")) for i in range(size)]


def ask_dataset_size(provider: InputProvider, minimum: int) -> int:
    """Asks for the benchmark dataset size, raising small values to ``minimum``."""
    size = parse_size(provider.ask(f"Enter size for large dataset test (minimum {minimum})"))
    return clamp_dataset_size(size, minimum)
