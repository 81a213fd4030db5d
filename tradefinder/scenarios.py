"""
Fixed price scenarios with known answers, run through both finders.
"""
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from tradefinder.algorithms import TradeResult, find_optimal_trade, find_optimal_trade_fast

__all__ = ["Scenario", "ScenarioOutcome", "SCENARIOS", "check_scenarios"]


@dataclass(frozen=True)
class Scenario:
    prices: Tuple[float, ...]
    expected: TradeResult
    description: str


@dataclass(frozen=True)
class ScenarioOutcome:
    scenario: Scenario
    quadratic: TradeResult
    linear: TradeResult

    @property
    def quadratic_passed(self) -> bool:
        return self.quadratic == self.scenario.expected

    @property
    def linear_passed(self) -> bool:
        return self.linear == self.scenario.expected

    @property
    def passed(self) -> bool:
        return self.quadratic_passed and self.linear_passed


SCENARIOS: List[Scenario] = [
    Scenario((7, 1, 5, 3, 6, 4), (1, 4),
             "Basic profit case - buy at 1 and sell at 6 for profit of 5"),
    Scenario((7, 6, 4, 3, 1), (0, 0),
             "Decreasing prices - no profit possible"),
    Scenario((1, 2, 3, 4, 5), (0, 4),
             "Increasing prices - buy first day, sell last day"),
    Scenario((3, 3, 3), (0, 0),
             "Flat prices - no profit possible"),
    Scenario((20, 18, 15, 8, 3, 6, 10, 4, 12), (4, 8),
             "Large drops then recovery - buy at 3 and sell at 12 for profit of 9"),
    Scenario((), (0, 0),
             "Empty array - no trade"),
    Scenario((5,), (0, 0),
             "Single price - no trade possible"),
    Scenario((1, 12, 1, 12), (0, 1),
             "Multiple peaks - capture the first peak"),
]


def check_scenarios(scenarios: Sequence[Scenario] = SCENARIOS) -> List[ScenarioOutcome]:
    """Runs both finders over every scenario."""
    return [
        ScenarioOutcome(
            scenario=s,
            quadratic=find_optimal_trade(s.prices),
            linear=find_optimal_trade_fast(s.prices),
        )
        for s in scenarios
    ]
