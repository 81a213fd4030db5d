"""
Shared pytest fixtures.
"""
from typing import Callable, List

import pytest


class ScriptedInput:
    """InputProvider answering from a fixed list and recording the questions."""

    def __init__(self, answers: List[str]):
        self._answers = list(answers)
        self.questions: List[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        if not self._answers:
            raise AssertionError(f"No scripted answer left for: {question}")
        return self._answers.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._answers)


@pytest.fixture
def scripted_input() -> Callable[..., ScriptedInput]:
    """Factory fixture: ``scripted_input("1", "3", "y")``."""
    def _make(*answers: str) -> ScriptedInput:
        return ScriptedInput(list(answers))
    return _make
