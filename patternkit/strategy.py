"""Strategy: a context runs whichever algorithm object it is given."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _run_labelled(label: str) -> str:
    line = f"Executing strategy {label}"
    print(line)
    return line


class Strategy(ABC):
    """An interchangeable algorithm."""

    @abstractmethod
    def execute(self) -> object:
        """Run the algorithm and return its outcome."""


class ConcreteStrategyA(Strategy):
    def execute(self) -> str:
        return _run_labelled("A")


class ConcreteStrategyB(Strategy):
    def execute(self) -> str:
        return _run_labelled("B")


class Context:
    """Runs its current strategy; the strategy may be replaced at any time."""

    def __init__(self, strategy: Strategy) -> None:
        self.strategy = strategy

    def execute_strategy(self) -> object:
        return self.strategy.execute()


def main(argv: list[str] | None = None) -> int:
    """Run strategy A, switch to B, run again."""
    context = Context(ConcreteStrategyA())
    context.execute_strategy()
    context.strategy = ConcreteStrategyB()
    context.execute_strategy()
    return 0