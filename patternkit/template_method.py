"""Template method: a fixed sequence of steps filled in by subclasses."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _emit(line: str) -> str:
    """Print a line and hand it back to the caller."""
    print(line)
    return line


class AbstractClass(ABC):
    """Defines the order of steps; subclasses supply each step."""

    def template_method(self) -> list[str]:
        """Run the three steps in order and return the lines they produced."""
        return [self.step1(), self.step2(), self.step3()]

    @abstractmethod
    def step1(self) -> str:
        """First step."""

    @abstractmethod
    def step2(self) -> str:
        """Second step."""

    @abstractmethod
    def step3(self) -> str:
        """Third step."""


class ConcreteClassA(AbstractClass):
    def step1(self) -> str:
        return _emit("ConcreteClassA: Step 1")

    def step2(self) -> str:
        return _emit("ConcreteClassA: Step 2")

    def step3(self) -> str:
        return _emit("ConcreteClassA: Step 3")


class ConcreteClassB(AbstractClass):
    def step1(self) -> str:
        return _emit("ConcreteClassB: Step 1")

    def step2(self) -> str:
        return _emit("ConcreteClassB: Step 2")

    def step3(self) -> str:
        return _emit("ConcreteClassB: Step 3")


def main(argv: list[str] | None = None) -> int:
    """Run the template method on both concrete classes."""
    ConcreteClassA().template_method()
    print()
    ConcreteClassB().template_method()
    return 0