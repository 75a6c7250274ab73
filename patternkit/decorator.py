"""Decorator: wrap a component to add behaviour around its operation."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _emit(line: str) -> str:
    """Print a line and hand it back to the caller."""
    print(line)
    return line


class Component(ABC):
    """Something with an operation that can be decorated."""

    @abstractmethod
    def operation(self) -> list[str]:
        """Perform the operation and return the lines it produced."""


class ConcreteComponent(Component):
    def operation(self) -> list[str]:
        return [_emit("ConcreteComponent operation")]


class Decorator(Component):
    """Wraps a component and forwards the operation to it."""

    def __init__(self, component: Component) -> None:
        self.component = component

    def operation(self) -> list[str]:
        return self.component.operation()


class ConcreteDecoratorA(Decorator):
    """Runs the wrapped operation, then its own behaviour."""

    def operation(self) -> list[str]:
        lines = super().operation()
        lines.append(self._added_behavior())
        return lines

    def _added_behavior(self) -> str:
        return _emit("ConcreteDecoratorA added behavior")


class ConcreteDecoratorB(Decorator):
    """Runs the wrapped operation, then its own behaviour."""

    def operation(self) -> list[str]:
        lines = super().operation()
        lines.append(self._added_behavior())
        return lines

    def _added_behavior(self) -> str:
        return _emit("ConcreteDecoratorB added behavior")


def main(argv: list[str] | None = None) -> int:
    """Wrap a component in two decorators and run it."""
    decorated = ConcreteDecoratorB(ConcreteDecoratorA(ConcreteComponent()))
    decorated.operation()
    return 0