"""Bridge: an abstraction delegates its work to a separate implementor."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Implementor(ABC):
    """The implementation side of the bridge."""

    @abstractmethod
    def operation_impl(self) -> object:
        """Do the concrete work."""

    def _trace(self) -> str:
        entry = f"{type(self).__name__} operationImpl"
        print(entry)
        return entry


class ConcreteImplementorA(Implementor):
    def operation_impl(self) -> str:
        return self._trace()


class ConcreteImplementorB(Implementor):
    def operation_impl(self) -> str:
        return self._trace()


class Abstraction(ABC):
    """The client-facing side of the bridge, holding an implementor."""

    def __init__(self, implementor: Implementor) -> None:
        self.implementor = implementor

    @abstractmethod
    def operation(self) -> object:
        """Perform the operation."""


class RefinedAbstraction(Abstraction):
    """Performs its operation by calling the implementor."""

    def operation(self) -> object:
        return self.implementor.operation_impl()


def main(argv: list[str] | None = None) -> int:
    """Run the same abstraction over two implementors."""
    for implementor in (ConcreteImplementorA(), ConcreteImplementorB()):
        RefinedAbstraction(implementor).operation()
    return 0