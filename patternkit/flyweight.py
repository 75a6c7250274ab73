"""Flyweight: share objects by key instead of creating duplicates."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Flyweight(ABC):
    """A shared object whose context-dependent state is passed in."""

    @abstractmethod
    def operation(self, extrinsic_state: str) -> None:
        """Act using the given extrinsic state."""


class ConcreteFlyweight(Flyweight):
    """A flyweight carrying a fixed intrinsic state."""

    def __init__(self, intrinsic_state: str) -> None:
        self.intrinsic_state = intrinsic_state

    def operation(self, extrinsic_state: str) -> None:
        print(
            f"ConcreteFlyweight: Intrinsic State = {self.intrinsic_state}, "
            f"Extrinsic State = {extrinsic_state}"
        )


class FlyweightFactory:
    """Hands out one shared flyweight per key, creating it on first use."""

    def __init__(self) -> None:
        self._flyweights: dict[str, Flyweight] = {}

    def get_flyweight(self, key: str) -> Flyweight:
        flyweight = self._flyweights.get(key)
        if flyweight is None:
            flyweight = self._flyweights[key] = ConcreteFlyweight(key)
        return flyweight

    def __len__(self) -> int:
        return len(self._flyweights)


def main(argv: list[str] | None = None) -> int:
    """Fetch flyweights by key and show that equal keys share one object."""
    factory = FlyweightFactory()
    flyweight1 = factory.get_flyweight("key1")
    flyweight1.operation("extrinsicState1")
    flyweight2 = factory.get_flyweight("key2")
    flyweight2.operation("extrinsicState2")
    flyweight3 = factory.get_flyweight("key1")
    flyweight3.operation("extrinsicState3")
    print(f"flyweight1 == flyweight3: {int(flyweight1 is flyweight3)}")
    return 0