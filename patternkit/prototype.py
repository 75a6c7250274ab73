"""Prototype: new objects made by copying an existing one."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Prototype(ABC):
    @abstractmethod
    def clone(self) -> Prototype:
        """Return an independent copy of this object."""


@dataclass
class ConcretePrototype(Prototype):
    """A prototype holding a single integer value."""

    value: int

    def clone(self) -> ConcretePrototype:
        return copy.copy(self)

    def display(self) -> str:
        """Print the value and return the printed text."""
        text = f"ConcretePrototype with value: {self.value}"
        print(text)
        return text


def main(argv: list[str] | None = None) -> int:
    """Display an original and its clone."""
    original = ConcretePrototype(42)
    original.display()
    original.clone().display()
    return 0