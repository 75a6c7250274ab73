"""Builder: a director assembles a product step by step through a builder."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Product:
    """The thing being assembled, made of three parts."""

    part_a: str = ""
    part_b: str = ""
    part_c: str = ""

    def show(self) -> str:
        """Print the parts on one line and return that line."""
        line = "Product Parts: " + ", ".join((self.part_a, self.part_b, self.part_c))
        print(line)
        return line


class Builder(ABC):
    """Builds the parts of a product."""

    @abstractmethod
    def build_part_a(self) -> None:
        """Build part A."""

    @abstractmethod
    def build_part_b(self) -> None:
        """Build part B."""

    @abstractmethod
    def build_part_c(self) -> None:
        """Build part C."""

    @property
    @abstractmethod
    def result(self) -> Product:
        """The product built so far."""


class ConcreteBuilder(Builder):
    """Fills each part with its fixed name."""

    def __init__(self) -> None:
        self._product = Product()

    def build_part_a(self) -> None:
        self._product.part_a = "PartA"

    def build_part_b(self) -> None:
        self._product.part_b = "PartB"

    def build_part_c(self) -> None:
        self._product.part_c = "PartC"

    @property
    def result(self) -> Product:
        return self._product


class Director:
    """Runs a builder through the parts in order."""

    def __init__(self, builder: Builder | None = None) -> None:
        self.builder = builder

    def construct(self) -> None:
        if self.builder is None:
            raise RuntimeError("no builder set")
        self.builder.build_part_a()
        self.builder.build_part_b()
        self.builder.build_part_c()


def main(argv: list[str] | None = None) -> int:
    """Build a product and show it."""
    builder = ConcreteBuilder()
    director = Director()
    director.builder = builder
    director.construct()
    builder.result.show()
    return 0