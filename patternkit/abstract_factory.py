"""Abstract factory: families of related products made by one factory."""

from __future__ import annotations

from abc import ABC, abstractmethod


def _emit(line: str) -> str:
    """Print a line and hand it back to the caller."""
    print(line)
    return line


class AbstractProductA(ABC):
    @abstractmethod
    def use_product_a(self) -> str:
        """Use the product and return what it reported."""


class AbstractProductB(ABC):
    @abstractmethod
    def use_product_b(self) -> str:
        """Use the product and return what it reported."""


class ProductA1(AbstractProductA):
    def use_product_a(self) -> str:
        return _emit("Using Product A1")


class ProductA2(AbstractProductA):
    def use_product_a(self) -> str:
        return _emit("Using Product A2")


class ProductB1(AbstractProductB):
    def use_product_b(self) -> str:
        return _emit("Using Product B1")


class ProductB2(AbstractProductB):
    def use_product_b(self) -> str:
        return _emit("Using Product B2")


class AbstractFactory(ABC):
    """Creates one product of each kind from a single family."""

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        """Make the family's A product."""

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        """Make the family's B product."""


class ConcreteFactory1(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ProductB1()


class ConcreteFactory2(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ProductB2()


def main(argv: list[str] | None = None) -> int:
    """Make and use a product pair from each factory."""
    for factory in (ConcreteFactory1(), ConcreteFactory2()):
        factory.create_product_a().use_product_a()
        factory.create_product_b().use_product_b()
    return 0