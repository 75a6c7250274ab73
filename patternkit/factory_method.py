"""Factory method: subclasses decide which product to create."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product(ABC):
    @abstractmethod
    def use(self) -> str:
        """Use the product and return the message it printed."""

    def _announce(self) -> str:
        notice = f"Using {type(self).__name__}"
        print(notice)
        return notice


class ConcreteProductA(Product):
    def use(self) -> str:
        return self._announce()


class ConcreteProductB(Product):
    def use(self) -> str:
        return self._announce()


class Factory(ABC):
    """Creates a product whose concrete type the subclass chooses."""

    @abstractmethod
    def create_product(self) -> Product:
        """Make a new product."""


class ConcreteFactoryA(Factory):
    def create_product(self) -> Product:
        return ConcreteProductA()


class ConcreteFactoryB(Factory):
    def create_product(self) -> Product:
        return ConcreteProductB()


def main(argv: list[str] | None = None) -> int:
    """Make and use a product from each factory."""
    for factory in (ConcreteFactoryA(), ConcreteFactoryB()):
        factory.create_product().use()
    return 0