"""Visitor: operations on elements kept outside the element classes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Visitor(ABC):
    """An operation defined once per element kind."""

    @abstractmethod
    def visit_element_a(self, element: ElementA) -> object:
        """Visit an ElementA."""

    @abstractmethod
    def visit_element_b(self, element: ElementB) -> object:
        """Visit an ElementB."""


class Element(ABC):
    """Something a visitor can visit."""

    @abstractmethod
    def accept(self, visitor: Visitor) -> object:
        """Dispatch to the visitor method for this element kind."""


class ElementA(Element):
    def accept(self, visitor: Visitor) -> object:
        return visitor.visit_element_a(self)

    def operation_a(self) -> str:
        return "ElementA operation"


class ElementB(Element):
    def accept(self, visitor: Visitor) -> object:
        return visitor.visit_element_b(self)

    def operation_b(self) -> str:
        return "ElementB operation"


class _PrintingVisitor(Visitor):
    """Prints one line per visit, naming the visitor and the element."""

    def _report(self, element_name: str, detail: str) -> str:
        line = f"{type(self).__name__} visited {element_name}: {detail}"
        print(line)
        return line

    def visit_element_a(self, element: ElementA) -> str:
        return self._report("ElementA", element.operation_a())

    def visit_element_b(self, element: ElementB) -> str:
        return self._report("ElementB", element.operation_b())


class ConcreteVisitorA(_PrintingVisitor):
    """The first printing visitor."""


class ConcreteVisitorB(_PrintingVisitor):
    """The second printing visitor."""


class ObjectStructure:
    """An ordered collection of elements that a visitor walks."""

    def __init__(self) -> None:
        self._elements: list[Element] = []

    def add_element(self, element: Element) -> None:
        self._elements.append(element)

    def accept(self, visitor: Visitor) -> list[object]:
        """Let the visitor visit every element; return each visit's result."""
        return [element.accept(visitor) for element in self._elements]


def main(argv: list[str] | None = None) -> int:
    """Walk two elements with two visitors."""
    structure = ObjectStructure()
    structure.add_element(ElementA())
    structure.add_element(ElementB())
    for visitor in (ConcreteVisitorA(), ConcreteVisitorB()):
        structure.accept(visitor)
    return 0