"""Composite: leaves and groups of components treated alike."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """A node in a tree; child management does nothing by default."""

    @abstractmethod
    def operation(self) -> None:
        """Perform the operation on this node."""

    def add(self, component: Component) -> None:
        """Add a child; ignored by nodes that cannot hold children."""

    def remove(self, component: Component) -> None:
        """Remove a child; ignored by nodes that cannot hold children."""

    def get_child(self, index: int) -> Component | None:
        """Return the child at index, or None."""
        return None


class Leaf(Component):
    """A node without children."""

    def operation(self) -> None:
        print("Leaf operation")


class Composite(Component):
    """A node whose operation runs on each child in order."""

    def __init__(self) -> None:
        self._children: list[Component] = []

    def operation(self) -> None:
        for child in self._children:
            child.operation()

    def add(self, component: Component) -> None:
        self._children.append(component)

    def remove(self, component: Component) -> None:
        """Remove the first occurrence of this very component, if present."""
        for position, child in enumerate(self._children):
            if child is component:
                del self._children[position]
                return

    def get_child(self, index: int) -> Component | None:
        """Return the child at a non-negative in-range index, else None."""
        if 0 <= index < len(self._children):
            return self._children[index]
        return None


def main(argv: list[str] | None = None) -> int:
    """Build a small tree and run the operation on its root."""
    root = Composite()
    branch = Composite()
    root.add(Leaf())
    root.add(Leaf())
    branch.add(Leaf())
    root.add(branch)
    root.operation()
    return 0