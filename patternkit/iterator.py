"""Iterator: explicit cursor over an aggregate of integers."""

from __future__ import annotations


class ConcreteIterator:
    """A cursor over a list with first/next/is_done/current_item."""

    def __init__(self, items: list[int]) -> None:
        self._items = items
        self._current = 0

    def first(self) -> None:
        self._current = 0

    def next(self) -> None:
        if self._current < len(self._items):
            self._current += 1

    def is_done(self) -> bool:
        return self._current >= len(self._items)

    def current_item(self) -> int:
        if self.is_done():
            raise IndexError("Iterator out of range")
        return self._items[self._current]


class ConcreteAggregate:
    """A growable collection of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def create_iterator(self) -> ConcreteIterator:
        return ConcreteIterator(self._items)

    def add_item(self, item: int) -> None:
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]


def main(argv: list[str] | None = None) -> int:
    """Fill an aggregate and walk it with its iterator."""
    aggregate = ConcreteAggregate()
    for item in (1, 2, 3):
        aggregate.add_item(item)
    iterator = aggregate.create_iterator()
    iterator.first()
    while not iterator.is_done():
        print(f"Item: {iterator.current_item()}")
        iterator.next()
    return 0