"""Observer: a subject notifies registered observers of state changes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Something that wants to hear about a subject's changes."""

    @abstractmethod
    def update(self, message: str) -> None:
        """Receive a notification."""


class Subject:
    """Keeps a list of observers and notifies them in registration order."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Drop every registration of the observer; unknown observers are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self, message: str) -> None:
        for observer in list(self._observers):
            observer.update(message)


class ConcreteObserverA(Observer):
    def update(self, message: str) -> None:
        print(f"ConcreteObserverA received: {message}")


class ConcreteObserverB(Observer):
    def update(self, message: str) -> None:
        print(f"ConcreteObserverB received: {message}")


class ConcreteSubject(Subject):
    """A subject whose state changes are broadcast to its observers."""

    def __init__(self) -> None:
        super().__init__()
        self.state = ""

    def set_state(self, state: str) -> None:
        self.state = state
        print(f"ConcreteSubject: State changed to {self.state}")
        self.notify_observers(self.state)


def main(argv: list[str] | None = None) -> int:
    """Notify two observers, remove one, notify again."""
    subject = ConcreteSubject()
    observer_a = ConcreteObserverA()
    observer_b = ConcreteObserverB()
    subject.add_observer(observer_a)
    subject.add_observer(observer_b)
    subject.set_state("State1")
    subject.remove_observer(observer_a)
    subject.set_state("State2")
    return 0