"""Memento: save and restore an object's state through snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Memento:
    """An immutable snapshot of an originator's state."""

    state: str


class Originator:
    """Holds a state that can be saved to and restored from mementos."""

    def __init__(self) -> None:
        self.state = ""

    def set_state(self, state: str) -> None:
        self.state = state
        print(f"Originator: State changed to {self.state}")

    def save_state_to_memento(self) -> Memento:
        print("Originator: Saving to Memento.")
        return Memento(self.state)

    def restore_state_from_memento(self, memento: Memento) -> None:
        self.state = memento.state
        print(f"Originator: State after restoring from Memento: {self.state}")


@dataclass
class Caretaker:
    """Keeps mementos on a stack, newest on top."""

    _mementos: list[Memento] = field(default_factory=list)

    def add_memento(self, memento: Memento) -> None:
        self._mementos.append(memento)

    def get_memento(self) -> Memento | None:
        """Pop and return the newest memento, or None when there is none."""
        return self._mementos.pop() if self._mementos else None


def main(argv: list[str] | None = None) -> int:
    """Save two states, change once more, then roll back twice."""
    originator = Originator()
    caretaker = Caretaker()

    originator.set_state("State1")
    caretaker.add_memento(originator.save_state_to_memento())
    originator.set_state("State2")
    caretaker.add_memento(originator.save_state_to_memento())
    originator.set_state("State3")

    originator.restore_state_from_memento(caretaker.get_memento())
    originator.restore_state_from_memento(caretaker.get_memento())
    return 0