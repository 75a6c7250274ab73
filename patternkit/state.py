"""State: a context delegates its behaviour to a swappable state object."""

from __future__ import annotations

from abc import ABC, abstractmethod


class State(ABC):
    """Behaviour of a context in one of its states."""

    @abstractmethod
    def handle(self) -> object:
        """Handle a request made to the context and return the outcome."""

    def _report(self) -> str:
        message = f"{type(self).__name__} handles the request."
        print(message)
        return message


class ConcreteStateA(State):
    def handle(self) -> str:
        return self._report()


class ConcreteStateB(State):
    def handle(self) -> str:
        return self._report()


class Context:
    """Holds the current state and forwards requests to it."""

    def __init__(self, state: State) -> None:
        self.state = state

    def transition_to(self, state: State) -> None:
        print(f"Context: Transition to {type(state).__name__}.")
        self.state = state

    def request(self) -> object:
        return self.state.handle()


def main(argv: list[str] | None = None) -> int:
    """Make a request, switch state, make another."""
    context = Context(ConcreteStateA())
    context.request()
    context.transition_to(ConcreteStateB())
    context.request()
    return 0